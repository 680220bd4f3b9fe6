# tests/core/test_events.py
"""
Testes de logging estruturado e coleta de warnings no EventLog.

Os testes asseguram que:
- eventos são registrados como dicionários estruturados
- campos adicionais são preservados sem perda
- warnings são agrupados por fonte e também viram eventos
- o número de eventos retidos respeita `max_events`
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

try:
    from config_lambda.core.events import EventLog
except Exception as e:  # noqa: BLE001
    EventLog = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing events module. Implement:\n"
            "- src/config_lambda/core/events.py (EventLog)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_log_records_structured_event():
    """
    Verifica o formato mínimo de um evento.

    Invariantes:
        - `level`, `message` e `timestamp` estão sempre presentes
        - O timestamp é ISO-8601 com fuso UTC
        - Campos extras aparecem no próprio evento
    """
    _require_imports()
    log = EventLog()
    log.log(level="INFO", message="config lookup", key="env1", found=True)

    assert len(log.events) == 1
    event = log.events[0]
    assert event["level"] == "INFO"
    assert event["message"] == "config lookup"
    assert event["key"] == "env1"
    assert event["found"] is True
    assert datetime.fromisoformat(event["timestamp"]).utcoffset().total_seconds() == 0


def test_add_warning_groups_by_source():
    _require_imports()
    log = EventLog()
    log.add_warning(source="environment", message="w1")
    log.add_warning(source="environment", message="w2")
    log.add_warning(source="appsettings.json", message="w3")

    assert log.warnings == {"environment": ["w1", "w2"], "appsettings.json": ["w3"]}
    assert [e["message"] for e in log.filter(level="WARNING")] == ["w1", "w2", "w3"]


def test_max_events_drops_oldest():
    _require_imports()
    log = EventLog(max_events=3)
    for i in range(5):
        log.log(level="INFO", message=f"m{i}")

    assert [e["message"] for e in log.events] == ["m2", "m3", "m4"]


def test_unbounded_when_max_events_is_none():
    _require_imports()
    log = EventLog(max_events=None)
    for i in range(1500):
        log.log(level="DEBUG", message="tick")
    assert len(log.events) == 1500


def test_filter_by_level_and_message():
    _require_imports()
    log = EventLog()
    log.log(level="INFO", message="a")
    log.log(level="DEBUG", message="a")
    log.log(level="INFO", message="b")

    assert len(log.filter(level="INFO")) == 2
    assert len(log.filter(message="a")) == 2
    assert len(log.filter(level="INFO", message="a")) == 1
    assert len(log.filter()) == 3


def test_concurrent_logging_respects_max_events():
    """
    Verifica que registros concorrentes não perdem nem cortam eventos a mais.

    Invariantes:
        - Com 8 threads x 200 eventos e limite 500, restam exatamente 500
        - Sem limite, todos os 1600 eventos são retidos
    """
    _require_imports()
    bounded = EventLog(max_events=500)
    unbounded = EventLog(max_events=None)

    def _worker(worker_id):
        for i in range(200):
            bounded.log(level="INFO", message="tick", worker=worker_id, i=i)
            unbounded.log(level="INFO", message="tick", worker=worker_id, i=i)
            if i % 50 == 0:
                bounded.filter(message="tick")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_worker, range(8)))

    assert len(bounded.events) == 500
    assert len(unbounded.events) == 1600
