# src/config_lambda/core/events.py
"""
EventLog: log estruturado de execução do config-lambda.

Logs não são strings livres: cada evento é um dicionário com nível,
mensagem, timestamp UTC e campos adicionais preservados sem perda.

Princípios fundamentais:
- Eventos são acumulados em memória e consultáveis por testes
- Warnings são sinais não fatais, agrupados por fonte
- Uma instância "quente" da função atende muitas invocações, por isso
  o número de eventos retidos é limitado (`max_events`)
- O EventLog é a única escrita tolerada após a construção da
  configuração; todas as mutações ocorrem sob um lock, permitindo
  invocações concorrentes sobre a mesma instância
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional


DEFAULT_MAX_EVENTS = 1000


@dataclass
class EventLog:
    """
    Coletor de eventos estruturados e warnings.

    Campos canônicos:
    - events: eventos em ordem de registro (mais antigos primeiro)
    - warnings: warnings por fonte
    - max_events: limite de eventos retidos; None desativa o limite
    """

    events: Deque[Dict[str, Any]] = field(default_factory=deque)
    warnings: Dict[str, List[str]] = field(default_factory=dict)
    max_events: Optional[int] = DEFAULT_MAX_EVENTS

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        # deque com maxlen descarta os mais antigos ao atingir o limite
        self.events = deque(self.events, maxlen=self.max_events)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        with self._lock:
            self.events.append(event)

    def add_warning(self, *, source: str, message: str) -> None:
        with self._lock:
            self.warnings.setdefault(source, []).append(message)
        self.log(level="WARNING", message=message, source=source)

    def filter(
        self, *, level: Optional[str] = None, message: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Eventos que casam com `level` e/ou `message` (igualdade exata)."""
        with self._lock:
            snapshot = list(self.events)
        return [
            e
            for e in snapshot
            if (level is None or e["level"] == level)
            and (message is None or e["message"] == message)
        ]
