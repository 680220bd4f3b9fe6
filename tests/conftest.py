# tests/conftest.py
"""
Fixtures compartilhados para testes do config-lambda.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de arquivos `appsettings*.json` semelhantes ao uso real
- um diretório de configuração montado em `tmp_path`
- um ambiente de variáveis vazio e controlado

Decisões arquiteturais:
    - Conteúdos são fornecidos como string; a escrita em disco é explícita
    - Variáveis de ambiente são passadas como mapa explícito (`environ`),
      evitando dependência do ambiente real do processo

Invariantes:
    - Nenhuma fixture altera `os.environ`
    - Dados retornados são determinísticos e isolados
"""

from pathlib import Path
from typing import Callable, Optional

import pytest


@pytest.fixture
def base_settings_json() -> str:
    """
    Conteúdo típico de `appsettings.json` (arquivo base obrigatório).

    Contém chaves planas, uma seção aninhada, uma lista, um número
    com casas decimais, um booleano, uma string vazia e um null.
    """
    return """
{
  "env1": "val1",
  "env2": "base-only",
  "Logging": {
    "Level": "Information",
    "Console": { "Enabled": true }
  },
  "AllowedHosts": ["a.example.com", "b.example.com"],
  "Threshold": 1.50,
  "EmptyValue": "",
  "NullValue": null
}
"""


@pytest.fixture
def environment_settings_json() -> str:
    """Conteúdo típico de `appsettings.Development.json` (override opcional)."""
    return """
{
  "env2": "from-development",
  "Logging": { "Level": "Debug" }
}
"""


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[..., Path]:
    """
    Fábrica que escreve um arquivo de configuração em `tmp_path`.

    Uso: `write_settings(content)` escreve `appsettings.json`;
    `write_settings(content, environment="Development")` escreve
    `appsettings.Development.json`. Retorna o caminho escrito.
    """

    def _write(content: str, environment: Optional[str] = None, extension: str = ".json") -> Path:
        name = "appsettings" if environment is None else f"appsettings.{environment}"
        path = tmp_path / f"{name}{extension}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def empty_environ() -> dict:
    """Ambiente de variáveis vazio (nenhuma variável sobrescreve arquivos)."""
    return {}
