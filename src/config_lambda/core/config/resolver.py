# src/config_lambda/core/config/resolver.py
"""
ConfigResolver: construção e consulta da configuração em camadas.

A configuração efetiva é resolvida a partir de (precedência crescente):
    1. `appsettings.json` (obrigatório)
    2. `appsettings.<ambiente>.json` (opcional)
    3. variáveis de ambiente do processo

Responsabilidades do módulo:
    - Montar a ConfigurationView uma única vez, na construção
    - Expor `lookup(key)` com valor sentinela para chaves ausentes
    - Definir o protocolo `ConfigurationProvider` consumido pelo entry point
    - Oferecer `InMemoryConfiguration` para testes, sem framework de mock

Invariantes:
    - Falhas de carregamento ocorrem antes de qualquer lookup
    - `lookup` nunca levanta exceção para chave ausente
    - Repetir `lookup(k)` sem mutação das fontes produz o mesmo resultado

Limites explícitos:
    - Não recarrega arquivos após a construção
    - Não conhece a plataforma de invocação
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Union

from ..constants import (
    BASE_SETTINGS_NAME,
    DEFAULT_SETTINGS_EXTENSION,
    ENVIRONMENT_SOURCE_NAME,
    MISSING_KEY_SENTINEL,
)
from ..events import EventLog
from .environment import environment_variables, resolve_environment_name
from .loader import load_settings_file
from .merge import normalize_key
from .view import ConfigurationSource, ConfigurationView


class ConfigurationProvider(Protocol):
    """Qualquer fonte capaz de responder `get(key) -> valor ou None`."""

    def get(self, key: str) -> Optional[str]:
        ...


def _require_str_key(key: object) -> str:
    if not isinstance(key, str):
        raise TypeError(f"Chave de configuração deve ser str, recebido: {type(key).__name__}")
    return key


class InMemoryConfiguration:
    """
    Provider baseado em um mapa em memória.

    Usado em testes no lugar da configuração real. A consulta não
    diferencia maiúsculas/minúsculas, como na ConfigurationView.
    """

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._view = ConfigurationView([ConfigurationSource(name="memory", values=values or {})])

    def get(self, key: str) -> Optional[str]:
        return self._view.get(_require_str_key(key))

    def lookup(self, key: str) -> str:
        value = self.get(key)
        return MISSING_KEY_SENTINEL if value is None else value


def settings_file_name(environment: Optional[str] = None, extension: str = DEFAULT_SETTINGS_EXTENSION) -> str:
    """`appsettings.json` ou `appsettings.<ambiente>.json`."""
    if environment is None:
        return f"{BASE_SETTINGS_NAME}{extension}"
    return f"{BASE_SETTINGS_NAME}.{environment}{extension}"


class ConfigResolver:
    """
    Configuração em camadas pronta para consulta.

    Construída uma única vez (por instância da função). Depois de construída
    é somente-leitura e pode ser compartilhada entre invocações.

    Args:
        base_path: Diretório onde os arquivos `appsettings*` são procurados.
            Por padrão, o diretório de trabalho atual.
        environment: Nome do ambiente. Por padrão, `ASPNETCORE_ENVIRONMENT`
            ou "Production".
        environ: Fonte explícita de variáveis de ambiente (padrão `os.environ`).
        extension: Extensão dos arquivos de configuração (".json", ".yaml", ".yml").
        event_log: Destino dos eventos estruturados de construção.

    Raises:
        SettingsFileNotFoundError: Se o arquivo base não existir.
        SettingsParseError: Se algum arquivo for inválido.
        InvalidConfigRootTypeError: Se a raiz de algum arquivo não for objeto.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
    """

    def __init__(
        self,
        base_path: Optional[Union[str, Path]] = None,
        environment: Optional[str] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        extension: str = DEFAULT_SETTINGS_EXTENSION,
        event_log: Optional[EventLog] = None,
    ) -> None:
        self.events = event_log if event_log is not None else EventLog()
        self.base_path = Path(base_path) if base_path is not None else Path(os.getcwd())
        self.environment = environment if environment is not None else resolve_environment_name(environ)
        self.extension = extension

        sources: List[ConfigurationSource] = []

        base_file = self.base_path / settings_file_name(extension=extension)
        sources.append(self._load_file_source(base_file))

        env_file = self.base_path / settings_file_name(self.environment, extension)
        if env_file.is_file():
            sources.append(self._load_file_source(env_file))
        else:
            self.events.log(
                level="INFO",
                message="optional settings file skipped",
                path=str(env_file),
            )

        sources.append(self._load_environment_source(environ))

        self.view = ConfigurationView(sources)
        self.events.log(
            level="INFO",
            message="configuration built",
            environment=self.environment,
            sources=[s.name for s in self.view.sources],
        )

    def _load_file_source(self, path: Path) -> ConfigurationSource:
        values = load_settings_file(path)
        self.events.log(
            level="INFO",
            message="settings file loaded",
            path=str(path),
            keys=len(values),
        )
        return ConfigurationSource(name=path.name, values=values)

    def _load_environment_source(self, environ: Optional[Mapping[str, str]]) -> ConfigurationSource:
        values = environment_variables(environ)

        # nomes que só diferem na caixa colidem; vence o último em ordem alfabética
        seen: Dict[str, str] = {}
        for name in values:
            normalized = normalize_key(name)
            if normalized in seen:
                self.events.add_warning(
                    source=ENVIRONMENT_SOURCE_NAME,
                    message=f"Variáveis de ambiente colidem: '{seen[normalized]}' e '{name}'",
                )
            seen[normalized] = name

        self.events.log(
            level="INFO",
            message="environment variables loaded",
            keys=len(values),
        )
        return ConfigurationSource(name=ENVIRONMENT_SOURCE_NAME, values=values)

    def get(self, key: str) -> Optional[str]:
        return self.view.get(_require_str_key(key))

    def lookup(self, key: str) -> str:
        """
        Retorna o valor efetivo de `key` ou o sentinela "None".

        Nunca levanta exceção para chave ausente. String vazia é um valor
        válido e é retornada como "".
        """
        value = self.get(key)
        return MISSING_KEY_SENTINEL if value is None else value

    def __repr__(self) -> str:
        return f"ConfigResolver(base_path={str(self.base_path)!r}, environment={self.environment!r})"
