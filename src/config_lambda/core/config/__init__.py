# src/config_lambda/core/config/__init__.py

"""
Camada de configuração do config-lambda.

Este pacote contém as estruturas responsáveis por carregar, empilhar e
consultar a configuração em camadas da função.

Responsabilidades do pacote:
    - Carregamento de arquivos (`appsettings.json` + `appsettings.<env>.json`)
    - Captura de variáveis de ambiente como camada de maior precedência
    - Resolução de precedência via merge determinístico e case-insensitive
    - Consulta com valor sentinela para chaves ausentes

Invariantes:
    - A configuração efetiva é imutável após a construção
    - Falhas de carregamento são fatais e tipadas (`ConfigurationLoadError`)
"""

from .errors import (
    ConfigError,
    ConfigurationLoadError,
    DuplicateConfigKeyError,
    InvalidConfigRootTypeError,
    SettingsFileNotFoundError,
    SettingsParseError,
    UnsupportedConfigFormatError,
)
from .resolver import ConfigResolver, ConfigurationProvider, InMemoryConfiguration
from .view import ConfigurationSource, ConfigurationView

__all__ = [
    "ConfigError",
    "ConfigurationLoadError",
    "DuplicateConfigKeyError",
    "InvalidConfigRootTypeError",
    "SettingsFileNotFoundError",
    "SettingsParseError",
    "UnsupportedConfigFormatError",
    "ConfigResolver",
    "ConfigurationProvider",
    "InMemoryConfiguration",
    "ConfigurationSource",
    "ConfigurationView",
]
