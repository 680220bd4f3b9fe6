# src/config_lambda/core/config/errors.py
"""
Exceções canônicas da camada de configuração do config-lambda.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento e a resolução da configuração em camadas.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de carregamento são fatais e ocorrem na construção
    - Chave ausente NÃO é erro (é representada pelo valor sentinela)

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda falha de construção herda de `ConfigurationLoadError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não representa falhas da plataforma de invocação
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de qualquer falha da camada de configuração,
    distinguindo-a de erros da plataforma ou do chamador.
    """


class ConfigurationLoadError(ConfigError):
    """
    Falha fatal durante a construção da configuração em camadas.

    Decisões arquiteturais:
        - Levantada antes de qualquer lookup ser possível
        - Nunca é recuperada localmente: aborta a instância da função
    """


class SettingsFileNotFoundError(ConfigurationLoadError):
    """
    O arquivo base de configuração (`appsettings.json`) não existe.

    O arquivo base é obrigatório. A ausência do arquivo específico de
    ambiente nunca levanta esta exceção.
    """


class SettingsParseError(ConfigurationLoadError):
    """
    O conteúdo de um arquivo de configuração não pôde ser interpretado.

    A exceção original do parser (JSON ou YAML) fica encadeada em
    `__cause__`.
    """


class DuplicateConfigKeyError(SettingsParseError):
    """Um mesmo arquivo define a mesma chave (case-insensitive) mais de uma vez."""


class InvalidConfigRootTypeError(ConfigurationLoadError):
    """
    O conteúdo raiz do arquivo não é um objeto (mapa chave-valor).

    Listas ou escalares no root são rejeitados, sem normalização.
    """


class UnsupportedConfigFormatError(ConfigurationLoadError):
    """
    A extensão do arquivo de configuração não é suportada.

    Formatos suportados:
        - JSON (.json)
        - YAML (.yaml, .yml)
    """
