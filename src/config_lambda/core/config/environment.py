# src/config_lambda/core/config/environment.py
"""
Fonte de configuração baseada em variáveis de ambiente.

Responsabilidades do módulo:
    - Resolver o nome do ambiente ativo (`ASPNETCORE_ENVIRONMENT`)
    - Capturar um snapshot das variáveis de ambiente como camada plana

Decisões arquiteturais:
    - `__` no nome da variável equivale ao separador `:` de chaves aninhadas
    - O snapshot é tirado uma única vez, na construção da configuração
    - A ordem de visita é determinística (nomes ordenados)
"""

import os
from typing import Dict, Mapping, Optional

from ..constants import (
    DEFAULT_ENVIRONMENT,
    ENV_NESTING_DELIMITER,
    ENVIRONMENT_VARIABLE,
    KEY_DELIMITER,
)


def resolve_environment_name(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Retorna o nome do ambiente ativo.

    O nome seleciona o arquivo opcional `appsettings.<ambiente>.json`
    carregado sobre o arquivo base.

    Decisões arquiteturais:
        - A fonte é `ASPNETCORE_ENVIRONMENT`
        - Valores ausentes ou em branco resultam em `DEFAULT_ENVIRONMENT`
        - Espaços nas bordas são removidos

    Invariantes:
        - O retorno nunca é vazio

    Limites explícitos:
        - Não verifica se o arquivo do ambiente existe
        - Não normaliza a caixa do nome (o sistema de arquivos pode diferenciar)

    Args:
        environ (Optional[Mapping[str, str]]): Fonte explícita; por padrão
            `os.environ`.

    Returns:
        str: Nome do ambiente (ex.: "Production", "Development").
    """
    source = os.environ if environ is None else environ
    value = source.get(ENVIRONMENT_VARIABLE)
    if value is None or not value.strip():
        return DEFAULT_ENVIRONMENT
    return value.strip()


def environment_variables(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Captura as variáveis de ambiente como mapa plano de configuração.

    Args:
        environ (Optional[Mapping[str, str]]): Fonte explícita; por padrão
            `os.environ`.

    Returns:
        Dict[str, str]: Snapshot com `__` convertido para `:` nos nomes.
    """
    source = os.environ if environ is None else environ
    result: Dict[str, str] = {}
    for name in sorted(source):
        result[name.replace(ENV_NESTING_DELIMITER, KEY_DELIMITER)] = source[name]
    return result
