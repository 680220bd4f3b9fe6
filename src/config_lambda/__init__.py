# src/config_lambda/__init__.py
"""
config-lambda: função serverless de lookup em configuração em camadas.

Dada uma chave, a função retorna o valor efetivo resolvido a partir de
`appsettings.json`, `appsettings.<ambiente>.json` e variáveis de ambiente,
ou o sentinela "None" quando a chave não existe em nenhuma fonte.

Arquitetura em alto nível:
    - core.config → carregamento, merge e consulta da configuração
    - core.events → log estruturado de eventos
    - function    → entry point (`handler`) e classe `Function`
"""

from .core.config import ConfigResolver, InMemoryConfiguration
from .function import Function, handler

__all__ = ["ConfigResolver", "InMemoryConfiguration", "Function", "handler"]
