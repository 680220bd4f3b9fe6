# src/config_lambda/core/__init__.py
"""
Core do config-lambda.

Componentes principais:
    - config    → carregamento, merge e consulta da configuração em camadas
    - events    → log estruturado de eventos e warnings
    - constants → nomes de arquivos, variáveis de ambiente e sentinela

Limites explícitos:
    - Não depende da plataforma de invocação (ver `config_lambda.function`)
"""
