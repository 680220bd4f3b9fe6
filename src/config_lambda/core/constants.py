# src/config_lambda/core/constants.py
"""
Constantes canônicas do config-lambda.

Nomes de arquivos, variáveis de ambiente e valores fixos compartilhados
entre loader, resolver e entry point.
"""

# Variável de ambiente que seleciona o arquivo `appsettings.<env>.json`.
ENVIRONMENT_VARIABLE = "ASPNETCORE_ENVIRONMENT"
DEFAULT_ENVIRONMENT = "Production"

BASE_SETTINGS_NAME = "appsettings"
DEFAULT_SETTINGS_EXTENSION = ".json"

# Separador de caminho para chaves aninhadas ("Logging:Level").
KEY_DELIMITER = ":"
# Grafia do separador em nomes de variáveis de ambiente ("Logging__Level").
ENV_NESTING_DELIMITER = "__"

# Retornado quando a chave não existe em nenhuma fonte.
MISSING_KEY_SENTINEL = "None"

# Nomes de fonte usados em eventos e no debug_view.
ENVIRONMENT_SOURCE_NAME = "environment"
