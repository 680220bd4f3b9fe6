# src/config_lambda/function.py
"""
Entry point da função serverless.

A função recebe uma chave de configuração (string) e devolve o valor
efetivo da configuração em camadas, ou "None" quando a chave não existe.

Decisões arquiteturais:
    - A configuração é injetada pelo construtor (testes passam um
      `InMemoryConfiguration`); sem ela, é construída a partir do ambiente
    - O contexto de invocação é opaco: só `aws_request_id` é lido, e
      apenas para o evento de log
    - Uma instância por processo é reaproveitada entre invocações
    - O EventLog é a única escrita após a construção; a configuração em
      si é somente-leitura e o EventLog serializa suas mutações
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from .core.config.resolver import ConfigResolver, ConfigurationProvider
from .core.constants import MISSING_KEY_SENTINEL
from .core.events import EventLog


class Function:
    """Handler de lookup de configuração."""

    def __init__(
        self,
        configuration: Optional[ConfigurationProvider] = None,
        *,
        event_log: Optional[EventLog] = None,
    ) -> None:
        self.events = event_log if event_log is not None else EventLog()
        if configuration is None:
            configuration = ConfigResolver(event_log=self.events)
        self.configuration = configuration

    def function_handler(self, input: str, context: Any = None) -> str:
        """
        Retorna o valor de configuração cuja chave é `input`.

        Args:
            input (str): Chave de configuração (ex.: "env1", "Logging:Level").
            context (Any): Contexto da plataforma; não é consumido pelo lookup.

        Returns:
            str: Valor efetivo ou "None" se a chave não existir.

        Raises:
            TypeError: Se `input` não for str.
        """
        if not isinstance(input, str):
            raise TypeError(f"Input deve ser str, recebido: {type(input).__name__}")

        value = self.configuration.get(input)
        self.events.log(
            level="INFO",
            message="config lookup",
            key=input,
            found=value is not None,
            request_id=getattr(context, "aws_request_id", None),
        )
        return MISSING_KEY_SENTINEL if value is None else value


@lru_cache(maxsize=1)
def default_function() -> Function:
    # exceções de construção não são cacheadas: a próxima invocação tenta de novo
    return Function()


def reset_default_function() -> None:
    default_function.cache_clear()


def handler(input: str, context: Any) -> str:
    """Callable registrado na plataforma (`config_lambda.function.handler`)."""
    return default_function().function_handler(input, context)
