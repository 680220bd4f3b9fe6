# src/config_lambda/core/config/merge.py
"""
Resolução de precedência entre camadas de configuração.

Este módulo implementa a política oficial de sobreposição utilizada pelo
config-lambda para combinar as camadas (arquivo base, arquivo de ambiente
e variáveis de ambiente) em uma única visão.

Política de merge (v1):
    - Camadas posteriores sobrescrevem camadas anteriores
    - Chaves são comparadas sem diferenciar maiúsculas/minúsculas
    - Valor `None` em camada posterior também sobrescreve (chave fica ausente)
    - Chaves não sobrescritas são preservadas

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo

Limites explícitos:
    - Não carrega arquivos nem lê o ambiente
    - Não realiza coerção de tipos (todas as camadas já são planas)
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ResolvedEntry:
    """Valor efetivo de uma chave e a camada que o forneceu."""

    key: str
    value: Optional[str]
    source: str


def normalize_key(key: str) -> str:
    return key.casefold()


def merge_layers(
    layers: Iterable[Tuple[str, Mapping[str, Optional[str]]]],
) -> Dict[str, ResolvedEntry]:
    """
    Combina camadas ordenadas em um mapa `chave normalizada -> ResolvedEntry`.

    Esta função resolve a precedência entre as fontes de configuração,
    percorrendo as camadas da menor para a maior prioridade e registrando,
    para cada chave, o valor vencedor e a fonte que o forneceu.

    Política de merge (v1):
        - Camada posterior sempre vence camada anterior
        - Comparação de chaves via `str.casefold` (case-insensitive)
        - `None` em camada posterior sobrescreve o valor anterior
        - A grafia preservada é a da camada vencedora

    Decisões arquiteturais:
        - As camadas já chegam achatadas (`a:b:0`); não há merge recursivo
        - Não há conflito de tipos: todos os valores são str ou None
        - A fonte vencedora é mantida para diagnóstico (`source_of`, `debug_view`)

    Invariantes:
        - A estrutura retornada é sempre um novo dicionário
        - Nenhuma camada de entrada é mutada
        - A mesma sequência de camadas sempre produz o mesmo resultado

    Limites explícitos:
        - Não remove chaves com valor None (a visão decide tratá-las como ausentes)
        - Não valida nomes de chave

    Args:
        layers: Sequência de pares `(nome_da_fonte, mapa_plano)`, da menor
            para a maior precedência.

    Returns:
        Dict[str, ResolvedEntry]: Novo dicionário com o valor vencedor
        de cada chave.
    """
    result: Dict[str, ResolvedEntry] = {}

    for source_name, values in layers:
        for key, value in values.items():
            result[normalize_key(key)] = ResolvedEntry(key=key, value=value, source=source_name)

    return result
