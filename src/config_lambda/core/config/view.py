# src/config_lambda/core/config/view.py
"""
ConfigurationView: visão imutável da configuração em camadas.

A visão guarda a lista ordenada de fontes (da menor para a maior
precedência) e o resultado já resolvido do merge. Depois de construída,
nenhuma escrita ocorre: leituras concorrentes são seguras.

Invariantes:
    - Variáveis de ambiente > arquivo de ambiente > arquivo base
    - `get` nunca levanta exceção para chave ausente
    - Valor `None` é indistinguível de chave ausente
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..constants import KEY_DELIMITER
from .merge import ResolvedEntry, merge_layers, normalize_key


@dataclass(frozen=True)
class ConfigurationSource:
    """Uma camada nomeada de configuração (mapa plano `chave -> valor`)."""

    name: str
    values: Mapping[str, Optional[str]]


class ConfigurationView:
    """
    Visão somente-leitura sobre um conjunto ordenado de fontes.

    Campos:
    - sources: fontes na ordem de precedência crescente
    - entries: merge resolvido (chave normalizada -> ResolvedEntry)
    """

    def __init__(self, sources: Sequence[ConfigurationSource]) -> None:
        # cópia: mutações posteriores nas fontes não afetam a visão
        self._sources: Tuple[ConfigurationSource, ...] = tuple(
            ConfigurationSource(name=s.name, values=MappingProxyType(dict(s.values)))
            for s in sources
        )
        self._entries: Mapping[str, ResolvedEntry] = MappingProxyType(
            merge_layers((s.name, s.values) for s in self._sources)
        )

    @property
    def sources(self) -> Tuple[ConfigurationSource, ...]:
        return self._sources

    def _entry(self, key: str) -> Optional[ResolvedEntry]:
        entry = self._entries.get(normalize_key(key))
        if entry is None or entry.value is None:
            return None
        return entry

    def get(self, key: str) -> Optional[str]:
        """
        Retorna o valor efetivo de `key` ou None quando ausente.

        Decisões arquiteturais:
            - A comparação de chaves é case-insensitive
            - Chave com valor None (null no arquivo) é tratada como ausente
            - String vazia é um valor válido e é retornada como ""

        Invariantes:
            - Nunca levanta exceção para chave ausente
            - Chamadas repetidas retornam o mesmo valor (a visão é imutável)

        Limites explícitos:
            - Não aplica o sentinela "None" (responsabilidade do resolver)
        """
        entry = self._entry(key)
        return None if entry is None else entry.value

    def source_of(self, key: str) -> Optional[str]:
        """
        Nome da fonte que forneceu o valor efetivo da chave.

        Retorna o nome do arquivo (ex.: "appsettings.Development.json") ou
        "environment"; None quando a chave está ausente.

        Limites explícitos:
            - Uso diagnóstico; não influencia o valor retornado por `get`
        """
        entry = self._entry(key)
        return None if entry is None else entry.source

    def keys(self) -> List[str]:
        return [e.key for e in self._entries.values() if e.value is not None]

    def get_section(self, prefix: str) -> Dict[str, str]:
        """
        Retorna as chaves abaixo de `prefix:` indexadas pelo restante do caminho.

        Exemplo: com `Logging:Level=Debug`, `get_section("logging")`
        retorna `{"Level": "Debug"}`.
        """
        marker = normalize_key(prefix) + KEY_DELIMITER
        depth = prefix.count(KEY_DELIMITER) + 1
        section: Dict[str, str] = {}
        for normalized, entry in self._entries.items():
            if entry.value is not None and normalized.startswith(marker):
                section[entry.key.split(KEY_DELIMITER, depth)[depth]] = entry.value
        return section

    def debug_view(self) -> List[str]:
        """Linhas `chave=valor (fonte)` ordenadas por chave, para diagnóstico."""
        lines = []
        for normalized in sorted(self._entries):
            entry = self._entries[normalized]
            if entry.value is None:
                continue
            lines.append(f"{entry.key}={entry.value} ({entry.source})")
        return lines

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._entry(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def __repr__(self) -> str:
        names = ", ".join(s.name for s in self._sources)
        return f"ConfigurationView(sources=[{names}], keys={len(self)})"
