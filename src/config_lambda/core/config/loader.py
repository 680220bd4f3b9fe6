# src/config_lambda/core/config/loader.py
"""
Loader de arquivos de configuração do config-lambda.

Este módulo é responsável por ler um único arquivo de configuração do
disco e convertê-lo em um mapa plano `chave -> string`, pronto para ser
empilhado como camada pelo resolver.

Responsabilidades do módulo:
    - Carregar arquivos em JSON ou YAML (escolha pela extensão)
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Achatar estruturas aninhadas em chaves com caminho (`a:b:0`)
    - Detectar chaves duplicadas dentro de um mesmo arquivo

Política de achatamento (v1):
    - objeto  → `pai:filho`
    - lista   → `pai:0`, `pai:1`, ...
    - string  → mantida como está
    - número  → texto literal do arquivo (JSON) ou `str(valor)` (YAML)
    - booleano → "True" / "False"
    - null    → None (tratado como ausente no lookup)
    - objeto ou lista vazios → nenhuma chave

Invariantes:
    - O retorno é sempre um dicionário plano de `str -> Optional[str]`
    - Chaves comparadas sem diferenciar maiúsculas/minúsculas são únicas

Limites explícitos:
    - Não resolve precedência entre arquivos
    - Não lê variáveis de ambiente
"""

from collections.abc import Hashable
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import json

import yaml  # PyYAML

from ..constants import KEY_DELIMITER
from .errors import (
    DuplicateConfigKeyError,
    InvalidConfigRootTypeError,
    SettingsFileNotFoundError,
    SettingsParseError,
    UnsupportedConfigFormatError,
)


JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def _reject_duplicate_pairs(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # object_pairs_hook: json.load descartaria duplicatas silenciosamente
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DuplicateConfigKeyError(f"Chave duplicada no objeto JSON: '{key}'")
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    # NaN, Infinity e -Infinity não são JSON válido
    raise SettingsParseError(f"Constante não suportada em JSON: {name}")


class _UniqueKeySafeLoader(yaml.SafeLoader):
    """SafeLoader que rejeita chaves repetidas no mesmo mapeamento YAML."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                # chaves `<<` (merge) podem ser sobrescritas legitimamente
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise DuplicateConfigKeyError(f"Chave duplicada no mapeamento YAML: '{key}'")
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _scalar_to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # bool antes de int: True é instância de int
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


def flatten(data: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Achata uma estrutura aninhada em um mapa plano de chaves com caminho.

    Args:
        data (Dict[str, Any]): Conteúdo já interpretado de um arquivo.

    Returns:
        Dict[str, Optional[str]]: Mapa plano `caminho -> valor`.

    Raises:
        DuplicateConfigKeyError: Se duas chaves achatadas colidirem
            (comparação case-insensitive).
    """
    result: Dict[str, Optional[str]] = {}
    seen: Dict[str, str] = {}

    def _visit(prefix: str, value: Any) -> None:
        if isinstance(value, dict):
            for child_key, child_value in value.items():
                child_path = f"{prefix}{KEY_DELIMITER}{child_key}" if prefix else str(child_key)
                _visit(child_path, child_value)
            return

        if isinstance(value, list):
            for index, item in enumerate(value):
                _visit(f"{prefix}{KEY_DELIMITER}{index}", item)
            return

        normalized = prefix.casefold()
        if normalized in seen:
            raise DuplicateConfigKeyError(
                f"Chave duplicada na configuração: '{prefix}' (conflita com '{seen[normalized]}')"
            )
        seen[normalized] = prefix
        result[prefix] = _scalar_to_str(value)

    _visit("", data)
    return result


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()

    if suffix in JSON_SUFFIXES:
        try:
            # números preservam o texto literal ("1.50" continua "1.50")
            return json.loads(
                text,
                parse_int=str,
                parse_float=str,
                parse_constant=_reject_constant,
                object_pairs_hook=_reject_duplicate_pairs,
            )
        except json.JSONDecodeError as exc:
            raise SettingsParseError(f"JSON inválido em {path}: {exc}") from exc

    if suffix in YAML_SUFFIXES:
        try:
            return yaml.load(text, Loader=_UniqueKeySafeLoader)
        except yaml.YAMLError as exc:
            raise SettingsParseError(f"YAML inválido em {path}: {exc}") from exc

    raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")


def load_settings_file(path: Union[str, Path]) -> Dict[str, Optional[str]]:
    """
    Carrega um arquivo de configuração e retorna seu conteúdo achatado.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O formato é decidido pela extensão, nunca pelo conteúdo
        - YAML vazio é interpretado como dicionário vazio
        - JSON vazio, `NaN`/`Infinity` ou bytes fora de UTF-8 são erro de parse
        - Chaves repetidas no mesmo mapeamento são rejeitadas (JSON e YAML)
        - O conteúdo raiz deve ser um objeto (JSON `null` no root é rejeitado)

    Args:
        path (Union[str, Path]): Caminho do arquivo.

    Returns:
        Dict[str, Optional[str]]: Mapa plano `caminho -> valor`.

    Raises:
        SettingsFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        SettingsParseError: Se o conteúdo não puder ser interpretado.
        DuplicateConfigKeyError: Se o arquivo definir a mesma chave duas vezes.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um objeto.
    """
    path = Path(path)
    if not path.is_file():
        raise SettingsFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SettingsParseError(f"Arquivo não está em UTF-8: {path}: {exc}") from exc

    data = _parse(path, text)

    # só YAML vazio (ou só comentários) resulta em None; JSON vazio já falhou no parse
    if data is None and suffix in YAML_SUFFIXES:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser objeto, recebido: {type(data).__name__}"
        )

    return flatten(data)
