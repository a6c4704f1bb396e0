"""Conversão de convenções de nomes de chaves (casing).

Cada provedor espera o payload numa convenção própria (camelCase,
snake_case, PascalCase...). Os conectores montam um único formato interno
e este módulo re-escreve as chaves recursivamente na convenção do provedor.

As regras de quebra de palavras precisam ser exatamente estas para manter
compatibilidade com integrações existentes:
1. minúscula/dígito seguido de maiúscula (``fooBar`` -> ``foo|Bar``)
2. sequência de maiúsculas antes de Maiúscula+minúscula
   (``HTTPServer`` -> ``HTTP|Server``)
3. qualquer sequência de ``-``, ``_`` ou espaço (separador descartado)
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from utils.deep_merge import is_plain_mapping

_BOUNDARY = "\0"
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[-_\s]+")


class CasingConvention(str, Enum):
    """Convenções de nome de chave suportadas."""

    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    CONSTANT_CASE = "CONSTANT_CASE"


def split_words(key: str) -> list[str]:
    """Quebra uma chave em palavras preservando a caixa original.

    Exemplos:
        >>> split_words("thread-id")
        ['thread', 'id']
        >>> split_words("fooBarBAZQux")
        ['foo', 'Bar', 'BAZ', 'Qux']
    """
    marked = _LOWER_UPPER.sub(rf"\1{_BOUNDARY}\2", key)
    marked = _ACRONYM_WORD.sub(rf"\1{_BOUNDARY}\2", marked)
    marked = _SEPARATORS.sub(_BOUNDARY, marked)
    return [word for word in marked.split(_BOUNDARY) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _to_camel_case(key: str) -> str:
    words = split_words(key)
    return "".join(
        word.lower() if index == 0 else _capitalize(word)
        for index, word in enumerate(words)
    )


def _to_pascal_case(key: str) -> str:
    return "".join(_capitalize(word) for word in split_words(key))


def _to_snake_case(key: str) -> str:
    return "_".join(word.lower() for word in split_words(key))


def _to_kebab_case(key: str) -> str:
    return "-".join(word.lower() for word in split_words(key))


def _to_constant_case(key: str) -> str:
    return "_".join(word.upper() for word in split_words(key))


_CONVERTERS: dict[CasingConvention, Callable[[str], str]] = {
    CasingConvention.CAMEL_CASE: _to_camel_case,
    CasingConvention.PASCAL_CASE: _to_pascal_case,
    CasingConvention.SNAKE_CASE: _to_snake_case,
    CasingConvention.KEBAB_CASE: _to_kebab_case,
    CasingConvention.CONSTANT_CASE: _to_constant_case,
}


def convert_key(key: str, convention: CasingConvention | str) -> str:
    """Converte uma única chave para a convenção informada.

    Função total: string vazia produz string vazia e chaves de uma palavra
    só mudam de caixa.
    """
    return _CONVERTERS[CasingConvention(convention)](key)


def transform_keys(
    mapping: Mapping[Any, Any],
    convention: CasingConvention | str,
) -> dict[Any, Any]:
    """Re-escreve recursivamente as chaves de um mapping.

    Apenas mappings aninhados são percorridos. Listas e blobs binários
    são mantidos como estão (sem descer nos elementos). Chaves que não
    são string passam sem alteração. Em colisão, a última chave vence.

    Args:
        mapping: Payload de origem (não é modificado).
        convention: Convenção de destino.

    Returns:
        Novo dict com as chaves convertidas.
    """
    converter = _CONVERTERS[CasingConvention(convention)]
    result: dict[Any, Any] = {}
    for key, value in mapping.items():
        new_key = converter(key) if isinstance(key, str) else key
        if is_plain_mapping(value):
            result[new_key] = transform_keys(value, convention)
        else:
            result[new_key] = value
    return result


__all__ = [
    "CasingConvention",
    "convert_key",
    "split_words",
    "transform_keys",
]
