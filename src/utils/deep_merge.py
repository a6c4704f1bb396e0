"""Merge profundo de mappings com precedência da última fonte."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Final


class _Unset:
    """Marcador de valor ausente (não confundir com None/null)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()

_BINARY_TYPES = (bytes, bytearray, memoryview)


def is_plain_mapping(value: Any) -> bool:
    """True para mappings comuns (dict e afins), nunca para blobs."""
    return isinstance(value, Mapping) and not isinstance(value, _BINARY_TYPES)


def deep_merge(
    target: MutableMapping[Any, Any],
    *sources: Mapping[Any, Any] | None,
) -> MutableMapping[Any, Any]:
    """Mescla `sources` em `target`, na ordem, e retorna `target`.

    Regras por chave:
    - valor UNSET na fonte: ignorado (nunca sobrescreve)
    - ambos mappings: merge recursivo (chaves existentes sobrevivem)
    - qualquer outro caso (escalar, lista, blob, tipos diferentes):
      a fonte posterior substitui o valor inteiro; listas nunca são
      concatenadas

    Mappings recebidos são copiados, então o resultado não compartilha
    dicts aninhados com as fontes.
    """
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if value is UNSET:
                continue
            existing = target.get(key, UNSET)
            if is_plain_mapping(value):
                base = dict(existing) if is_plain_mapping(existing) else {}
                target[key] = deep_merge(base, value)
            else:
                target[key] = value
    return target


__all__ = ["UNSET", "deep_merge", "is_plain_mapping"]
