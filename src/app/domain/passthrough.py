"""Override de passthrough e payload final do pipeline de transformação."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

PASSTHROUGH_KEY = "_passthrough"


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Campos crus do chamador: body, headers e query.

    O body entra por último no merge e nunca passa pelo casing; headers e
    query são repassados sem alteração.
    """

    body: Mapping[str, Any] | None = None
    headers: Mapping[str, str] | None = None
    query: Mapping[str, str] | None = None

    @classmethod
    def from_value(cls, value: Passthrough | Mapping[str, Any] | None) -> Passthrough:
        """Aceita instância pronta, mapping `{body, headers, query}` ou None."""
        if value is None:
            return cls()
        if isinstance(value, Passthrough):
            return value
        return cls(
            body=value.get("body"),
            headers=value.get("headers"),
            query=value.get("query"),
        )


@dataclass(frozen=True, slots=True)
class MergedPayload:
    """Saída do pipeline: body final + headers/query do passthrough."""

    body: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)


__all__ = ["PASSTHROUGH_KEY", "MergedPayload", "Passthrough"]
