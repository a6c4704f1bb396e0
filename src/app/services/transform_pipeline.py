"""Pipeline de transformação: casing + merge em camadas.

Precedência (menor -> maior):
1. campos internos calculados pelo conector (com casing)
2. campos conhecidos enviados pelo chamador (com casing)
3. body do passthrough (cru, já na convenção nativa do provedor)

Headers e query vêm somente do passthrough e nunca passam pelo casing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.passthrough import PASSTHROUGH_KEY, MergedPayload, Passthrough
from utils.casing import CasingConvention, transform_keys
from utils.deep_merge import deep_merge


def split_bridge_data(
    bridge_data: Mapping[str, Any] | None,
) -> tuple[dict[str, Any], Passthrough]:
    """Separa campos conhecidos do override `_passthrough`."""
    if not bridge_data:
        return {}, Passthrough()
    known = {key: value for key, value in bridge_data.items() if key != PASSTHROUGH_KEY}
    return known, Passthrough.from_value(bridge_data.get(PASSTHROUGH_KEY))


def transform_payload(
    internal_fields: Mapping[str, Any],
    bridge_data: Mapping[str, Any] | None = None,
    *,
    casing: CasingConvention,
) -> MergedPayload:
    """Produz o `{body, headers, query}` final de um envio.

    Args:
        internal_fields: Payload montado pelo conector a partir das opções.
        bridge_data: Campos do chamador, podendo conter `_passthrough`.
        casing: Convenção do provedor.

    Returns:
        MergedPayload com body mesclado e headers/query do passthrough.
    """
    known_fields, passthrough = split_bridge_data(bridge_data)
    body = deep_merge(
        {},
        transform_keys(internal_fields, casing),
        transform_keys(known_fields, casing),
        passthrough.body or {},
    )
    return MergedPayload(
        body=dict(body),
        headers=dict(passthrough.headers or {}),
        query=dict(passthrough.query or {}),
    )


__all__ = ["split_bridge_data", "transform_payload"]
