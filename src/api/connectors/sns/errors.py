"""Leitura das respostas XML do SNS (Query API)."""

from __future__ import annotations

import re
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails


def extract_xml_tag(xml: Any, tag: str) -> str | None:
    """Conteúdo textual da primeira ocorrência de `<tag>...</tag>`."""
    if not isinstance(xml, str) or not xml:
        return None
    match = re.search(rf"<{tag}>([^<]+)</{tag}>", xml)
    return match.group(1) if match else None


def parse_sns_error(body: Any) -> ProviderErrorDetails:
    """`<ErrorResponse><Error><Code/><Message/></Error></ErrorResponse>`."""
    return ProviderErrorDetails(
        code=extract_xml_tag(body, "Code"),
        message=extract_xml_tag(body, "Message"),
    )
