"""Conector Amazon SES."""

from .connector import SesEmailConnector, create_ses_connector
from .errors import parse_ses_error
from .mime import build_mime_message, encode_raw_message

__all__ = [
    "SesEmailConnector",
    "build_mime_message",
    "create_ses_connector",
    "encode_raw_message",
    "parse_ses_error",
]
