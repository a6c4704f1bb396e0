"""Conector Resend."""

from .connector import ResendEmailConnector, create_resend_connector
from .errors import parse_resend_error

__all__ = ["ResendEmailConnector", "create_resend_connector", "parse_resend_error"]
