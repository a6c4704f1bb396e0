"""Conector Plivo."""

from .connector import PlivoSmsConnector, create_plivo_connector
from .errors import parse_plivo_error

__all__ = ["PlivoSmsConnector", "create_plivo_connector", "parse_plivo_error"]
