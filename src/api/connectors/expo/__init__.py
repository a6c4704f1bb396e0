"""Conector Expo push."""

from .connector import ExpoPushConnector, create_expo_connector
from .errors import parse_expo_error

__all__ = ["ExpoPushConnector", "create_expo_connector", "parse_expo_error"]
