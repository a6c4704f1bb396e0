"""Conector APNs."""

from .connector import ApnsPushConnector, create_apns_connector
from .errors import parse_apns_error

__all__ = ["ApnsPushConnector", "create_apns_connector", "parse_apns_error"]
