"""Conector Vonage (provider id `nexmo`)."""

from .connector import VonageSmsConnector, create_vonage_connector
from .errors import parse_vonage_error

__all__ = ["VonageSmsConnector", "create_vonage_connector", "parse_vonage_error"]
