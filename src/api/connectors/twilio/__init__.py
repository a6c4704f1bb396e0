"""Conector Twilio."""

from .connector import TwilioSmsConnector, create_twilio_connector
from .errors import parse_twilio_error

__all__ = ["TwilioSmsConnector", "create_twilio_connector", "parse_twilio_error"]
