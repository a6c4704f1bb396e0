"""Conector Mailgun."""

from .connector import MailgunEmailConnector, create_mailgun_connector
from .errors import parse_mailgun_error

__all__ = ["MailgunEmailConnector", "create_mailgun_connector", "parse_mailgun_error"]
