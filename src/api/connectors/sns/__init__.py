"""Conector Amazon SNS."""

from .connector import SnsSmsConnector, create_sns_connector
from .errors import extract_xml_tag, parse_sns_error

__all__ = ["SnsSmsConnector", "create_sns_connector", "extract_xml_tag", "parse_sns_error"]
