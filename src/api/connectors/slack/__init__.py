"""Conector Slack."""

from .connector import SlackChatConnector, create_slack_connector, parse_slack_error

__all__ = ["SlackChatConnector", "create_slack_connector", "parse_slack_error"]
