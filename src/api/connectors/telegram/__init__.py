"""Conector Telegram."""

from .connector import TelegramChatConnector, create_telegram_connector, parse_telegram_error

__all__ = ["TelegramChatConnector", "create_telegram_connector", "parse_telegram_error"]
