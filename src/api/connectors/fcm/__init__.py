"""Conector FCM."""

from .connector import FcmPushConnector, build_message, create_fcm_connector, trigger_fields
from .errors import parse_fcm_error

__all__ = [
    "FcmPushConnector",
    "build_message",
    "create_fcm_connector",
    "parse_fcm_error",
    "trigger_fields",
]
