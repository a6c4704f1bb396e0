"""Exceções compartilhadas pelos conectores."""

from .exceptions import (
    ConnectorError,
    CredentialError,
    FanOutFailureError,
    MissingConfigurationError,
)

__all__ = [
    "ConnectorError",
    "CredentialError",
    "FanOutFailureError",
    "MissingConfigurationError",
]
