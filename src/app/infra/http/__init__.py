"""Cliente HTTP compartilhado pelos conectores."""

from .client import HttpClient, HttpClientConfig

__all__ = ["HttpClient", "HttpClientConfig"]
