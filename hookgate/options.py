"""
Client and per-request configuration.

``ClientOptions`` holds settings fixed for the lifetime of a client.
Per-request overrides travel as a plain mapping through the public API
and are only interpreted here, right before a request is sent.

Recognized per-request keys:

- ``idempotency_key`` : str - sent as the ``idempotency-key`` header
- ``headers`` : dict - extra HTTP headers; they cannot replace
  ``Authorization``, ``x-request-id`` or ``idempotency-key``
- ``timeout`` : float - request timeout in seconds
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from hookgate.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://api.hookgate.io"

# Token suffix (after the last ".") -> regional API host
REGIONAL_SERVER_URLS = {
    "us": "https://api.us.hookgate.io",
    "eu": "https://api.eu.hookgate.io",
    "in": "https://api.in.hookgate.io",
    "ca": "https://api.ca.hookgate.io",
    "au": "https://api.au.hookgate.io",
}

RECOGNIZED_REQUEST_OPTIONS = ("idempotency_key", "headers", "timeout")


def _is_number(value: Any) -> bool:
    """Return True for int or float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ClientOptions:
    """
    Settings shared by every request made through one client.

    Attributes
    ----------
    server_url : str, optional
        API base URL. When unset, derived from the token's region suffix.
    timeout : float
        Default request timeout in seconds (default: 30)
    max_retries : int
        Retries after the first attempt for connection errors,
        timeouts and 5xx responses (default: 2)
    retry_backoff : float
        Base delay in seconds; attempt ``n`` waits
        ``retry_backoff * 2 ** (n - 1)`` (default: 0.05)
    """

    server_url: Optional[str] = None
    timeout: float = 30
    max_retries: int = 2
    retry_backoff: float = 0.05

    def __post_init__(self):
        if not _is_number(self.timeout) or self.timeout <= 0:
            raise ConfigurationError(
                f"timeout must be a positive number, got {self.timeout!r}"
            )
        if (
            isinstance(self.max_retries, bool)
            or not isinstance(self.max_retries, int)
            or self.max_retries < 0
        ):
            raise ConfigurationError(
                f"max_retries must be a non-negative integer, got {self.max_retries!r}"
            )
        if not _is_number(self.retry_backoff) or self.retry_backoff < 0:
            raise ConfigurationError(
                f"retry_backoff must be a non-negative number, got {self.retry_backoff!r}"
            )


@dataclass
class RequestOptions:
    """Per-request overrides parsed from an options mapping."""

    idempotency_key: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None


def resolve_server_url(token: str, server_url: Optional[str] = None) -> str:
    """
    Return the API base URL for a token.

    Parameters
    ----------
    token : str
        Auth token, optionally ending in a region suffix (e.g. ``"sk_abc.eu"``)
    server_url : str, optional
        Explicit base URL; takes precedence over the token region

    Returns
    -------
    str
        Base URL without a trailing slash

    Examples
    --------
    >>> resolve_server_url("sk_abc.eu")
    'https://api.eu.hookgate.io'
    >>> resolve_server_url("sk_abc.eu", "http://localhost:8071/")
    'http://localhost:8071'
    """
    if server_url:
        return server_url.rstrip("/")

    region = token.rsplit(".", 1)[-1] if "." in token else ""
    return REGIONAL_SERVER_URLS.get(region, DEFAULT_SERVER_URL)


def parse_request_options(options: Optional[Mapping[str, Any]]) -> RequestOptions:
    """
    Build RequestOptions from an options mapping.

    The mapping is read, never modified. Unknown keys are ignored
    with a warning.

    Parameters
    ----------
    options : Mapping, optional
        Per-request overrides; ``None`` is treated as empty

    Returns
    -------
    RequestOptions
        Parsed overrides

    Raises
    ------
    ConfigurationError
        If ``options`` or ``headers`` is not a mapping, a header or the
        ``idempotency_key`` is not a string, or ``timeout`` is not a
        positive number
    """
    if options is None:
        return RequestOptions()

    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Request options must be a mapping, got {type(options).__name__}"
        )

    unknown = [key for key in options if key not in RECOGNIZED_REQUEST_OPTIONS]
    if unknown:
        logger.warning(
            f"Ignoring unknown request options: {sorted(unknown)}. "
            f"Supported: {list(RECOGNIZED_REQUEST_OPTIONS)}"
        )

    headers = options.get("headers") or {}
    if not isinstance(headers, Mapping):
        raise ConfigurationError(
            f"'headers' option must be a mapping, got {type(headers).__name__}"
        )

    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ConfigurationError(
                f"Header names and values must be strings, got {name!r}: {value!r}"
            )

    idempotency_key = options.get("idempotency_key")
    if idempotency_key is not None and not isinstance(idempotency_key, str):
        raise ConfigurationError(
            f"'idempotency_key' option must be a string, "
            f"got {type(idempotency_key).__name__}"
        )

    timeout = options.get("timeout")
    if timeout is not None and (not _is_number(timeout) or timeout <= 0):
        raise ConfigurationError(
            f"'timeout' option must be a positive number, got {timeout!r}"
        )

    return RequestOptions(
        idempotency_key=idempotency_key,
        headers=dict(headers),
        timeout=timeout,
    )
