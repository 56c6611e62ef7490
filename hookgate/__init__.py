"""
Hookgate - Python client for the Hookgate webhook service API.

This package wraps the authentication endpoints of the Hookgate HTTP API:
requesting pre-authenticated dashboard access for an application and
logging out an auth token.

Example usage::

    from hookgate import Hookgate

    with Hookgate("sk_test.eu") as hookgate:
        access = hookgate.authentication.dashboard_access("app_123")
        print(access.url)

        hookgate.authentication.logout({"idempotency_key": "logout-1"})
"""

from hookgate.api.authentication_api import AuthenticationApi
from hookgate.api.base import BaseAuthenticationClient
from hookgate.api_client import ApiClient
from hookgate.authentication import Authentication
from hookgate.client import Hookgate
from hookgate.exceptions import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    HookgateError,
    HttpValidationError,
    ResponseFormatError,
)
from hookgate.models import DashboardAccessOut
from hookgate.options import ClientOptions
from hookgate.version import __version__

__all__ = [
    # Client
    "Hookgate",
    "ApiClient",
    "ClientOptions",
    # Authentication
    "Authentication",
    "AuthenticationApi",
    "BaseAuthenticationClient",
    "DashboardAccessOut",
    # Exceptions
    "HookgateError",
    "ConfigurationError",
    "ApiError",
    "HttpValidationError",
    "ApiConnectionError",
    "ResponseFormatError",
    # Version
    "__version__",
]
