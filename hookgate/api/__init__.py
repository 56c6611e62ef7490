"""
Endpoint clients for Hookgate.

This module contains the low-level endpoint classes that build API
requests. Currently supported:

- BaseAuthenticationClient: Interface required by the Authentication facade
- AuthenticationApi: HTTP-backed authentication endpoints
"""

from hookgate.api.authentication_api import AuthenticationApi
from hookgate.api.base import BaseAuthenticationClient

__all__ = [
    "AuthenticationApi",
    "BaseAuthenticationClient",
]
