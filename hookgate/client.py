"""
Top-level Hookgate client.

This module provides the Hookgate class, the entry point that wires an
ApiClient to the resource facades.
"""

from typing import Optional

import requests

from hookgate.api.authentication_api import AuthenticationApi
from hookgate.api_client import ApiClient
from hookgate.authentication import Authentication
from hookgate.options import ClientOptions


class Hookgate:
    """
    Client for the Hookgate API.

    Examples
    --------
    >>> with Hookgate("sk_test.eu") as hookgate:
    ...     access = hookgate.authentication.dashboard_access("app_123")
    ...     print(access.url)
    """

    def __init__(
        self,
        token: str,
        options: Optional[ClientOptions] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client.

        Parameters
        ----------
        token : str
            Auth token
        options : ClientOptions, optional
            Client-wide settings
        session : requests.Session, optional
            HTTP session to use

        Raises
        ------
        ConfigurationError
            If the token is empty or options are invalid
        """
        self._api_client = ApiClient(token, options=options, session=session)
        self._authentication = Authentication(AuthenticationApi(self._api_client))

    @property
    def api_client(self) -> ApiClient:
        """Return underlying API client."""
        return self._api_client

    @property
    def authentication(self) -> Authentication:
        """Return authentication facade."""
        return self._authentication

    def close(self) -> None:
        """Release the HTTP session."""
        self._api_client.close()

    def __enter__(self) -> "Hookgate":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(server_url='{self._api_client.server_url}')"
