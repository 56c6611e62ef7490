"""
Authentication facade.

Exposes the authentication operations under short names and forwards
each call to an injected client unchanged.
"""

from collections.abc import Mapping
from typing import Any, Optional

from hookgate.api.base import BaseAuthenticationClient


class Authentication:
    """
    Facade over an authentication endpoint client.

    The facade holds a non-owning reference to the client and adds no
    behaviour of its own: arguments are passed through as given, results
    are returned as received and exceptions propagate untouched.

    Examples
    --------
    >>> auth = Authentication(AuthenticationApi(api_client))
    >>> auth.dashboard_access("app_123").url
    'https://app.hookgate.io/login#key=...'
    >>> auth.logout()
    """

    def __init__(self, client: BaseAuthenticationClient):
        """
        Parameters
        ----------
        client : BaseAuthenticationClient
            Any object providing ``dashboard_access(app_id, options)`` and
            ``logout(options)``
        """
        self._client = client

    @property
    def client(self) -> BaseAuthenticationClient:
        """Return wrapped client."""
        return self._client

    def dashboard_access(
        self,
        app_id: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Get dashboard access for an application.

        Parameters
        ----------
        app_id : str
            Application identifier
        options : Mapping, optional
            Per-request overrides, forwarded as-is (default: empty)

        Returns
        -------
        Any
            Whatever the wrapped client returns
        """
        return self._client.dashboard_access(app_id, {} if options is None else options)

    def logout(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Log out the current token.

        Parameters
        ----------
        options : Mapping, optional
            Per-request overrides, forwarded as-is (default: empty)

        Returns
        -------
        Any
            Whatever the wrapped client returns
        """
        return self._client.logout({} if options is None else options)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._client!r})"
