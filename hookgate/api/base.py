"""
Base interface for authentication endpoint clients.

This module defines the abstract base class naming the operations the
Authentication facade needs. The facade relies only on these two methods,
so any object providing them (the HTTP-backed AuthenticationApi or a
test double) can be injected.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseAuthenticationClient(ABC):
    """
    Abstract base class for authentication endpoint clients.

    Examples
    --------
    >>> class StaticClient(BaseAuthenticationClient):
    ...     def dashboard_access(self, app_id, options):
    ...         return {"url": f"https://portal.example.com/{app_id}"}
    ...
    ...     def logout(self, options):
    ...         return None
    """

    @abstractmethod
    def dashboard_access(self, app_id: str, options: Mapping[str, Any]) -> Any:
        """
        Request dashboard access for an application.

        Parameters
        ----------
        app_id : str
            Application identifier
        options : Mapping
            Per-request overrides (``idempotency_key``, ``headers``, ``timeout``)

        Returns
        -------
        Any
            Implementation-defined response
        """
        pass

    @abstractmethod
    def logout(self, options: Mapping[str, Any]) -> Any:
        """
        Invalidate the token used for the request.

        Parameters
        ----------
        options : Mapping
            Per-request overrides (``idempotency_key``, ``headers``, ``timeout``)

        Returns
        -------
        Any
            Implementation-defined response
        """
        pass

    def __repr__(self) -> str:
        """Return string representation of the client."""
        return f"{self.__class__.__name__}()"
