"""
Authentication endpoints of the Hookgate API.

This module provides the AuthenticationApi class, the HTTP-backed
implementation of BaseAuthenticationClient:

- dashboard_access → POST /api/v1/auth/dashboard-access/{app_id}/
- logout → POST /api/v1/auth/logout/
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from hookgate.api.base import BaseAuthenticationClient
from hookgate.api_client import ApiClient
from hookgate.models import DashboardAccessOut

logger = logging.getLogger(__name__)


class AuthenticationApi(BaseAuthenticationClient):
    """
    Low-level client for the authentication endpoints.

    Builds each request and hands it to an ApiClient; errors raised by
    the ApiClient are not caught here.

    Examples
    --------
    >>> api = AuthenticationApi(ApiClient("sk_test.eu"))
    >>> access = api.dashboard_access("app_123", {})
    >>> access.url
    'https://app.hookgate.io/login#key=...'
    """

    DASHBOARD_ACCESS_PATH = "/api/v1/auth/dashboard-access/{app_id}/"
    LOGOUT_PATH = "/api/v1/auth/logout/"

    # Operation ids, used in log messages
    DASHBOARD_ACCESS_OPERATION = "get_dashboard_access"
    LOGOUT_OPERATION = "logout"

    def __init__(self, api_client: ApiClient):
        """
        Initialize authentication endpoints.

        Parameters
        ----------
        api_client : ApiClient
            Client used to send requests
        """
        self._api_client = api_client

    @property
    def api_client(self) -> ApiClient:
        """Return underlying API client."""
        return self._api_client

    def dashboard_access(
        self,
        app_id: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> DashboardAccessOut:
        """
        Get a pre-authenticated application portal URL.

        Parameters
        ----------
        app_id : str
            Application identifier or uid
        options : Mapping, optional
            Per-request overrides

        Returns
        -------
        DashboardAccessOut
            Portal URL and token

        Raises
        ------
        ApiError
            If the server rejects the request
        ApiConnectionError
            If the server cannot be reached
        ResponseFormatError
            If the response lacks ``url`` or ``token``
        """
        logger.debug(f"{self.DASHBOARD_ACCESS_OPERATION}: app_id={app_id}")

        data = self._api_client.request(
            "POST",
            self.DASHBOARD_ACCESS_PATH,
            path_params={"app_id": app_id},
            request_options=options,
        )
        access = DashboardAccessOut.from_dict(data)

        logger.info(f"Dashboard access granted for {app_id}")
        return access

    def logout(self, options: Optional[Mapping[str, Any]] = None) -> None:
        """
        Log out the token used for the request.

        Parameters
        ----------
        options : Mapping, optional
            Per-request overrides

        Raises
        ------
        ApiError
            If the server rejects the request
        ApiConnectionError
            If the server cannot be reached
        """
        logger.debug(f"{self.LOGOUT_OPERATION}: invalidating token")

        self._api_client.request(
            "POST",
            self.LOGOUT_PATH,
            request_options=options,
        )

        logger.info("Logged out")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._api_client!r})"
