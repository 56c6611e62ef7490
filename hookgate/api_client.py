"""
HTTP client for the Hookgate API.

This module provides the ApiClient class which performs authenticated
requests against the Hookgate API: header construction, idempotency keys,
retries with exponential backoff and mapping of error responses to
Hookgate exceptions.
"""

import logging
import time
import uuid
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

import requests

from hookgate.exceptions import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    HttpValidationError,
    ResponseFormatError,
)
from hookgate.options import (
    ClientOptions,
    RequestOptions,
    parse_request_options,
    resolve_server_url,
)
from hookgate.version import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"hookgate-python/{__version__}"

# Lower-cased names of headers the caller cannot override
RESERVED_HEADERS = ("authorization", "x-request-id", "idempotency-key")


class ApiClient:
    """
    Authenticated HTTP client for the Hookgate API.

    Owns a ``requests.Session`` unless one is injected. Connection errors,
    timeouts and 5xx responses are retried; every other outcome is
    returned or raised after a single attempt.

    Examples
    --------
    >>> with ApiClient("sk_test.eu") as api:
    ...     api.request("POST", "/api/v1/auth/logout/")
    """

    def __init__(
        self,
        token: str,
        options: Optional[ClientOptions] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize API client.

        Parameters
        ----------
        token : str
            Auth token. A region suffix (e.g. ``".eu"``) selects the
            regional server unless ``options.server_url`` is set.
        options : ClientOptions, optional
            Client-wide settings (default: ``ClientOptions()``)
        session : requests.Session, optional
            HTTP session to use. An injected session is not closed by
            :meth:`close`.

        Raises
        ------
        ConfigurationError
            If the token is empty
        """
        if not token:
            raise ConfigurationError("Auth token must not be empty")

        self._token = token
        self._options = options or ClientOptions()
        self._server_url = resolve_server_url(token, self._options.server_url)
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def server_url(self) -> str:
        """Return API base URL."""
        return self._server_url

    @property
    def options(self) -> ClientOptions:
        """Return client options."""
        return self._options

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(server_url='{self._server_url}')"

    # =========================================================================
    # Requests
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        request_options: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """
        Send a request and return the decoded response body.

        Parameters
        ----------
        method : str
            HTTP method (GET, POST, ...)
        path : str
            Path template, e.g. ``"/api/v1/auth/dashboard-access/{app_id}/"``
        path_params : Mapping, optional
            Values substituted into ``path``; each is URL-quoted
        request_options : Mapping, optional
            Per-request overrides (``idempotency_key``, ``headers``,
            ``timeout``). Read, never modified.
        body : Any, optional
            JSON-serializable request body

        Returns
        -------
        Any
            Decoded JSON body, or None for 204 and empty responses

        Raises
        ------
        HttpValidationError
            On HTTP 422
        ApiError
            On any other non-2xx response
        ApiConnectionError
            If the server cannot be reached after all retries
        ResponseFormatError
            If a successful response body is not valid JSON
        """
        method = method.upper()
        url = f"{self._server_url}{self._format_path(path, path_params)}"
        parsed = parse_request_options(request_options)
        request_id = uuid.uuid4().hex
        headers = self._build_headers(method, parsed, request_id)
        timeout = parsed.timeout if parsed.timeout is not None else self._options.timeout

        response = self._send_with_retry(method, url, headers, body, timeout)
        return self._handle_response(response, method, url, request_id)

    @staticmethod
    def _format_path(path: str, path_params: Optional[Mapping[str, Any]]) -> str:
        """Substitute URL-quoted path parameters into a path template."""
        if not path_params:
            return path
        quoted = {key: quote(str(value), safe="") for key, value in path_params.items()}
        return path.format(**quoted)

    def _build_headers(
        self,
        method: str,
        parsed: RequestOptions,
        request_id: str,
    ) -> dict[str, str]:
        """
        Build headers shared by every attempt of one request.

        Caller headers are applied first; ``Authorization``,
        ``x-request-id`` and ``idempotency-key`` always come from the
        client and drop any caller header of the same name.
        """
        headers = {
            name: value
            for name, value in parsed.headers.items()
            if name.lower() not in RESERVED_HEADERS
        }
        given = {name.lower() for name in headers}
        if "accept" not in given:
            headers["Accept"] = "application/json"
        if "user-agent" not in given:
            headers["User-Agent"] = USER_AGENT
        headers["Authorization"] = f"Bearer {self._token}"
        headers["x-request-id"] = request_id

        # Every POST carries an idempotency key, reused across retries
        if parsed.idempotency_key:
            headers["idempotency-key"] = parsed.idempotency_key
        elif method == "POST":
            headers["idempotency-key"] = f"auto_{uuid.uuid4().hex}"

        return headers

    def _send_with_retry(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Optional[Any],
        timeout: float,
    ) -> requests.Response:
        """
        Send request, retrying connection errors and 5xx responses.

        Returns
        -------
        requests.Response
            First non-5xx response, or the last 5xx response once
            retries are exhausted

        Raises
        ------
        ApiConnectionError
            If every attempt failed at the transport level
        """
        attempts = self._options.max_retries + 1
        last_error: Optional[requests.RequestException] = None

        for attempt in range(1, attempts + 1):
            attempt_headers = dict(headers)
            if attempt > 1:
                attempt_headers["x-retry-count"] = str(attempt - 1)

            try:
                logger.debug(f"{method} {url} (attempt {attempt}/{attempts})")
                response = self._session.request(
                    method,
                    url,
                    headers=attempt_headers,
                    json=body,
                    timeout=timeout,
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                last_error = e
                logger.warning(f"{method} {url} failed (attempt {attempt}): {e}")
            except requests.RequestException as e:
                raise ApiConnectionError(f"{method} {url} failed: {e}") from e
            else:
                if response.status_code < 500 or attempt == attempts:
                    return response
                logger.warning(
                    f"{method} {url} returned HTTP {response.status_code} "
                    f"(attempt {attempt})"
                )

            if attempt < attempts:
                wait_time = self._options.retry_backoff * 2 ** (attempt - 1)
                logger.debug(f"Retrying in {wait_time:.2f} seconds...")
                time.sleep(wait_time)

        raise ApiConnectionError(
            f"{method} {url} failed after {attempts} attempts: {last_error}"
        ) from last_error

    def _handle_response(
        self,
        response: requests.Response,
        method: str,
        url: str,
        request_id: str,
    ) -> Any:
        """Decode a successful response or raise the matching ApiError."""
        status = response.status_code

        if 200 <= status < 300:
            if status == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise ResponseFormatError(
                    f"Invalid JSON in response to {method} {url}: {e}"
                ) from e

        body = self._decode_error_body(response)
        message = f"{method} {url} failed with HTTP {status}"
        if isinstance(body, dict) and body.get("detail"):
            message = f"{message}: {body['detail']}"

        if status == 422:
            detail = body.get("detail") if isinstance(body, dict) else None
            raise HttpValidationError(
                message,
                detail=detail if isinstance(detail, list) else None,
                body=body,
                request_id=request_id,
            )

        raise ApiError(message, status_code=status, body=body, request_id=request_id)

    @staticmethod
    def _decode_error_body(response: requests.Response) -> Any:
        """Return JSON error body, falling back to raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text
