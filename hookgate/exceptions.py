"""
Exception types raised by the Hookgate client.

Errors fall into three groups: bad local settings (``ConfigurationError``),
failed HTTP exchanges (``ApiError``, ``HttpValidationError``,
``ApiConnectionError``) and responses the client could not read
(``ResponseFormatError``). They share ``HookgateError`` as a common parent.

The authentication facade never raises these itself; they originate in the
HTTP client and reach the caller unchanged.
"""


class HookgateError(Exception):
    """
    Common parent of every error the Hookgate client raises.

    Catch this to handle any failure of a Hookgate call, whether it
    happened before the request was sent, on the wire, or while reading
    the response.

    Examples
    --------
    >>> try:
    ...     client.authentication.logout()
    ... except HookgateError as e:
    ...     print(f"Logout failed: {e}")
    """

    pass


class ConfigurationError(HookgateError):
    """
    Invalid client configuration.

    Raised for an empty auth token, client options of the wrong type or
    out of range, and malformed per-request options.

    Examples
    --------
    >>> raise ConfigurationError("Auth token must not be empty")
    """

    pass


class ApiError(HookgateError):
    """
    Error response returned by the API.

    Raised for non-2xx responses once retries (if any) are exhausted.

    Attributes
    ----------
    status_code : int, optional
        HTTP status code of the response.
    body : Any, optional
        Decoded JSON body, or raw text when the body is not JSON.
    request_id : str, optional
        Value of the ``x-request-id`` header sent with the request.

    Examples
    --------
    >>> raise ApiError("Unauthorized", status_code=401)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body=None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.request_id = request_id


class HttpValidationError(ApiError):
    """
    Request rejected by server-side validation (HTTP 422).

    Attributes
    ----------
    detail : list
        Validation error entries reported by the server.
    """

    def __init__(
        self,
        message: str,
        detail: list | None = None,
        status_code: int | None = 422,
        body=None,
        request_id: str | None = None,
    ):
        super().__init__(
            message, status_code=status_code, body=body, request_id=request_id
        )
        self.detail = detail or []


class ApiConnectionError(HookgateError):
    """
    The API could not be reached.

    Raised when connection errors or timeouts persist after all retry
    attempts. The underlying ``requests`` exception is chained as
    ``__cause__``.
    """

    pass


class ResponseFormatError(HookgateError):
    """
    Response body could not be interpreted.

    Raised when a successful response is not valid JSON or lacks
    fields required by the response model.
    """

    pass
