"""
Pytest configuration and shared fixtures.

This module contains pytest fixtures and configuration that are shared
across all test modules.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from hookgate.api_client import ApiClient
from hookgate.options import ClientOptions


@pytest.fixture
def token() -> str:
    """
    Provide an auth token with an EU region suffix.

    Returns
    -------
    str
        Auth token
    """
    return "sk_test_4f9a2c.eu"


@pytest.fixture
def make_response():
    """
    Provide a factory for mocked ``requests.Response`` objects.

    Returns
    -------
    callable
        ``make_response(status_code=200, json_data=None, text="")``
    """

    def _make_response(status_code: int = 200, json_data=None, text: str = ""):
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        if json_data is not None:
            response.text = json.dumps(json_data)
            response.content = response.text.encode()
            response.json = Mock(return_value=json_data)
        else:
            response.text = text
            response.content = text.encode()
            response.json = Mock(side_effect=ValueError("Expecting value"))
        return response

    return _make_response


@pytest.fixture
def mock_session() -> Mock:
    """
    Provide a mocked HTTP session.

    Returns
    -------
    Mock
        Session whose ``request`` must be configured by the test
    """
    return Mock(spec=requests.Session)


@pytest.fixture
def api_client(token, mock_session) -> ApiClient:
    """
    Provide an ApiClient on a mocked session with fast retries.

    Returns
    -------
    ApiClient
        Client sending to ``https://api.eu.hookgate.io``
    """
    return ApiClient(
        token,
        options=ClientOptions(max_retries=2, retry_backoff=0),
        session=mock_session,
    )
