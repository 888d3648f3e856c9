"""Shared fixtures for the SMS sender tests."""

import pytest
import requests


def make_response(status_code: int, body: str = "") -> requests.Response:
    """Build a real requests.Response with a preset body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def env():
    """Complete environment for a send without a URL."""
    return {
        "SMS_FROM": "+15550001111",
        "SMS_TO": "+15550002222",
        "SMS_ACCOUNTSID": "AC0123456789",
        "SMS_AUTHTOKEN": "secret-token",
    }
