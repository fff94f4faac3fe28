"""Shared test fixtures for flickrcred.

Provides credential settings, canned Flickr responses, and a mock Flickr
client. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from flickrcred.client import FlickrClient


GET_TOKEN_XML = """<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
<auth>
    <token>T</token>
    <perms>read</perms>
    <user nsid="123" username="alice" fullname="Alice A" />
</auth>
</rsp>
"""

FAIL_XML = """<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="fail">
    <err code="108" msg="Invalid frob" />
</rsp>
"""


def make_response(body: str, status_code: int = 200) -> MagicMock:
    """Create a mock :class:`httpx.Response` carrying *body*."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.text = body
    response.content = body.encode("utf-8")
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            message=f"HTTP {status_code}",
            request=MagicMock(),
            response=response,
        )
    else:
        response.raise_for_status.return_value = response
    return response


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> dict[str, Any]:
    """Complete plugin-level settings."""
    return {"key": "test-key", "secret": "test-secret", "perms": "read"}


# ---------------------------------------------------------------------------
# Flickr fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def token_response() -> MagicMock:
    """A successful ``flickr.auth.getToken`` response."""
    return make_response(GET_TOKEN_XML)


@pytest.fixture
def fake_client(token_response: MagicMock) -> MagicMock:
    """A mock :class:`FlickrClient` answering ``getToken`` successfully."""
    client = MagicMock(spec=FlickrClient)
    client.execute_method.return_value = token_response
    client.request_auth_url.return_value = (
        "https://api.flickr.com/services/auth/?api_key=test-key&perms=read&api_sig=abc"
    )
    return client


@pytest.fixture
def fail_response() -> MagicMock:
    """A ``stat="fail"`` response for an invalid frob."""
    return make_response(FAIL_XML)


@pytest.fixture
def response_factory():
    """Factory building mock responses from a body and status code."""
    return make_response
