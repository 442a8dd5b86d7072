"""
Pytest configuration and fixtures for the classifier tests
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from shopping_classifier.client import ClassifierClient
from shopping_classifier.session import ClassificationResult, ClassificationSession

IPHONE_QUERY = "iPhone 15 Pro"
IPHONE_DESCRIPTION = "Apple iPhone 15 Pro, 256GB, Natural Titanium, A17 Pro chip."


@pytest.fixture
def session():
    """Fresh session in the Idle phase."""
    return ClassificationSession()


@pytest.fixture
def filled_session(session):
    session.edit_query(IPHONE_QUERY)
    session.edit_description(IPHONE_DESCRIPTION)
    return session


@pytest.fixture
def fake_client():
    """Client stub returning an exact match unless reconfigured."""
    client = MagicMock(spec=ClassifierClient)
    client.classify.return_value = ClassificationResult("exact", 0.94)
    return client


def make_response(status_code=200, payload=None, reason="OK", body=None):
    """Build a ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        body = json.dumps(payload if payload is not None else {})
    response._content = body.encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def http_session():
    """MagicMock standing in for ``requests.Session``."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def response_factory():
    return make_response
