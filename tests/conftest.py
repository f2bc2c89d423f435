# tests/conftest.py
"""
Central test configuration and fixtures.
No test talks to Clicksign: the client's session.post is patched and
answers with hand-built requests.Response objects.
"""
import json
import os
from unittest.mock import patch

import pytest
import requests

TEST_ENV = {
    "CLICKSIGN_ACCESS_TOKEN": "c9d91ece-9b3b-4def-abac-25b645cb083c",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

from clicksign import Client

TEST_HOST = "https://api.example.com/"


def build_response(status_code, body=""):
    """A requests.Response as the transport would hand it back."""
    response = requests.Response()
    response.status_code = status_code
    if not isinstance(body, str):
        body = json.dumps(body)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def client():
    return Client(TEST_ENV["CLICKSIGN_ACCESS_TOKEN"], TEST_HOST)


@pytest.fixture
def mock_post(client):
    """
    Patches the client's session.post. Set return_value (or side_effect)
    to choose what the fake server answers.
    """
    with patch.object(client.session, "post") as post:
        post.return_value = build_response(200, "{}")
        yield post


@pytest.fixture
def signer_fields():
    return {
        "email": "fulano@example.com",
        "phone_number": "11999999999",
        "auths": ["email"],
        "name": "Fulano de Tal",
        "documentation": "123.321.123-40",
        "birthday": "1983-03-31",
        "has_documentation": True,
        "delivery": "email",
        "selfie_enabled": False,
        "handwritten_enabled": False,
        "official_document_enabled": False,
        "liveness_enabled": False,
    }


@pytest.fixture
def list_fields():
    return {
        "document_key": "doc123",
        "signer_key": "sig456",
        "sign_as": "sign",
        "group": 1,
        "message": "Prezado Fulano, por favor assine o documento.",
    }


@pytest.fixture
def make_response():
    return build_response
