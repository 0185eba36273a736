"""Pytest configuration and fixtures

Shared fixtures for the Gemini client, the transform service and the HTTP API.
Outbound calls never leave the process: every client is built on an
httpx.MockTransport whose handler the test controls.
"""

import base64
import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from clients import GeminiImageClient
from models import ImagePayload
from services import ImageTransformService

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
RESULT_DATA = base64.b64encode(b"restyled-image-bytes").decode("ascii")


def gemini_response(*parts):
    """Build a generateContent response with a single candidate holding `parts`."""
    return {"candidates": [{"content": {"role": "model", "parts": list(parts)}}]}


def image_part(data=RESULT_DATA, mime_type="image/png"):
    return {"inlineData": {"mimeType": mime_type, "data": data}}


def text_part(text="Here is your image."):
    return {"text": text}


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed JSON body or error."""

    def __init__(self, body=None, status_code=200, error=None):
        self.body = body if body is not None else gemini_response(image_part())
        self.status_code = status_code
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def image_payload():
    return ImagePayload.from_bytes(PNG_BYTES, "image/png")


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def gemini_client(handler):
    return GeminiImageClient(api_key="test-key", transport=httpx.MockTransport(handler))


@pytest.fixture
def transform_service(gemini_client):
    return ImageTransformService(client=gemini_client)
