"""Tests for ImagePayload encoding and data URI parsing"""

import base64

import pytest
from pydantic import ValidationError

from models import ImagePayload


def test_from_bytes_encodes_base64():
    payload = ImagePayload.from_bytes(b"\x89PNG raw", "image/png")
    assert base64.b64decode(payload.data) == b"\x89PNG raw"
    assert payload.mime_type == "image/png"


def test_from_bytes_defaults_mime_type():
    assert ImagePayload.from_bytes(b"abc").mime_type == "image/png"


def test_from_data_uri_splits_header():
    payload = ImagePayload.from_data_uri("data:image/jpeg;base64,aGVsbG8=")
    assert payload.mime_type == "image/jpeg"
    assert payload.data == "aGVsbG8="


@pytest.mark.parametrize("uri", ["data:;base64,aGVsbG8=", "data,aGVsbG8="])
def test_from_data_uri_falls_back_to_png(uri):
    assert ImagePayload.from_data_uri(uri).mime_type == "image/png"


def test_from_data_uri_requires_separator():
    with pytest.raises(ValueError):
        ImagePayload.from_data_uri("aGVsbG8=")


def test_empty_data_rejected():
    with pytest.raises(ValidationError):
        ImagePayload(data="   ", mime_type="image/png")


def test_invalid_base64_rejected():
    with pytest.raises(ValidationError):
        ImagePayload(data="not base64!!", mime_type="image/png")
