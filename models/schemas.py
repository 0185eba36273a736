import base64
import binascii
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_MIME_TYPE = "image/png"

_DATA_URI_MIME = re.compile(r":(.*?);")


class ArtisticStyle(str, Enum):
    WATERCOLOR = "watercolor"
    OIL = "oil"
    CHARCOAL = "charcoal"
    CYBERPUNK = "cyberpunk"
    PENCIL = "pencil"
    POPART = "popart"


class TransformMode(str, Enum):
    STYLE = "style"
    OUTFIT = "outfit"


class ImagePayload(BaseModel):
    """Base64 image bytes plus the media type they were uploaded with."""

    model_config = {"frozen": True}
    data: str = Field(..., description="Base64-encoded image bytes")
    mime_type: str = Field(default=DEFAULT_MIME_TYPE, description="Declared media type")

    @field_validator("data")
    @classmethod
    def _must_be_base64(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("image data must not be empty")
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"image data is not valid base64: {e}") from e
        return value

    @field_validator("mime_type")
    @classmethod
    def _default_mime(cls, value: str) -> str:
        return value.strip() or DEFAULT_MIME_TYPE

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: Optional[str] = None) -> "ImagePayload":
        return cls(
            data=base64.b64encode(raw).decode("ascii"),
            mime_type=mime_type or DEFAULT_MIME_TYPE,
        )

    @classmethod
    def from_data_uri(cls, uri: str) -> "ImagePayload":
        """Split a ``data:<mime>;base64,<data>`` string; media type falls back to image/png."""
        header, sep, data = uri.partition(",")
        if not sep:
            raise ValueError("not a data URI: missing ',' separator")
        match = _DATA_URI_MIME.search(header)
        return cls(data=data, mime_type=match.group(1) if match else DEFAULT_MIME_TYPE)


class StyleOption(BaseModel):
    id: ArtisticStyle
    label: str
    description: str


class TransformResponse(BaseModel):
    image: str = Field(..., description="Result image as a data URI")
    mode: TransformMode
    style: Optional[ArtisticStyle] = Field(None, description="Style applied (style mode only)")
    filename: str = Field(..., description="Suggested download file name")


class TransformErrorResponse(BaseModel):
    detail: str
    code: Optional[str] = None
