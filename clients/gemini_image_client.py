"""
Gemini generateContent client for image edits.
Sends one inline image plus an instruction and reads the image back out of the response parts.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from models.schemas import DEFAULT_MIME_TYPE, ImagePayload

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-2.5-flash-image"


class ImageTransformError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def build_image_parts(image: ImagePayload, instruction: str) -> List[Dict[str, Any]]:
    """Request parts in the order the model expects: the photo first, then the instruction."""
    return [
        {"inlineData": {"mimeType": image.mime_type, "data": image.data}},
        {"text": instruction},
    ]


def extract_inline_image(response: Dict[str, Any]) -> Optional[str]:
    """
    Return the first inline image of the first candidate as a data URI.
    Text parts before it are skipped; None when the model sent no image.
    """
    candidates = response.get("candidates") or []
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    for part in parts if isinstance(parts, list) else []:
        if not isinstance(part, dict):
            continue
        inline = part.get("inlineData") or part.get("inline_data")
        if isinstance(inline, dict):
            mime_type = inline.get("mimeType") or inline.get("mime_type") or DEFAULT_MIME_TYPE
            return f"data:{mime_type};base64,{inline.get('data', '')}"
    return None


class GeminiImageClient:
    """Client for POST /v1beta/models/{model}:generateContent."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _headers(self) -> dict:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    def generate_content(self, parts: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Single request, no retry. Returns the decoded JSON response."""
        if not self.api_key:
            raise ImageTransformError("GEMINI_API_KEY is not set")

        payload = {"contents": [{"parts": parts}]}
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self.transport) as client:
                r = client.post(self.endpoint, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            raise ImageTransformError(f"Gemini request failed: {e}") from e

        if r.status_code >= 400:
            raise ImageTransformError(
                f"Gemini API error {r.status_code}: {r.text[:500]}",
                status_code=r.status_code,
            )
        try:
            data = r.json()
        except ValueError as e:
            raise ImageTransformError(f"Gemini returned invalid JSON: {r.text[:200]}") from e
        if not isinstance(data, dict):
            raise ImageTransformError(f"Gemini returned unexpected response: {r.text[:200]}")

        logger.info("Gemini generateContent completed (model=%s)", self.model)
        return data

    def edit_image(self, image: ImagePayload, instruction: str) -> Optional[str]:
        """Send the photo with an instruction; returns a data URI or None."""
        response = self.generate_content(build_image_parts(image, instruction))
        return extract_inline_image(response)
