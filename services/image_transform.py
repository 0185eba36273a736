"""
Image transform service – style transfer and outfit swap over the Gemini image model.
"""
import asyncio
import logging
from typing import Optional, Union

from clients.gemini_image_client import GeminiImageClient
from models.schemas import ArtisticStyle, ImagePayload
from services.prompt_catalog import build_outfit_prompt, get_style_prompt

logger = logging.getLogger(__name__)


class ImageTransformService:
    def __init__(self, client: GeminiImageClient):
        self.client = client

    def apply_style(
        self, image: ImagePayload, style: Union[ArtisticStyle, str]
    ) -> Optional[str]:
        """Returns a data URI of the restyled image, or None if the model sent no image."""
        try:
            result = self.client.edit_image(image, get_style_prompt(style))
        except Exception:
            logger.exception("Error transforming image (style=%s)", getattr(style, "value", style))
            raise
        if result is None:
            logger.warning("No image in model response (style=%s)", getattr(style, "value", style))
        return result

    def apply_outfit_description(self, image: ImagePayload, description: str) -> Optional[str]:
        try:
            result = self.client.edit_image(image, build_outfit_prompt(description))
        except Exception:
            logger.exception("Error swapping outfit")
            raise
        if result is None:
            logger.warning("No image in model response (outfit swap)")
        return result

    async def apply_style_async(
        self, image: ImagePayload, style: Union[ArtisticStyle, str]
    ) -> Optional[str]:
        """Run style transfer without blocking event loop."""
        return await asyncio.to_thread(self.apply_style, image, style)

    async def apply_outfit_description_async(
        self, image: ImagePayload, description: str
    ) -> Optional[str]:
        return await asyncio.to_thread(self.apply_outfit_description, image, description)
