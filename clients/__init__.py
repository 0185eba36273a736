from .gemini_image_client import (
    GeminiImageClient,
    ImageTransformError,
    build_image_parts,
    extract_inline_image,
)

__all__ = [
    "GeminiImageClient",
    "ImageTransformError",
    "build_image_parts",
    "extract_inline_image",
]
