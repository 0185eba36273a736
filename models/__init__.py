from .schemas import (
    ArtisticStyle,
    ImagePayload,
    StyleOption,
    TransformErrorResponse,
    TransformMode,
    TransformResponse,
)

__all__ = [
    "ArtisticStyle",
    "ImagePayload",
    "StyleOption",
    "TransformErrorResponse",
    "TransformMode",
    "TransformResponse",
]
