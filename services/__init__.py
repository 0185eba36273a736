from .image_transform import ImageTransformService

__all__ = ["ImageTransformService"]
