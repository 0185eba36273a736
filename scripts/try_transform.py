"""
Try the Gemini image edit against a local photo.
Run from project root with GEMINI_API_KEY in .env (or env).

    python scripts/try_transform.py photo.jpg --style oil
    python scripts/try_transform.py photo.jpg --outfit "a navy tuxedo"
"""
import argparse
import base64
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clients import GeminiImageClient, ImageTransformError
from config import get_settings
from models import ArtisticStyle, ImagePayload
from services import ImageTransformService


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("image", type=Path)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--style", choices=[s.value for s in ArtisticStyle], default="watercolor")
    group.add_argument("--outfit", help="Outfit description for an outfit swap")
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args()

    settings = get_settings()
    if not settings.gemini_api_key:
        print("ERROR: Set GEMINI_API_KEY in .env or environment")
        return 1

    suffix = args.image.suffix.lower().lstrip(".")
    mime_type = "image/jpeg" if suffix in ("jpg", "jpeg") else f"image/{suffix or 'png'}"
    image = ImagePayload.from_bytes(args.image.read_bytes(), mime_type)

    service = ImageTransformService(
        client=GeminiImageClient(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_image_model,
            timeout_seconds=settings.api_timeout_seconds,
        )
    )

    print("Model:", settings.gemini_image_model)
    print("Mode:", f"outfit ({args.outfit})" if args.outfit else f"style ({args.style})")
    try:
        if args.outfit:
            result = service.apply_outfit_description(image, args.outfit)
        else:
            result = service.apply_style(image, args.style)
    except ImageTransformError as e:
        print("ERROR:", e)
        return 1

    if result is None:
        print("NO IMAGE: the model answered without an image")
        return 1

    header, _, data = result.partition(",")
    out = args.out or args.image.with_name(f"{args.image.stem}-{'outfit' if args.outfit else args.style}.png")
    out.write_bytes(base64.b64decode(data))
    print("SUCCESS:", header, "->", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
