"""
FastAPI application for AI photo restyling and outfit swaps.
"""
import logging
import mimetypes
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from clients import GeminiImageClient, ImageTransformError
from config import get_settings
from models import (
    ArtisticStyle,
    ImagePayload,
    StyleOption,
    TransformErrorResponse,
    TransformMode,
    TransformResponse,
)
from services import ImageTransformService
from services.prompt_catalog import list_style_options

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

STATIC_DIR = Path(__file__).parent / "static"
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".gif", ".heic", ".heif"}
_EXT_FOR_MIME = {"image/png": "png", "image/jpeg": "jpg", "image/webp": "webp", "image/gif": "gif"}

FAILED_REQUEST_MESSAGE = (
    "An error occurred while processing the image. Please check your connection and try again."
)
MISSING_DESCRIPTION_MESSAGE = "Please provide an outfit description."

_ERROR_RESPONSES = {
    400: {"model": TransformErrorResponse, "description": "Invalid upload or missing description"},
    502: {"model": TransformErrorResponse, "description": "Model returned no image or the request failed"},
}


@lru_cache
def get_image_client() -> GeminiImageClient:
    settings = get_settings()
    return GeminiImageClient(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
        model=settings.gemini_image_model,
        timeout_seconds=settings.api_timeout_seconds,
    )


def get_service() -> ImageTransformService:
    return ImageTransformService(client=get_image_client())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Restyle service starting")
    s = get_settings()
    if s.gemini_api_key:
        logger.info("Image model: %s", s.gemini_image_model)
    else:
        logger.warning("GEMINI_API_KEY is not set; transform requests will fail")
    yield
    logger.info("Restyle service shutting down")


app = FastAPI(
    title="Restyle – AI Photo Styles & Outfit Swap",
    description="Turn photos into artwork or swap outfits with a generative image model",
    version="1.0.0",
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Prevent HTML from being cached so users always get latest after deploy
_HTML_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache", "Expires": "0"}


# ── Page routes ──────────────────────────────────────────────

@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for uptime checks."""
    return JSONResponse({"status": "ok"})


@app.get("/")
async def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", headers=_HTML_HEADERS)


# ── Styles API ───────────────────────────────────────────────

@app.get("/api/styles", response_model=list[StyleOption])
async def get_styles() -> list[StyleOption]:
    return list_style_options()


# ── Transform API ────────────────────────────────────────────

def _guess_mime_type(file: UploadFile) -> Optional[str]:
    if file.content_type and file.content_type.startswith("image/"):
        return file.content_type
    guessed, _ = mimetypes.guess_type(file.filename or "")
    return guessed


async def _read_upload(file: UploadFile) -> ImagePayload:
    """Validate an uploaded photo and encode it for the model request."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    ext = Path(file.filename).suffix.lower()
    is_image_type = bool(file.content_type and file.content_type.startswith("image/"))
    if ext not in IMAGE_EXTENSIONS and not is_image_type:
        raise HTTPException(status_code=400, detail=f"Unsupported format: {ext or file.content_type}")

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    max_bytes = get_settings().max_upload_bytes
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400, detail=f"File must be under {max_bytes // (1024 * 1024)} MB"
        )

    logger.info("Image received: %s (%d bytes)", file.filename, len(content))
    return ImagePayload.from_bytes(content, _guess_mime_type(file))


def _download_filename(result: str, mode: TransformMode, style: Optional[ArtisticStyle] = None) -> str:
    mime_type = result[len("data:"):].split(";", 1)[0]
    ext = _EXT_FOR_MIME.get(mime_type, "png")
    if mode == TransformMode.STYLE and style is not None:
        return f"{style.value}-sketch.{ext}"
    return f"outfit-swap.{ext}"


@app.post("/api/transform/style", response_model=TransformResponse, responses=_ERROR_RESPONSES)
async def transform_style(
    file: UploadFile = File(...),
    style: ArtisticStyle = Form(ArtisticStyle.WATERCOLOR),
    service: ImageTransformService = Depends(get_service),
) -> TransformResponse:
    """Apply one of the fixed artistic styles to the uploaded photo."""
    image = await _read_upload(file)
    try:
        result = await service.apply_style_async(image, style)
    except ImageTransformError as e:
        raise HTTPException(status_code=502, detail=FAILED_REQUEST_MESSAGE) from e
    if not result:
        raise HTTPException(
            status_code=502, detail=f"Failed to generate the {style.value}. Please try again."
        )
    return TransformResponse(
        image=result,
        mode=TransformMode.STYLE,
        style=style,
        filename=_download_filename(result, TransformMode.STYLE, style),
    )


@app.post("/api/transform/outfit", response_model=TransformResponse, responses=_ERROR_RESPONSES)
async def transform_outfit(
    file: UploadFile = File(...),
    description: str = Form(""),
    service: ImageTransformService = Depends(get_service),
) -> TransformResponse:
    """Swap the clothing of the person in the photo for the described outfit."""
    if not description.strip():
        raise HTTPException(status_code=400, detail=MISSING_DESCRIPTION_MESSAGE)
    image = await _read_upload(file)
    try:
        result = await service.apply_outfit_description_async(image, description)
    except ImageTransformError as e:
        raise HTTPException(status_code=502, detail=FAILED_REQUEST_MESSAGE) from e
    if not result:
        raise HTTPException(
            status_code=502, detail="Failed to generate the outfit swap. Please try again."
        )
    return TransformResponse(
        image=result,
        mode=TransformMode.OUTFIT,
        filename=_download_filename(result, TransformMode.OUTFIT),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8001,
        reload=True,
    )
