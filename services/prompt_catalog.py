"""
Fixed instruction texts sent to the image model, one per artistic style,
plus the outfit swap template.
"""
from typing import Union

from models.schemas import ArtisticStyle, StyleOption

STYLE_PROMPTS: dict[ArtisticStyle, str] = {
    ArtisticStyle.WATERCOLOR: (
        "Transform this image into a vibrant watercolor splash effect sketch. The style should be "
        "artistic, with visible brush strokes, paint drips, and a beautiful blend of colors, while "
        "maintaining the core subject of the original photo."
    ),
    ArtisticStyle.OIL: (
        "Transform this image into a classic oil painting. Use thick, visible brush strokes, rich "
        "textures, and deep, vibrant colors. The final result should look like a masterpiece on canvas."
    ),
    ArtisticStyle.CHARCOAL: (
        "Transform this image into a rough charcoal sketch. Use black and white tones, expressive "
        "hand-drawn lines, and smudged shading to create a dramatic, artistic feel."
    ),
    ArtisticStyle.CYBERPUNK: (
        "Transform this image into a neon cyberpunk style. Use high contrast, glowing edges, and a "
        "palette dominated by electric pink, blue, and purple. Add a futuristic, digital glitch aesthetic."
    ),
    ArtisticStyle.PENCIL: (
        "Transform this image into a detailed pencil drawing. Use fine graphite lines, realistic "
        "shading, and cross-hatching to create a classic, hand-sketched look on paper."
    ),
    ArtisticStyle.POPART: (
        "Transform this image into a bold pop art style. Use vibrant, flat colors, thick outlines, "
        "and halftone dot patterns reminiscent of 1960s comic book art."
    ),
}

# (label, description) shown in the style picker, in display order
STYLE_LABELS: dict[ArtisticStyle, tuple[str, str]] = {
    ArtisticStyle.WATERCOLOR: ("Watercolor", "Soft splashes and vibrant drips"),
    ArtisticStyle.OIL: ("Oil Painting", "Thick strokes and rich textures"),
    ArtisticStyle.CHARCOAL: ("Charcoal", "Rough, dramatic hand-drawn lines"),
    ArtisticStyle.CYBERPUNK: ("Cyberpunk", "Neon glows and futuristic vibes"),
    ArtisticStyle.PENCIL: ("Pencil", "Classic graphite sketch"),
    ArtisticStyle.POPART: ("Pop Art", "Bold colors and comic patterns"),
}

OUTFIT_PROMPT_TEMPLATE = (
    "Please swap the outfit of the person in this image with the following description: "
    "{description}. Keep the person's identity, pose, and background as consistent as possible. "
    "Only change the clothing."
)


def get_style_prompt(style: Union[ArtisticStyle, str]) -> str:
    return STYLE_PROMPTS[ArtisticStyle(style)]


def build_outfit_prompt(description: str) -> str:
    """Description is inserted verbatim; blank input is the caller's problem."""
    return OUTFIT_PROMPT_TEMPLATE.format(description=description)


def list_style_options() -> list[StyleOption]:
    return [
        StyleOption(id=style, label=label, description=description)
        for style, (label, description) in STYLE_LABELS.items()
    ]
