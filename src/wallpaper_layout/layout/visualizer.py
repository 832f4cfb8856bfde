"""
Module: layout.visualizer

Purpose:
    Debug visualization for computed layouts. Draws each placement as a
    labelled outline on a blank canvas, with the margin drawn as a guide,
    so strategies can be compared without decoding any source images.

Key Functions:
    - render_layout_preview(): Create the wireframe image
    - save_layout_preview(): Render and write to disk

Dependencies:
    - PIL: Image drawing

Used By:
    - scripts.preview_layout: --preview option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from wallpaper_layout.core.models import CanvasBounds, PlacementRect

logger = logging.getLogger(__name__)

# Visualization constants
BACKGROUND_COLOR = (255, 255, 255, 255)
MARGIN_GUIDE_COLOR = (200, 200, 200, 255)
FILL_COLOR = (66, 133, 244, 60)          # Translucent blue
OUTLINE_COLOR = (25, 80, 170, 220)
LABEL_BG_COLOR = (0, 0, 0, 200)
LABEL_TEXT_COLOR = (255, 255, 255, 255)
BOX_LINE_WIDTH = 3
FONT_SIZE = 16


def render_layout_preview(
    placements: Sequence[PlacementRect],
    bounds: CanvasBounds,
    margin: Optional[float] = None,
    scale: float = 1.0,
) -> Image.Image:
    """
    Draw a layout as outlined rectangles.

    Placements are drawn in ``order`` so stacked images overlap the way
    the renderer would draw them.

    Args:
        placements: Layout output
        bounds: Canvas the layout was computed for
        margin: Draw a margin guide at this inset (None = no guide)
        scale: Output size relative to the canvas

    Returns:
        New RGB image of size bounds * scale

    Example:
        >>> preview = render_layout_preview(rects, CanvasBounds(), margin=20, scale=0.5)
        >>> preview.size
        (960, 540)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")

    size = (max(1, round(bounds.width * scale)), max(1, round(bounds.height * scale)))
    canvas = Image.new("RGBA", size, BACKGROUND_COLOR)
    overlay = Image.new("RGBA", size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    if margin is not None and margin > 0:
        draw.rectangle(
            _scaled_box((margin, margin, bounds.width - margin, bounds.height - margin), scale),
            outline=MARGIN_GUIDE_COLOR,
            width=1,
        )

    for rect in sorted(placements, key=lambda r: r.order):
        box = _scaled_box((rect.x, rect.y, rect.right, rect.bottom), scale)
        draw.rectangle(box, fill=FILL_COLOR, outline=OUTLINE_COLOR, width=BOX_LINE_WIDTH)
        _draw_label(draw, box, str(rect.image_id), font)

    canvas = Image.alpha_composite(canvas, overlay)
    return canvas.convert("RGB")


def save_layout_preview(
    placements: Sequence[PlacementRect],
    bounds: CanvasBounds,
    output_path: Path,
    margin: Optional[float] = None,
    scale: float = 1.0,
) -> Path:
    """Render a preview and save it (format from the file suffix)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    render_layout_preview(placements, bounds, margin=margin, scale=scale).save(output_path)
    logger.info(f"Saved layout preview to {output_path}")
    return output_path


def _scaled_box(
    box: Tuple[float, float, float, float],
    scale: float,
) -> Tuple[int, int, int, int]:
    left, top, right, bottom = (round(v * scale) for v in box)
    # PIL rejects boxes with right < left
    return (left, top, max(left, right), max(top, bottom))


def _draw_label(
    draw: ImageDraw.ImageDraw,
    box: Tuple[int, int, int, int],
    text: str,
    font: ImageFont.ImageFont,
) -> None:
    """Draw text on a dark background at the top-left corner of box."""
    text_box = draw.textbbox((box[0] + 4, box[1] + 4), text, font=font)
    padded = (text_box[0] - 2, text_box[1] - 2, text_box[2] + 2, text_box[3] + 2)
    draw.rectangle(padded, fill=LABEL_BG_COLOR)
    draw.text((box[0] + 4, box[1] + 4), text, fill=LABEL_TEXT_COLOR, font=font)
