"""
Debug preview of a packed bin.

Draws the used rectangles (and optionally the free rectangles) of a bin so a
layout can be inspected by eye. This is not the atlas texture: no pixels of
the packed images are read or written here.
"""

from __future__ import annotations

import logging

from PIL import Image, ImageDraw

from .packer import MaxRectsBinPack

BACKGROUND_COLOR = (32, 32, 32)
OUTLINE_COLOR = (0, 0, 0)
FREE_OUTLINE_COLOR = (255, 0, 0)
USED_COLORS = ['#4e79a7', '#f28e2b', '#59a14f', '#edc948', '#b07aa1', '#76b7b2', '#ff9da7', '#9c755f']


def render_preview(bin_pack: MaxRectsBinPack, scale: int = 1, show_free: bool = False) -> Image.Image:
    """
    Render the bin layout as an RGB image.

    Args:
        bin_pack: Bin to draw
        scale: Pixels per bin unit
        show_free: Also outline the free rectangles

    Returns:
        Image of size (width * scale, height * scale)
    """
    canvas_width = max(1, bin_pack.width * scale)
    canvas_height = max(1, bin_pack.height * scale)
    logging.debug(f"Rendering preview {canvas_width}x{canvas_height} for "
                  f"{len(bin_pack.used_rectangles)} used rectangles")

    img = Image.new('RGB', (canvas_width, canvas_height), color=BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    for i, rect in enumerate(bin_pack.used_rectangles):
        box = [rect.x * scale, rect.y * scale, rect.right * scale - 1, rect.bottom * scale - 1]
        draw.rectangle(box, fill=USED_COLORS[i % len(USED_COLORS)], outline=OUTLINE_COLOR)

    if show_free:
        for rect in bin_pack.free_rectangles:
            if rect.area == 0:
                continue
            box = [rect.x * scale, rect.y * scale, rect.right * scale - 1, rect.bottom * scale - 1]
            draw.rectangle(box, outline=FREE_OUTLINE_COLOR)

    return img
