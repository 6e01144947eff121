"""Sun and moon glyphs drawn with Pillow for the appearance switch."""
from __future__ import annotations

import math

from PIL import Image, ImageDraw


GREY = (107, 114, 128, 255)
LIGHT_GREY = (156, 163, 175, 255)


def draw_sun(size: int = 32, color: tuple[int, int, int, int] = GREY) -> Image.Image:
    """Return an RGBA image of a sun: a ring with eight rays."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    c = size / 2
    width = max(1, size // 12)
    r = size * 0.2
    draw.ellipse((c - r, c - r, c + r, c + r), outline=color, width=width)
    for i in range(8):
        angle = i * math.pi / 4
        inner, outer = size * 0.32, size * 0.46
        draw.line(
            (
                c + inner * math.cos(angle),
                c + inner * math.sin(angle),
                c + outer * math.cos(angle),
                c + outer * math.sin(angle),
            ),
            fill=color,
            width=width,
        )
    return img


def draw_moon(size: int = 32, color: tuple[int, int, int, int] = GREY) -> Image.Image:
    """Return an RGBA image of a crescent moon."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    pad = size * 0.12
    draw.ellipse((pad, pad, size - pad, size - pad), fill=color)
    # Cut the crescent by clearing an offset disc.
    shift = size * 0.28
    draw.ellipse(
        (pad + shift, pad - shift * 0.4, size - pad + shift, size - pad - shift * 0.4),
        fill=(0, 0, 0, 0),
    )
    return img
