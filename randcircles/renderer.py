"""Circle rendering to SVG documents and raster previews.

Circle positions and radii are fractions of the canvas: x and y scale
with width and height, the radius with the shorter side.
"""

import logging
from pathlib import Path

import svgwrite
from PIL import Image, ImageDraw

from .color import hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)


def _to_canvas(circle, width, height):
    """Return (cx, cy, r, opacity) in pixels for a circle."""
    cx = circle.x * width
    cy = circle.y * height
    r = max(0.0, circle.radius * min(width, height))
    opacity = min(1.0, max(0.0, circle.opacity))
    return cx, cy, r, opacity


def render_svg(circles, width, height, background=None):
    """Build an SVG drawing with one <circle> per Circle.

    Args:
        circles: Iterable of Circle.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        background: Optional hex color for a full-canvas rectangle.

    Returns:
        svgwrite.Drawing.
    """
    dwg = svgwrite.Drawing(size=(width, height))
    if background is not None:
        dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"),
                         fill=rgb_to_hex(hex_to_rgb(background))))

    for circle in circles:
        cx, cy, r, opacity = _to_canvas(circle, width, height)
        dwg.add(dwg.circle(center=(cx, cy), r=r,
                           fill=rgb_to_hex(circle.color),
                           fill_opacity=opacity))
    return dwg


def render_image(circles, width, height, background=None):
    """Rasterize circles onto an RGBA image, blending by opacity."""
    bg = (0, 0, 0, 0) if background is None else hex_to_rgb(background) + (255,)
    img = Image.new('RGBA', (width, height), bg)
    draw = ImageDraw.Draw(img, 'RGBA')

    for circle in circles:
        cx, cy, r, opacity = _to_canvas(circle, width, height)
        fill = tuple(circle.color) + (int(round(opacity * 255)),)
        draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill)

    return img


def save(circles, path, width, height, background=None):
    """Write circles to path: SVG for '.svg', otherwise a Pillow image."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == '.svg':
        render_svg(circles, width, height, background).saveas(str(path))
    else:
        img = render_image(circles, width, height, background)
        if path.suffix.lower() in ('.jpg', '.jpeg'):
            img = img.convert('RGB')  # no alpha in JPEG
        img.save(str(path))

    logger.info("wrote %s (%dx%d)", path, width, height)
    return path
