"""
Rasterization of EAN-13 module patterns into display bitmaps.
"""

from dataclasses import dataclass
from io import BytesIO

import numpy as np
import structlog
from PIL import Image, ImageDraw, ImageFont

from src.barcode.encoder import decode_module_pattern, encode_module_pattern
from src.barcode.exceptions import InvalidGeometryError, InvalidInputError
from src.barcode.tables import GUARD_POSITIONS
from src.barcode.validator import format_grouped

logger = structlog.get_logger(__name__)

WHITE = 255
BLACK = 0

CAPTION_FONTS = ("DejaVuSansMono.ttf", "Menlo.ttc", "consola.ttf")


@dataclass(frozen=True)
class RenderGeometry:
    """Configuration for barcode rasterization."""

    module_width: int = 3
    bar_height: int = 140
    full_height_guards: bool = True
    guard_extension: int = 20  # how much taller guard bars are than data bars
    show_caption: bool = False
    caption_height: int = 30
    caption_font_size: int = 16

    @classmethod
    def display(cls) -> "RenderGeometry":
        """Checkout display: extended guard bars, digits shown outside the bitmap."""
        return cls(module_width=3, bar_height=140, full_height_guards=True, show_caption=False)

    @classmethod
    def labeled(cls) -> "RenderGeometry":
        """Uniform bars with the grouped number drawn underneath."""
        return cls(module_width=3, bar_height=120, full_height_guards=False, show_caption=True)

    @property
    def standard_bar_height(self) -> int:
        """Height of non-guard bars."""
        if self.full_height_guards:
            return self.bar_height - self.guard_extension
        return self.bar_height

    @property
    def canvas_height(self) -> int:
        """Total raster height including the caption band."""
        if self.show_caption:
            return self.bar_height + self.caption_height
        return self.bar_height

    def validate(self) -> None:
        """Raise InvalidGeometryError if this geometry cannot produce a raster."""
        if self.module_width <= 0:
            raise InvalidGeometryError(f"module_width must be positive: {self.module_width}")
        if self.bar_height <= 0:
            raise InvalidGeometryError(f"bar_height must be positive: {self.bar_height}")
        if self.guard_extension < 0:
            raise InvalidGeometryError(f"guard_extension cannot be negative: {self.guard_extension}")
        if self.standard_bar_height <= 0:
            raise InvalidGeometryError("guard_extension leaves no room for data bars")
        if self.show_caption and (self.caption_height <= 0 or self.caption_font_size <= 0):
            raise InvalidGeometryError("caption_height and caption_font_size must be positive")


@dataclass(frozen=True)
class Bar:
    """A filled black rectangle in raster coordinates."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Bitmap:
    """Rasterized barcode: canvas size, bar rectangles and optional caption."""

    width: int
    height: int
    bar_height: int
    bars: tuple[Bar, ...]
    caption: str | None = None
    font_size: int = 16

    def to_array(self) -> np.ndarray:
        """Grayscale pixels (white 255, black 0) without the caption text."""
        pixels = np.full((self.height, self.width), WHITE, dtype=np.uint8)
        for bar in self.bars:
            pixels[bar.y:bar.y + bar.height, bar.x:bar.x + bar.width] = BLACK
        return pixels

    def to_image(self) -> Image.Image:
        """Render to a Pillow grayscale image, drawing the caption if present."""
        image = Image.fromarray(self.to_array())
        if self.caption:
            draw = ImageDraw.Draw(image)
            font = _load_caption_font(self.font_size)
            left, top, right, bottom = draw.textbbox((0, 0), self.caption, font=font)
            band = self.height - self.bar_height
            x = (self.width - (right - left)) / 2 - left
            y = self.bar_height + (band - (bottom - top)) / 2 - top
            draw.text((x, y), self.caption, fill=BLACK, font=font)
        return image

    def to_png(self) -> bytes:
        """Encode the rendered image as PNG bytes."""
        with BytesIO() as buffer:
            self.to_image().save(buffer, format="PNG")
            return buffer.getvalue()


def _load_caption_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Load a monospaced font for digits, falling back to Pillow's default."""
    for name in CAPTION_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def rasterize(
    pattern: str,
    geometry: RenderGeometry | None = None,
    caption: str | None = None,
) -> Bitmap:
    """
    Lay out a module pattern as bars on a white canvas.

    Args:
        pattern: Module pattern of '0' (space) and '1' (bar) symbols
        geometry: Rendering configuration (default: RenderGeometry())
        caption: Text for the caption band; when captions are enabled and
            none is given, the grouped digits decoded from the pattern are used

    Returns:
        Bitmap description of the rendered barcode

    Raises:
        InvalidInputError: If the pattern is empty or has foreign symbols
        InvalidGeometryError: If the geometry has non-positive dimensions
    """
    geometry = geometry or RenderGeometry()
    geometry.validate()

    if not pattern:
        raise InvalidInputError("Cannot rasterize an empty module pattern")
    if set(pattern) - {"0", "1"}:
        raise InvalidInputError("Module pattern may only contain '0' and '1'")

    full = geometry.bar_height
    standard = geometry.standard_bar_height
    bars = tuple(
        Bar(
            x=i * geometry.module_width,
            y=0,
            width=geometry.module_width,
            height=full if i in GUARD_POSITIONS else standard,
        )
        for i, symbol in enumerate(pattern)
        if symbol == "1"
    )

    text = None
    if geometry.show_caption:
        text = caption if caption is not None else format_grouped(decode_module_pattern(pattern))

    bitmap = Bitmap(
        width=len(pattern) * geometry.module_width,
        height=geometry.canvas_height,
        bar_height=geometry.bar_height,
        bars=bars,
        caption=text,
        font_size=geometry.caption_font_size,
    )
    logger.debug(
        "Rasterized barcode",
        width=bitmap.width,
        height=bitmap.height,
        bars=len(bars),
        caption=text is not None,
    )
    return bitmap


def render_ean13(code: str, geometry: RenderGeometry | None = None) -> Bitmap:
    """
    Convenience function to encode and rasterize an EAN-13 code.

    Args:
        code: 13-digit EAN code
        geometry: Rendering configuration

    Returns:
        Bitmap with the grouped code as caption when captions are enabled
    """
    pattern = encode_module_pattern(code)
    return rasterize(pattern, geometry, caption=format_grouped(code))
