"""
Text measurement backed by Pillow fonts.
This is the adapter layer - measures real glyphs for the layout core.
"""
import logging
import warnings
from typing import Set

from PIL import ImageFont

logger = logging.getLogger(__name__)

# Fonts tried after the requested family
FALLBACK_FONTS = ["DejaVuSans.ttf", "arial.ttf", "Arial.ttf"]

# Used for line metrics when the font has no getmetrics()
REFERENCE_TEXT = "Ag"

# Tallest and deepest common glyphs, measured from the baseline
LINE_BOUNDS_TEXT = "\u00c1\u00c5Hgjpqy|"

_font_warning_emitted: Set[str] = set()


def load_font(font_family: str, text_size: float):
    """
    Load a TrueType font, falling back to Pillow's default font.

    Args:
        font_family: Font family or file name (".ttf" optional)
        text_size: Font size in pixels

    Returns:
        Pillow font object
    """
    size = max(1, int(round(text_size)))
    name = font_family if font_family.endswith(".ttf") else font_family + ".ttf"
    for candidate in (name, name.replace(" ", "")):
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            continue

    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using fallback font.", UserWarning)

    for candidate in FALLBACK_FONTS:
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            continue

    logger.debug("Falling back to Pillow default font for %r", font_family)
    return ImageFont.load_default(size=size)


class PillowTextMeasurer:
    """
    TextMeasurer implementation using a Pillow font.

    Widths use the font's advance length, heights the tight bounding box
    of the text, line height ascent + descent.
    """

    def __init__(self, font_family: str = "DejaVuSans", text_size: float = 10.0):
        self.font_family = font_family
        self.text_size = text_size
        self.font = load_font(font_family, text_size)

    def measure_width(self, text: str) -> float:
        if not text:
            return 0.0
        return float(self.font.getlength(text))

    def measure_height(self, text: str) -> float:
        if not text:
            return 0.0
        left, top, right, bottom = self.font.getbbox(text)
        return float(bottom - top)

    def line_height(self) -> float:
        ascent, descent = self._metrics()
        return float(ascent + descent)

    def line_spacing(self) -> float:
        """
        Extra leading between lines: headroom above the ascent plus the
        deepest glyph extent below the baseline (top/bottom font bounds).
        """
        ascent, descent = self._metrics()
        if not hasattr(self.font, "getmetrics"):
            return float(descent)

        left, top, right, bottom = self.font.getbbox(LINE_BOUNDS_TEXT, anchor="ls")
        headroom = max(0.0, -top - ascent)
        return float(headroom + max(bottom, descent))

    def _metrics(self):
        if hasattr(self.font, "getmetrics"):
            return self.font.getmetrics()
        left, top, right, bottom = self.font.getbbox(REFERENCE_TEXT)
        return bottom, 0
