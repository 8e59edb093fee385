"""
Measurement capabilities consumed by the layout pass.
The core only depends on these protocols; font backends live in adapters.
"""
from typing import Protocol

from .models import Size


class TextMeasurer(Protocol):
    """Measures label text in the legend font (pixels)"""

    def measure_width(self, text: str) -> float:
        ...

    def measure_height(self, text: str) -> float:
        ...

    def line_height(self) -> float:
        ...

    def line_spacing(self) -> float:
        ...


class Viewport(Protocol):
    """Reports the width the legend may occupy"""

    def available_width(self) -> float:
        ...


def measure_size(measurer: TextMeasurer, text: str) -> Size:
    """
    Measure both dimensions of a label.

    Args:
        measurer: Text measurement capability
        text: Label text

    Returns:
        Size of the rendered text
    """
    return Size(measurer.measure_width(text), measurer.measure_height(text))


class MonospaceTextMeasurer:
    """
    Estimates text size from character count.

    Every character is assumed to be text_size * char_width_ratio wide
    (~0.6 of the font size for typical sans fonts). Deterministic, so it
    doubles as the measurer used in tests.
    """

    def __init__(self, text_size: float = 10.0, char_width_ratio: float = 0.6,
                 leading: float = 0.0):
        self.text_size = text_size
        self.char_width_ratio = char_width_ratio
        self.leading = leading

    def measure_width(self, text: str) -> float:
        return len(text) * self.text_size * self.char_width_ratio

    def measure_height(self, text: str) -> float:
        return self.text_size if text else 0.0

    def line_height(self) -> float:
        return self.text_size

    def line_spacing(self) -> float:
        return self.leading


class StaticViewport:
    """Viewport with a fixed available width"""

    def __init__(self, width: float):
        self.width = width

    def available_width(self) -> float:
        return self.width
