"""
Pure data models for legend layout.
No rendering or font imports - fully testable with mock measurers.
"""
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from enum import Enum


# Color sentinels: an extra entry with COLOR_SKIP gets no form,
# one with COLOR_NONE gets an empty form.
COLOR_SKIP = 0x00112233
COLOR_NONE = 0x00112234


class InvalidLegendConfig(ValueError):
    """Raised when a LegendConfig is constructed with unusable values"""


class LegendForm(Enum):
    """Shape drawn next to a legend label"""
    NONE = "none"  # No form, no space reserved
    EMPTY = "empty"  # Space reserved but nothing drawn
    DEFAULT = "default"  # Use the legend-wide form
    SQUARE = "square"
    CIRCLE = "circle"
    LINE = "line"


class LegendOrientation(Enum):
    """Whether entries flow left-to-right or stack top-to-bottom"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LegendDirection(Enum):
    """Text direction, passed through to the renderer"""
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"


class LegendHorizontalAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LegendVerticalAlignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Labeled:
    """Label variant carrying text"""
    text: str


class Stacked:
    """Label variant for a form without text that groups with the next label"""

    def __repr__(self):
        return "STACKED"


STACKED = Stacked()

EntryLabel = Union[Labeled, Stacked]


@dataclass(frozen=True)
class LegendEntry:
    """One legend item: a form plus an optional text label"""
    label: EntryLabel = STACKED
    form: LegendForm = LegendForm.DEFAULT
    form_size: Optional[float] = None  # in dp, None = legend default
    form_line_width: Optional[float] = None  # in dp, None = legend default
    form_line_dash: Optional[Tuple[float, ...]] = None  # dash intervals
    form_color: int = 0  # ARGB

    @classmethod
    def labeled(cls, text: str, **kwargs) -> "LegendEntry":
        return cls(label=Labeled(text), **kwargs)

    @classmethod
    def stacked(cls, **kwargs) -> "LegendEntry":
        return cls(label=STACKED, **kwargs)

    @property
    def is_stacked(self) -> bool:
        return isinstance(self.label, Stacked)

    @property
    def text(self) -> Optional[str]:
        """Label text, or None for a stacked entry"""
        if isinstance(self.label, Labeled):
            return self.label.text
        return None

    @property
    def has_form(self) -> bool:
        return self.form != LegendForm.NONE


@dataclass
class LegendConfig:
    """Configuration for a legend layout pass (linear values in dp)"""
    # Arrangement
    orientation: LegendOrientation = LegendOrientation.HORIZONTAL
    direction: LegendDirection = LegendDirection.LEFT_TO_RIGHT
    horizontal_alignment: LegendHorizontalAlignment = LegendHorizontalAlignment.LEFT
    vertical_alignment: LegendVerticalAlignment = LegendVerticalAlignment.BOTTOM
    draw_inside: bool = False
    word_wrap: bool = False
    max_size_percent: float = 0.95  # Fraction of available width before wrapping

    # Forms
    form: LegendForm = LegendForm.SQUARE
    form_size: float = 8.0
    form_line_width: float = 3.0

    # Spacing
    x_entry_space: float = 6.0  # Between entries on a horizontal line
    y_entry_space: float = 0.0  # Between rows / wrapped lines
    form_to_text_space: float = 5.0
    stack_space: float = 3.0  # Between consecutive stacked forms

    # Text and offsets
    text_size: float = 10.0
    x_offset: float = 5.0
    y_offset: float = 3.0

    # dp -> pixel factor
    density: float = 1.0

    def __post_init__(self):
        if not 0.0 < self.max_size_percent <= 1.0:
            raise InvalidLegendConfig(
                f"max_size_percent must be in (0, 1], got {self.max_size_percent}"
            )

        for name in ("form_size", "form_line_width", "x_entry_space", "y_entry_space",
                     "form_to_text_space", "stack_space", "text_size"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidLegendConfig(f"{name} must be finite and not negative, got {value}")

        for name in ("x_offset", "y_offset"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidLegendConfig(f"{name} must be finite, got {value}")

        if not math.isfinite(self.density) or self.density <= 0:
            raise InvalidLegendConfig(f"density must be positive, got {self.density}")


@dataclass(frozen=True)
class Size:
    """Width/height pair in pixels"""
    width: float
    height: float


@dataclass(frozen=True)
class LayoutResult:
    """Complete legend layout produced by one calculate_dimensions pass"""
    needed_width: float
    needed_height: float
    max_label_width: float
    max_label_height: float
    orientation: LegendOrientation = LegendOrientation.HORIZONTAL
    # Horizontal orientation only; empty for vertical
    label_sizes: Tuple[Size, ...] = field(default_factory=tuple)
    label_break_points: Tuple[bool, ...] = field(default_factory=tuple)
    line_sizes: Tuple[Size, ...] = field(default_factory=tuple)

    @property
    def line_count(self) -> int:
        return len(self.line_sizes)
