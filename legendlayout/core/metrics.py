"""
Entry metrics and unit conversion.
Pure functions - easily testable.
"""
import math
from dataclasses import replace
from typing import Optional, Sequence

from .models import LegendConfig, LegendEntry
from .measurement import TextMeasurer


def finite_or_zero(value: Optional[float]) -> float:
    """
    Treat missing or non-finite numbers as a zero contribution.

    Args:
        value: Number to sanitize

    Returns:
        value, or 0.0 if it is None, NaN or infinite
    """
    if value is None or not math.isfinite(value):
        return 0.0
    return value


def convert_dp_to_pixel(dp: float, density: float = 1.0) -> float:
    """Convert density-independent units to pixels"""
    return dp * density


def scale_config(config: LegendConfig, density: Optional[float] = None) -> LegendConfig:
    """
    Create a copy of config with all linear dimensions converted to pixels.

    Args:
        config: Configuration in dp
        density: dp -> pixel factor (defaults to config.density)

    Returns:
        New LegendConfig in pixels, with density reset to 1.0
    """
    if density is None:
        density = config.density

    return replace(
        config,
        form_size=convert_dp_to_pixel(config.form_size, density),
        form_line_width=convert_dp_to_pixel(config.form_line_width, density),
        x_entry_space=convert_dp_to_pixel(config.x_entry_space, density),
        y_entry_space=convert_dp_to_pixel(config.y_entry_space, density),
        form_to_text_space=convert_dp_to_pixel(config.form_to_text_space, density),
        stack_space=convert_dp_to_pixel(config.stack_space, density),
        text_size=convert_dp_to_pixel(config.text_size, density),
        x_offset=convert_dp_to_pixel(config.x_offset, density),
        y_offset=convert_dp_to_pixel(config.y_offset, density),
        # max_size_percent is a ratio, not scaled
        density=1.0,
    )


def resolved_form_size(entry: LegendEntry, default_size: float, density: float = 1.0) -> float:
    """
    Form size for an entry in pixels.

    Args:
        entry: Legend entry
        default_size: Legend-wide form size, already in pixels
        density: Factor applied to the entry's own override (in dp)

    Returns:
        Override converted to pixels if set, else default_size
    """
    if entry.form_size is None:
        return finite_or_zero(default_size)
    return finite_or_zero(convert_dp_to_pixel(entry.form_size, density))


def maximum_entry_width(
    entries: Sequence[LegendEntry],
    measurer: TextMeasurer,
    default_form_size: float,
    form_to_text_space: float,
    density: float = 1.0
) -> float:
    """
    Widest possible single entry: widest label + largest form + form-to-text space.

    Stacked entries contribute to the form size maximum only.
    """
    max_text_width = 0.0
    max_form_size = 0.0

    for entry in entries:
        form_size = resolved_form_size(entry, default_form_size, density)
        if form_size > max_form_size:
            max_form_size = form_size

        if entry.is_stacked:
            continue

        width = finite_or_zero(measurer.measure_width(entry.text))
        if width > max_text_width:
            max_text_width = width

    return max_text_width + max_form_size + form_to_text_space


def maximum_entry_height(entries: Sequence[LegendEntry], measurer: TextMeasurer) -> float:
    """Tallest label text; 0 if no entry is labeled"""
    max_height = 0.0

    for entry in entries:
        if entry.is_stacked:
            continue

        height = finite_or_zero(measurer.measure_height(entry.text))
        if height > max_height:
            max_height = height

    return max_height
