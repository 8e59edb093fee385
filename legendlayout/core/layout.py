"""
Legend layout algorithms.
Pure functions - no side effects, no font or drawing imports.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from .models import LegendConfig, LegendEntry, LegendOrientation, LayoutResult, Size
from .measurement import TextMeasurer, Viewport, measure_size
from .metrics import (
    finite_or_zero,
    maximum_entry_height,
    maximum_entry_width,
    resolved_form_size,
    scale_config,
)

logger = logging.getLogger(__name__)


def calculate_dimensions(
    entries: Sequence[LegendEntry],
    config: LegendConfig,
    measurer: TextMeasurer,
    viewport: Viewport
) -> LayoutResult:
    """
    Calculate the space a legend needs and how its entries break into lines.

    Args:
        entries: Legend entries in display order (an empty sequence is valid)
        config: Legend configuration in dp
        measurer: Text measurement capability for the label font
        viewport: Provides the available width for word-wrapping

    Returns:
        LayoutResult with needed size (offsets included) and, for horizontal
        orientation, per-entry label sizes, break points and per-line sizes

    Raises:
        ValueError: If entries is None
    """
    if entries is None:
        raise ValueError("entries must not be None")

    # Snapshot so a caller mutating its list cannot affect this pass
    entries = tuple(entries)
    px_config = scale_config(config)

    max_label_width = maximum_entry_width(
        entries, measurer, px_config.form_size, px_config.form_to_text_space, config.density
    )
    max_label_height = maximum_entry_height(entries, measurer)

    if config.orientation == LegendOrientation.VERTICAL:
        needed_width, needed_height = _calculate_vertical_dimensions(
            entries, px_config, measurer, config.density
        )
        label_sizes: Tuple[Size, ...] = ()
        break_points: Tuple[bool, ...] = ()
        line_sizes: Tuple[Size, ...] = ()
    else:
        flow = _calculate_horizontal_dimensions(
            entries, px_config, measurer, viewport, config.density
        )
        needed_width, needed_height = flow.needed_size()
        label_sizes = tuple(flow.label_sizes)
        break_points = tuple(flow.break_points)
        line_sizes = tuple(flow.line_sizes)

    result = LayoutResult(
        needed_width=needed_width + px_config.x_offset,
        needed_height=needed_height + px_config.y_offset,
        max_label_width=max_label_width,
        max_label_height=max_label_height,
        orientation=config.orientation,
        label_sizes=label_sizes,
        label_break_points=break_points,
        line_sizes=line_sizes,
    )

    logger.debug(
        "Legend layout: %s, %d entries, %d lines, needed %.1f x %.1f",
        config.orientation.value, len(entries), result.line_count,
        result.needed_width, result.needed_height
    )

    return result


class _VerticalStack:
    """
    Walks entries top-to-bottom, one row per label.

    Unlabeled entries accumulate their forms on the current row until a
    label closes the stack.
    """

    def __init__(self, config: LegendConfig, measurer: TextMeasurer, density: float):
        self.config = config
        self.measurer = measurer
        self.density = density
        self.row_height = finite_or_zero(measurer.line_height()) + config.y_entry_space

        self.line_width = 0.0
        self.max_width = 0.0
        self.total_height = 0.0
        self.was_stacked = False
        # Height of a labeled row is charged once another entry follows it
        self._row_pending = False

    def add(self, entry: LegendEntry) -> None:
        config = self.config

        if self._row_pending:
            self.total_height += self.row_height
            self._row_pending = False

        form_size = resolved_form_size(entry, config.form_size, self.density)

        if not self.was_stacked:
            self.line_width = 0.0

        if entry.has_form:
            if self.was_stacked:
                self.line_width += config.stack_space
            self.line_width += form_size

        if not entry.is_stacked:
            if entry.has_form and not self.was_stacked:
                self.line_width += config.form_to_text_space
            elif self.was_stacked:
                # Label closes the stack: commit it as its own row
                self.max_width = max(self.max_width, self.line_width)
                self.total_height += self.row_height
                self.line_width = 0.0
                self.was_stacked = False

            self.line_width += self._text_width(entry.text)
            self._row_pending = True
        else:
            self.was_stacked = True
            self.line_width += form_size + config.stack_space

        self.max_width = max(self.max_width, self.line_width)

    def finish(self) -> Tuple[float, float]:
        # No spacing is charged after the last row
        self._row_pending = False
        return self.max_width, self.total_height

    def _text_width(self, text: str) -> float:
        return finite_or_zero(self.measurer.measure_width(text))


def _calculate_vertical_dimensions(
    entries: Sequence[LegendEntry],
    config: LegendConfig,
    measurer: TextMeasurer,
    density: float
) -> Tuple[float, float]:
    """
    Calculate (width, height) for a vertically stacked legend.

    Args:
        entries: Legend entries
        config: Configuration already converted to pixels
        measurer: Text measurement capability
        density: Factor for per-entry form size overrides

    Returns:
        Tuple of (width, height) without offsets
    """
    stack = _VerticalStack(config, measurer, density)

    for entry in entries:
        stack.add(entry)

    return stack.finish()


class _HorizontalFlow:
    """
    Walks entries left-to-right, breaking lines between groups.

    A group is a run of stacked entries plus the label that ends it, or a
    lone labeled entry. Groups are never split across lines.
    """

    def __init__(
        self,
        config: LegendConfig,
        measurer: TextMeasurer,
        content_width: float,
        density: float
    ):
        self.config = config
        self.measurer = measurer
        self.content_width = content_width
        self.density = density
        self.line_height = finite_or_zero(measurer.line_height())
        self.line_spacing = finite_or_zero(measurer.line_spacing()) + config.y_entry_space

        self.label_sizes: List[Size] = []
        self.break_points: List[bool] = []
        self.line_sizes: List[Size] = []

        self.max_line_width = 0.0
        self.current_line_width = 0.0
        self.required_width = 0.0
        self.stacked_start: Optional[int] = None

    def add(self, entry: LegendEntry) -> None:
        config = self.config
        index = len(self.break_points)
        form_size = resolved_form_size(entry, config.form_size, self.density)

        self.break_points.append(False)

        if self.stacked_start is None:
            self.required_width = 0.0
        else:
            self.required_width += config.stack_space

        if not entry.is_stacked:
            size = measure_size(self.measurer, entry.text)
            size = Size(finite_or_zero(size.width), finite_or_zero(size.height))
            self.label_sizes.append(size)
            if entry.has_form:
                self.required_width += config.form_to_text_space + form_size
            self.required_width += size.width

            self._place_group(index)
            self.stacked_start = None
        else:
            self.label_sizes.append(Size(0.0, 0.0))
            if entry.has_form:
                self.required_width += form_size
            if self.stacked_start is None:
                self.stacked_start = index

    def finish(self) -> None:
        if not self.break_points:
            return

        # A trailing stacked run still has to be laid out
        if self.stacked_start is not None:
            self._place_group(len(self.break_points) - 1)
            self.stacked_start = None

        self._close_line()

    def needed_size(self) -> Tuple[float, float]:
        line_count = len(self.line_sizes)
        if line_count == 0:
            return 0.0, 0.0

        height = self.line_height * line_count + self.line_spacing * (line_count - 1)
        return self.max_line_width, height

    def _place_group(self, index: int) -> None:
        required_spacing = 0.0 if self.current_line_width == 0.0 else self.config.x_entry_space
        needed = required_spacing + self.required_width

        fits = self.content_width - self.current_line_width >= needed
        if not self.config.word_wrap or self.current_line_width == 0.0 or fits:
            self.current_line_width += needed
            return

        self._close_line()

        # Break before the whole stacked run, never inside it
        break_index = self.stacked_start if self.stacked_start is not None else index
        self.break_points[break_index] = True
        self.current_line_width = self.required_width

        logger.debug("Legend line break before entry %d", break_index)

    def _close_line(self) -> None:
        self.line_sizes.append(Size(self.current_line_width, self.line_height))
        self.max_line_width = max(self.max_line_width, self.current_line_width)


def _calculate_horizontal_dimensions(
    entries: Sequence[LegendEntry],
    config: LegendConfig,
    measurer: TextMeasurer,
    viewport: Viewport,
    density: float
) -> _HorizontalFlow:
    """
    Flow entries into lines against the available width.

    Args:
        entries: Legend entries
        config: Configuration already converted to pixels
        measurer: Text measurement capability
        viewport: Source of the available width
        density: Factor for per-entry form size overrides

    Returns:
        Finished flow holding label sizes, break points and line sizes
    """
    content_width = finite_or_zero(viewport.available_width()) * config.max_size_percent
    flow = _HorizontalFlow(config, measurer, content_width, density)

    for entry in entries:
        flow.add(entry)

    flow.finish()
    return flow
