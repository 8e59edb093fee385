"""
Legend holder: entries, configuration and the most recent layout.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import (
    COLOR_NONE,
    COLOR_SKIP,
    STACKED,
    Labeled,
    LayoutResult,
    LegendConfig,
    LegendEntry,
    LegendForm,
)
from .measurement import TextMeasurer, Viewport
from .metrics import maximum_entry_height, maximum_entry_width, scale_config
from .layout import calculate_dimensions


def entries_from_colors(colors: Sequence[int], labels: Sequence[Optional[str]]) -> List[LegendEntry]:
    """
    Build entries from parallel color and label lists.

    Args:
        colors: ARGB colors; COLOR_SKIP or 0 means no form, COLOR_NONE an empty form
        labels: Label texts; None makes a stacked entry

    Returns:
        One entry per color/label pair (extra items of the longer list are ignored)
    """
    entries = []
    for color, label in zip(colors, labels):
        if color == COLOR_SKIP or color == 0:
            form = LegendForm.NONE
        elif color == COLOR_NONE:
            form = LegendForm.EMPTY
        else:
            form = LegendForm.DEFAULT

        entries.append(LegendEntry(
            label=STACKED if label is None else Labeled(label),
            form=form,
            form_color=color,
        ))
    return entries


class Legend:
    """
    Chart legend state.

    Entries come from the chart's data sets unless the legend is custom.
    Extra entries are appended after the regular ones in every layout pass.
    """

    def __init__(self, entries: Iterable[LegendEntry] = (), config: LegendConfig = None):
        if entries is None:
            raise ValueError("entries must not be None")

        self.config = config if config is not None else LegendConfig()
        self.entries: Tuple[LegendEntry, ...] = tuple(entries)
        self.extra_entries: Tuple[LegendEntry, ...] = ()
        self.is_legend_custom = False
        self.result: Optional[LayoutResult] = None

    def set_entries(self, entries: Iterable[LegendEntry]) -> None:
        self.entries = tuple(entries)

    def set_extra(self, entries: Optional[Iterable[LegendEntry]]) -> None:
        self.extra_entries = tuple(entries) if entries is not None else ()

    def set_extra_from_colors(self, colors: Sequence[int], labels: Sequence[Optional[str]]) -> None:
        self.extra_entries = tuple(entries_from_colors(colors, labels))

    def set_custom(self, entries: Iterable[LegendEntry]) -> None:
        """Use these entries instead of the ones derived from chart data"""
        self.entries = tuple(entries)
        self.is_legend_custom = True

    def reset_custom(self) -> None:
        self.is_legend_custom = False

    def all_entries(self) -> Tuple[LegendEntry, ...]:
        return self.entries + self.extra_entries

    def maximum_entry_width(self, measurer: TextMeasurer) -> float:
        px_config = scale_config(self.config)
        return maximum_entry_width(
            self.all_entries(), measurer, px_config.form_size,
            px_config.form_to_text_space, self.config.density
        )

    def maximum_entry_height(self, measurer: TextMeasurer) -> float:
        return maximum_entry_height(self.all_entries(), measurer)

    def calculate_dimensions(self, measurer: TextMeasurer, viewport: Viewport) -> LayoutResult:
        """
        Run a layout pass and replace the stored result.

        Args:
            measurer: Text measurement capability for the label font
            viewport: Provides the available width

        Returns:
            The new LayoutResult (also stored as self.result)
        """
        self.result = calculate_dimensions(self.all_entries(), self.config, measurer, viewport)
        return self.result
