"""
Unit tests for the Legend holder.
These tests don't require a font backend.
"""
import pytest
from legendlayout.core.models import (
    LegendEntry, LegendConfig, LegendForm, LegendOrientation,
    COLOR_SKIP, COLOR_NONE,
)
from legendlayout.core.measurement import StaticViewport
from legendlayout.core.legend import Legend, entries_from_colors


@pytest.fixture
def sample_entries():
    return [
        LegendEntry.labeled("Temperature", form=LegendForm.LINE, form_color=0xFFFF0000),
        LegendEntry.stacked(form=LegendForm.SQUARE, form_color=0xFF00FF00),
        LegendEntry.labeled("Humidity", form=LegendForm.SQUARE, form_color=0xFF0000FF),
    ]


class TestEntriesFromColors:
    """Tests for building extra entries from colors and labels"""

    def test_color_sentinels(self):
        entries = entries_from_colors(
            [0xFFFF0000, COLOR_SKIP, COLOR_NONE, 0],
            ["Red", "Skipped", "Empty", "Zero"],
        )

        assert [e.form for e in entries] == [
            LegendForm.DEFAULT, LegendForm.NONE, LegendForm.EMPTY, LegendForm.NONE,
        ]
        assert entries[0].form_color == 0xFFFF0000
        assert entries[0].text == "Red"

    def test_none_label_is_stacked(self):
        entries = entries_from_colors([0xFF000000, 0xFF111111], [None, "Total"])

        assert entries[0].is_stacked
        assert entries[1].text == "Total"

    def test_truncates_to_shorter_list(self):
        assert len(entries_from_colors([1, 2, 3], ["A"])) == 1
        assert len(entries_from_colors([1], ["A", "B"])) == 1


class TestLegend:
    """Tests for Legend state and layout passes"""

    def test_defaults(self):
        legend = Legend()

        assert legend.entries == ()
        assert legend.extra_entries == ()
        assert not legend.is_legend_custom
        assert legend.result is None

    def test_none_entries_rejected(self):
        with pytest.raises(ValueError):
            Legend(None)

    def test_entries_are_snapshot(self, sample_entries):
        legend = Legend(sample_entries)
        sample_entries.append(LegendEntry.labeled("Late"))

        assert len(legend.entries) == 3

    def test_custom_entries(self, sample_entries):
        legend = Legend()
        legend.set_custom(sample_entries)

        assert legend.is_legend_custom
        assert legend.entries == tuple(sample_entries)

        legend.reset_custom()
        assert not legend.is_legend_custom

    def test_extra_entries_appended(self, sample_entries):
        legend = Legend(sample_entries)
        legend.set_extra_from_colors([0xFF000000], ["Extra"])

        assert legend.all_entries()[-1].text == "Extra"
        assert len(legend.all_entries()) == 4

        legend.set_extra(None)
        assert legend.extra_entries == ()

    def test_calculate_dimensions_stores_result(self, sample_entries, measurer, wide_viewport):
        legend = Legend(sample_entries)
        result = legend.calculate_dimensions(measurer, wide_viewport)

        assert legend.result is result
        assert len(result.label_sizes) == 3

    def test_result_replaced_each_pass(self, sample_entries, measurer):
        legend = Legend(sample_entries, LegendConfig(word_wrap=True))
        first = legend.calculate_dimensions(measurer, StaticViewport(1000.0))
        second = legend.calculate_dimensions(measurer, StaticViewport(60.0))

        assert legend.result is second
        assert first.line_count == 1
        assert second.line_count == 2

    def test_extra_entries_in_layout(self, sample_entries, measurer, wide_viewport):
        legend = Legend(sample_entries)
        legend.set_extra([LegendEntry.labeled("Extra")])
        result = legend.calculate_dimensions(measurer, wide_viewport)

        assert len(result.label_break_points) == 4

    def test_vertical_orientation(self, sample_entries, measurer, wide_viewport):
        legend = Legend(sample_entries, LegendConfig(orientation=LegendOrientation.VERTICAL))
        result = legend.calculate_dimensions(measurer, wide_viewport)

        assert result.orientation == LegendOrientation.VERTICAL
        assert result.line_sizes == ()

    def test_maximum_entry_metrics(self, sample_entries, measurer):
        legend = Legend(sample_entries)

        # "Temperature" = 66px, default form 8px, form-to-text 5px
        assert legend.maximum_entry_width(measurer) == pytest.approx(79.0)
        assert legend.maximum_entry_height(measurer) == pytest.approx(10.0)

    def test_maximum_entry_width_uses_density(self, sample_entries, measurer):
        legend = Legend(sample_entries, LegendConfig(density=2.0))
        assert legend.maximum_entry_width(measurer) == pytest.approx(66 + 16 + 10)
