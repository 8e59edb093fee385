"""
Shared fixtures for legend layout tests.
"""
import pytest

from legendlayout.core.measurement import MonospaceTextMeasurer, StaticViewport


@pytest.fixture
def measurer():
    """Every character 6px wide, lines 10px tall, no leading"""
    return MonospaceTextMeasurer(text_size=10.0, char_width_ratio=0.6)


@pytest.fixture
def wide_viewport():
    return StaticViewport(1000.0)


@pytest.fixture
def narrow_viewport():
    """Content width 95px with the default max_size_percent"""
    return StaticViewport(100.0)
