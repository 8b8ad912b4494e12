"""Unit tests for scale and centering math."""

from __future__ import annotations

import pytest

from campus_icons.errors import DegenerateGraphicError
from campus_icons.geometry import compute_placement
from campus_icons.models import BoxSize


def test_wide_box_keeps_aspect_ratio_and_centers() -> None:
    """The longer side hits the occupancy target; the shorter under-fills."""
    placement = compute_placement(BoxSize(200, 100), canvas_size=512, occupancy=0.85)

    assert placement.scale == pytest.approx(2.176)
    assert placement.scaled_width == pytest.approx(435.2)
    assert placement.scaled_height == pytest.approx(217.6)
    assert placement.offset_x == pytest.approx(38.4)
    assert placement.offset_y == pytest.approx(147.2)


def test_square_box_offsets_are_symmetric() -> None:
    """A square logo gets equal offsets on both axes."""
    placement = compute_placement(BoxSize(173, 173), canvas_size=1024, occupancy=0.9)

    assert placement.scale == pytest.approx(921.6 / 173)
    assert placement.scaled_width == pytest.approx(921.6)
    assert placement.offset_x == pytest.approx(51.2)
    assert placement.offset_y == pytest.approx(placement.offset_x)


def test_tall_box_uses_height_for_scale() -> None:
    """Height drives the scale when it is the longer side."""
    placement = compute_placement(BoxSize(50, 250), canvas_size=500, occupancy=1.0)

    assert placement.scale == pytest.approx(2.0)
    assert placement.offset_x == pytest.approx(200.0)
    assert placement.offset_y == pytest.approx(0.0)


def test_placement_is_deterministic() -> None:
    """Same inputs always produce the same placement."""
    first = compute_placement(BoxSize(300, 150), 512, 0.85)
    second = compute_placement(BoxSize(300, 150), 512, 0.85)

    assert first == second


@pytest.mark.parametrize("width,height", [(0, 0), (0, 40), (40, 0)])
def test_zero_sized_box_is_degenerate(width: float, height: float) -> None:
    """An empty box raises instead of dividing by zero."""
    with pytest.raises(DegenerateGraphicError):
        compute_placement(BoxSize(width, height), 512, 0.85)
