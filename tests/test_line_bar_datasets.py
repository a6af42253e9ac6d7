"""Tests for the line and bar dataset kinds."""

from __future__ import annotations

import pytest

from chartconfig.color import Color
from chartconfig.datasets import BarDataset, LineDataset, RadarDataset
from chartconfig.exceptions import StyleDomainError
from chartconfig.styles import BorderSkipped, CubicInterpolationMode, PointStyle

pytestmark = pytest.mark.unit


def test_line_dataset_extends_radar_styling_with_axis_fields() -> None:
    """Line datasets carry every radar field plus axis and interpolation fields."""

    assert set(RadarDataset.field_names()) < set(LineDataset.field_names())
    assert not isinstance(LineDataset(), RadarDataset)

    dataset = (
        LineDataset()
        .set_label("Revenue")
        .set_x_axis_id("x")
        .set_y_axis_id("y-right")
        .set_span_gaps(True)
        .set_show_line(False)
        .set_cubic_interpolation_mode("monotone")
        .add_point_style(PointStyle.triangle)
    )
    assert dataset.x_axis_id == "x"
    assert dataset.y_axis_id == "y-right"
    assert dataset.span_gaps is True
    assert dataset.show_line is False
    assert dataset.cubic_interpolation_mode is CubicInterpolationMode.monotone
    assert dataset.point_style == [PointStyle.triangle]


def test_line_dataset_rejects_unknown_interpolation_mode() -> None:
    """Interpolation mode is a closed domain."""

    with pytest.raises(StyleDomainError):
        LineDataset().set_cubic_interpolation_mode("linear")


def test_bar_dataset_styles_are_per_bar_sequences() -> None:
    """Bar colors, widths and skipped edges are index-aligned sequences."""

    dataset = (
        BarDataset()
        .set_data([3, 7])
        .set_background_color([Color(255, 0, 0), "#00ff00"])
        .add_border_color(Color.named("black"))
        .set_border_width([1, 2])
        .add_border_skipped("left")
        .add_hover_background_color("blue")
        .add_hover_border_color("white")
        .set_hover_border_width([4])
        .set_stack("totals")
    )
    assert dataset.background_color == [Color(255, 0, 0), Color(0, 255, 0)]
    assert dataset.border_color == [Color(0, 0, 0)]
    assert dataset.border_width == [1, 2]
    assert dataset.border_skipped == [BorderSkipped.left]
    assert dataset.hover_background_color == [Color(0, 0, 255)]
    assert dataset.hover_border_color == [Color(255, 255, 255)]
    assert dataset.hover_border_width == [4]
    assert dataset.stack == "totals"

    dataset.set_background_color(None)
    assert dataset.background_color == []


@pytest.mark.parametrize("dataset_cls", [RadarDataset, LineDataset, BarDataset])
def test_every_typed_accessor_is_documented(dataset_cls: type) -> None:
    """Each field's property, setter and appender carries a docstring."""

    undocumented: list[str] = []
    for field in dataset_cls.fields:
        accessors = [getattr(dataset_cls, field.name).fget, getattr(dataset_cls, f"set_{field.name}")]
        if field.is_sequence:
            accessors.append(getattr(dataset_cls, f"add_{field.name}"))
        undocumented.extend(accessor.__qualname__ for accessor in accessors if not (accessor.__doc__ or "").strip())

    assert undocumented == []
