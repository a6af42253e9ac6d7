"""Tests for the shared dataset mechanics (fields, views, generic access)."""

from __future__ import annotations

import pytest

from chartconfig.color import Color
from chartconfig.datasets import BarDataset, Dataset, DatasetField, RadarDataset, SequenceView
from chartconfig.exceptions import ColorError, FieldValueError, StyleDomainError, UnknownFieldError
from chartconfig.styles import PointStyle

pytestmark = pytest.mark.unit


def test_new_dataset_starts_with_absent_scalars_and_empty_sequences(radar: RadarDataset) -> None:
    """Every scalar is None and every sequence is empty on construction."""

    for field in RadarDataset.fields:
        value = radar.get_field(field.name)
        if field.is_sequence:
            assert isinstance(value, SequenceView)
            assert len(value) == 0
        else:
            assert value is None


def test_sequence_view_is_live_and_read_only(radar: RadarDataset) -> None:
    """Views reflect later mutations but expose no mutation methods."""

    view = radar.point_radius
    radar.add_point_radius(3).add_point_radius(4)
    assert view == [3, 4]
    assert view == (3, 4)
    assert view[1] == 4
    assert view[0:1] == (3,)
    assert list(reversed(view)) == [4, 3]
    assert 3 in view
    assert not hasattr(view, "append")
    with pytest.raises(TypeError):
        view[0] = 9  # type: ignore[index]
    assert repr(view) == "SequenceView([3, 4])"


def test_setting_a_sequence_from_its_own_view_keeps_contents(radar: RadarDataset) -> None:
    """Replacing a sequence with its own view does not wipe it."""

    radar.set_point_radius([1, 2, 3])
    radar.set_point_radius(radar.point_radius)
    assert radar.point_radius == [1, 2, 3]


def test_rejected_element_leaves_sequence_unchanged(radar: RadarDataset) -> None:
    """A set with an out-of-domain element does not partially apply."""

    radar.set_point_style([PointStyle.circle])
    with pytest.raises(StyleDomainError):
        radar.set_point_style(["star", "hexagon"])
    assert radar.point_style == [PointStyle.circle]


def test_none_elements_are_rejected_outside_data(radar: RadarDataset) -> None:
    """Style, color and number sequences refuse None; only `data` holds gaps."""

    radar.add_point_style("star").add_point_border_color("red").add_point_radius(3)

    with pytest.raises(StyleDomainError):
        radar.add_point_style(None)  # type: ignore[arg-type]
    with pytest.raises(ColorError):
        radar.add_point_border_color(None)  # type: ignore[arg-type]
    with pytest.raises(FieldValueError):
        radar.add_point_radius(None)  # type: ignore[arg-type]
    with pytest.raises(ColorError):
        radar.set_point_background_color(["blue", None])  # type: ignore[list-item]

    assert radar.point_style == [PointStyle.star]
    assert radar.point_border_color == [Color.named("red")]
    assert radar.point_radius == [3]
    assert radar.point_background_color == []

    radar.add_data(None).set_data([1, None, 2])
    assert radar.data == [1, None, 2]


def test_bare_string_is_not_split_into_elements(radar: RadarDataset) -> None:
    """A single string passed where a sequence is expected raises TypeError."""

    radar.set_border_dash([4, 2]).set_point_style(["rect"])

    with pytest.raises(TypeError, match="border_dash"):
        radar.set_border_dash("12")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="point_style"):
        radar.set_point_style("circle")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        radar.set_field("data", b"12")

    assert radar.border_dash == [4, 2]
    assert radar.point_style == [PointStyle.rect]


def test_setter_input_is_copied(radar: RadarDataset) -> None:
    """Mutating the caller's list after `set_*` does not leak into the dataset."""

    widths = [1, 2]
    radar.set_point_border_width(widths)
    widths.append(3)
    assert radar.point_border_width == [1, 2]


def test_generic_field_access_matches_typed_accessors(radar: RadarDataset) -> None:
    """get_field/set_field/add_to_field agree with the typed API."""

    radar.set_field("border_width", 4).add_to_field("point_style", "cross")
    assert radar.border_width == 4
    assert radar.get_field("point_style") == [PointStyle.cross]
    radar.set_field("point_style", None)
    assert radar.point_style == []


def test_generic_field_access_rejects_unknown_and_misused_fields(radar: RadarDataset) -> None:
    """Unknown names and `add` on a scalar raise UnknownFieldError."""

    with pytest.raises(UnknownFieldError):
        radar.set_field("bar_thickness", 3)
    with pytest.raises(UnknownFieldError):
        radar.get_field("stack")
    with pytest.raises(UnknownFieldError):
        radar.add_to_field("label", "x")


def test_color_fields_accept_color_strings(radar: RadarDataset) -> None:
    """Color strings are parsed at the boundary; other types are rejected."""

    radar.set_border_color("#ff0000").add_point_background_color("rgba(0,0,255,0.5)")
    assert radar.border_color == Color(255, 0, 0)
    assert radar.point_background_color == [Color(0, 0, 255, 0.5)]
    with pytest.raises(ColorError):
        radar.set_background_color(42)  # type: ignore[arg-type]


def test_datasets_compare_by_value() -> None:
    """Datasets of the same kind with the same state compare equal."""

    left = RadarDataset().set_label("A").add_point_radius(2)
    right = RadarDataset().set_label("A").add_point_radius(2)
    assert left == right
    assert left != RadarDataset().set_label("A")
    assert BarDataset().set_label("A") != RadarDataset().set_label("A")
    assert "label='A'" in repr(left)


def test_base_fields_are_shared_by_every_kind() -> None:
    """label, hidden and data come from the base class."""

    assert Dataset.field_names() == ("label", "hidden", "data")
    for dataset_cls in (RadarDataset, BarDataset):
        assert dataset_cls.field_names()[:3] == ("label", "hidden", "data")

    dataset = BarDataset().set_hidden(True).set_data([1.5, None, 3]).add_data(4)
    assert dataset.hidden is True
    assert dataset.data == [1.5, None, 3, 4]


def test_kind_declaring_duplicate_fields_is_rejected() -> None:
    """Subclasses cannot declare the same field twice."""

    with pytest.raises(ValueError):

        class _Broken(Dataset):
            fields = Dataset.fields + (DatasetField("label", "label", "scalar", "text"),)
