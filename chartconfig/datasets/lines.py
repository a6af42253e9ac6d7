"""Fields shared by datasets drawn as a line through styled points.

Radar and line datasets both render a (possibly filled) line with one marker
per data point. The point-level fields are sequences: element *i* styles the
point at index *i*.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from ..color import Color
from ..styles import BorderCapStyle, BorderJoinStyle, PointStyle
from .base import Dataset, DatasetField, SequenceView

LINE_FIELDS: tuple[DatasetField, ...] = (
    DatasetField("fill", "fill", "scalar", "bool"),
    DatasetField("line_tension", "lineTension", "scalar", "number"),
    DatasetField("background_color", "backgroundColor", "scalar", "color"),
    DatasetField("border_width", "borderWidth", "scalar", "number"),
    DatasetField("border_color", "borderColor", "scalar", "color"),
    DatasetField("border_cap_style", "borderCapStyle", "scalar", "style", BorderCapStyle),
    DatasetField("border_dash", "borderDash", "sequence", "number"),
    DatasetField("border_dash_offset", "borderDashOffset", "scalar", "number"),
    DatasetField("border_join_style", "borderJoinStyle", "scalar", "style", BorderJoinStyle),
    DatasetField("point_border_color", "pointBorderColor", "sequence", "color"),
    DatasetField("point_background_color", "pointBackgroundColor", "sequence", "color"),
    DatasetField("point_border_width", "pointBorderWidth", "sequence", "number"),
    DatasetField("point_radius", "pointRadius", "sequence", "number"),
    DatasetField("point_hover_radius", "pointHoverRadius", "sequence", "number"),
    DatasetField("point_hit_radius", "pointHitRadius", "sequence", "number"),
    DatasetField("point_hover_background_color", "pointHoverBackgroundColor", "sequence", "color"),
    DatasetField("point_hover_border_color", "pointHoverBorderColor", "sequence", "color"),
    DatasetField("point_hover_border_width", "pointHoverBorderWidth", "sequence", "number"),
    DatasetField("point_style", "pointStyle", "sequence", "style", PointStyle),
)


class PointLineDataset(Dataset):
    """Line and point styling shared by radar and line datasets."""

    fields = Dataset.fields + LINE_FIELDS

    # Line -----------------------------------------------------------------

    @property
    def fill(self) -> bool | None:
        """Whether the area under the line is filled, or None when unset."""

        return self._get("fill")

    def set_fill(self, fill: bool | None) -> Self:
        """If true, fill the area under the line."""

        return self._set("fill", fill)

    @property
    def line_tension(self) -> float | None:
        """The line tension, or None when unset."""

        return self._get("line_tension")

    def set_line_tension(self, line_tension: float | None) -> Self:
        """Bezier curve tension of the line. Set to 0 to draw straight lines."""

        return self._set("line_tension", line_tension)

    @property
    def background_color(self) -> Color | None:
        """The background color, or None when unset."""

        return self._get("background_color")

    def set_background_color(self, background_color: Color | str | None) -> Self:
        """The fill color under the line."""

        return self._set("background_color", background_color)

    @property
    def border_width(self) -> int | None:
        """The border width, or None when unset."""

        return self._get("border_width")

    def set_border_width(self, border_width: int | None) -> Self:
        """The width of the line in pixels."""

        return self._set("border_width", border_width)

    @property
    def border_color(self) -> Color | None:
        """The border color, or None when unset."""

        return self._get("border_color")

    def set_border_color(self, border_color: Color | str | None) -> Self:
        """The color of the line."""

        return self._set("border_color", border_color)

    @property
    def border_cap_style(self) -> BorderCapStyle | None:
        """The border cap style, or None when unset."""

        return self._get("border_cap_style")

    def set_border_cap_style(self, border_cap_style: BorderCapStyle | str | None) -> Self:
        """Line cap style (butt, round or square).

        Raises:
            StyleDomainError: If a token outside the domain is given.
        """

        return self._set("border_cap_style", border_cap_style)

    @property
    def border_dash(self) -> SequenceView[int]:
        """Dash pattern lengths, alternating draw and gap."""

        return self._view("border_dash")

    def set_border_dash(self, border_dash: Iterable[int] | None) -> Self:
        """Line dash: alternating draw and gap lengths.

        The sequence is stored literally. When it has an odd length the
        renderer repeats it (`[5, 15, 25]` is drawn as `[5, 15, 25, 5, 15, 25]`).
        """

        return self._set_all("border_dash", border_dash)

    def add_border_dash(self, length: int) -> Self:
        """Append one draw or gap length to the dash pattern."""

        return self._add("border_dash", length)

    @property
    def border_dash_offset(self) -> float | None:
        """The border dash offset, or None when unset."""

        return self._get("border_dash_offset")

    def set_border_dash_offset(self, border_dash_offset: float | None) -> Self:
        """Offset into the dash pattern. The renderer starts at 0.0."""

        return self._set("border_dash_offset", border_dash_offset)

    @property
    def border_join_style(self) -> BorderJoinStyle | None:
        """The border join style, or None when unset."""

        return self._get("border_join_style")

    def set_border_join_style(self, border_join_style: BorderJoinStyle | str | None) -> Self:
        """Line join style (round, bevel or miter).

        Raises:
            StyleDomainError: If a token outside the domain is given.
        """

        return self._set("border_join_style", border_join_style)

    # Points ---------------------------------------------------------------

    @property
    def point_border_color(self) -> SequenceView[Color]:
        """Per-point border color values, in data order."""

        return self._view("point_border_color")

    def set_point_border_color(self, colors: Iterable[Color | str] | None) -> Self:
        """The border color for points."""

        return self._set_all("point_border_color", colors)

    def add_point_border_color(self, color: Color | str) -> Self:
        """Append one point border color entry for the next data point."""

        return self._add("point_border_color", color)

    @property
    def point_background_color(self) -> SequenceView[Color]:
        """Per-point background color values, in data order."""

        return self._view("point_background_color")

    def set_point_background_color(self, colors: Iterable[Color | str] | None) -> Self:
        """The fill color for points."""

        return self._set_all("point_background_color", colors)

    def add_point_background_color(self, color: Color | str) -> Self:
        """Append one point background color entry for the next data point."""

        return self._add("point_background_color", color)

    @property
    def point_border_width(self) -> SequenceView[int]:
        """Per-point border width values, in data order."""

        return self._view("point_border_width")

    def set_point_border_width(self, widths: Iterable[int] | None) -> Self:
        """The width of the point border in pixels."""

        return self._set_all("point_border_width", widths)

    def add_point_border_width(self, width: int) -> Self:
        """Append one point border width entry for the next data point."""

        return self._add("point_border_width", width)

    @property
    def point_radius(self) -> SequenceView[int]:
        """Per-point radius values, in data order."""

        return self._view("point_radius")

    def set_point_radius(self, radii: Iterable[int] | None) -> Self:
        """The radius of the point shape. A radius of 0 renders nothing."""

        return self._set_all("point_radius", radii)

    def add_point_radius(self, radius: int) -> Self:
        """Append one point radius entry for the next data point."""

        return self._add("point_radius", radius)

    @property
    def point_hover_radius(self) -> SequenceView[int]:
        """Per-point hover radius values, in data order."""

        return self._view("point_hover_radius")

    def set_point_hover_radius(self, radii: Iterable[int] | None) -> Self:
        """The radius of the point when hovered."""

        return self._set_all("point_hover_radius", radii)

    def add_point_hover_radius(self, radius: int) -> Self:
        """Append one point hover radius entry for the next data point."""

        return self._add("point_hover_radius", radius)

    @property
    def point_hit_radius(self) -> SequenceView[int]:
        """Per-point hit radius values, in data order."""

        return self._view("point_hit_radius")

    def set_point_hit_radius(self, radii: Iterable[int] | None) -> Self:
        """The pixel size of the non-displayed point that reacts to mouse events."""

        return self._set_all("point_hit_radius", radii)

    def add_point_hit_radius(self, radius: int) -> Self:
        """Append one point hit radius entry for the next data point."""

        return self._add("point_hit_radius", radius)

    @property
    def point_hover_background_color(self) -> SequenceView[Color]:
        """Per-point hover background color values, in data order."""

        return self._view("point_hover_background_color")

    def set_point_hover_background_color(self, colors: Iterable[Color | str] | None) -> Self:
        """Point background color when hovered."""

        return self._set_all("point_hover_background_color", colors)

    def add_point_hover_background_color(self, color: Color | str) -> Self:
        """Append one point hover background color entry for the next data point."""

        return self._add("point_hover_background_color", color)

    @property
    def point_hover_border_color(self) -> SequenceView[Color]:
        """Per-point hover border color values, in data order."""

        return self._view("point_hover_border_color")

    def set_point_hover_border_color(self, colors: Iterable[Color | str] | None) -> Self:
        """Point border color when hovered."""

        return self._set_all("point_hover_border_color", colors)

    def add_point_hover_border_color(self, color: Color | str) -> Self:
        """Append one point hover border color entry for the next data point."""

        return self._add("point_hover_border_color", color)

    @property
    def point_hover_border_width(self) -> SequenceView[int]:
        """Per-point hover border width values, in data order."""

        return self._view("point_hover_border_width")

    def set_point_hover_border_width(self, widths: Iterable[int] | None) -> Self:
        """Border width of the point when hovered."""

        return self._set_all("point_hover_border_width", widths)

    def add_point_hover_border_width(self, width: int) -> Self:
        """Append one point hover border width entry for the next data point."""

        return self._add("point_hover_border_width", width)

    @property
    def point_style(self) -> SequenceView[PointStyle]:
        """Per-point style values, in data order."""

        return self._view("point_style")

    def set_point_style(self, styles: Iterable[PointStyle | str] | None) -> Self:
        """The style of each point (circle, triangle, rect, rectRot, cross,
        crossRot, star, line or dash).

        Raises:
            StyleDomainError: If any token is outside the domain. The stored
                sequence is left unchanged in that case.
        """

        return self._set_all("point_style", styles)

    def add_point_style(self, style: PointStyle | str) -> Self:
        """Append one point style entry for the next data point."""

        return self._add("point_style", style)
