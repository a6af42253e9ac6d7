"""Bar dataset with per-bar styling."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from ..color import Color
from ..styles import BorderSkipped
from .base import Dataset, DatasetField, SequenceView


class BarDataset(Dataset):
    """Dataset for bar charts.

    Unlike line-based kinds, bar colors and widths are sequences: element *i*
    styles the bar for data point *i*.
    """

    kind = "bar"
    fields = Dataset.fields + (
        DatasetField("x_axis_id", "xAxisID", "scalar", "text"),
        DatasetField("y_axis_id", "yAxisID", "scalar", "text"),
        DatasetField("stack", "stack", "scalar", "text"),
        DatasetField("background_color", "backgroundColor", "sequence", "color"),
        DatasetField("border_color", "borderColor", "sequence", "color"),
        DatasetField("border_width", "borderWidth", "sequence", "number"),
        DatasetField("border_skipped", "borderSkipped", "sequence", "style", BorderSkipped),
        DatasetField("hover_background_color", "hoverBackgroundColor", "sequence", "color"),
        DatasetField("hover_border_color", "hoverBorderColor", "sequence", "color"),
        DatasetField("hover_border_width", "hoverBorderWidth", "sequence", "number"),
    )

    @property
    def x_axis_id(self) -> str | None:
        """The x axis ID, or None when unset."""

        return self._get("x_axis_id")

    def set_x_axis_id(self, x_axis_id: str | None) -> Self:
        """The ID of the x axis to plot this dataset on."""

        return self._set("x_axis_id", x_axis_id)

    @property
    def y_axis_id(self) -> str | None:
        """The y axis ID, or None when unset."""

        return self._get("y_axis_id")

    def set_y_axis_id(self, y_axis_id: str | None) -> Self:
        """The ID of the y axis to plot this dataset on."""

        return self._set("y_axis_id", y_axis_id)

    @property
    def stack(self) -> str | None:
        """The stack, or None when unset."""

        return self._get("stack")

    def set_stack(self, stack: str | None) -> Self:
        """Group ID; bars sharing a stack ID are stacked together."""

        return self._set("stack", stack)

    @property
    def background_color(self) -> SequenceView[Color]:
        """Per-bar background color values, in data order."""

        return self._view("background_color")

    def set_background_color(self, colors: Iterable[Color | str] | None) -> Self:
        """The fill color of each bar."""

        return self._set_all("background_color", colors)

    def add_background_color(self, color: Color | str) -> Self:
        """Append one background color entry for the next bar."""

        return self._add("background_color", color)

    @property
    def border_color(self) -> SequenceView[Color]:
        """Per-bar border color values, in data order."""

        return self._view("border_color")

    def set_border_color(self, colors: Iterable[Color | str] | None) -> Self:
        """The border color of each bar."""

        return self._set_all("border_color", colors)

    def add_border_color(self, color: Color | str) -> Self:
        """Append one border color entry for the next bar."""

        return self._add("border_color", color)

    @property
    def border_width(self) -> SequenceView[int]:
        """Per-bar border width values, in data order."""

        return self._view("border_width")

    def set_border_width(self, widths: Iterable[int] | None) -> Self:
        """The border width of each bar in pixels."""

        return self._set_all("border_width", widths)

    def add_border_width(self, width: int) -> Self:
        """Append one border width entry for the next bar."""

        return self._add("border_width", width)

    @property
    def border_skipped(self) -> SequenceView[BorderSkipped]:
        """Per-bar border skipped values, in data order."""

        return self._view("border_skipped")

    def set_border_skipped(self, edges: Iterable[BorderSkipped | str] | None) -> Self:
        """The edge of each bar drawn without a border."""

        return self._set_all("border_skipped", edges)

    def add_border_skipped(self, edge: BorderSkipped | str) -> Self:
        """Append one border skipped entry for the next bar."""

        return self._add("border_skipped", edge)

    @property
    def hover_background_color(self) -> SequenceView[Color]:
        """Per-bar hover background color values, in data order."""

        return self._view("hover_background_color")

    def set_hover_background_color(self, colors: Iterable[Color | str] | None) -> Self:
        """Bar fill colors when hovered."""

        return self._set_all("hover_background_color", colors)

    def add_hover_background_color(self, color: Color | str) -> Self:
        """Append one hover background color entry for the next bar."""

        return self._add("hover_background_color", color)

    @property
    def hover_border_color(self) -> SequenceView[Color]:
        """Per-bar hover border color values, in data order."""

        return self._view("hover_border_color")

    def set_hover_border_color(self, colors: Iterable[Color | str] | None) -> Self:
        """Bar border colors when hovered."""

        return self._set_all("hover_border_color", colors)

    def add_hover_border_color(self, color: Color | str) -> Self:
        """Append one hover border color entry for the next bar."""

        return self._add("hover_border_color", color)

    @property
    def hover_border_width(self) -> SequenceView[int]:
        """Per-bar hover border width values, in data order."""

        return self._view("hover_border_width")

    def set_hover_border_width(self, widths: Iterable[int] | None) -> Self:
        """Bar border widths in pixels when hovered."""

        return self._set_all("hover_border_width", widths)

    def add_hover_border_width(self, width: int) -> Self:
        """Append one hover border width entry for the next bar."""

        return self._add("hover_border_width", width)
