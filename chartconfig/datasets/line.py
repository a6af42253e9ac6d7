"""Line dataset: radar styling plus axis binding and interpolation."""

from __future__ import annotations

from typing import Self

from ..styles import CubicInterpolationMode
from .base import DatasetField
from .lines import PointLineDataset


class LineDataset(PointLineDataset):
    """Dataset for line charts."""

    kind = "line"
    fields = PointLineDataset.fields + (
        DatasetField("x_axis_id", "xAxisID", "scalar", "text"),
        DatasetField("y_axis_id", "yAxisID", "scalar", "text"),
        DatasetField("span_gaps", "spanGaps", "scalar", "bool"),
        DatasetField("show_line", "showLine", "scalar", "bool"),
        DatasetField(
            "cubic_interpolation_mode", "cubicInterpolationMode", "scalar", "style", CubicInterpolationMode
        ),
    )

    @property
    def x_axis_id(self) -> str | None:
        """The x axis ID this dataset binds to, or None when unset."""

        return self._get("x_axis_id")

    def set_x_axis_id(self, x_axis_id: str | None) -> Self:
        """The ID of the x axis to plot this dataset on."""

        return self._set("x_axis_id", x_axis_id)

    @property
    def y_axis_id(self) -> str | None:
        """The y axis ID this dataset binds to, or None when unset."""

        return self._get("y_axis_id")

    def set_y_axis_id(self, y_axis_id: str | None) -> Self:
        """The ID of the y axis to plot this dataset on."""

        return self._set("y_axis_id", y_axis_id)

    @property
    def span_gaps(self) -> bool | None:
        """Whether lines span gaps in the data, or None when unset."""

        return self._get("span_gaps")

    def set_span_gaps(self, span_gaps: bool | None) -> Self:
        """If true, lines are drawn across `None` data values."""

        return self._set("span_gaps", span_gaps)

    @property
    def show_line(self) -> bool | None:
        """Whether the line is drawn, or None when unset."""

        return self._get("show_line")

    def set_show_line(self, show_line: bool | None) -> Self:
        """If false, only the points are drawn."""

        return self._set("show_line", show_line)

    @property
    def cubic_interpolation_mode(self) -> CubicInterpolationMode | None:
        """The cubic interpolation mode, or None when unset."""

        return self._get("cubic_interpolation_mode")

    def set_cubic_interpolation_mode(self, mode: CubicInterpolationMode | str | None) -> Self:
        """Curve algorithm. `monotone` preserves monotonicity and ignores tension."""

        return self._set("cubic_interpolation_mode", mode)
