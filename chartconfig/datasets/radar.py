"""Radar (spider web) dataset."""

from __future__ import annotations

from .lines import PointLineDataset


class RadarDataset(PointLineDataset):
    """Dataset for radar charts.

    Radar datasets draw one closed line through a point on every axis. All
    styling fields come from `PointLineDataset`; radar adds none of its own.

    Example:
        >>> dataset = (
        ...     RadarDataset()
        ...     .set_label("Series A")
        ...     .set_fill(False)
        ...     .add_point_style("circle")
        ... )
    """

    kind = "radar"
