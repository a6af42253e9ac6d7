"""Typed Chart.js dataset configuration.

Build a dataset through its fluent `set_*` / `add_*` methods, then hand it to
`chartconfig.codec` to obtain the JSON object Chart.js consumes. The package
performs no I/O and configures no logging handlers on import.
"""

from .codec import decode_dataset, dumps_chart_data, dumps_dataset, encode_chart_data, encode_dataset
from .color import Color
from .data import ChartData
from .datasets import BarDataset, Dataset, LineDataset, RadarDataset
from .styles import BorderCapStyle, BorderJoinStyle, BorderSkipped, CubicInterpolationMode, PointStyle

__all__ = [
    "BarDataset",
    "BorderCapStyle",
    "BorderJoinStyle",
    "BorderSkipped",
    "ChartData",
    "Color",
    "CubicInterpolationMode",
    "Dataset",
    "LineDataset",
    "PointStyle",
    "RadarDataset",
    "decode_dataset",
    "dumps_chart_data",
    "dumps_dataset",
    "encode_chart_data",
    "encode_dataset",
]
