"""Dataset kinds and the shared builder mechanics."""

from .bar import BarDataset
from .base import Dataset, DatasetField, SequenceView
from .line import LineDataset
from .radar import RadarDataset

__all__ = ["BarDataset", "Dataset", "DatasetField", "LineDataset", "RadarDataset", "SequenceView"]
