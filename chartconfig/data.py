"""Chart data container: axis labels plus the datasets drawn against them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from .datasets import Dataset, SequenceView


class ChartData:
    """Labels and datasets for one chart.

    Labels are index-aligned with each dataset's `data` sequence.
    """

    def __init__(self) -> None:
        self._labels: list[str] = []
        self._datasets: list[Dataset] = []

    @property
    def labels(self) -> SequenceView[str]:
        return SequenceView(self._labels)

    def set_labels(self, labels: Iterable[str] | None) -> Self:
        if isinstance(labels, (str, bytes)):
            raise TypeError(f"labels expects an iterable of strings, not a single {type(labels).__name__}.")
        self._labels[:] = list(labels) if labels is not None else []
        return self

    def add_label(self, label: str) -> Self:
        self._labels.append(label)
        return self

    @property
    def datasets(self) -> SequenceView[Dataset]:
        return SequenceView(self._datasets)

    def set_datasets(self, datasets: Iterable[Dataset] | None) -> Self:
        self._datasets[:] = list(datasets) if datasets is not None else []
        return self

    def add_dataset(self, dataset: Dataset) -> Self:
        self._datasets.append(dataset)
        return self

    def __repr__(self) -> str:
        return f"ChartData(labels={self._labels!r}, datasets={self._datasets!r})"
