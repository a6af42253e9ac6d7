"""Registry of dataset kinds, used to restore datasets from stored payloads."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .datasets import BarDataset, Dataset, LineDataset, RadarDataset


class DatasetKindRegistry:
    """Lookup of dataset classes by their `kind` name."""

    def __init__(self, kinds: Iterable[type[Dataset]] = ()) -> None:
        """Initialize a registry from a collection of dataset classes."""

        self._kinds: dict[str, type[Dataset]] = {}
        for dataset_cls in kinds:
            self.register(dataset_cls)

    def register(self, dataset_cls: type[Dataset]) -> None:
        """Register a dataset class under its `kind`.

        Raises:
            TypeError: If `dataset_cls` is not a Dataset subclass.
            ValueError: If the kind is already registered.
        """

        if not isinstance(dataset_cls, type) or not issubclass(dataset_cls, Dataset):
            raise TypeError(f"{dataset_cls!r} must be a subclass of Dataset.")
        if dataset_cls.kind in self._kinds:
            raise ValueError(f"Dataset kind {dataset_cls.kind!r} is already registered.")
        self._kinds[dataset_cls.kind] = dataset_cls

    def get(self, kind: str) -> type[Dataset] | None:
        """Return the class for a kind, or None when missing."""

        return self._kinds.get(kind)

    def create(self, kind: str) -> Dataset:
        """Instantiate an empty dataset of the given kind.

        Raises:
            KeyError: If no class is registered for `kind`.
        """

        try:
            dataset_cls = self._kinds[kind]
        except KeyError:
            raise KeyError(f"Dataset kind {kind!r} is not registered.") from None
        return dataset_cls()

    def kinds(self) -> tuple[str, ...]:
        """Return registered kind names in a stable order."""

        return tuple(sorted(self._kinds))


DEFAULT_REGISTRY: Final[DatasetKindRegistry] = DatasetKindRegistry((RadarDataset, LineDataset, BarDataset))
