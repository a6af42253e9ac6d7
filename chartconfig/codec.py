"""Serialization contract between datasets and Chart.js JSON.

Inclusion rule, applied uniformly by `is_included`:

- a scalar field contributes its key only when it is not None;
- a sequence field contributes its key only when it is non-empty.

Keys are the exact Chart.js property names, style members serialize to their
token, and colors render with a single `ColorFormat` per document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from .color import COLOR_FORMATS, Color, ColorFormat
from .data import ChartData
from .datasets import Dataset, DatasetField
from .exceptions import ChartConfigError, ColorError, DatasetDecodeError
from .registry import DEFAULT_REGISTRY, DatasetKindRegistry
from .settings import load_color_format

logger = logging.getLogger(__name__)


def is_included(field: DatasetField, value: Any) -> bool:
    """Return whether a field's current value belongs in serialized output.

    Args:
        field: Field declaration.
        value: Scalar value, or the field's sequence view.
    """

    if field.is_sequence:
        return len(value) > 0
    return value is not None


def encode_dataset(dataset: Dataset, *, color_format: ColorFormat | None = None) -> dict[str, Any]:
    """Encode a dataset into a JSON-serializable dictionary.

    Args:
        dataset: Dataset to encode.
        color_format: Color rendering; defaults to the configured setting.

    Returns:
        Dict keyed by Chart.js property names, in field declaration order. An
        all-default dataset encodes to an empty dict.
    """

    resolved = _resolve_color_format(color_format)
    payload = _encode_fields(dataset, resolved)
    logger.debug("Encoded %s dataset with %d key(s)", dataset.kind, len(payload))
    return payload


def encode_chart_data(data: ChartData, *, color_format: ColorFormat | None = None) -> dict[str, Any]:
    """Encode labels and datasets into a Chart.js `data` object.

    Every dataset in the document is rendered with the same color format.

    Args:
        data: ChartData to encode.
        color_format: Color rendering; defaults to the configured setting.

    Returns:
        Dict with `labels` and `datasets` keys, each omitted when empty.
    """

    resolved = _resolve_color_format(color_format)
    payload: dict[str, Any] = {}
    if len(data.labels) > 0:
        payload["labels"] = list(data.labels)
    if len(data.datasets) > 0:
        payload["datasets"] = [_encode_fields(dataset, resolved) for dataset in data.datasets]
    logger.debug(
        "Encoded chart data with %d label(s) and %d dataset(s)",
        len(data.labels),
        len(data.datasets),
    )
    return payload


def dumps_dataset(dataset: Dataset, *, color_format: ColorFormat | None = None, indent: int | None = None) -> str:
    """Serialize a dataset to JSON text (compact unless `indent` is given)."""

    return _dumps(encode_dataset(dataset, color_format=color_format), indent=indent)


def dumps_chart_data(data: ChartData, *, color_format: ColorFormat | None = None, indent: int | None = None) -> str:
    """Serialize chart data to JSON text (compact unless `indent` is given)."""

    return _dumps(encode_chart_data(data, color_format=color_format), indent=indent)


def decode_dataset(
    payload: Mapping[str, Any],
    *,
    kind: str,
    registry: DatasetKindRegistry = DEFAULT_REGISTRY,
) -> Dataset:
    """Decode a dataset from a payload previously produced by `encode_dataset`.

    Args:
        payload: Mapping keyed by Chart.js property names.
        kind: Dataset kind to restore (e.g. "radar").
        registry: Registry used to resolve `kind`.

    Returns:
        A new dataset holding the payload's values.

    Raises:
        DatasetDecodeError: When the kind or a key is unknown, a sequence key
            does not hold a list, or a style/color value is out of domain.
    """

    dataset_cls = registry.get(kind)
    if dataset_cls is None:
        raise DatasetDecodeError(f"Unknown dataset kind {kind!r}; expected one of {', '.join(registry.kinds())}.")

    fields_by_key = {field.json_key: field for field in dataset_cls.fields}
    dataset = dataset_cls()
    for key, value in payload.items():
        field = fields_by_key.get(key)
        if field is None:
            raise DatasetDecodeError(f"{dataset_cls.__name__} has no property {key!r}.")
        if field.is_sequence and value is not None and not isinstance(value, list):
            raise DatasetDecodeError(f"{dataset_cls.__name__}.{key} must be a list, got {type(value).__name__}.")
        try:
            dataset.set_field(field.name, value)
        except ChartConfigError as exc:
            raise DatasetDecodeError(f"{dataset_cls.__name__}.{key}: {exc}") from exc
    logger.debug("Decoded %s dataset from %d key(s)", kind, len(payload))
    return dataset


def _encode_fields(dataset: Dataset, color_format: ColorFormat) -> dict[str, Any]:
    """Project every included field of a dataset into a dict."""

    payload: dict[str, Any] = {}
    for field in dataset.fields:
        value = dataset.get_field(field.name)
        if not is_included(field, value):
            continue
        if field.is_sequence:
            payload[field.json_key] = [_encode_value(item, color_format) for item in value]
        else:
            payload[field.json_key] = _encode_value(value, color_format)
    return payload


def _encode_value(value: Any, color_format: ColorFormat) -> Any:
    """Encode a single field value."""

    if isinstance(value, Color):
        return value.render(color_format)
    if isinstance(value, StrEnum):
        return value.value
    return value


def _resolve_color_format(color_format: ColorFormat | None) -> ColorFormat:
    """Return the requested color format, falling back to settings."""

    resolved = color_format if color_format is not None else load_color_format()
    if resolved not in COLOR_FORMATS:
        raise ColorError(f"Unsupported color format {resolved!r}; expected one of {', '.join(COLOR_FORMATS)}.")
    return resolved


def _dumps(payload: dict[str, Any], *, indent: int | None) -> str:
    """Dump a payload with compact separators unless indenting."""

    if indent is None:
        return json.dumps(payload, separators=(",", ":"))
    return json.dumps(payload, indent=indent)
