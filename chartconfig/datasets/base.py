"""Shared mechanics for every dataset kind.

A dataset is a bag of independently settable fields declared once per kind as
`DatasetField` entries. Two shapes exist:

- scalar fields hold one value or `None` (absent);
- sequence fields always hold a list, empty by default, where element *i*
  styles data point *i*.

Concrete kinds expose typed `set_*` / `add_*` methods that delegate to the
generic operations here, and every mutator returns the concrete instance so
calls declared on the base and on a kind can be chained freely.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, Generic, Literal, Self, TypeVar, overload

from ..color import Color
from ..exceptions import ColorError, FieldValueError, UnknownFieldError
from ..styles import coerce_style

FieldShape = Literal["scalar", "sequence"]
ValueKind = Literal["text", "bool", "number", "color", "style"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DatasetField:
    """Declaration of one dataset field.

    Args:
        name: Python attribute name (snake_case).
        json_key: Exact Chart.js property name used in serialized output.
        shape: "scalar" or "sequence".
        kind: Value kind, used for boundary coercion and encoding.
        choices: StrEnum domain for `kind="style"` fields.
        nullable: Whether sequence elements may be None (data gaps).
    """

    name: str
    json_key: str
    shape: FieldShape
    kind: ValueKind = "number"
    choices: type[StrEnum] | None = None
    nullable: bool = False

    @property
    def is_sequence(self) -> bool:
        """Return True for sequence-shaped fields."""

        return self.shape == "sequence"

    def coerce(self, value: Any) -> Any:
        """Normalize one element at the API boundary.

        Style tokens become enum members and color strings become `Color`
        values; everything else passes through untouched. None is only
        accepted for nullable fields.

        Raises:
            StyleDomainError: If a style value is outside its domain.
            ColorError: If a color string cannot be parsed.
            FieldValueError: If None is given for a non-nullable number or text field.
        """

        if value is None and self.nullable:
            return None
        if self.kind == "style" and self.choices is not None:
            return coerce_style(self.choices, value)
        if self.kind == "color":
            if isinstance(value, Color):
                return value
            if isinstance(value, str):
                return Color.parse(value)
            raise ColorError(f"{self.name} expects a Color or color string, got {value!r}.")
        if value is None:
            raise FieldValueError(f"{self.name} does not accept None elements.")
        return value


class SequenceView(Sequence, Generic[T]):
    """Read-only live view over a sequence field.

    The view reflects later `set_*` / `add_*` calls on the owning dataset but
    offers no way to mutate the underlying list.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[T]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceView({self._items!r})"


class Dataset:
    """Base class for all dataset kinds.

    Subclasses set `kind` and extend `fields`. Instances start empty: every
    scalar absent and every sequence empty.

    Instances are plain mutable values without internal locking; callers that
    share one across threads must synchronize access themselves.
    """

    kind: ClassVar[str] = "dataset"
    fields: ClassVar[tuple[DatasetField, ...]] = (
        DatasetField("label", "label", "scalar", "text"),
        DatasetField("hidden", "hidden", "scalar", "bool"),
        DatasetField("data", "data", "sequence", "number", nullable=True),
    )
    _fields_by_name: ClassVar[dict[str, DatasetField]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._fields_by_name = _index_fields(cls)

    def __init__(self) -> None:
        self._scalars: dict[str, Any] = {}
        self._sequences: dict[str, list[Any]] = {
            field.name: [] for field in self.fields if field.is_sequence
        }

    # ------------------------------------------------------------------
    # Generic field access
    # ------------------------------------------------------------------
    @classmethod
    def field(cls, name: str) -> DatasetField:
        """Return the declaration for a field name.

        Raises:
            UnknownFieldError: If this kind does not declare `name`.
        """

        try:
            return cls._fields_by_name[name]
        except KeyError:
            raise UnknownFieldError(f"{cls.__name__} has no field {name!r}.") from None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return declared field names in declaration order."""

        return tuple(field.name for field in cls.fields)

    def get_field(self, name: str) -> Any:
        """Return a scalar value (or None) or a SequenceView, by field name."""

        field = self.field(name)
        if field.is_sequence:
            return SequenceView(self._sequences[name])
        return self._scalars.get(name)

    def set_field(self, name: str, value: Any) -> Self:
        """Set a scalar or replace a sequence, by field name.

        `None` clears a scalar and empties a sequence.
        """

        field = self.field(name)
        if field.is_sequence:
            return self._replace(field, value)
        return self._assign(field, value)

    def add_to_field(self, name: str, value: Any) -> Self:
        """Append one element to a sequence field, by field name.

        Raises:
            UnknownFieldError: If `name` is unknown or names a scalar field.
        """

        field = self.field(name)
        if not field.is_sequence:
            raise UnknownFieldError(f"{type(self).__name__}.{name} is a scalar field; use set_field instead.")
        return self._append(field, value)

    # ------------------------------------------------------------------
    # Mutation primitives used by the typed accessors
    # ------------------------------------------------------------------
    def _get(self, name: str) -> Any:
        return self._scalars.get(name)

    def _view(self, name: str) -> SequenceView[Any]:
        return SequenceView(self._sequences[name])

    def _set(self, name: str, value: Any) -> Self:
        return self._assign(self._fields_by_name[name], value)

    def _set_all(self, name: str, values: Iterable[Any] | None) -> Self:
        return self._replace(self._fields_by_name[name], values)

    def _add(self, name: str, value: Any) -> Self:
        return self._append(self._fields_by_name[name], value)

    def _assign(self, field: DatasetField, value: Any) -> Self:
        if value is None:
            self._scalars.pop(field.name, None)
        else:
            self._scalars[field.name] = field.coerce(value)
        return self

    def _replace(self, field: DatasetField, values: Iterable[Any] | None) -> Self:
        if isinstance(values, (str, bytes)):
            raise TypeError(f"{field.name} expects an iterable of values, not a single {type(values).__name__}.")
        # Coerce before clearing so a rejected element or a view over this
        # same field leaves the stored list intact.
        incoming = [field.coerce(value) for value in values] if values is not None else []
        self._sequences[field.name][:] = incoming
        return self

    def _append(self, field: DatasetField, value: Any) -> Self:
        self._sequences[field.name].append(field.coerce(value))
        return self

    # ------------------------------------------------------------------
    # Fields shared by every kind
    # ------------------------------------------------------------------
    @property
    def label(self) -> str | None:
        """Label shown in the legend and tooltips."""

        return self._get("label")

    def set_label(self, label: str | None) -> Self:
        """Set the label shown in the legend and tooltips."""

        return self._set("label", label)

    @property
    def hidden(self) -> bool | None:
        """Whether the dataset starts hidden."""

        return self._get("hidden")

    def set_hidden(self, hidden: bool | None) -> Self:
        """If true, the dataset is not rendered until toggled from the legend."""

        return self._set("hidden", hidden)

    @property
    def data(self) -> SequenceView[float | None]:
        """Data values, aligned with the chart labels."""

        return self._view("data")

    def set_data(self, data: Iterable[float | None] | None) -> Self:
        """Replace the data values; `None` entries render as gaps."""

        return self._set_all("data", data)

    def add_data(self, value: float | None) -> Self:
        """Append one data value."""

        return self._add("data", value)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset) or type(other) is not type(self):
            return NotImplemented
        return self._scalars == other._scalars and self._sequences == other._sequences

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [f"{name}={value!r}" for name, value in self._scalars.items()]
        parts.extend(f"{name}={items!r}" for name, items in self._sequences.items() if items)
        return f"{type(self).__name__}({', '.join(parts)})"


def _index_fields(cls: type[Dataset]) -> dict[str, DatasetField]:
    """Index a kind's field declarations by name, rejecting duplicates."""

    indexed: dict[str, DatasetField] = {}
    for field in cls.fields:
        if field.name in indexed:
            raise ValueError(f"{cls.__name__} declares field {field.name!r} more than once.")
        if field.kind == "style" and field.choices is None:
            raise ValueError(f"{cls.__name__}.{field.name} is a style field without choices.")
        indexed[field.name] = field
    return indexed


Dataset._fields_by_name = _index_fields(Dataset)
