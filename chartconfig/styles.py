"""Enumerated style domains used by dataset fields.

Member values are the exact tokens understood by Chart.js, so serializing a
member is just reading its value. Domains are closed: there is no free-text
fallback.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from .exceptions import StyleDomainError


class BorderCapStyle(StrEnum):
    """Line cap style.

    - `butt`: ends of lines are squared off at the endpoints.
    - `round`: ends of lines are rounded.
    - `square`: ends are squared off by adding a box with an equal width and
      half the height of the line's thickness.
    """

    butt = "butt"
    round = "round"
    square = "square"


class BorderJoinStyle(StrEnum):
    """Line join style.

    - `round`: rounds off corners by filling a sector of a disc centered at the
      common endpoint of connected segments.
    - `bevel`: fills a triangular area between the common endpoint and the
      outside corners of each segment.
    - `miter`: extends the outside edges of connected segments until they meet.
    """

    round = "round"
    bevel = "bevel"
    miter = "miter"


class PointStyle(StrEnum):
    """Shape drawn for each data point."""

    circle = "circle"
    triangle = "triangle"
    rect = "rect"
    rect_rot = "rectRot"
    cross = "cross"
    cross_rot = "crossRot"
    star = "star"
    line = "line"
    dash = "dash"


class CubicInterpolationMode(StrEnum):
    """Curve algorithm for line datasets."""

    default = "default"
    monotone = "monotone"


class BorderSkipped(StrEnum):
    """Edge of a bar that is drawn without a border."""

    bottom = "bottom"
    left = "left"
    top = "top"
    right = "right"


StyleT = TypeVar("StyleT", bound=StrEnum)


def coerce_style(enum_cls: type[StyleT], value: StyleT | str) -> StyleT:
    """Convert a member or its external token into a style member.

    Args:
        enum_cls: The StrEnum domain to coerce into.
        value: A member of `enum_cls` or one of its token strings.

    Returns:
        The matching member of `enum_cls`.

    Raises:
        StyleDomainError: If `value` is not part of the domain.
    """

    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise StyleDomainError(
            domain=enum_cls.__name__,
            value=value,
            allowed=tuple(member.value for member in enum_cls),
        ) from exc
