"""Immutable color values and their Chart.js string renderings."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from random import Random
from typing import Final, Literal

from .exceptions import ColorError

ColorFormat = Literal["rgba", "hex"]

COLOR_FORMATS: Final[tuple[ColorFormat, ...]] = ("rgba", "hex")

_HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNCTIONAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(rgba?)\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color.

    Args:
        red: Red channel, 0..255.
        green: Green channel, 0..255.
        blue: Blue channel, 0..255.
        alpha: Opacity, 0.0 (transparent) to 1.0 (opaque).

    Raises:
        ColorError: If a channel or the alpha value is out of bounds.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ColorError(f"Color.{name} must be an int, got {channel!r}.")
            if not 0 <= channel <= 255:
                raise ColorError(f"Color.{name} must be within 0..255, got {channel}.")
        if isinstance(self.alpha, bool) or not isinstance(self.alpha, (int, float)):
            raise ColorError(f"Color.alpha must be a number, got {self.alpha!r}.")
        if not 0.0 <= self.alpha <= 1.0:
            raise ColorError(f"Color.alpha must be within 0..1, got {self.alpha}.")

    @property
    def is_opaque(self) -> bool:
        """Return True when alpha is exactly 1."""

        return self.alpha == 1.0

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy of this color with a different alpha."""

        return replace(self, alpha=alpha)

    def to_rgba(self) -> str:
        """Render as a CSS `rgba(r,g,b,a)` string."""

        return f"rgba({self.red},{self.green},{self.blue},{_format_alpha(self.alpha)})"

    def to_hex(self) -> str:
        """Render as `#rrggbb`, or `#rrggbbaa` when the color is not opaque."""

        rendered = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if not self.is_opaque:
            rendered += f"{round(self.alpha * 255):02x}"
        return rendered

    def render(self, color_format: ColorFormat) -> str:
        """Render using one of the supported output formats.

        Args:
            color_format: Either "rgba" or "hex".

        Returns:
            The color as a string Chart.js accepts.

        Raises:
            ColorError: If `color_format` is not supported.
        """

        if color_format == "rgba":
            return self.to_rgba()
        if color_format == "hex":
            return self.to_hex()
        raise ColorError(f"Unsupported color format {color_format!r}; expected one of {', '.join(COLOR_FORMATS)}.")

    @classmethod
    def named(cls, name: str) -> Color:
        """Return a color from the named palette.

        Raises:
            ColorError: If the name is not in the palette.
        """

        try:
            return NAMED_COLORS[name.strip().casefold()]
        except KeyError:
            raise ColorError(f"Unknown color name {name!r}.") from None

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a CSS-like color notation.

        Accepted forms are `#rgb`, `#rrggbb`, `#rrggbbaa`, `rgb(r,g,b)`,
        `rgba(r,g,b,a)` and palette names.

        Args:
            text: Color notation to parse.

        Returns:
            Parsed Color.

        Raises:
            ColorError: If the text is not a recognized notation.
        """

        raw = text.strip()
        hex_match = _HEX_PATTERN.match(raw)
        if hex_match is not None:
            digits = hex_match.group(1)
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            alpha = 1.0
            if len(digits) == 8:
                alpha = round(int(digits[6:8], 16) / 255, 3)
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), alpha)

        functional = _FUNCTIONAL_PATTERN.match(raw)
        if functional is not None:
            prefix, red, green, blue, alpha_raw = functional.groups()
            has_alpha = alpha_raw is not None
            if has_alpha != (prefix.lower() == "rgba"):
                raise ColorError(f"Mismatched channel count in color {text!r}.")
            return cls(int(red), int(green), int(blue), float(alpha_raw) if has_alpha else 1.0)

        if raw.casefold() in NAMED_COLORS:
            return NAMED_COLORS[raw.casefold()]
        raise ColorError(f"Unrecognized color notation {text!r}.")

    @classmethod
    def random(cls, rng: Random | None = None, *, alpha: float = 1.0) -> Color:
        """Return a random color.

        Args:
            rng: Optional random generator, for reproducible palettes.
            alpha: Alpha applied to the generated color.
        """

        source = rng if rng is not None else Random()
        return cls(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255), alpha)


def _format_alpha(alpha: float) -> str:
    """Format alpha without trailing zeros (1 -> "1", 0.50 -> "0.5")."""

    text = f"{float(alpha):.3f}".rstrip("0").rstrip(".")
    return text or "0"


NAMED_COLORS: Final[dict[str, Color]] = {
    "black": Color(0, 0, 0),
    "silver": Color(192, 192, 192),
    "gray": Color(128, 128, 128),
    "white": Color(255, 255, 255),
    "maroon": Color(128, 0, 0),
    "red": Color(255, 0, 0),
    "purple": Color(128, 0, 128),
    "fuchsia": Color(255, 0, 255),
    "green": Color(0, 128, 0),
    "lime": Color(0, 255, 0),
    "olive": Color(128, 128, 0),
    "yellow": Color(255, 255, 0),
    "navy": Color(0, 0, 128),
    "blue": Color(0, 0, 255),
    "teal": Color(0, 128, 128),
    "aqua": Color(0, 255, 255),
    "orange": Color(255, 165, 0),
    "transparent": Color(0, 0, 0, 0.0),
}
