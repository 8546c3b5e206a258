"""Breakpoint model: named minimum-width thresholds for responsive groups."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from cascade.errors import ConfigError

_WIDTH_RE = re.compile(r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?:px)?\s*$")


@dataclass(frozen=True)
class Breakpoint:
    """A named screen threshold.

    Attributes:
        name: Prefix used for wrapped class names (``md`` in ``md:hover:x``).
        min_width: Minimum viewport width in pixels.
    """

    name: str
    min_width: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Breakpoint name must be a non-empty string")
        if self.min_width < 0:
            raise ValueError(f"Breakpoint '{self.name}' has a negative width")

    @property
    def condition(self) -> str:
        """Media condition wrapping every rule in this breakpoint's group."""
        return f"(min-width: {_format_width(self.min_width)})"


def _format_width(width: float) -> str:
    if float(width).is_integer():
        return f"{int(width)}px"
    return f"{width}px"


def parse_width(raw: object, name: str = "") -> float:
    """Parse ``640``, ``"640"`` or ``"640px"`` into a pixel width."""
    if isinstance(raw, bool):
        raise ConfigError(f"invalid width {raw!r}", key=name or None)
    if isinstance(raw, (int, float)):
        return float(raw)
    match = _WIDTH_RE.match(str(raw))
    if match is None:
        raise ConfigError(f"invalid width {raw!r}", key=name or None)
    return float(match.group("value"))


def sort_breakpoints(breakpoints: Iterable[Breakpoint]) -> tuple[Breakpoint, ...]:
    """Order breakpoints by ascending width; equal widths keep their order."""
    return tuple(sorted(breakpoints, key=lambda b: b.min_width))


def breakpoints_from_mapping(screens: Mapping[str, object]) -> tuple[Breakpoint, ...]:
    """Build sorted breakpoints from a ``{name: width}`` mapping."""
    return sort_breakpoints(
        Breakpoint(name=name, min_width=parse_width(width, name))
        for name, width in screens.items()
    )


DEFAULT_SCREENS: tuple[Breakpoint, ...] = (
    Breakpoint("sm", 640),
    Breakpoint("md", 768),
    Breakpoint("lg", 1024),
    Breakpoint("xl", 1280),
)
