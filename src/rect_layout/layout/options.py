"""Per-call option records for spreading and flowing.

Options are passed to the arrange functions as keyword arguments and
validated here before any layout runs. Unknown keys are rejected rather
than ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.errors import LayoutConfigError


# Defaults
DEFAULT_ORIGIN = 0
DEFAULT_GAP = 0

SPREAD_HORIZONTAL_KEYS = frozenset({"x", "gap", "cols"})
SPREAD_VERTICAL_KEYS = frozenset({"y", "gap", "rows"})
FLOW_HORIZONTAL_KEYS = frozenset({"x", "gap"})
FLOW_VERTICAL_KEYS = frozenset({"y", "gap"})


def validate_option_keys(options: dict[str, Any], allowed: frozenset[str], caller: str) -> None:
    """Raise LayoutConfigError if options holds a key outside allowed."""
    unknown = sorted(set(options) - allowed)
    if unknown:
        raise LayoutConfigError(
            f"Unknown option(s) for {caller}: {unknown}. "
            f"Accepted options are {sorted(allowed)}."
        )


def _validate_slots(value: Any, key: str, caller: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise LayoutConfigError(
            f"{caller} option '{key}' must be a positive integer, got {value!r}."
        )
    return value


@dataclass(frozen=True)
class SpreadOptions:
    """Resolved options for spread_horizontal / spread_vertical.

    origin : where the first slot starts (``x`` or ``y``)
    gap : minimum distance between consecutive items
    slots : number of equal columns (rows) the span is divided into
    """

    origin: float = DEFAULT_ORIGIN
    gap: float = DEFAULT_GAP
    slots: int = 1

    @classmethod
    def horizontal(cls, options: dict[str, Any], n_items: int) -> SpreadOptions:
        validate_option_keys(options, SPREAD_HORIZONTAL_KEYS, "spread_horizontal")
        return cls(
            origin=options.get("x", DEFAULT_ORIGIN),
            gap=options.get("gap", DEFAULT_GAP),
            slots=_validate_slots(options.get("cols", n_items or 1), "cols", "spread_horizontal"),
        )

    @classmethod
    def vertical(cls, options: dict[str, Any], n_items: int) -> SpreadOptions:
        validate_option_keys(options, SPREAD_VERTICAL_KEYS, "spread_vertical")
        return cls(
            origin=options.get("y", DEFAULT_ORIGIN),
            gap=options.get("gap", DEFAULT_GAP),
            slots=_validate_slots(options.get("rows", n_items or 1), "rows", "spread_vertical"),
        )


@dataclass(frozen=True)
class FlowOptions:
    """Resolved options for flow_horizontal / flow_vertical."""

    origin: float = DEFAULT_ORIGIN
    gap: float = DEFAULT_GAP

    @classmethod
    def horizontal(cls, options: dict[str, Any]) -> FlowOptions:
        validate_option_keys(options, FLOW_HORIZONTAL_KEYS, "flow_horizontal")
        return cls(
            origin=options.get("x", DEFAULT_ORIGIN),
            gap=options.get("gap", DEFAULT_GAP),
        )

    @classmethod
    def vertical(cls, options: dict[str, Any]) -> FlowOptions:
        validate_option_keys(options, FLOW_VERTICAL_KEYS, "flow_vertical")
        return cls(
            origin=options.get("y", DEFAULT_ORIGIN),
            gap=options.get("gap", DEFAULT_GAP),
        )
