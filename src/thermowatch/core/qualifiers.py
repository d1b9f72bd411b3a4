"""Ready-made qualifiers for common temperature thresholds.

Thresholds are compared against event values, so they are in the
thermometer's default unit. Qualifiers that look at the previous reading
never fire on the first reading.
"""

from __future__ import annotations

from typing import Final, Literal, get_args

from thermowatch.core.events import Qualifier, TemperatureEvent

QualifierKind = Literal[
    "always",
    "at_or_above",
    "at_or_below",
    "delta_exceeds",
    "falls_to",
    "rises_to",
]

#: Qualifier kinds that can be built from configuration
QUALIFIER_KINDS: Final[tuple[str, ...]] = get_args(QualifierKind)


def always() -> Qualifier:
    """Qualifier that accepts every reading."""

    def qualifier(event: TemperatureEvent) -> bool:
        del event  # Unused
        return True

    return qualifier


def at_or_above(threshold: float) -> Qualifier:
    """Accept readings at or above the threshold (e.g. boiling)."""

    def qualifier(event: TemperatureEvent) -> bool:
        return event.current >= threshold

    return qualifier


def at_or_below(threshold: float) -> Qualifier:
    """Accept readings at or below the threshold (e.g. freezing)."""

    def qualifier(event: TemperatureEvent) -> bool:
        return event.current <= threshold

    return qualifier


def delta_exceeds(threshold: float) -> Qualifier:
    """Accept readings that moved more than threshold since the last one."""

    def qualifier(event: TemperatureEvent) -> bool:
        if event.previous is None:
            return False
        return abs(event.previous - event.current) > threshold

    return qualifier


def falls_to(threshold: float) -> Qualifier:
    """Accept readings crossing down to the threshold.

    Fires only on the transition: the previous reading was above the
    threshold and the current one is at or below it.
    """

    def qualifier(event: TemperatureEvent) -> bool:
        if event.previous is None:
            return False
        return event.current <= threshold < event.previous

    return qualifier


def rises_to(threshold: float) -> Qualifier:
    """Accept readings crossing up to the threshold."""

    def qualifier(event: TemperatureEvent) -> bool:
        if event.previous is None:
            return False
        return event.previous < threshold <= event.current

    return qualifier


def build_qualifier(kind: str, threshold: float | None = None) -> Qualifier:
    """Create a qualifier by kind name.

    Args:
        kind: One of QUALIFIER_KINDS.
        threshold: Threshold value, required for every kind but "always".

    Returns:
        The qualifier function.

    Raises:
        ValueError: If the kind is unknown or the threshold is missing.
    """
    if kind == "always":
        return always()

    builders = {
        "at_or_above": at_or_above,
        "at_or_below": at_or_below,
        "delta_exceeds": delta_exceeds,
        "falls_to": falls_to,
        "rises_to": rises_to,
    }
    if kind not in builders:
        msg = f"Unknown qualifier kind '{kind}'. Available: {list(QUALIFIER_KINDS)}"
        raise ValueError(msg)
    if threshold is None:
        msg = f"Qualifier kind '{kind}' requires a threshold"
        raise ValueError(msg)
    return builders[kind](threshold)
