"""Thermometer: unit-aware reading stream with qualified listeners.

A thermometer takes raw Celsius readings one at a time, turns each into a
TemperatureEvent in its default unit and notifies only the listeners whose
qualifier accepts that event.

Usage:
    thermometer = Thermometer("Celsius")
    thermometer.register(lambda e: e.current >= 100, on_boiling)
    thermometer.run([15, 3000, 45])
"""

from __future__ import annotations

import logging
import types
from typing import TYPE_CHECKING, Any

from thermowatch.core.events import Listener, Qualifier, TemperatureEvent
from thermowatch.core.units import TemperatureUnit, parse_unit
from thermowatch.core.units import convert as convert_unit

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _callable_name(func: object) -> str:
    return getattr(func, "__name__", repr(func))


def _listener_key(listener: object) -> Any:
    """Identity key for a listener.

    Bound methods are created anew on every attribute access, so they are
    keyed by the object they are bound to and the underlying function.
    """
    if isinstance(listener, types.MethodType):
        return (id(listener.__self__), id(listener.__func__))
    if isinstance(listener, types.BuiltinMethodType) and listener.__self__ is not None:
        return (id(listener.__self__), listener.__name__)
    return id(listener)


class Thermometer:
    """Observer registry and dispatch loop for temperature readings.

    Listeners are keyed by identity, never by equality: registering the
    same listener again replaces its qualifier instead of adding a second
    entry, while distinct objects that compare equal stay separate.
    Dispatch follows registration order.

    Thread-safety: This implementation is NOT thread-safe. Registration
    from another thread during run() is undefined.
    """

    def __init__(
        self,
        default_unit: TemperatureUnit | str,
        *,
        isolate_errors: bool = False,
    ) -> None:
        """Initialize a cold thermometer with no listeners.

        Args:
            default_unit: Unit events are reported in.
            isolate_errors: If True, a failing qualifier or listener is
                logged and dispatch continues. If False (default), the
                exception propagates to the caller.

        Raises:
            ValueError: If default_unit names no known unit.
        """
        self._default_unit = parse_unit(default_unit)
        self._isolate_errors = isolate_errors
        self._previous: float | None = None
        # Identity key -> (listener, qualifier); the stored listener pins its id
        self._listeners: dict[Any, tuple[Listener, Qualifier]] = {}

    @property
    def default_unit(self) -> TemperatureUnit:
        """Unit events are reported in."""
        return self._default_unit

    @property
    def previous(self) -> float | None:
        """Last processed raw reading in Celsius, or None if cold."""
        return self._previous

    @property
    def is_warm(self) -> bool:
        """Whether at least one reading has been processed."""
        return self._previous is not None

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return _listener_key(listener) in self._listeners

    def register(self, qualifier: Qualifier, listener: Listener) -> None:
        """Register a listener, or replace the qualifier of a known one.

        Args:
            qualifier: Predicate deciding whether the listener fires.
            listener: Callback invoked with the event when qualified.
        """
        key = _listener_key(listener)
        replaced = key in self._listeners
        self._listeners[key] = (listener, qualifier)
        logger.debug(
            "%s listener '%s'",
            "Re-registered" if replaced else "Registered",
            _callable_name(listener),
        )

    def unregister(self, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored.

        Args:
            listener: The listener to remove.
        """
        key = _listener_key(listener)
        if key in self._listeners:
            del self._listeners[key]
            logger.debug("Unregistered listener '%s'", _callable_name(listener))

    def convert(self, unit: TemperatureUnit | str, value: float) -> float:
        """Express a Celsius value in any supported unit.

        Args:
            unit: Target unit, not necessarily the default one.
            value: Temperature in degrees Celsius.

        Returns:
            The converted value.
        """
        return convert_unit(parse_unit(unit), value)

    def process_reading(self, raw: float) -> None:
        """Dispatch one raw Celsius reading to qualified listeners.

        Every entry is evaluated against the same event. The registry is
        snapshotted first, so changes made by listeners apply from the
        next reading on.

        Args:
            raw: Reading in degrees Celsius.
        """
        previous = self._previous
        event = TemperatureEvent(
            current=convert_unit(self._default_unit, raw),
            previous=(
                None if previous is None else convert_unit(self._default_unit, previous)
            ),
        )
        logger.debug("Reading %s -> %s", raw, event)

        for listener, qualifier in list(self._listeners.values()):
            if self._isolate_errors:
                self._dispatch_isolated(qualifier, listener, event)
            elif qualifier(event):
                listener(event)

        self._previous = raw

    def _dispatch_isolated(
        self,
        qualifier: Qualifier,
        listener: Listener,
        event: TemperatureEvent,
    ) -> None:
        try:
            if qualifier(event):
                listener(event)
        except Exception:
            logger.exception(
                "Listener '%s' failed processing reading %s",
                _callable_name(listener),
                event.current,
            )

    def run(self, readings: Iterable[float]) -> None:
        """Process a finite sequence of readings in order.

        Stands in for live polling, where process_reading would be called
        by a timer or device callback instead.

        Args:
            readings: Raw readings in degrees Celsius.
        """
        for raw in readings:
            self.process_reading(raw)
