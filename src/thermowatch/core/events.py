"""Temperature events delivered to thermometer listeners."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TemperatureEvent:
    """A single reading as seen by listeners.

    Both values are expressed in the thermometer's default unit.

    Attributes:
        current: The reading that triggered this event.
        previous: The reading before it, or None for the first reading
            a thermometer processes.
    """

    current: float
    previous: float | None = None

    @property
    def delta(self) -> float | None:
        """Change since the previous reading, or None if there was none."""
        if self.previous is None:
            return None
        return self.current - self.previous

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {"current": self.current, "previous": self.previous}


# Type aliases for registry entries
Qualifier = Callable[[TemperatureEvent], bool]
Listener = Callable[[TemperatureEvent], None]
