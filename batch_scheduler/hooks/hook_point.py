"""Scheduler lifecycle points and cadence rules.

Defines the HookPoint enum for the two driver entry points and Cadence
for step-level firing control of re-selection and visualization.
"""

from dataclasses import dataclass
from enum import Enum, auto


class HookPoint(Enum):
    """Lifecycle points where hooks and sinks can fire."""
    INITIALIZE = auto()
    UPDATE = auto()


@dataclass(frozen=True)
class Cadence:
    """Modulo-based firing schedule.

    ``every == 0`` disables firing entirely; otherwise the action fires on
    every step where ``step % every == 0`` (including step 0).
    """

    every: int = 1

    def __post_init__(self):
        if self.every < 0:
            raise ValueError(f"cadence must be >= 0, got {self.every}")

    @property
    def enabled(self) -> bool:
        return self.every > 0

    def is_active(self, step: int) -> bool:
        """Whether the action should fire at the given step."""
        if not self.enabled:
            return False
        return step % self.every == 0
