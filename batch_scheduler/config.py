"""Scheduler configuration dataclass.

Every scheduler accepts a SchedulerConfig (or the same fields as
keyword arguments) for its cadences and verbosity.
"""

from dataclasses import dataclass


@dataclass
class SchedulerConfig:
    """Common scheduler settings."""
    # Cadences: 0 disables, otherwise fire when step % cadence == 0
    apply_step: int = 1              # re-selection interval (steps)
    plot_step: int = 1               # visualization interval (steps)
    update_step: int = 1             # full loss refresh interval (selection passes)

    verbose: bool = True             # print status lines through OLConsole
    refresh_workers: int = 0         # >1 refreshes element losses in a thread pool
    seed: int | None = None          # seed for the random policies

    def __post_init__(self):
        if self.apply_step < 0:
            raise ValueError(f"apply_step must be >= 0, got {self.apply_step}")
        if self.plot_step < 0:
            raise ValueError(f"plot_step must be >= 0, got {self.plot_step}")
        if self.update_step <= 0:
            raise ValueError(f"update_step must be > 0, got {self.update_step}")
        if self.refresh_workers < 0:
            raise ValueError(f"refresh_workers must be >= 0, got {self.refresh_workers}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")
