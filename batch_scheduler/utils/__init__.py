"""Shared utility functions for the scheduler.

Organized into submodules:
- formatting: bounded-width number rendering, status lines, JSON serialization
- reproducibility: random generators
"""

from .formatting import round_to_length, format_status, _json_default
from .reproducibility import make_rng

__all__ = [
    # Formatting
    'round_to_length', 'format_status', '_json_default',
    # Reproducibility
    'make_rng',
]
