"""Hook infrastructure: lifecycle points, cadences, and visualization hooks."""

from .hook_point import HookPoint, Cadence
from .visualization import VisualizationHook, SelectionTableHook

__all__ = [
    'HookPoint',
    'Cadence',
    'VisualizationHook',
    'SelectionTableHook',
]
