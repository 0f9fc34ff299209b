"""
Core Models Package

Immutable data models for the collage partition.

All models in this package are frozen dataclasses or enums. A resize
never mutates a cell; it produces a new cell with the same id, which
keeps snapshots taken before the change intact for rollback.
"""

from .frame import Axis, Point, RelativeFrame
from .grips import GripPosition
from .cells import CellContent, CollageCell
from .state import CollageState

__all__ = [
    "Axis",
    "Point",
    "RelativeFrame",
    "GripPosition",
    "CellContent",
    "CollageCell",
    "CollageState",
]
