"""
Collage Toolkit Core Package

Shared geometry and data models used by the partition engine:

- RelativeFrame / Axis: rectangles in normalized canvas coordinates
- GripPosition: draggable cell edges
- CollageCell / CellContent: regions and their display payload
- CollageState: immutable snapshots for reset and rollback
"""

from .models import (
    Axis,
    CellContent,
    CollageCell,
    CollageState,
    GripPosition,
    Point,
    RelativeFrame,
)

__all__ = [
    "Axis",
    "CellContent",
    "CollageCell",
    "CollageState",
    "GripPosition",
    "Point",
    "RelativeFrame",
]
