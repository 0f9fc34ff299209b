"""
Module: engine

Purpose:
    Partition engine for collage layouts. Keeps a set of cells covering
    the canvas and restructures it through split, grip-resize, merge and
    reset, committing or rolling back each change atomically.

Key Classes:
    - Collage: The live partition
    - CollageConfig: Size floor, tolerance and colour seed
    - CollageObserver: Base class for change notification receivers
    - CellNotFoundError: Raised by strict id lookups

Dependencies:
    - collage_toolkit.core.models: Geometry and cell models

Used By:
    - Host applications (views, gesture handlers)
"""

from .config import CollageConfig
from .observers import CollageObserver, ObserverRegistry
from .collage import CellNotFoundError, Collage

__all__ = [
    # Config
    "CollageConfig",
    # Notification
    "CollageObserver",
    "ObserverRegistry",
    # Engine
    "Collage",
    "CellNotFoundError",
]
