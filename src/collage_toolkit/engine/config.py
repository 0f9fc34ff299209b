"""
Module: engine.config

Purpose:
    Configuration dataclass for the partition engine. Immutable
    configuration with validation on construction.

Key Classes:
    - CollageConfig: Size floor, comparison tolerance and colour seed

Dependencies:
    - dataclasses (std)
    - common.thresholds: Default values

Used By:
    - engine.collage.Collage
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from collage_toolkit.common.thresholds import PARTITION_THRESHOLDS


@dataclass(frozen=True)
class CollageConfig:
    """
    Configuration for a collage (immutable).

    Attributes:
        min_cell_size: Smallest width or height a committed cell may have
        tolerance: Allowed error of the engine's area, overlap and size
            floor checks. Edge matching (grips, adjacency, shared lines)
            always uses ALLOWABLE_ACCURACY from common.thresholds
        seed: Seed for the random colours of new cells (None = unseeded)

    Example:
        >>> config = CollageConfig(seed=7)
        >>> config.min_cell_size
        0.2
    """

    min_cell_size: float = PARTITION_THRESHOLDS.min_cell_size
    tolerance: float = PARTITION_THRESHOLDS.allowable_accuracy
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0 < self.min_cell_size <= 0.5:
            raise ValueError(f"min_cell_size must be in (0, 0.5]: {self.min_cell_size}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative: {self.tolerance}")

    def make_rng(self) -> random.Random:
        """Random generator for cell colours."""
        return random.Random(self.seed)
