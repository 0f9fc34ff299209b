"""Centralized threshold and magic number configuration.

This module contains the numeric floors and float tolerances used by the
partition engine. Having these in one place keeps the minimum cell size
and the comparison tolerance consistent between the geometry models and
the engine.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class PartitionThresholds:
    """Thresholds for cell sizing and float comparisons."""

    min_cell_size: float = 0.2  # Minimum width/height of a cell (fraction of canvas)
    accuracy_multiplier: int = 10000  # Multiples of machine epsilon tolerated in comparisons

    @property
    def allowable_accuracy(self) -> float:
        """Tolerance used for every float equality check on frames."""
        return sys.float_info.epsilon * self.accuracy_multiplier


# Global instances for easy import
PARTITION_THRESHOLDS = PartitionThresholds()
ALLOWABLE_ACCURACY = PARTITION_THRESHOLDS.allowable_accuracy
