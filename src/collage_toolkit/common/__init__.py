"""Shared constants for the collage toolkit."""

from .thresholds import ALLOWABLE_ACCURACY, PARTITION_THRESHOLDS, PartitionThresholds

__all__ = [
    "ALLOWABLE_ACCURACY",
    "PARTITION_THRESHOLDS",
    "PartitionThresholds",
]
