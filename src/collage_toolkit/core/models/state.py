"""
Module: state

Purpose:
    Provides the CollageState dataclass - an immutable snapshot of every
    cell frame plus the selected cell. Snapshots serve as the reset target
    of a collage, as rollback points, and as the candidate frames of an
    in-progress resize reported to observers.

Key Functions:
    - CollageState.capture(cells, selected): Snapshot live cells
    - CollageState.frame_for(cell): Frame recorded for a cell
    - CollageState.materialize(): Cells moved to their recorded frames

Dependencies:
    - dataclasses (std)
    - types.MappingProxyType (std)
    - .cells.CollageCell
    - .frame.RelativeFrame

Used By:
    - engine.collage.Collage
    - engine.observers.CollageObserver
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .cells import CollageCell
from .frame import RelativeFrame


@dataclass(frozen=True)
class CollageState:
    """
    Snapshot of cell frames and selection (immutable).

    The insertion order of ``cell_frames`` is the cell ordering of the
    snapshot; restoring a snapshot restores that order.

    Attributes:
        cell_frames: Read-only mapping of cell to frame
        selected_cell: Selected cell at capture time, if any

    Example:
        >>> state = CollageState.capture(collage.cells, collage.selected_cell)
        >>> state.frame_for(collage.selected_cell)
        RelativeFrame(0.5, 0.0, 0.5, 1.0)
    """

    cell_frames: Mapping[CollageCell, RelativeFrame] = field(default_factory=dict)
    selected_cell: Optional[CollageCell] = None

    def __post_init__(self) -> None:
        """Freeze the frame mapping."""
        object.__setattr__(self, "cell_frames", MappingProxyType(dict(self.cell_frames)))

    @classmethod
    def capture(
        cls,
        cells: Iterable[CollageCell],
        selected_cell: Optional[CollageCell] = None,
    ) -> CollageState:
        """
        Snapshot the current frames of ``cells``.

        Args:
            cells: Cells in their current order
            selected_cell: Cell to record as selected

        Returns:
            New CollageState
        """
        return cls({cell: cell.frame for cell in cells}, selected_cell)

    @property
    def cells(self) -> tuple[CollageCell, ...]:
        """Cells of the snapshot in order (frames as they were when keyed)."""
        return tuple(self.cell_frames)

    def frame_for(self, cell: CollageCell) -> Optional[RelativeFrame]:
        """Frame recorded for ``cell`` (matched by id), or None."""
        return self.cell_frames.get(cell)

    def materialize(self) -> tuple[CollageCell, ...]:
        """
        Cells of the snapshot carrying their recorded frames.

        Returns:
            Tuple of cells in snapshot order
        """
        return tuple(cell.with_frame(frame) for cell, frame in self.cell_frames.items())

    def __len__(self) -> int:
        return len(self.cell_frames)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cell_frames
