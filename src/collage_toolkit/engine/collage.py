"""
Module: engine.collage

Purpose:
    The partition engine. Owns the live cells of a collage and the
    selected cell, and implements split, grip-resize, merge and reset
    while keeping the canvas fully covered by non-overlapping cells of at
    least the minimum size. Every mutation is atomic: the candidate
    frames are applied, validated, and either committed or rolled back
    to the snapshot taken before the call.

Key Classes:
    - Collage: Live partition with mutation and query operations
    - CellNotFoundError: Raised by strict id lookups

Dependencies:
    - logging (std)
    - core.models: RelativeFrame, GripPosition, CollageCell, CollageState
    - engine.config.CollageConfig
    - engine.observers.ObserverRegistry

Used By:
    - Host applications (views, gesture handlers)

Resize Algorithm:
    1. Collect the changing cells: every cell with an edge on the dragged
       line, or, when merging, the neighbours across the selected edge.
    2. Move each changing cell's own edge on that line by the value.
    3. Apply the new frames, then validate the size floor and coverage.
    4. Commit and notify, or restore the start snapshot and notify.
"""

from __future__ import annotations

import itertools
import logging
import math
from typing import Iterable, Iterator, List, Optional, Union
from uuid import UUID

from collage_toolkit.core.models import (
    Axis,
    CellContent,
    CollageCell,
    CollageState,
    GripPosition,
    Point,
    RelativeFrame,
)

from .config import CollageConfig
from .observers import CollageObserver, ObserverRegistry

logger = logging.getLogger(__name__)


CellRef = Union[CollageCell, UUID]


class CellNotFoundError(LookupError):
    """Raised when a cell id is not part of the collage."""


class Collage:
    """
    Live partition of the canvas into cells.

    Construct once from an initial list of cells (or nothing, which gives
    one full-canvas cell). The initial layout is kept as a snapshot and
    ``reset()`` always returns to it.

    Example:
        >>> collage = Collage()
        >>> collage.split_selected_cell(Axis.VERTICAL)
        True
        >>> collage.change_selected_cell_size(GripPosition.LEFT, -0.3)
        True
        >>> [round(c.frame.width, 2) for c in collage.cells]
        [0.2, 0.8]
        >>> collage.merge_selected_cell()
        True
        >>> len(collage)
        1
    """

    def __init__(
        self,
        cells: Optional[Iterable[CollageCell]] = None,
        config: Optional[CollageConfig] = None,
    ) -> None:
        self.config = config or CollageConfig()
        self._rng = self.config.make_rng()
        self._observers = ObserverRegistry()

        initial = list(cells or [])
        if not initial:
            initial = [CollageCell(RelativeFrame.fullsized(), CellContent.random(self._rng))]

        ids = [cell.id for cell in initial]
        if len(set(ids)) != len(ids):
            raise ValueError("Initial cells must have unique ids")

        self._cells: List[CollageCell] = initial
        self._selected_id: UUID = initial[-1].id
        self._initial_state = CollageState.capture(self._cells, self.selected_cell)

        logger.info(f"Created collage with {len(self._cells)} cell(s)")
        if not self.is_fullsized:
            logger.warning("Initial cells do not cover the canvas exactly")

    # ─────────────────────────────────────────────────────────────────────────
    # Observers
    # ─────────────────────────────────────────────────────────────────────────

    def add_observer(self, observer: CollageObserver) -> None:
        """Register an observer (held by weak reference)."""
        self._observers.add(observer)

    def remove_observer(self, observer: CollageObserver) -> None:
        self._observers.remove(observer)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def cells(self) -> tuple[CollageCell, ...]:
        """Live cells in order."""
        return tuple(self._cells)

    @property
    def selected_cell(self) -> CollageCell:
        """The selected cell, carrying its current frame."""
        return self.get_cell(self._selected_id)

    @property
    def initial_state(self) -> CollageState:
        return self._initial_state

    @property
    def state(self) -> CollageState:
        """Snapshot of the current frames and selection."""
        return CollageState.capture(self._cells, self.selected_cell)

    @property
    def is_fullsized(self) -> bool:
        """
        Check the coverage invariant.

        Every frame must lie inside the canvas, the cell areas must add up
        to the canvas area, and no two cells may overlap.

        Returns:
            True if the cells partition the canvas exactly
        """
        canvas = RelativeFrame.fullsized()
        tolerance = self.config.tolerance

        if not all(cell.frame.is_in_bounds(canvas) for cell in self._cells):
            return False

        cells_area = math.fsum(cell.frame.area for cell in self._cells)
        if abs(canvas.area - cells_area) >= tolerance:
            return False

        return all(
            a.frame.intersection_area(b.frame) <= tolerance
            for a, b in itertools.combinations(self._cells, 2)
        )

    def cell_at(self, point: Point) -> Optional[CollageCell]:
        """
        First cell whose frame contains ``point``.

        Args:
            point: (x, y) in canvas-relative coordinates

        Returns:
            The cell, or None if the point is outside every cell
        """
        return next((cell for cell in self._cells if cell.frame.contains(point)), None)

    def find_cell(self, cell: CellRef) -> Optional[CollageCell]:
        """Live version of a cell (looked up by id), or None."""
        cell_id = _id_of(cell)
        return next((live for live in self._cells if live.id == cell_id), None)

    def get_cell(self, cell: CellRef) -> CollageCell:
        """
        Live version of a cell (looked up by id).

        Raises:
            CellNotFoundError: If no live cell has that id
        """
        found = self.find_cell(cell)
        if found is None:
            raise CellNotFoundError(f"No cell with id {_id_of(cell)}")
        return found

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[CollageCell]:
        return iter(tuple(self._cells))

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, (CollageCell, UUID)):
            return False
        return self.find_cell(cell) is not None

    def __repr__(self) -> str:
        return f"Collage(cells={len(self._cells)}, selected={str(self._selected_id)[:8]})"

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def set_selected(self, cell: Optional[CellRef]) -> bool:
        """
        Select a cell by id.

        Args:
            cell: Cell or cell id to select. None (a missed ``cell_at``)
                selects nothing.

        Returns:
            True if the selection changed. False when ``cell`` is None, is
            already selected or is not part of the collage (logged as a
            warning).
        """
        if cell is None:
            logger.debug("Ignoring selection of no cell")
            return False

        cell_id = _id_of(cell)
        if cell_id == self._selected_id:
            return False

        found = self.find_cell(cell_id)
        if found is None:
            logger.warning(f"Ignoring selection of unknown cell {cell_id}")
            return False

        self._selected_id = found.id
        self._observers.selection_changed(self, found)
        return True

    def split_selected_cell(self, axis: Axis) -> bool:
        """
        Split the selected cell in half.

        The first half keeps the payload, the second gets a random colour
        and becomes the selection. Rejected without any notification when
        either half would fall below the minimum size.

        Args:
            axis: Orientation of the dividing line

        Returns:
            True if the split was committed
        """
        selected = self.selected_cell
        first_frame, second_frame = selected.frame.split(axis)

        if not (self._is_allowed(first_frame) and self._is_allowed(second_frame)):
            logger.debug(f"Rejected {axis} split of {selected!r}: halves below minimum size")
            return False

        first = CollageCell(first_frame, selected.content)
        second = CollageCell(second_frame, CellContent.random(self._rng))

        self._add(first)
        self._add(second)
        self._remove(selected)
        self.set_selected(second)

        logger.debug(f"Split {selected!r} along a {axis} line into {first!r} and {second!r}")
        self._observers.changed(self)
        return True

    def change_selected_cell_size(
        self,
        grip: GripPosition,
        value: float,
        merging: bool = False,
    ) -> bool:
        """
        Drag one edge of the selected cell.

        Every cell with an edge on the dragged line moves that edge by
        ``value``. With ``merging`` the selected cell is removed instead
        and its neighbours across ``grip`` grow into its area.

        Args:
            grip: Edge of the selected cell being dragged
            value: Signed displacement as a fraction of the canvas
            merging: Absorb the selected cell into its neighbours

        Returns:
            True if the change was committed, False if it was rejected and
            the previous state restored
        """
        selected = self.selected_cell
        changing = self._merging_cells(grip) if merging else self._affected_cells(grip)

        if not changing or not selected.has_grip(grip):
            return False

        start_state = self.state

        moved = [
            cell.with_frame(self._calculate_frame(cell, value, cell.grip_position_relative_to(selected, grip)))
            for cell in changing
        ]

        if merging:
            self._remove(selected)
            new_selected = moved[-1]
        else:
            new_selected = next((cell for cell in moved if cell == selected), selected)
        intermediate_state = CollageState.capture(moved, new_selected)

        self._apply(intermediate_state)

        allowed = all(self._is_allowed(cell.frame) for cell in moved)
        if not (allowed and self.is_fullsized):
            self._restore(start_state)
            logger.debug(f"Rejected {grip} change of {value:+.4f} (merging={merging}); state restored")
            self._observers.changed(self)
            return False

        logger.debug(f"Committed {grip} change of {value:+.4f} on {len(moved)} cell(s) (merging={merging})")
        if merging:
            self._observers.changed(self)
        else:
            self._observers.state_changed(self, intermediate_state)
        return True

    def merge_selected_cell(self) -> bool:
        """
        Merge the selected cell into its neighbours.

        Tries the grips of the selected cell in LEFT, RIGHT, TOP, BOTTOM
        order, collapsing the cell across each edge until one succeeds.
        The absorbing neighbour becomes the selection.

        Returns:
            True if the cell was merged
        """
        selected = self.selected_cell
        for grip in GripPosition:
            if not selected.has_grip(grip):
                continue
            if self.change_selected_cell_size(grip, grip.side_change_value(selected.frame), merging=True):
                logger.debug(f"Merged {selected!r} across its {grip} edge")
                return True

        logger.debug(f"No neighbour can absorb {selected!r}")
        return False

    def reset(self) -> None:
        """Restore the initial layout and selection."""
        self._restore(self._initial_state)
        logger.info(f"Reset collage to {len(self._cells)} initial cell(s)")
        self._observers.changed(self)

    # ─────────────────────────────────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _add(self, cell: CollageCell) -> None:
        if cell not in self._cells:
            self._cells.append(cell)

    def _remove(self, cell: CollageCell) -> None:
        self._cells = [live for live in self._cells if live.id != cell.id]

    def _apply(self, state: CollageState) -> None:
        """Write the frames of ``state`` onto the live cells, keeping order."""
        index = {cell.id: position for position, cell in enumerate(self._cells)}
        for cell in state.materialize():
            position = index.get(cell.id)
            if position is None:
                self._cells.append(cell)
            else:
                self._cells[position] = cell
        if state.selected_cell is not None:
            self._selected_id = state.selected_cell.id

    def _restore(self, state: CollageState) -> None:
        """Replace the live cells, their order and the selection with ``state``."""
        self._cells = list(state.materialize())
        if state.selected_cell is not None:
            self._selected_id = state.selected_cell.id

    def _calculate_frame(self, cell: CollageCell, value: float, grip: GripPosition) -> RelativeFrame:
        if not cell.has_grip(grip):
            return cell.frame
        return grip.apply(cell.frame, value)

    def _is_allowed(self, frame: RelativeFrame) -> bool:
        return min(frame.width, frame.height) >= self.config.min_cell_size - self.config.tolerance

    def _affected_cells(self, grip: GripPosition) -> List[CollageCell]:
        """Cells with an edge on the line the selected cell's ``grip`` lies on."""
        line_point = grip.center_point(self.selected_cell.frame)
        return [cell for cell in self._cells if cell.frame.belongs_to_parallel_line(grip.axis, line_point)]

    def _merging_cells(self, grip: GripPosition) -> List[CollageCell]:
        """Neighbours directly across the selected cell's ``grip`` edge."""
        selected = self.selected_cell
        return [
            cell for cell in self._cells
            if cell != selected and cell.frame.intersects_on(selected.frame, grip)
        ]


def _id_of(cell: CellRef) -> UUID:
    return cell.id if isinstance(cell, CollageCell) else cell
