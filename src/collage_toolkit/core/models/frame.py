"""
Module: frame

Purpose:
    Provides the RelativeFrame dataclass - a rectangle in normalized canvas
    coordinates - and the Axis enum naming the orientation of dividing
    lines. All partition geometry (splitting, adjacency, collinearity)
    is expressed through these two types.

Key Functions:
    - RelativeFrame.split(axis): Halve a frame along a dividing line
    - RelativeFrame.contains(point): Half-open point containment
    - RelativeFrame.intersects(other): Interior overlap check
    - RelativeFrame.intersects_on(other, grip): Adjacency across an edge
    - RelativeFrame.belongs_to_parallel_line(axis, point): Collinear edge check

Dependencies:
    - dataclasses (std)
    - enum (std)
    - common.thresholds: Float tolerance

Used By:
    - core.models.grips.GripPosition
    - core.models.cells.CollageCell
    - core.models.state.CollageState
    - engine.collage.Collage

Coordinate Convention:
    Origin is the top-left corner of the canvas, y grows downwards.
    The canvas itself is RelativeFrame.fullsized() == (0, 0, 1, 1).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Tuple

from collage_toolkit.common.thresholds import ALLOWABLE_ACCURACY

if TYPE_CHECKING:
    from .grips import GripPosition


Point = Tuple[float, float]


class Axis(str, Enum):
    """
    Orientation of a dividing line.

    VERTICAL lines separate left/right neighbours (they move along x),
    HORIZONTAL lines separate top/bottom neighbours (they move along y).
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RelativeFrame:
    """
    Rectangle in canvas-relative coordinates.

    Values are fractions of the canvas dimensions. A frame is not
    validated on construction: a partition may hold a frame that is
    out of bounds or degenerate while a candidate state is checked.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent

    Example:
        >>> left, right = RelativeFrame.fullsized().split(Axis.VERTICAL)
        >>> right
        RelativeFrame(0.5, 0.0, 0.5, 1.0)
        >>> left.area
        0.5
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def fullsized(cls) -> RelativeFrame:
        """The whole canvas."""
        return cls(0.0, 0.0, 1.0, 1.0)

    @classmethod
    def zero(cls) -> RelativeFrame:
        return cls(0.0, 0.0, 0.0, 0.0)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Area as a fraction of the canvas area."""
        return self.width * self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def is_in_bounds(self, canvas: RelativeFrame) -> bool:
        """
        Check that every edge lies inside ``canvas``.

        Edges may touch the canvas boundary; overshoot up to the
        allowable accuracy is tolerated.

        Args:
            canvas: Bounding frame, usually RelativeFrame.fullsized()

        Returns:
            True if the frame is inside canvas
        """
        return (
            self.min_x >= canvas.min_x - ALLOWABLE_ACCURACY
            and self.min_y >= canvas.min_y - ALLOWABLE_ACCURACY
            and self.max_x <= canvas.max_x + ALLOWABLE_ACCURACY
            and self.max_y <= canvas.max_y + ALLOWABLE_ACCURACY
        )

    def contains(self, point: Point) -> bool:
        """
        Check if a point is within this frame.

        The frame is half-open: [min_x, max_x) x [min_y, max_y), so a
        point on a shared edge belongs to exactly one of two neighbours.

        Args:
            point: (x, y) in canvas-relative coordinates

        Returns:
            True if the point is inside the frame
        """
        px, py = point
        return self.min_x <= px < self.max_x and self.min_y <= py < self.max_y

    def intersection_area(self, other: RelativeFrame) -> float:
        """Area shared by the interiors of two frames (0 when only touching)."""
        overlap_w = min(self.max_x, other.max_x) - max(self.min_x, other.min_x)
        overlap_h = min(self.max_y, other.max_y) - max(self.min_y, other.min_y)
        if overlap_w <= 0 or overlap_h <= 0:
            return 0.0
        return overlap_w * overlap_h

    def intersects(self, other: RelativeFrame) -> bool:
        """
        Check if the interiors of two frames overlap.

        Frames that only share an edge do NOT intersect.
        """
        return self.intersection_area(other) > ALLOWABLE_ACCURACY

    def intersects_on(self, other: RelativeFrame, grip: GripPosition) -> bool:
        """
        Check if this frame lies directly across ``other``'s ``grip`` edge.

        The frames qualify when this frame's opposite edge coincides with
        that edge and their extents along the edge overlap with positive
        length. Corner-only contact does not count.

        Args:
            other: Frame whose edge is examined
            grip: Edge of ``other`` to look across

        Returns:
            True if this frame is a neighbour of ``other`` on that side
        """
        edge = grip.edge_coordinate(other)
        facing = grip.opposite.edge_coordinate(self)
        if abs(edge - facing) > ALLOWABLE_ACCURACY:
            return False

        if grip.axis is Axis.VERTICAL:
            shared = min(self.max_y, other.max_y) - max(self.min_y, other.min_y)
        else:
            shared = min(self.max_x, other.max_x) - max(self.min_x, other.min_x)
        return shared > ALLOWABLE_ACCURACY

    def belongs_to_parallel_line(self, axis: Axis, point: Point) -> bool:
        """
        Check if one of this frame's edges lies on the line through ``point``.

        For Axis.VERTICAL the line is x == point.x and the left/right edges
        are compared; for Axis.HORIZONTAL the line is y == point.y and the
        top/bottom edges are compared.

        Args:
            axis: Orientation of the line
            point: Any point on the line

        Returns:
            True if an edge of the given orientation lies on the line
        """
        px, py = point
        if axis is Axis.VERTICAL:
            edges, target = (self.min_x, self.max_x), px
        else:
            edges, target = (self.min_y, self.max_y), py
        return any(abs(edge - target) <= ALLOWABLE_ACCURACY for edge in edges)

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Frames
    # ─────────────────────────────────────────────────────────────────────────

    def split(self, axis: Axis) -> tuple[RelativeFrame, RelativeFrame]:
        """
        Halve this frame along a dividing line of the given orientation.

        Axis.VERTICAL yields (left, right) halves, Axis.HORIZONTAL yields
        (top, bottom) halves. The union of the halves is the original frame.

        Args:
            axis: Orientation of the dividing line

        Returns:
            Tuple of (first, second) frames
        """
        if Axis(axis) is Axis.VERTICAL:
            half = self.width / 2
            first = replace(self, width=half)
            second = replace(self, x=self.x + half, width=self.width - half)
        else:
            half = self.height / 2
            first = replace(self, height=half)
            second = replace(self, y=self.y + half, height=self.height - half)
        return first, second

    def union(self, other: RelativeFrame) -> RelativeFrame:
        """Smallest frame containing both frames."""
        min_x = min(self.min_x, other.min_x)
        min_y = min(self.min_y, other.min_y)
        return RelativeFrame(
            min_x,
            min_y,
            max(self.max_x, other.max_x) - min_x,
            max(self.max_y, other.max_y) - min_y,
        )

    def with_changes(self, **changes: float) -> RelativeFrame:
        """Copy of this frame with the given fields replaced."""
        return replace(self, **changes)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Get as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"RelativeFrame({self.x}, {self.y}, {self.width}, {self.height})"
