"""
Module: grips

Purpose:
    Provides the GripPosition enum - the four edges of a cell that can be
    dragged to resize it. Each grip knows the orientation of the line it
    lies on and how a signed displacement of that line changes a frame.

Key Functions:
    - GripPosition.axis: Orientation of the edge line
    - GripPosition.center_point(frame): Midpoint of the edge
    - GripPosition.apply(frame, value): Move the edge by value
    - GripPosition.side_change_value(frame): Displacement collapsing the frame

Dependencies:
    - enum (std)
    - .frame.RelativeFrame, .frame.Axis

Used By:
    - core.models.cells.CollageCell
    - engine.collage.Collage
"""

from __future__ import annotations

from enum import Enum

from .frame import Axis, Point, RelativeFrame


class GripPosition(str, Enum):
    """
    Edge of a cell.

    Values passed to ``apply`` are signed displacements of the edge line:
    positive moves it towards larger x (LEFT/RIGHT) or larger y (TOP/BOTTOM).

    Example:
        >>> GripPosition.LEFT.apply(RelativeFrame(0.5, 0, 0.5, 1), -0.3)
        RelativeFrame(0.2, 0, 0.8, 1)
    """
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value

    @property
    def axis(self) -> Axis:
        """Orientation of the line this edge lies on."""
        if self in (GripPosition.LEFT, GripPosition.RIGHT):
            return Axis.VERTICAL
        return Axis.HORIZONTAL

    @property
    def opposite(self) -> GripPosition:
        return _OPPOSITES[self]

    def edge_coordinate(self, frame: RelativeFrame) -> float:
        """x of a LEFT/RIGHT edge, y of a TOP/BOTTOM edge."""
        if self is GripPosition.LEFT:
            return frame.min_x
        if self is GripPosition.RIGHT:
            return frame.max_x
        if self is GripPosition.TOP:
            return frame.min_y
        return frame.max_y

    def center_point(self, frame: RelativeFrame) -> Point:
        """Midpoint of this edge of ``frame``."""
        if self.axis is Axis.VERTICAL:
            return (self.edge_coordinate(frame), frame.mid_y)
        return (frame.mid_x, self.edge_coordinate(frame))

    def apply(self, frame: RelativeFrame, value: float) -> RelativeFrame:
        """
        Move this edge of ``frame`` by ``value``.

        LEFT/TOP shift the origin and shrink the dimension by ``value``;
        RIGHT/BOTTOM only change the dimension. The opposite edge never moves.

        Args:
            frame: Frame to resize
            value: Signed displacement as a fraction of the canvas

        Returns:
            The resized frame
        """
        if self is GripPosition.LEFT:
            return frame.with_changes(x=frame.x + value, width=frame.width - value)
        if self is GripPosition.RIGHT:
            return frame.with_changes(width=frame.width + value)
        if self is GripPosition.TOP:
            return frame.with_changes(y=frame.y + value, height=frame.height - value)
        return frame.with_changes(height=frame.height + value)

    def side_change_value(self, frame: RelativeFrame) -> float:
        """
        Displacement that drags a neighbour's facing edge across ``frame``.

        Applying this value to the neighbours of ``frame`` on this side
        makes them absorb the whole frame.
        """
        if self is GripPosition.LEFT:
            return frame.width
        if self is GripPosition.RIGHT:
            return -frame.width
        if self is GripPosition.TOP:
            return frame.height
        return -frame.height


_OPPOSITES = {
    GripPosition.LEFT: GripPosition.RIGHT,
    GripPosition.RIGHT: GripPosition.LEFT,
    GripPosition.TOP: GripPosition.BOTTOM,
    GripPosition.BOTTOM: GripPosition.TOP,
}
