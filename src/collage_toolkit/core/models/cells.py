"""
Module: cells

Purpose:
    Provides the CollageCell dataclass - one rectangular region of the
    partition - and CellContent, the display payload it carries. Cells are
    immutable: resizing produces a new cell with the same id.

Key Functions:
    - CellContent.from_color(spec): Payload from any Pillow colour string
    - CellContent.random(rng): Payload with a random colour
    - CollageCell.grips: Edges not lying on the canvas boundary
    - CollageCell.with_frame(frame): Same cell, new frame
    - CollageCell.grip_position_relative_to(other, grip): Map a grip across cells

Dependencies:
    - dataclasses (std)
    - uuid (std)
    - PIL.ImageColor: Colour parsing
    - PIL.Image (TYPE_CHECKING only)
    - .frame.RelativeFrame
    - .grips.GripPosition

Used By:
    - core.models.state.CollageState
    - engine.collage.Collage

Identity:
    Two cells are equal iff their ids are equal. Frame and content are
    excluded from comparison and hashing, so a resized cell still matches
    its previous version in sets and mappings.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional, Tuple
from uuid import UUID, uuid4

from PIL import ImageColor

from collage_toolkit.common.thresholds import ALLOWABLE_ACCURACY

from .frame import RelativeFrame
from .grips import GripPosition

if TYPE_CHECKING:
    from PIL import Image


RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class CellContent:
    """
    Display payload of a cell (opaque to the partition engine).

    Attributes:
        color: Background colour as an RGB tuple
        image: Optional image shown in the cell; compared by nothing,
            the engine only carries the reference along

    Example:
        >>> CellContent.from_color("#ff8800").color
        (255, 136, 0)
    """

    color: RGB
    image: Optional[Image.Image] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate colour channels on construction."""
        if len(self.color) != 3:
            raise ValueError(f"color must have 3 channels: {self.color!r}")
        if any(not 0 <= channel <= 255 for channel in self.color):
            raise ValueError(f"color channels must be in 0..255: {self.color!r}")

    @classmethod
    def from_color(cls, spec: str, image: Optional[Image.Image] = None) -> CellContent:
        """
        Create a payload from a colour string.

        Args:
            spec: Anything PIL.ImageColor understands ("red", "#f80", "rgb(1,2,3)")
            image: Optional image reference

        Raises:
            ValueError: If the colour string is not recognised
        """
        rgb = ImageColor.getrgb(spec)
        return cls(color=tuple(rgb[:3]), image=image)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> CellContent:
        """Create an image-less payload with a random colour."""
        rng = rng or random.Random()
        return cls(color=(rng.randrange(256), rng.randrange(256), rng.randrange(256)))

    @property
    def hex_color(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.color)


@dataclass(frozen=True)
class CollageCell:
    """
    One rectangular region of the collage.

    Attributes:
        frame: Position in canvas-relative coordinates
        content: Display payload
        id: Unique identity, preserved across resizes

    Example:
        >>> cell = CollageCell(RelativeFrame(0.5, 0, 0.5, 1))
        >>> sorted(cell.grips)
        [<GripPosition.LEFT: 'left'>]
        >>> cell.with_frame(RelativeFrame(0.2, 0, 0.8, 1)) == cell
        True
    """

    frame: RelativeFrame = field(compare=False)
    content: CellContent = field(default_factory=CellContent.random, compare=False)
    id: UUID = field(default_factory=uuid4)

    @property
    def grips(self) -> frozenset[GripPosition]:
        """
        Edges that can be dragged.

        An edge lying on the canvas boundary is not a grip. Derived from
        ``frame``, so it always reflects the current frame.
        """
        canvas = RelativeFrame.fullsized()
        return frozenset(
            grip for grip in GripPosition
            if abs(grip.edge_coordinate(self.frame) - grip.edge_coordinate(canvas)) > ALLOWABLE_ACCURACY
        )

    def has_grip(self, grip: GripPosition) -> bool:
        return grip in self.grips

    def with_frame(self, frame: RelativeFrame) -> CollageCell:
        """Same cell (same id and content) moved to ``frame``."""
        return replace(self, frame=frame)

    def grip_position_relative_to(self, other: CollageCell, grip: GripPosition) -> GripPosition:
        """
        Map ``other``'s ``grip`` onto this cell's edge on the same line.

        Cells stacked along the line share the same side (both RIGHT);
        cells facing each other across it get opposite sides (RIGHT/LEFT).
        When this cell has no edge on that line ``grip`` is returned as is.

        Args:
            other: Cell the grip is defined on
            grip: Edge of ``other``

        Returns:
            The grip on this cell that moves together with ``other``'s grip
        """
        line = grip.edge_coordinate(other.frame)
        for candidate in (grip, grip.opposite):
            if abs(candidate.edge_coordinate(self.frame) - line) <= ALLOWABLE_ACCURACY:
                return candidate
        return grip

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"CollageCell({str(self.id)[:8]}, {self.frame!r}, {self.content.hex_color})"
