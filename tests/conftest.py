import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import collage_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from collage_toolkit.core.models import CellContent, CollageCell, RelativeFrame  # noqa: E402
from collage_toolkit.engine import Collage, CollageConfig, CollageObserver  # noqa: E402


class RecordingObserver(CollageObserver):
    """Observer that records every notification as (kind, payload)."""

    def __init__(self):
        self.events = []

    def collage_selection_changed(self, collage, cell):
        self.events.append(("selection", cell))

    def collage_changed(self, collage):
        self.events.append(("changed", collage))

    def collage_state_changed(self, collage, state):
        self.events.append(("state", state))

    @property
    def kinds(self):
        return [kind for kind, _ in self.events]


def make_cell(x, y, width, height, color="white"):
    """Build a cell with a fixed colour."""
    return CollageCell(RelativeFrame(x, y, width, height), CellContent.from_color(color))


# Common test fixtures
@pytest.fixture
def config():
    """Seeded configuration for reproducible colours."""
    return CollageConfig(seed=1234)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def grid_cells():
    """2x2 grid: top-left, top-right, bottom-left, bottom-right."""
    return [
        make_cell(0.0, 0.0, 0.5, 0.5, "red"),
        make_cell(0.5, 0.0, 0.5, 0.5, "green"),
        make_cell(0.0, 0.5, 0.5, 0.5, "blue"),
        make_cell(0.5, 0.5, 0.5, 0.5, "yellow"),
    ]


@pytest.fixture
def column_and_rows_cells():
    """Full-height left column, right half split into top and bottom."""
    return [
        make_cell(0.0, 0.0, 0.5, 1.0, "red"),
        make_cell(0.5, 0.0, 0.5, 0.5, "green"),
        make_cell(0.5, 0.5, 0.5, 0.5, "blue"),
    ]


@pytest.fixture
def pinwheel_cells():
    """Four arms around a 0.2 x 0.2 centre cell (centre is last)."""
    return [
        make_cell(0.0, 0.0, 0.6, 0.4, "red"),
        make_cell(0.6, 0.0, 0.4, 0.6, "green"),
        make_cell(0.4, 0.6, 0.6, 0.4, "blue"),
        make_cell(0.0, 0.4, 0.4, 0.6, "yellow"),
        make_cell(0.4, 0.4, 0.2, 0.2, "black"),
    ]


@pytest.fixture
def collage(config, observer):
    """Fresh single-cell collage with a recording observer attached."""
    c = Collage(config=config)
    c.add_observer(observer)
    return c
