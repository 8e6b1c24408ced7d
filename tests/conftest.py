import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt-backed tests run without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from assetpicker.domain.models.asset import AssetItem  # noqa: E402
from assetpicker.events.bus import EventBus  # noqa: E402
from assetpicker.models.state import PickerState  # noqa: E402


def make_items(*ids):
    return [AssetItem(id=item_id, asset={"_id": item_id}) for item_id in ids]


@pytest.fixture
def items():
    """Five assets in display order: A, B, C, D, E."""
    return make_items("A", "B", "C", "D", "E")


@pytest.fixture
def bus():
    event_bus = EventBus()
    yield event_bus
    event_bus.shutdown()


@pytest.fixture
def state(items, bus):
    return PickerState(items, event_bus=bus)
