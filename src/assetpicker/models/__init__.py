from .asset_store import AssetItemStore
from .dialog_stack import DialogStack
from .selection import RangePolicy, SelectionEngine
from .state import PickerState

__all__ = [
    "AssetItemStore",
    "DialogStack",
    "PickerState",
    "RangePolicy",
    "SelectionEngine",
]
