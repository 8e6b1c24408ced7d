from .action import Action, ActionSink
from .asset import AssetItem
from .dialog import DialogDescriptor, DialogKind, asset_edit_dialog, confirm_delete_assets_dialog

__all__ = [
    "Action",
    "ActionSink",
    "AssetItem",
    "DialogDescriptor",
    "DialogKind",
    "asset_edit_dialog",
    "confirm_delete_assets_dialog",
]
