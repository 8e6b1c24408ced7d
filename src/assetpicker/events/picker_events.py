"""Events published by :class:`assetpicker.models.state.PickerState`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .bus import Event


@dataclass(kw_only=True)
class PickerEvent(Event):
    """Base class for every picker state notification."""


@dataclass(kw_only=True)
class SelectionChangedEvent(PickerEvent):
    picked_ids: Tuple[Any, ...] = ()
    last_picked: Optional[Any] = None


@dataclass(kw_only=True)
class AssetStateChangedEvent(PickerEvent):
    """An item's ``updating`` flag or ``error`` marker changed."""
    asset_id: Any = None
    updating: bool = False
    error: Optional[str] = None


@dataclass(kw_only=True)
class ItemsReplacedEvent(PickerEvent):
    item_ids: Tuple[Any, ...] = ()
    dropped_ids: Tuple[Any, ...] = ()


@dataclass(kw_only=True)
class DialogShownEvent(PickerEvent):
    dialog_id: str = ""
    replaced: bool = False


@dataclass(kw_only=True)
class DialogRemovedEvent(PickerEvent):
    dialog_id: str = ""
    cascade_from: Optional[str] = None


@dataclass(kw_only=True)
class ActionDispatchedEvent(PickerEvent):
    action: Any = None
    source_dialog_id: Optional[str] = None
    extra: dict = field(default_factory=dict)
