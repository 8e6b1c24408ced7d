from .bus import Event, EventBus, Subscription
from .picker_events import (
    ActionDispatchedEvent,
    AssetStateChangedEvent,
    DialogRemovedEvent,
    DialogShownEvent,
    ItemsReplacedEvent,
    PickerEvent,
    SelectionChangedEvent,
)

__all__ = [
    "ActionDispatchedEvent",
    "AssetStateChangedEvent",
    "DialogRemovedEvent",
    "DialogShownEvent",
    "Event",
    "EventBus",
    "ItemsReplacedEvent",
    "PickerEvent",
    "SelectionChangedEvent",
    "Subscription",
]
