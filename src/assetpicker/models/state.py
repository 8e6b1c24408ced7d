"""Per-session state container shared by selection, dialogs and bindings."""

from __future__ import annotations

import logging
import threading
from functools import wraps
from typing import Callable, Hashable, Iterable, List, Optional, TypeVar

from assetpicker.domain.models.action import ActionSink
from assetpicker.domain.models.asset import AssetItem
from assetpicker.domain.models.dialog import DialogDescriptor
from assetpicker.errors import AssetNotFoundError
from assetpicker.events.bus import EventBus
from assetpicker.events.picker_events import (
    ActionDispatchedEvent,
    AssetStateChangedEvent,
    DialogRemovedEvent,
    DialogShownEvent,
    ItemsReplacedEvent,
    SelectionChangedEvent,
)

from .asset_store import AssetItemStore
from .dialog_stack import DialogStack
from .selection import RangePolicy, SelectionEngine

_T = TypeVar("_T")


def _locked(method: Callable[..., _T]) -> Callable[..., _T]:
    @wraps(method)
    def wrapper(self: "PickerState", *args, **kwargs) -> _T:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class PickerState:
    """Own the asset store, selection engine and dialog stack for one session.

    Every mutator runs under one re-entrant lock, so a transition is never
    observed half-applied and a confirm's follow-up action may call back
    into :meth:`pick` from the same thread. When an :class:`EventBus` is
    supplied, each effective change is published on it.

    ``set_updating`` and ``set_error`` are completion callbacks for work
    that runs elsewhere; they tolerate ids that have since left the store.
    """

    def __init__(
        self,
        items: Optional[Iterable[AssetItem]] = None,
        *,
        event_bus: Optional[EventBus] = None,
        action_sink: Optional[ActionSink] = None,
        range_policy: RangePolicy = RangePolicy.ADDITIVE,
    ) -> None:
        self._lock = threading.RLock()
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

        self.store = AssetItemStore(items)
        self.selection = SelectionEngine(self.store, range_policy)
        self.dialogs = DialogStack(action_sink)

        self.selection.selection_changed.connect(self._on_selection_changed)
        self.dialogs.shown.connect(self._on_dialog_shown)
        self.dialogs.removed.connect(self._on_dialog_removed)
        self.dialogs.dispatched.connect(self._on_action_dispatched)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def set_action_sink(self, action_sink: Optional[ActionSink]) -> None:
        self.dialogs.set_action_sink(action_sink)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @_locked
    def items(self) -> List[AssetItem]:
        return self.store.items()

    @_locked
    def get(self, item_id: Hashable) -> AssetItem:
        return self.store.get(item_id)

    @_locked
    def find(self, item_id: Hashable) -> Optional[AssetItem]:
        return self.store.find(item_id)

    @_locked
    def picked_ids(self) -> List[Hashable]:
        return self.store.picked_ids()

    @property
    def last_picked(self) -> Optional[Hashable]:
        with self._lock:
            return self.selection.last_picked

    @_locked
    def open_dialogs(self) -> List[DialogDescriptor]:
        return self.dialogs.dialogs()

    # ------------------------------------------------------------------
    # Item list
    # ------------------------------------------------------------------
    @_locked
    def set_items(self, items: Iterable[AssetItem]) -> List[Hashable]:
        dropped = self.store.set_items(items)
        self._after_rows_left(dropped)
        return dropped

    @_locked
    def append_items(self, items: Iterable[AssetItem]) -> List[Hashable]:
        added = self.store.append_items(items)
        if added:
            self._publish(ItemsReplacedEvent(item_ids=tuple(self.store.ids())))
        return added

    @_locked
    def remove_items(self, item_ids: Iterable[Hashable]) -> List[Hashable]:
        removed = self.store.remove_items(item_ids)
        if removed:
            self._after_rows_left(removed)
        return removed

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @_locked
    def pick(self, item_id: Hashable, picked: bool) -> bool:
        return self.selection.pick(item_id, picked)

    @_locked
    def pick_range(self, start_id: Optional[Hashable], end_id: Hashable) -> List[Hashable]:
        return self.selection.pick_range(start_id, end_id)

    @_locked
    def pick_all(self) -> List[Hashable]:
        busy = [item.id for item in self.store.items() if item.updating]
        return self.selection.pick_all(exclude=busy)

    @_locked
    def pick_clear(self) -> None:
        self.selection.pick_clear()

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------
    @_locked
    def show(self, descriptor: DialogDescriptor) -> None:
        self.dialogs.show(descriptor)

    @_locked
    def remove(self, dialog_id: str) -> bool:
        return self.dialogs.remove(dialog_id)

    @_locked
    def confirm(self, dialog_id: str) -> bool:
        return self.dialogs.confirm(dialog_id)

    @_locked
    def close(self, dialog_id: str) -> bool:
        return self.dialogs.close(dialog_id)

    # ------------------------------------------------------------------
    # Completion callbacks
    # ------------------------------------------------------------------
    @_locked
    def set_updating(self, item_id: Hashable, updating: bool) -> bool:
        try:
            changed = self.store.set_updating(item_id, updating)
        except AssetNotFoundError:
            self._logger.debug("Late set_updating(%r, %s) ignored", item_id, updating)
            return False
        if changed:
            self._publish_item_state(item_id)
        return changed

    @_locked
    def set_error(self, item_id: Hashable, marker: Optional[str]) -> bool:
        try:
            changed = self.store.set_error(item_id, marker)
        except AssetNotFoundError:
            self._logger.debug("Late set_error(%r, %r) ignored", item_id, marker)
            return False
        if changed:
            self._publish_item_state(item_id)
        return changed

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _after_rows_left(self, dropped: List[Hashable]) -> None:
        self._publish(ItemsReplacedEvent(item_ids=tuple(self.store.ids()), dropped_ids=tuple(dropped)))
        if dropped:
            self.selection.forget(dropped)

    def _publish_item_state(self, item_id: Hashable) -> None:
        item = self.store.get(item_id)
        self._publish(AssetStateChangedEvent(asset_id=item_id, updating=item.updating, error=item.error))

    def _on_selection_changed(self, picked_ids, last_picked) -> None:
        self._publish(SelectionChangedEvent(picked_ids=picked_ids, last_picked=last_picked))

    def _on_dialog_shown(self, descriptor: DialogDescriptor, replaced: bool) -> None:
        self._publish(DialogShownEvent(dialog_id=descriptor.id, replaced=replaced))

    def _on_dialog_removed(self, dialog_id: str, cascade_from: Optional[str]) -> None:
        self._publish(DialogRemovedEvent(dialog_id=dialog_id, cascade_from=cascade_from))

    def _on_action_dispatched(self, action, source_dialog_id: str) -> None:
        self._publish(ActionDispatchedEvent(action=action, source_dialog_id=source_dialog_id))

    def _publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)


__all__ = ["PickerState"]
