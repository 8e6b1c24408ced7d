"""Pure Python view model mirroring :class:`PickerState` for the renderer."""

from __future__ import annotations

import logging
from typing import Optional

from assetpicker.domain.models.dialog import DialogDescriptor
from assetpicker.events.bus import EventBus
from assetpicker.events.picker_events import (
    DialogRemovedEvent,
    DialogShownEvent,
    PickerEvent,
)
from assetpicker.events.signal import ObservableProperty, Signal
from assetpicker.gui.viewmodels.base import BaseViewModel
from assetpicker.models.state import PickerState


class PickerViewModel(BaseViewModel):
    """Read-only projection of the picker state.

    Views bind to the observable properties; every ``PickerEvent`` on the
    bus triggers a refresh from the state container, so the projection is
    always a consistent snapshot.
    """

    def __init__(self, state: PickerState, event_bus: EventBus) -> None:
        super().__init__()
        self._state = state
        self._logger = logging.getLogger(__name__)

        self.items = ObservableProperty([])
        self.picked_ids = ObservableProperty(())
        self.picked_count = ObservableProperty(0)
        self.last_picked = ObservableProperty(None)
        self.dialogs = ObservableProperty([])
        self.top_dialog = ObservableProperty(None)

        self.dialog_opened = Signal("dialog_opened")
        self.dialog_closed = Signal("dialog_closed")

        self.subscribe_event(event_bus, PickerEvent, self._on_picker_event)
        self.refresh()

    def refresh(self) -> None:
        with self._state.lock:
            items = self._state.items()
            dialogs = self._state.open_dialogs()
            last_picked = self._state.last_picked
        picked = tuple(item.id for item in items if item.picked)

        self.items.value = items
        self.picked_ids.value = picked
        self.picked_count.value = len(picked)
        self.last_picked.value = last_picked
        self.dialogs.value = dialogs
        self.top_dialog.value = dialogs[-1] if dialogs else None

    def dialog(self, dialog_id: str) -> Optional[DialogDescriptor]:
        for descriptor in self.dialogs.value:
            if descriptor.id == dialog_id:
                return descriptor
        return None

    # -- EventBus handlers --------------------------------------------------

    def _on_picker_event(self, event: PickerEvent) -> None:
        self.refresh()
        if isinstance(event, DialogShownEvent) and not event.replaced:
            self.dialog_opened.emit(event.dialog_id)
        elif isinstance(event, DialogRemovedEvent):
            self.dialog_closed.emit(event.dialog_id)
