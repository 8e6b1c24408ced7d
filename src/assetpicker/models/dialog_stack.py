"""Stack of open dialogs with the confirm cascade."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from assetpicker.domain.models.action import ActionSink
from assetpicker.domain.models.dialog import DialogDescriptor
from assetpicker.errors import DialogNotFoundError
from assetpicker.events.signal import Signal


class DialogStack:
    """Ordered collection of open :class:`DialogDescriptor` objects.

    The last entry is the dialog on top. Removal of an absent id is always a
    no-op, which is what makes :meth:`confirm` safe to repeat.
    """

    def __init__(self, action_sink: Optional[ActionSink] = None) -> None:
        self._dialogs: List[DialogDescriptor] = []
        self._action_sink = action_sink
        self._logger = logging.getLogger(__name__)

        # shown(descriptor, replaced)
        self.shown = Signal("shown")
        # removed(dialog_id, cascade_from)
        self.removed = Signal("removed")
        # dispatched(action, source_dialog_id)
        self.dispatched = Signal("dispatched")

    def set_action_sink(self, action_sink: Optional[ActionSink]) -> None:
        self._action_sink = action_sink

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._dialogs)

    def __contains__(self, dialog_id: object) -> bool:
        return self._index(dialog_id) is not None

    def dialogs(self) -> List[DialogDescriptor]:
        return list(self._dialogs)

    def get(self, dialog_id: str) -> DialogDescriptor:
        index = self._index(dialog_id)
        if index is None:
            raise DialogNotFoundError(dialog_id)
        return self._dialogs[index]

    def top(self) -> Optional[DialogDescriptor]:
        return self._dialogs[-1] if self._dialogs else None

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def show(self, descriptor: DialogDescriptor) -> None:
        """Open *descriptor*; an open dialog with the same id is updated in place."""

        index = self._index(descriptor.id)
        replaced = index is not None
        if replaced:
            self._dialogs[index] = descriptor
        else:
            self._dialogs.append(descriptor)
        self.shown.emit(descriptor, replaced)

    def remove(self, dialog_id: Optional[str], *, cascade_from: Optional[str] = None) -> bool:
        """Close *dialog_id*; return ``False`` when it was not open."""

        index = self._index(dialog_id)
        if index is None:
            self._logger.debug("remove(%r) ignored: dialog not open", dialog_id)
            return False
        del self._dialogs[index]
        self.removed.emit(dialog_id, cascade_from)
        return True

    def close(self, dialog_id: str) -> bool:
        """Cancel path: close without cascade or dispatch."""

        return self.remove(dialog_id)

    def confirm(self, dialog_id: str) -> bool:
        """Run the confirm cascade for *dialog_id*.

        In order: close ``close_dialog_id``, dispatch
        ``confirm_callback_action``, close the dialog itself. Confirming a
        dialog that is not open does nothing, so a repeated confirm neither
        errors nor dispatches twice. Non-confirm dialogs simply close.
        """

        index = self._index(dialog_id)
        if index is None:
            self._logger.debug("confirm(%r) ignored: dialog not open", dialog_id)
            return False
        descriptor = self._dialogs[index]

        try:
            if descriptor.is_confirm:
                if descriptor.close_dialog_id is not None:
                    self.remove(descriptor.close_dialog_id, cascade_from=dialog_id)
                if descriptor.confirm_callback_action is not None:
                    self._dispatch(descriptor.confirm_callback_action, dialog_id)
        finally:
            self.remove(dialog_id)
        self._logger.info("Confirmed dialog %r", dialog_id)
        return True

    def clear(self) -> None:
        for descriptor in list(reversed(self._dialogs)):
            self.remove(descriptor.id)

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _dispatch(self, action: Any, source_dialog_id: str) -> None:
        if self._action_sink is None:
            self._logger.warning(
                "Dialog %r confirmed with follow-up %r but no action sink is attached",
                source_dialog_id,
                action,
            )
            return
        self._logger.info("Dispatching follow-up %r from dialog %r", action, source_dialog_id)
        self._action_sink(action)
        self.dispatched.emit(action, source_dialog_id)

    def _index(self, dialog_id: object) -> Optional[int]:
        for index, descriptor in enumerate(self._dialogs):
            if descriptor.id == dialog_id:
                return index
        return None


__all__ = ["DialogStack"]
