"""Qt glue: turn mouse events and keyboard modifiers into :class:`ClickEvent`."""

from __future__ import annotations

import logging
from typing import Hashable, Optional

from PySide6.QtCore import QObject, Qt, Signal, Slot
from PySide6.QtGui import QGuiApplication, QMouseEvent

from assetpicker.gui.interaction import ClickEvent, ClickResult, ClickTarget, InteractionBinding


def shift_from_modifiers(modifiers: Qt.KeyboardModifier) -> bool:
    return bool(modifiers & Qt.KeyboardModifier.ShiftModifier)


def click_from_modifiers(
    item_id: Hashable,
    modifiers: Qt.KeyboardModifier,
    target: ClickTarget = ClickTarget.ROW,
) -> ClickEvent:
    return ClickEvent(item_id=item_id, shift_held=shift_from_modifiers(modifiers), target=target)


def click_from_mouse_event(
    item_id: Hashable,
    event: QMouseEvent,
    target: ClickTarget = ClickTarget.ROW,
) -> Optional[ClickEvent]:
    """Build a click for a left-button *event*; other buttons yield ``None``."""

    if event.button() != Qt.MouseButton.LeftButton:
        return None
    return click_from_modifiers(item_id, event.modifiers(), target)


class QtInteractionRouter(QObject):
    """Forward view clicks to an :class:`InteractionBinding`.

    Slots read the application's live keyboard modifiers when no explicit
    modifiers are passed, mirroring a held-shift tracker on the view.
    """

    interactionHandled = Signal(object, str)

    def __init__(self, binding: InteractionBinding, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._binding = binding
        self._logger = logging.getLogger(__name__)

    @Slot(object)
    def rowClicked(self, item_id: Hashable) -> None:
        self.route(item_id, ClickTarget.ROW)

    @Slot(object)
    def contextClicked(self, item_id: Hashable) -> None:
        self.route(item_id, ClickTarget.CONTEXT)

    def route(
        self,
        item_id: Hashable,
        target: ClickTarget,
        modifiers: Optional[Qt.KeyboardModifier] = None,
    ) -> ClickResult:
        if modifiers is None:
            modifiers = QGuiApplication.keyboardModifiers()
        result = self._binding.handle(click_from_modifiers(item_id, modifiers, target))
        self._logger.debug("%s click on %r -> %s", target.value, item_id, result.value)
        self.interactionHandled.emit(item_id, result.value)
        return result


__all__ = [
    "QtInteractionRouter",
    "click_from_modifiers",
    "click_from_mouse_event",
    "shift_from_modifiers",
]
