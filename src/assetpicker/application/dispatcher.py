"""Default action sink: route follow-up actions to handlers by type."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from assetpicker.config import (
    ACTION_DIALOG_REMOVE,
    ACTION_PICK,
    ACTION_PICK_CLEAR,
    ACTION_PICK_RANGE,
    ACTION_SHOW_ASSET_EDIT,
)
from assetpicker.domain.models.action import Action, ActionSink
from assetpicker.domain.models.dialog import asset_edit_dialog
from assetpicker.errors import ActionRoutingError
from assetpicker.models.state import PickerState

ActionHandler = Callable[[Action], Any]


class ActionDispatcher:
    """Hand opaque follow-up actions to whoever understands them.

    Instances are callable so they can be attached directly as the state's
    action sink. :class:`Action` values whose ``type`` has a registered
    handler are routed to it; anything else goes to ``fallback`` or is
    logged and dropped.
    """

    def __init__(self, state: PickerState, fallback: Optional[ActionSink] = None) -> None:
        self._state = state
        self._fallback = fallback
        self._handlers: Dict[str, ActionHandler] = {}
        self._logger = logging.getLogger(__name__)
        self._register_defaults()

    def register(self, action_type: str, handler: ActionHandler, *, replace: bool = False) -> None:
        if action_type in self._handlers and not replace:
            raise ActionRoutingError(f"Handler already registered for {action_type!r}")
        self._handlers[action_type] = handler

    def unregister(self, action_type: str) -> None:
        self._handlers.pop(action_type, None)

    def handles(self, action_type: str) -> bool:
        return action_type in self._handlers

    def __call__(self, action: Any) -> Any:
        return self.dispatch(action)

    def dispatch(self, action: Any) -> Any:
        handler = self._handlers.get(action.type) if isinstance(action, Action) else None
        if handler is not None:
            self._logger.debug("Routing %s", action.type)
            return handler(action)
        if self._fallback is not None:
            return self._fallback(action)
        self._logger.warning("No route for action %r; dropped", action)
        return None

    # ------------------------------------------------------------------
    # Built-in routes
    # ------------------------------------------------------------------
    def _register_defaults(self) -> None:
        self.register(ACTION_PICK, self._on_pick)
        self.register(ACTION_PICK_RANGE, self._on_pick_range)
        self.register(ACTION_PICK_CLEAR, lambda action: self._state.pick_clear())
        self.register(ACTION_DIALOG_REMOVE, self._on_dialog_remove)
        self.register(ACTION_SHOW_ASSET_EDIT, self._on_show_asset_edit)

    def _on_pick(self, action: Action) -> bool:
        return self._state.pick(action.payload["asset_id"], bool(action.payload.get("picked", True)))

    def _on_pick_range(self, action: Action):
        return self._state.pick_range(action.payload.get("start_id"), action.payload["end_id"])

    def _on_dialog_remove(self, action: Action) -> bool:
        return self._state.remove(action.payload["id"])

    def _on_show_asset_edit(self, action: Action) -> None:
        self._state.show(asset_edit_dialog(action.payload["asset_id"]))


__all__ = ["ActionDispatcher", "ActionHandler"]
