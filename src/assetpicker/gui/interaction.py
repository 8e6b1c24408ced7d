"""Translate row clicks into selection changes or dialog openings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Collection, Dict, Hashable, List, Optional

from assetpicker.config import SELECTED_ASSET_KIND
from assetpicker.domain.models.asset import AssetItem
from assetpicker.domain.models.dialog import asset_edit_dialog
from assetpicker.models.state import PickerState

SelectionConsumer = Callable[[List[Dict[str, Any]]], None]


class ClickTarget(str, Enum):
    ROW = "row"
    CONTEXT = "context"


class ClickResult(str, Enum):
    IGNORED = "ignored"
    SELECTED_DOCUMENT = "selected_document"
    PICKED = "picked"
    UNPICKED = "unpicked"
    RANGE_PICKED = "range_picked"
    EDIT_OPENED = "edit_opened"


@dataclass(frozen=True)
class ClickEvent:
    item_id: Hashable
    shift_held: bool = False
    target: ClickTarget = ClickTarget.ROW


class InteractionBinding:
    """Decide what a click on an asset row means.

    In document context (the browser embedded to choose one asset for a
    host document) a row click reports the asset to ``on_select`` and the
    context affordance opens the edit dialog. In browse mode the row body
    opens the edit dialog unless the row is picked or shift is held, and
    the context affordance (the checkbox) toggles the pick.

    Rows that are ``updating`` or no longer listed ignore every click.
    """

    def __init__(
        self,
        state: PickerState,
        *,
        document_context: bool = False,
        on_select: Optional[SelectionConsumer] = None,
        selected_ids: Collection[Hashable] = (),
    ) -> None:
        self._state = state
        self.document_context = document_context
        self.on_select = on_select
        self.selected_ids = frozenset(selected_ids)
        self._logger = logging.getLogger(__name__)

    def handle(self, event: ClickEvent) -> ClickResult:
        if event.target is ClickTarget.CONTEXT:
            return self.context_click(event.item_id, shift_held=event.shift_held)
        return self.row_click(event.item_id, shift_held=event.shift_held)

    def row_click(self, item_id: Hashable, *, shift_held: bool = False) -> ClickResult:
        with self._state.lock:
            item = self._interactive(item_id)
            if item is None:
                return ClickResult.IGNORED

            if self.document_context:
                if item.id in self.selected_ids:
                    return ClickResult.IGNORED
                return self._report_selection(item)

            if shift_held:
                if item.picked:
                    return self._unpick(item)
                return self._range_to(item)

            if item.picked:
                return self._unpick(item)
            return self._open_edit(item)

    def context_click(self, item_id: Hashable, *, shift_held: bool = False) -> ClickResult:
        with self._state.lock:
            item = self._interactive(item_id)
            if item is None:
                return ClickResult.IGNORED

            if self.document_context:
                return self._open_edit(item)

            if shift_held and not item.picked:
                return self._range_to(item)
            if item.picked:
                return self._unpick(item)
            self._state.pick(item.id, True)
            return ClickResult.PICKED

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------
    def _interactive(self, item_id: Hashable) -> Optional[AssetItem]:
        item = self._state.find(item_id)
        if item is None:
            self._logger.debug("Click on unknown asset %r ignored", item_id)
            return None
        if item.updating:
            self._logger.debug("Click on updating asset %r ignored", item_id)
            return None
        return item

    def _report_selection(self, item: AssetItem) -> ClickResult:
        if self.on_select is None:
            self._logger.debug("No selection consumer; click on %r dropped", item.id)
            return ClickResult.IGNORED
        self.on_select([{"kind": SELECTED_ASSET_KIND, "value": item.id}])
        return ClickResult.SELECTED_DOCUMENT

    def _unpick(self, item: AssetItem) -> ClickResult:
        self._state.pick(item.id, False)
        return ClickResult.UNPICKED

    def _range_to(self, item: AssetItem) -> ClickResult:
        anchor = self._state.last_picked
        self._state.pick_range(anchor if anchor is not None else item.id, item.id)
        return ClickResult.RANGE_PICKED

    def _open_edit(self, item: AssetItem) -> ClickResult:
        self._state.show(asset_edit_dialog(item.id))
        return ClickResult.EDIT_OPENED


__all__ = ["ClickEvent", "ClickResult", "ClickTarget", "InteractionBinding", "SelectionConsumer"]
