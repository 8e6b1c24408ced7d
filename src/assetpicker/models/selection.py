"""Pick, unpick and shift-range selection over an :class:`AssetItemStore`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Hashable, Iterable, List, Optional

from assetpicker.events.signal import Signal

from .asset_store import AssetItemStore


class RangePolicy(str, Enum):
    """How :meth:`SelectionEngine.pick_range` treats picks outside the range."""

    ADDITIVE = "additive"
    REPLACE = "replace"


class SelectionEngine:
    """Selection transitions and the shift-click anchor.

    The anchor (``last_picked``) moves only when a single item is picked.
    Unpicking an item and extending a range both leave it where it is, so
    consecutive shift-clicks keep growing from the same origin.

    Callers are expected to have filtered out rows whose ``updating`` flag
    is set; the engine itself does not look at it.
    """

    def __init__(
        self,
        store: AssetItemStore,
        range_policy: RangePolicy = RangePolicy.ADDITIVE,
    ) -> None:
        self._store = store
        self._range_policy = RangePolicy(range_policy)
        self._last_picked: Optional[Hashable] = None
        self._logger = logging.getLogger(__name__)

        # emits (picked_ids, last_picked) after every effective change
        self.selection_changed = Signal("selection_changed")

    @property
    def last_picked(self) -> Optional[Hashable]:
        return self._last_picked

    @property
    def range_policy(self) -> RangePolicy:
        return self._range_policy

    @range_policy.setter
    def range_policy(self, policy: RangePolicy) -> None:
        self._range_policy = RangePolicy(policy)

    def picked_ids(self) -> List[Hashable]:
        return self._store.picked_ids()

    def pick(self, item_id: Hashable, picked: bool) -> bool:
        """Set the picked flag of *item_id*; picking also moves the anchor.

        Unknown ids are ignored. Returns ``True`` when anything changed.
        """

        if item_id not in self._store:
            self._logger.debug("pick(%r) ignored: not in store", item_id)
            return False
        changed = self._store.set_picked(item_id, picked)
        if picked and self._last_picked != item_id:
            self._last_picked = item_id
            changed = True
        if changed:
            self._notify()
        return changed

    def pick_range(self, start_id: Optional[Hashable], end_id: Hashable) -> List[Hashable]:
        """Pick every row between the anchor and *end_id*, inclusive.

        The anchor is *start_id*, else the current ``last_picked``, else
        *end_id* itself. Direction does not matter. ``last_picked`` is left
        untouched unless the range collapses to one item, in which case this
        is exactly ``pick(end_id, True)``. Returns the ids in the range, or
        an empty list when either end is unknown.
        """

        anchor = start_id
        if anchor is None:
            anchor = self._last_picked if self._last_picked is not None else end_id

        if anchor == end_id:
            if end_id not in self._store:
                return []
            self.pick(end_id, True)
            return [end_id]

        first = self._store.index_of(anchor)
        last = self._store.index_of(end_id)
        if first is None or last is None:
            self._logger.debug("pick_range(%r, %r) ignored: endpoint not in store", anchor, end_id)
            return []

        in_range = self._store.ids_between(first, last)
        changed = False
        for item_id in in_range:
            changed |= self._store.set_picked(item_id, True)

        if self._range_policy is RangePolicy.REPLACE:
            keep = set(in_range)
            for item_id in self._store.picked_ids():
                if item_id not in keep:
                    changed |= self._store.set_picked(item_id, False)

        if changed:
            self._notify()
        return in_range

    def pick_all(self, exclude: Iterable[Hashable] = ()) -> List[Hashable]:
        """Pick every row except *exclude*; the anchor does not move."""

        skip = set(exclude)
        changed = False
        for item_id in self._store.ids():
            if item_id not in skip:
                changed |= self._store.set_picked(item_id, True)
        if changed:
            self._notify()
        return self._store.picked_ids()

    def pick_clear(self) -> None:
        """Unpick every row and forget the anchor."""

        changed = self._last_picked is not None
        for item_id in self._store.picked_ids():
            changed |= self._store.set_picked(item_id, False)
        self._last_picked = None
        if changed:
            self._notify()

    def forget(self, removed_ids: Iterable[Hashable]) -> None:
        """Drop the anchor if it belonged to rows that left the store."""

        if self._last_picked is None:
            return
        if self._last_picked in set(removed_ids) or self._last_picked not in self._store:
            self._logger.debug("Anchor %r left the store; clearing", self._last_picked)
            self._last_picked = None
            self._notify()

    def _notify(self) -> None:
        self.selection_changed.emit(tuple(self._store.picked_ids()), self._last_picked)


__all__ = ["RangePolicy", "SelectionEngine"]
