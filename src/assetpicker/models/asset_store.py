"""Ordered store of :class:`AssetItem` rows."""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Optional

from assetpicker.domain.models.asset import AssetItem
from assetpicker.errors import AssetNotFoundError

_logger = logging.getLogger(__name__)


class AssetItemStore:
    """Hold the externally supplied asset rows in their display order.

    Rows are kept in a list with an ``id`` → index lookup. The store only
    performs single-item flag transitions; ordering is owned by the data
    source and only changes through :meth:`set_items`, :meth:`append_items`
    and :meth:`remove_items`.
    """

    def __init__(self, items: Optional[Iterable[AssetItem]] = None) -> None:
        self._rows: List[AssetItem] = []
        self._row_lookup: Dict[Hashable, int] = {}
        if items is not None:
            self.set_items(items)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, item_id: object) -> bool:
        try:
            return item_id in self._row_lookup
        except TypeError:
            return False

    def get(self, item_id: Hashable) -> AssetItem:
        """Return a snapshot of the item, raising :class:`AssetNotFoundError`."""

        return self._row(item_id).snapshot()

    def find(self, item_id: Hashable) -> Optional[AssetItem]:
        """Return a snapshot of the item or ``None`` when absent."""

        if item_id not in self:
            return None
        return self._rows[self._row_lookup[item_id]].snapshot()

    def items(self) -> List[AssetItem]:
        return [row.snapshot() for row in self._rows]

    def ids(self) -> List[Hashable]:
        return [row.id for row in self._rows]

    def index_of(self, item_id: Hashable) -> Optional[int]:
        if item_id not in self:
            return None
        return self._row_lookup[item_id]

    def ids_between(self, first: int, last: int) -> List[Hashable]:
        """Return the ids from row *first* to row *last* inclusive, in either order."""

        lo, hi = sorted((first, last))
        return [row.id for row in self._rows[lo : hi + 1]]

    def picked_ids(self) -> List[Hashable]:
        return [row.id for row in self._rows if row.picked]

    def picked_items(self) -> List[AssetItem]:
        return [row.snapshot() for row in self._rows if row.picked]

    # ------------------------------------------------------------------
    # Single-item transitions
    # ------------------------------------------------------------------
    def set_picked(self, item_id: Hashable, picked: bool) -> bool:
        """Set the ``picked`` flag; return ``True`` when the value changed."""

        row = self._row(item_id)
        changed = row.picked != bool(picked)
        row.picked = bool(picked)
        return changed

    def set_updating(self, item_id: Hashable, updating: bool) -> bool:
        row = self._row(item_id)
        changed = row.updating != bool(updating)
        row.updating = bool(updating)
        return changed

    def set_error(self, item_id: Hashable, marker: Optional[str]) -> bool:
        row = self._row(item_id)
        changed = row.error != marker
        row.error = marker
        return changed

    # ------------------------------------------------------------------
    # List replacement
    # ------------------------------------------------------------------
    def set_items(self, items: Iterable[AssetItem]) -> List[Hashable]:
        """Replace the rows with *items* and return the ids that disappeared.

        Rows whose id survives the refresh keep their ``picked``,
        ``updating`` and ``error`` state; the incoming ``asset`` payload
        wins. Duplicate ids keep their first position.
        """

        previous = {row.id: row for row in self._rows}
        rows: List[AssetItem] = []
        lookup: Dict[Hashable, int] = {}
        for item in items:
            if item.id in lookup:
                _logger.warning("Ignoring duplicate asset id %r", item.id)
                continue
            row = item.snapshot()
            old = previous.get(item.id)
            if old is not None:
                row.picked = old.picked
                row.updating = old.updating
                row.error = old.error
            lookup[row.id] = len(rows)
            rows.append(row)
        dropped = [item_id for item_id in previous if item_id not in lookup]
        self._rows = rows
        self._row_lookup = lookup
        return dropped

    def append_items(self, items: Iterable[AssetItem]) -> List[Hashable]:
        """Append *items* after the existing rows; return the ids actually added."""

        added: List[Hashable] = []
        for item in items:
            if item.id in self._row_lookup:
                _logger.debug("Asset %r already listed; skipping append", item.id)
                continue
            self._row_lookup[item.id] = len(self._rows)
            self._rows.append(item.snapshot())
            added.append(item.id)
        return added

    def remove_items(self, item_ids: Iterable[Hashable]) -> List[Hashable]:
        """Drop the given ids; unknown ids are ignored. Return the removed ids."""

        doomed = {item_id for item_id in item_ids if item_id in self}
        if not doomed:
            return []
        removed = [row.id for row in self._rows if row.id in doomed]
        self._rows = [row for row in self._rows if row.id not in doomed]
        self._rebuild_lookup()
        return removed

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _row(self, item_id: Hashable) -> AssetItem:
        if item_id not in self:
            raise AssetNotFoundError(item_id)
        return self._rows[self._row_lookup[item_id]]

    def _rebuild_lookup(self) -> None:
        self._row_lookup = {row.id: index for index, row in enumerate(self._rows)}


__all__ = ["AssetItemStore"]
