from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Hashable, Optional


@dataclass
class AssetItem:
    """One row of the browsable asset list.

    ``asset`` is the external asset record and is never inspected here.
    While ``updating`` is true the row is non-interactive.
    """

    id: Hashable
    asset: Any = None
    picked: bool = False
    updating: bool = False
    error: Optional[str] = None

    def snapshot(self) -> AssetItem:
        return replace(self)

    @classmethod
    def from_asset(cls, asset: Any, *, id_key: str = "_id") -> AssetItem:
        """Build an item from a mapping keyed by ``id_key`` or an object with ``id``."""
        if isinstance(asset, dict):
            return cls(id=asset[id_key], asset=asset)
        return cls(id=getattr(asset, "id"), asset=asset)
