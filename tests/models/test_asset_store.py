"""Tests for AssetItemStore — ordered rows and single-item transitions."""

import pytest

from assetpicker.domain.models.asset import AssetItem
from assetpicker.errors import AssetNotFoundError, NotFoundError
from assetpicker.models.asset_store import AssetItemStore


def _store(*ids):
    return AssetItemStore([AssetItem(id=i) for i in ids])


class TestAssetItemStore:
    def test_preserves_supplied_order(self):
        store = _store("c", "a", "b")

        assert store.ids() == ["c", "a", "b"]
        assert store.index_of("a") == 1
        assert len(store) == 3

    def test_get_missing_raises_not_found(self):
        store = _store("a")

        with pytest.raises(AssetNotFoundError) as excinfo:
            store.get("zzz")

        assert isinstance(excinfo.value, NotFoundError)
        assert excinfo.value.identifier == "zzz"

    def test_find_missing_returns_none(self):
        assert _store("a").find("zzz") is None

    def test_get_returns_snapshot(self):
        store = _store("a")

        snapshot = store.get("a")
        snapshot.picked = True

        assert store.get("a").picked is False

    @pytest.mark.parametrize("setter, value", [
        ("set_picked", True),
        ("set_updating", True),
        ("set_error", "has references"),
    ])
    def test_setters_raise_for_missing_id(self, setter, value):
        store = _store("a")

        with pytest.raises(AssetNotFoundError):
            getattr(store, setter)("missing", value)

    def test_setters_touch_only_one_item(self):
        store = _store("a", "b")

        store.set_picked("a", True)
        store.set_updating("a", True)
        store.set_error("a", "has references")

        a, b = store.items()
        assert (a.picked, a.updating, a.error) == (True, True, "has references")
        assert (b.picked, b.updating, b.error) == (False, False, None)

    def test_setters_report_change(self):
        store = _store("a")

        assert store.set_picked("a", True) is True
        assert store.set_picked("a", True) is False
        assert store.set_error("a", None) is False

    def test_error_cleared_only_explicitly(self):
        store = _store("a")
        store.set_error("a", "has references")
        store.set_updating("a", True)
        store.set_updating("a", False)

        assert store.get("a").error == "has references"

        store.set_error("a", None)
        assert store.get("a").error is None

    def test_ids_between_is_direction_agnostic(self):
        store = _store("a", "b", "c", "d")

        assert store.ids_between(1, 3) == ["b", "c", "d"]
        assert store.ids_between(3, 1) == ["b", "c", "d"]

    def test_set_items_keeps_state_of_surviving_rows(self):
        store = _store("a", "b", "c")
        store.set_picked("b", True)
        store.set_error("c", "has references")

        dropped = store.set_items([AssetItem(id="c"), AssetItem(id="b"), AssetItem(id="d")])

        assert dropped == ["a"]
        assert store.ids() == ["c", "b", "d"]
        assert store.get("b").picked is True
        assert store.get("c").error == "has references"
        assert store.get("d").picked is False

    def test_set_items_ignores_duplicates(self):
        store = AssetItemStore()

        store.set_items([AssetItem(id="a"), AssetItem(id="b"), AssetItem(id="a")])

        assert store.ids() == ["a", "b"]

    def test_append_items_skips_known_ids(self):
        store = _store("a")

        added = store.append_items([AssetItem(id="a"), AssetItem(id="b")])

        assert added == ["b"]
        assert store.ids() == ["a", "b"]
        assert store.index_of("b") == 1

    def test_remove_items_rebuilds_lookup(self):
        store = _store("a", "b", "c")

        removed = store.remove_items(["a", "zzz"])

        assert removed == ["a"]
        assert store.index_of("c") == 1
        assert "a" not in store

    def test_picked_accessors(self):
        store = _store("a", "b", "c")
        store.set_picked("c", True)
        store.set_picked("a", True)

        assert store.picked_ids() == ["a", "c"]
        assert [item.id for item in store.picked_items()] == ["a", "c"]

    def test_contains_handles_unhashable(self):
        assert ["a"] not in _store("a")


class TestAssetItem:
    def test_from_mapping_uses_document_id(self):
        item = AssetItem.from_asset({"_id": "image-1", "size": 10})

        assert item.id == "image-1"
        assert item.asset == {"_id": "image-1", "size": 10}

    def test_from_object_uses_id_attribute(self):
        class _Asset:
            id = "file-1"

        assert AssetItem.from_asset(_Asset()).id == "file-1"
