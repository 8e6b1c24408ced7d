"""Tests for SelectionEngine — pick, unpick and shift-range semantics."""

import pytest

from assetpicker.domain.models.asset import AssetItem
from assetpicker.models.asset_store import AssetItemStore
from assetpicker.models.selection import RangePolicy, SelectionEngine


def _engine(ids="ABCDE", policy=RangePolicy.ADDITIVE):
    store = AssetItemStore([AssetItem(id=i) for i in ids])
    return SelectionEngine(store, policy), store


class TestPick:
    def test_pick_sets_anchor(self):
        engine, store = _engine()

        engine.pick("C", True)

        assert store.picked_ids() == ["C"]
        assert engine.last_picked == "C"

    @pytest.mark.parametrize("item_id", list("ABCDE"))
    def test_unpick_never_moves_anchor(self, item_id):
        engine, store = _engine()

        engine.pick(item_id, True)
        engine.pick(item_id, False)

        assert store.get(item_id).picked is False
        assert engine.last_picked == item_id

    def test_unpick_other_item_keeps_previous_anchor(self):
        engine, _ = _engine()
        engine.pick("A", True)
        engine.pick("D", True)

        engine.pick("A", False)

        assert engine.last_picked == "D"

    def test_pick_unknown_id_is_noop(self):
        engine, store = _engine()

        assert engine.pick("Z", True) is False
        assert engine.last_picked is None
        assert store.picked_ids() == []

    def test_pick_emits_selection_changed(self):
        engine, _ = _engine()
        received = []
        engine.selection_changed.connect(lambda ids, anchor: received.append((ids, anchor)))

        engine.pick("B", True)
        engine.pick("B", True)  # no change

        assert received == [(("B",), "B")]


class TestPickRange:
    def test_range_is_direction_independent(self):
        forward, forward_store = _engine()
        backward, backward_store = _engine()

        forward.pick_range("B", "D")
        backward.pick_range("D", "B")

        assert forward_store.picked_ids() == backward_store.picked_ids() == ["B", "C", "D"]

    def test_range_does_not_move_anchor(self):
        engine, _ = _engine()
        engine.pick("C", True)

        engine.pick_range("C", "E")

        assert engine.last_picked == "C"

    def test_same_endpoints_is_single_pick(self):
        ranged, ranged_store = _engine()
        single, single_store = _engine()

        ranged.pick_range("B", "B")
        single.pick("B", True)

        assert ranged_store.picked_ids() == single_store.picked_ids() == ["B"]
        assert ranged.last_picked == single.last_picked == "B"

    def test_no_anchor_picks_only_target(self):
        engine, store = _engine()

        result = engine.pick_range(None, "D")

        assert result == ["D"]
        assert store.picked_ids() == ["D"]

    def test_missing_start_falls_back_to_last_picked(self):
        engine, store = _engine()
        engine.pick("B", True)

        engine.pick_range(None, "D")

        assert store.picked_ids() == ["B", "C", "D"]

    @pytest.mark.parametrize("start, end", [("Z", "B"), ("B", "Z")])
    def test_unknown_endpoint_is_noop(self, start, end):
        engine, store = _engine()

        assert engine.pick_range(start, end) == []
        assert store.picked_ids() == []

    def test_additive_scenario_keeps_picks_outside_range(self):
        engine, store = _engine()

        engine.pick("C", True)
        assert store.picked_ids() == ["C"]

        engine.pick_range("C", "A")
        assert store.picked_ids() == ["A", "B", "C"]

        engine.pick_range("C", "E")
        assert store.picked_ids() == ["A", "B", "C", "D", "E"]
        assert engine.last_picked == "C"

    def test_updating_rows_inside_range_are_picked(self):
        engine, store = _engine()
        store.set_updating("C", True)

        engine.pick("A", True)
        engine.pick_range("A", "E")

        assert store.picked_ids() == ["A", "B", "C", "D", "E"]
        assert store.get("C").updating is True

    def test_replace_policy_drops_picks_outside_range(self):
        engine, store = _engine(policy=RangePolicy.REPLACE)

        engine.pick("C", True)
        engine.pick_range("C", "A")
        engine.pick_range("C", "E")

        assert store.picked_ids() == ["C", "D", "E"]

    def test_range_policy_can_be_switched(self):
        engine, _ = _engine()

        engine.range_policy = "replace"

        assert engine.range_policy is RangePolicy.REPLACE


class TestBulkSelection:
    def test_pick_all_skips_excluded_and_keeps_anchor(self):
        engine, store = _engine()
        engine.pick("B", True)

        engine.pick_all(exclude=["D"])

        assert store.picked_ids() == ["A", "B", "C", "E"]
        assert engine.last_picked == "B"

    def test_pick_clear_forgets_anchor(self):
        engine, store = _engine()
        engine.pick("B", True)
        engine.pick_range("B", "D")

        engine.pick_clear()

        assert store.picked_ids() == []
        assert engine.last_picked is None

    def test_forget_clears_anchor_of_removed_row(self):
        engine, store = _engine()
        engine.pick("B", True)
        store.remove_items(["B"])

        engine.forget(["B"])

        assert engine.last_picked is None

    def test_forget_keeps_anchor_of_surviving_row(self):
        engine, store = _engine()
        engine.pick("B", True)
        store.remove_items(["C"])

        engine.forget(["C"])

        assert engine.last_picked == "B"
