"""Tests for DialogStack — show/remove/close and the confirm cascade."""

from unittest.mock import Mock

import pytest

from assetpicker.domain.models.action import Action
from assetpicker.domain.models.dialog import (
    DialogDescriptor,
    DialogKind,
    asset_edit_dialog,
    confirm_delete_assets_dialog,
)
from assetpicker.errors import DialogNotFoundError
from assetpicker.models.dialog_stack import DialogStack

X = Action("assets/deleteRequest", {"asset_ids": ["A"]})


def _confirm(**kwargs):
    defaults = dict(id="confirm", close_dialog_id="edit", confirm_callback_action=X)
    defaults.update(kwargs)
    return DialogDescriptor(**defaults)


class TestShowAndRemove:
    def test_show_appends_on_top(self):
        stack = DialogStack()

        stack.show(asset_edit_dialog("A"))
        stack.show(_confirm())

        assert [d.id for d in stack.dialogs()] == ["A", "confirm"]
        assert stack.top().id == "confirm"

    def test_reshow_updates_in_place(self):
        stack = DialogStack()
        stack.show(_confirm(title="first"))
        stack.show(asset_edit_dialog("A"))

        stack.show(_confirm(title="second"))

        assert [d.id for d in stack.dialogs()] == ["confirm", "A"]
        assert stack.get("confirm").title == "second"
        assert len(stack) == 2

    def test_remove_absent_is_noop(self):
        stack = DialogStack()

        assert stack.remove("nope") is False
        assert stack.remove(None) is False

    def test_get_absent_raises(self):
        with pytest.raises(DialogNotFoundError):
            DialogStack().get("nope")

    def test_close_does_not_cascade_or_dispatch(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(asset_edit_dialog("edit"))
        stack.show(_confirm())

        stack.close("confirm")

        assert "edit" in stack
        assert "confirm" not in stack
        sink.assert_not_called()

    def test_signals_report_changes(self):
        stack = DialogStack()
        shown, removed = [], []
        stack.shown.connect(lambda d, replaced: shown.append((d.id, replaced)))
        stack.removed.connect(lambda dialog_id, cascade: removed.append((dialog_id, cascade)))

        stack.show(_confirm())
        stack.show(_confirm())
        stack.remove("confirm")

        assert shown == [("confirm", False), ("confirm", True)]
        assert removed == [("confirm", None)]

    def test_clear_removes_everything(self):
        stack = DialogStack()
        stack.show(asset_edit_dialog("A"))
        stack.show(_confirm())

        stack.clear()

        assert stack.dialogs() == []


class TestConfirm:
    def test_cascade_closes_target_dispatches_and_self_closes(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(_confirm())
        stack.show(DialogDescriptor(id="edit", kind=DialogKind.ASSET_EDIT))

        assert stack.confirm("confirm") is True

        assert stack.dialogs() == []
        sink.assert_called_once_with(X)

    def test_cascade_order(self):
        stack = DialogStack()
        calls = []
        stack.set_action_sink(lambda action: calls.append(("dispatch", "edit" in stack, "confirm" in stack)))
        stack.removed.connect(lambda dialog_id, cascade: calls.append(("removed", dialog_id, cascade)))
        stack.show(DialogDescriptor(id="edit", kind=DialogKind.ASSET_EDIT))
        stack.show(_confirm())

        stack.confirm("confirm")

        assert calls == [
            ("removed", "edit", "confirm"),
            ("dispatch", False, True),
            ("removed", "confirm", None),
        ]

    def test_confirm_twice_equals_once(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(DialogDescriptor(id="edit", kind=DialogKind.ASSET_EDIT))
        stack.show(_confirm())

        stack.confirm("confirm")
        assert stack.confirm("confirm") is False

        assert stack.dialogs() == []
        sink.assert_called_once_with(X)

    def test_confirm_when_target_already_gone(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(_confirm())

        stack.confirm("confirm")

        assert stack.dialogs() == []
        sink.assert_called_once_with(X)

    def test_confirm_without_follow_up(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(_confirm(close_dialog_id=None, confirm_callback_action=None))

        stack.confirm("confirm")

        assert stack.dialogs() == []
        sink.assert_not_called()

    def test_confirm_without_sink_still_closes(self):
        stack = DialogStack()
        stack.show(_confirm())

        stack.confirm("confirm")

        assert stack.dialogs() == []

    def test_failing_sink_still_self_closes(self):
        stack = DialogStack(Mock(side_effect=RuntimeError("boom")))
        stack.show(_confirm())

        with pytest.raises(RuntimeError):
            stack.confirm("confirm")

        assert "confirm" not in stack

    def test_non_confirm_dialog_just_closes(self):
        sink = Mock()
        stack = DialogStack(sink)
        stack.show(DialogDescriptor(
            id="edit", kind=DialogKind.ASSET_EDIT, close_dialog_id="other", confirm_callback_action=X,
        ))
        stack.show(asset_edit_dialog("other"))

        stack.confirm("edit")

        assert [d.id for d in stack.dialogs()] == ["other"]
        sink.assert_not_called()


class TestDialogFactories:
    def test_asset_edit_dialog_is_keyed_by_asset(self):
        descriptor = asset_edit_dialog("image-1")

        assert descriptor.id == "image-1"
        assert descriptor.kind is DialogKind.ASSET_EDIT
        assert descriptor.payload == {"asset_id": "image-1"}

    def test_confirm_delete_dialog(self):
        descriptor = confirm_delete_assets_dialog(["A", "B"], close_dialog_id="A")

        assert descriptor.is_confirm
        assert descriptor.close_dialog_id == "A"
        assert descriptor.tone == "critical"
        assert descriptor.title == "Permanently delete 2 assets?"
        assert descriptor.confirm_callback_action == Action("assets/deleteRequest", {"asset_ids": ["A", "B"]})

    def test_confirm_delete_dialog_singular(self):
        assert confirm_delete_assets_dialog(["A"]).title == "Permanently delete 1 asset?"
