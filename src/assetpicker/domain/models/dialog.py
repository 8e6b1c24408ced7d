"""Dialog descriptors held by :class:`assetpicker.models.dialog_stack.DialogStack`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Iterable, Optional

from assetpicker.config import (
    ACTION_DELETE_REQUEST,
    CONFIRM_DELETE_DESCRIPTION,
    CONFIRM_DELETE_HEADER,
    CONFIRM_DELETE_TEXT,
    CONFIRM_DELETE_TONE,
    CONFIRM_DIALOG_ID,
)

from .action import Action


class DialogKind(str, Enum):
    CONFIRM = "confirm"
    ASSET_EDIT = "assetEdit"
    SEARCH_FACETS = "searchFacets"
    TAG_CREATE = "tagCreate"


@dataclass(frozen=True)
class DialogDescriptor:
    """An open dialog.

    Presentation fields are carried for the rendering layer only.
    ``close_dialog_id`` and ``confirm_callback_action`` drive the confirm
    cascade and are only honoured for :attr:`DialogKind.CONFIRM`.
    """

    id: str
    kind: DialogKind = DialogKind.CONFIRM
    close_dialog_id: Optional[str] = None
    confirm_callback_action: Any = None
    header_title: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    confirm_text: Optional[str] = None
    tone: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def is_confirm(self) -> bool:
        return self.kind is DialogKind.CONFIRM


def asset_edit_dialog(asset_id: Hashable) -> DialogDescriptor:
    """Descriptor for the edit dialog of one asset; the id is the asset id."""
    return DialogDescriptor(
        id=str(asset_id),
        kind=DialogKind.ASSET_EDIT,
        payload={"asset_id": asset_id},
    )


def confirm_delete_assets_dialog(
    asset_ids: Iterable[Hashable],
    *,
    close_dialog_id: Optional[str] = None,
    dialog_id: str = CONFIRM_DIALOG_ID,
) -> DialogDescriptor:
    ids = list(asset_ids)
    noun = "asset" if len(ids) == 1 else "assets"
    return DialogDescriptor(
        id=dialog_id,
        kind=DialogKind.CONFIRM,
        close_dialog_id=close_dialog_id,
        confirm_callback_action=Action(ACTION_DELETE_REQUEST, {"asset_ids": ids}),
        header_title=CONFIRM_DELETE_HEADER,
        title=f"Permanently delete {len(ids)} {noun}?",
        description=CONFIRM_DELETE_DESCRIPTION,
        confirm_text=CONFIRM_DELETE_TEXT,
        tone=CONFIRM_DELETE_TONE,
    )
