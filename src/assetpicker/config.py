"""Default configuration values for assetpicker."""

from __future__ import annotations

from typing import Final

# Marker surfaced on an item when a delete is refused because other
# documents still reference the asset.
ERROR_HAS_REFERENCES: Final[str] = "has references"

# Kind reported to the host's selection consumer in document context.
SELECTED_ASSET_KIND: Final[str] = "assetDocumentId"

# ---------------------------------------------------------------------------
# Dialog defaults
# ---------------------------------------------------------------------------

CONFIRM_DIALOG_ID: Final[str] = "confirm"
CONFIRM_DELETE_HEADER: Final[str] = "Confirm delete"
CONFIRM_DELETE_TEXT: Final[str] = "Yes, delete"
CONFIRM_DELETE_TONE: Final[str] = "critical"
CONFIRM_DELETE_DESCRIPTION: Final[str] = "This operation cannot be reversed."

# ---------------------------------------------------------------------------
# Action types understood by the default dispatcher
# ---------------------------------------------------------------------------

ACTION_PICK: Final[str] = "assets/pick"
ACTION_PICK_RANGE: Final[str] = "assets/pickRange"
ACTION_PICK_CLEAR: Final[str] = "assets/pickClear"
ACTION_DELETE_REQUEST: Final[str] = "assets/deleteRequest"
ACTION_DIALOG_REMOVE: Final[str] = "dialog/remove"
ACTION_SHOW_ASSET_EDIT: Final[str] = "dialog/showAssetEdit"

# Number of worker threads used to run external asset mutations.
MUTATION_MAX_WORKERS: Final[int] = 4
