"""Custom exception hierarchy for assetpicker."""

from __future__ import annotations

from assetpicker.config import ERROR_HAS_REFERENCES


class AssetPickerError(Exception):
    """Base class for all custom errors raised by assetpicker."""


# --- 2-layer hierarchy ---

class DomainError(AssetPickerError):
    """Base class for domain-level errors."""


class ApplicationError(AssetPickerError):
    """Base class for application-level errors."""


# --- Domain errors ---

class NotFoundError(DomainError):
    """Raised when an operation references an id absent from its collection."""

    def __init__(self, identifier: object, message: str | None = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"{identifier!r} not found")


class AssetNotFoundError(NotFoundError):
    """Raised when the requested asset item is not in the store."""

    def __init__(self, asset_id: object) -> None:
        super().__init__(asset_id, f"Asset {asset_id!r} not found")


class DialogNotFoundError(NotFoundError):
    """Raised when the requested dialog is not open."""

    def __init__(self, dialog_id: object) -> None:
        super().__init__(dialog_id, f"Dialog {dialog_id!r} is not open")


# --- Application errors ---

class ActionRoutingError(ApplicationError):
    """Raised when an action handler is registered twice for the same type."""


class AssetMutationError(ApplicationError):
    """Raised by external mutation callables when an asset operation is blocked."""

    def __init__(self, asset_id: object, marker: str = ERROR_HAS_REFERENCES) -> None:
        self.asset_id = asset_id
        self.marker = marker
        super().__init__(f"{asset_id!r}: {marker}")


# --- DI-specific errors ---

class CircularDependencyError(AssetPickerError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(AssetPickerError):
    """Raised when a dependency cannot be resolved."""


# --- Settings errors ---

class SettingsError(AssetPickerError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
