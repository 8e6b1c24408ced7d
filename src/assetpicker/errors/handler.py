"""Central error reporting: log, publish on the bus, notify the UI."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Hashable, Optional

from assetpicker.events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    # Row the failure belongs to, when it came from an asset mutation.
    asset_id: Optional[Hashable] = None
    context: dict = field(default_factory=dict)


UiCallback = Callable[[str, ErrorSeverity], None]


class ErrorHandler:
    """Report failures that must not unwind into the picker state.

    Worker-thread failures (external mutations, async bus handlers) end up
    here: they are logged, republished as :class:`ErrorOccurredEvent` and,
    for ERROR and above, surfaced through the registered UI callback.
    """

    def __init__(self, event_bus: EventBus, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._events = event_bus
        self._ui_callback: Optional[UiCallback] = None

    def register_ui_callback(self, callback: Optional[UiCallback]) -> None:
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[dict] = None,
        *,
        asset_id: Optional[Hashable] = None,
    ) -> ErrorOccurredEvent:
        context = dict(context or {})
        if asset_id is None:
            asset_id = context.get("asset_id")
        elif "asset_id" not in context:
            context["asset_id"] = asset_id

        log_method = getattr(self._logger, severity.value, self._logger.error)
        if asset_id is not None:
            log_method(
                "%s on asset %r: %s", error.__class__.__name__, asset_id, error,
                extra={"error_context": context},
            )
        else:
            log_method("%s: %s", error.__class__.__name__, error, extra={"error_context": context})

        event = ErrorOccurredEvent(error=error, severity=severity, asset_id=asset_id, context=context)
        self._events.publish(event)

        if self._ui_callback and severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            message = str(error) if asset_id is None else f"{asset_id}: {error}"
            self._ui_callback(message, severity)
        return event
