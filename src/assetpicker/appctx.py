"""Session-wide context tying the picker services together."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Hashable, Iterable, Optional

from .application.dispatcher import ActionDispatcher
from .config import ACTION_DELETE_REQUEST, CONFIRM_DIALOG_ID
from .di.bootstrap import bootstrap
from .di.container import Container, Scope
from .domain.models.action import Action, ActionSink
from .domain.models.asset import AssetItem
from .domain.models.dialog import confirm_delete_assets_dialog
from .events.bus import EventBus
from .gui.interaction import InteractionBinding, SelectionConsumer
from .gui.viewmodels.picker_viewmodel import PickerViewModel
from .models.state import PickerState

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .settings.manager import SettingsManager

_logger = logging.getLogger(__name__)


def create_container(
    items: Iterable[AssetItem] = (),
    *,
    settings: Optional["SettingsManager"] = None,
    deleter: Optional[Callable[[Hashable], None]] = None,
    fallback_sink: Optional[ActionSink] = None,
    document_context: bool = False,
    on_select: Optional[SelectionConsumer] = None,
) -> Container:
    container = Container()
    bootstrap(
        container,
        items=items,
        settings=settings,
        deleter=deleter,
        fallback_sink=fallback_sink,
        document_context=document_context,
        on_select=on_select,
    )
    return container


@dataclass
class PickerSession:
    """Resolved services for one browsing session."""

    container: Container
    settings: Optional["SettingsManager"] = None
    state: PickerState = field(init=False)
    dispatcher: ActionDispatcher = field(init=False)
    binding: InteractionBinding = field(init=False)
    event_bus: EventBus = field(init=False)

    def __post_init__(self) -> None:
        self.event_bus = self.container.resolve(EventBus)
        self.state = self.container.resolve(PickerState)
        # Resolving the dispatcher attaches it as the state's action sink.
        self.dispatcher = self.container.resolve(ActionDispatcher)
        self.binding = self.container.resolve(InteractionBinding)

    @classmethod
    def create(cls, items: Iterable[AssetItem] = (), **kwargs) -> PickerSession:
        return cls(container=create_container(items, **kwargs), settings=kwargs.get("settings"))

    def open_view(self) -> Scope:
        """Start a view scope; its viewmodel lives until ``scope.dispose()``."""

        return self.container.create_scope()

    def create_viewmodel(self, scope: Optional[Scope] = None) -> PickerViewModel:
        if scope is not None:
            return scope.resolve(PickerViewModel)
        return self.container.resolve(PickerViewModel)

    def request_delete(self, asset_ids: Optional[Iterable[Hashable]] = None, *, close_dialog_id: Optional[str] = None):
        """Delete *asset_ids* (default: the picked ones), asking first when configured.

        Returns the confirm dialog id when a confirmation was opened,
        otherwise the dispatcher's result.
        """

        ids = list(asset_ids) if asset_ids is not None else self.state.picked_ids()
        if not ids:
            _logger.debug("request_delete called with nothing to delete")
            return None
        confirm = self.settings.confirm_delete() if self.settings is not None else True
        if confirm:
            self.state.show(confirm_delete_assets_dialog(ids, close_dialog_id=close_dialog_id))
            return CONFIRM_DIALOG_ID
        if close_dialog_id is not None:
            self.state.remove(close_dialog_id)
        return self.dispatcher(Action(ACTION_DELETE_REQUEST, {"asset_ids": ids}))

    def shutdown(self) -> None:
        if self.container.is_registered(ThreadPoolExecutor):
            self.container.resolve(ThreadPoolExecutor).shutdown(wait=True)
        self.event_bus.shutdown()
