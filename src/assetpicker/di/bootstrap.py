"""Wire the picker services into a :class:`Container`."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Callable, Hashable, Iterable, Optional

from assetpicker.application.dispatcher import ActionDispatcher
from assetpicker.application.use_cases.delete_assets import (
    DeleteAssetsRequest,
    DeleteAssetsUseCase,
)
from assetpicker.config import ACTION_DELETE_REQUEST, MUTATION_MAX_WORKERS
from assetpicker.domain.models.action import ActionSink
from assetpicker.domain.models.asset import AssetItem
from assetpicker.errors.handler import ErrorHandler
from assetpicker.events.bus import EventBus
from assetpicker.gui.interaction import InteractionBinding, SelectionConsumer
from assetpicker.gui.viewmodels.picker_viewmodel import PickerViewModel
from assetpicker.models.selection import RangePolicy
from assetpicker.models.state import PickerState

from .container import Container

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from assetpicker.settings.manager import SettingsManager


def bootstrap(
    container: Container,
    *,
    items: Iterable[AssetItem] = (),
    settings: Optional["SettingsManager"] = None,
    deleter: Optional[Callable[[Hashable], None]] = None,
    fallback_sink: Optional[ActionSink] = None,
    document_context: bool = False,
    on_select: Optional[SelectionConsumer] = None,
) -> None:
    """Register all picker services in the DI container."""

    range_policy = settings.range_policy() if settings is not None else RangePolicy.ADDITIVE

    container.register_singleton(EventBus, EventBus)
    container.register_singleton(
        ErrorHandler,
        factory=lambda c: ErrorHandler(c.resolve(EventBus)),
    )
    container.register_singleton(
        PickerState,
        factory=lambda c: PickerState(items, event_bus=c.resolve(EventBus), range_policy=range_policy),
    )

    def _make_dispatcher(c: Container) -> ActionDispatcher:
        state = c.resolve(PickerState)
        dispatcher = ActionDispatcher(state, fallback=fallback_sink)
        if c.is_registered(DeleteAssetsUseCase):
            use_case = c.resolve(DeleteAssetsUseCase)
            dispatcher.register(
                ACTION_DELETE_REQUEST,
                lambda action: use_case(
                    DeleteAssetsRequest(asset_ids=tuple(action.payload.get("asset_ids", ())))
                ),
            )
        state.set_action_sink(dispatcher)
        return dispatcher

    container.register_singleton(ActionDispatcher, factory=_make_dispatcher)

    if deleter is not None:
        container.register_singleton(
            ThreadPoolExecutor,
            factory=lambda c: ThreadPoolExecutor(
                max_workers=MUTATION_MAX_WORKERS, thread_name_prefix="assetpicker-mutation"
            ),
        )
        container.register_singleton(
            DeleteAssetsUseCase,
            factory=lambda c: DeleteAssetsUseCase(
                c.resolve(PickerState),
                deleter,
                c.resolve(ThreadPoolExecutor),
                c.resolve(ErrorHandler),
            ),
        )

    container.register_singleton(
        InteractionBinding,
        factory=lambda c: InteractionBinding(
            c.resolve(PickerState),
            document_context=document_context,
            on_select=on_select,
        ),
    )
    # One viewmodel per view scope; disposing the scope unsubscribes it.
    container.register_scoped(
        PickerViewModel,
        factory=lambda c: PickerViewModel(c.resolve(PickerState), c.resolve(EventBus)),
    )

    if settings is not None:
        def _on_settings_changed(key: str, value) -> None:
            if key == "selection.range_policy":
                state = container.resolve(PickerState)
                with state.lock:
                    state.selection.range_policy = RangePolicy(value)

        settings.settingsChanged.connect(_on_settings_changed)
