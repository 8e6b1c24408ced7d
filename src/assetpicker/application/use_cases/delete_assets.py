"""Delete assets through an external mutation callable.

The picker core never performs I/O itself. This use case flags the rows
as ``updating``, runs the deletion on a worker thread and reports the
outcome back through the state's completion callbacks.
"""

import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Callable, Hashable, List, Optional, Tuple

from assetpicker.errors import AssetMutationError
from assetpicker.errors.handler import ErrorHandler, ErrorSeverity
from assetpicker.models.state import PickerState

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass(frozen=True)
class DeleteAssetsRequest(UseCaseRequest):
    asset_ids: Tuple[Hashable, ...] = ()


@dataclass(frozen=True)
class DeleteAssetsResponse(UseCaseResponse):
    submitted: Tuple[Hashable, ...] = ()
    skipped: Tuple[Hashable, ...] = ()
    futures: List[Future] = field(default_factory=list, compare=False)


class DeleteAssetsUseCase(UseCase):
    def __init__(
        self,
        state: PickerState,
        deleter: Callable[[Hashable], None],
        executor: Executor,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self._state = state
        self._deleter = deleter
        self._executor = executor
        self._error_handler = error_handler
        self._logger = logging.getLogger(__name__)

    def execute(self, request: DeleteAssetsRequest) -> DeleteAssetsResponse:
        submitted: List[Hashable] = []
        skipped: List[Hashable] = []
        futures: List[Future] = []
        for asset_id in request.asset_ids:
            # Claiming a row (check and flag) is one step under the state lock.
            with self._state.lock:
                item = self._state.find(asset_id)
                if item is None or item.updating:
                    skipped.append(asset_id)
                    continue
                self._state.set_error(asset_id, None)
                self._state.set_updating(asset_id, True)
            futures.append(self._executor.submit(self._delete_one, asset_id))
            submitted.append(asset_id)

        if skipped:
            self._logger.info("Skipped %d asset(s) already busy or gone: %s", len(skipped), skipped)
        if request.asset_ids and not submitted:
            return DeleteAssetsResponse.failure("Nothing to delete", skipped=tuple(skipped))
        return DeleteAssetsResponse(submitted=tuple(submitted), skipped=tuple(skipped), futures=futures)

    def _delete_one(self, asset_id: Hashable) -> bool:
        try:
            self._deleter(asset_id)
        except AssetMutationError as exc:
            self._logger.info("Delete of %r blocked: %s", asset_id, exc.marker)
            self._state.set_updating(asset_id, False)
            self._state.set_error(asset_id, exc.marker)
            return False
        except Exception as exc:
            self._state.set_updating(asset_id, False)
            if self._error_handler is not None:
                self._error_handler.handle(exc, ErrorSeverity.ERROR, asset_id=asset_id)
            else:
                self._logger.error("Delete of %r failed: %s", asset_id, exc)
            return False

        self._state.remove_items([asset_id])
        self._logger.info("Deleted asset %r", asset_id)
        return True
