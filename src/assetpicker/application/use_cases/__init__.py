from .base import UseCase, UseCaseRequest, UseCaseResponse
from .delete_assets import DeleteAssetsRequest, DeleteAssetsResponse, DeleteAssetsUseCase

__all__ = [
    "DeleteAssetsRequest",
    "DeleteAssetsResponse",
    "DeleteAssetsUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
