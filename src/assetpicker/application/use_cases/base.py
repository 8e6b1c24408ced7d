"""Request/response DTOs and the use case base class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UseCaseRequest:
    """Use case input DTO base."""


@dataclass(frozen=True)
class UseCaseResponse:
    """Use case output DTO base.

    ``success`` is False only when the request could not be acted on at
    all; per-item outcomes belong in the subclass fields.
    """

    success: bool = True
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str, **fields):
        return cls(success=False, error=error, **fields)


class UseCase(ABC):
    """Use case base class; instances are callable so they can serve as handlers."""

    @abstractmethod
    def execute(self, request: UseCaseRequest) -> UseCaseResponse:
        ...

    def __call__(self, request: UseCaseRequest) -> UseCaseResponse:
        return self.execute(request)
