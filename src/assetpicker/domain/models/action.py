"""Opaque follow-up actions handed to the action sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict


@dataclass(frozen=True)
class Action:
    type: str
    payload: Dict[str, Any] = field(default_factory=dict, hash=False)


ActionSink = Callable[[Any], None]
