"""Public domain model surface."""

from __future__ import annotations

from flowtally.domain.model.enums import Flow
from flowtally.domain.model.tracked_object import Identifier, TrackedObject, normalize_identifier

__all__ = [
    "Flow",
    "Identifier",
    "TrackedObject",
    "normalize_identifier",
]
