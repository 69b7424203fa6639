"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Flow(StrEnum):
    """Direction of movement for a tracked unit."""

    RECEIVED = "received"
    SHIPPED = "shipped"

    @property
    def opposite(self) -> Flow:
        return Flow.SHIPPED if self is Flow.RECEIVED else Flow.RECEIVED
