"""Per-flow ledger of outstanding quantities."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from flowtally.domain.model import TrackedObject

if TYPE_CHECKING:
    from flowtally.domain.model import Identifier


class Ledger:
    """Outstanding quantity per identifier for one flow.

    Keys are identifiers exactly as recorded, without normalization. Every entry
    holds a quantity of at least one; entries that would drop to zero are removed.
    """

    def __init__(self) -> None:
        self._entries: dict[Identifier, TrackedObject] = {}

    def offset(self, identifier: Identifier) -> bool:
        """Take one unit of ``identifier`` off the ledger, if present."""

        entry = self._entries.get(identifier)
        if entry is None:
            return False
        entry.quantity -= 1
        if entry.quantity <= 0:
            del self._entries[identifier]
        return True

    def accumulate(self, identifier: Identifier, display_name: str) -> int:
        """Add one unit of ``identifier`` and return its new quantity."""

        entry = self._entries.get(identifier)
        if entry is None:
            entry = TrackedObject(identifier=identifier, display_name=display_name, quantity=0)
            self._entries[identifier] = entry
        entry.quantity += 1
        return entry.quantity

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> tuple[TrackedObject, ...]:
        return tuple(replace(entry) for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
