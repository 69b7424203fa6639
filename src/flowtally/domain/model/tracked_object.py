"""Tracked object record shared by the directory and the ledgers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Identifier: TypeAlias = str


def normalize_identifier(identifier: Identifier) -> Identifier:
    """Return the canonical directory key for ``identifier``."""

    return identifier.upper()


@dataclass(slots=True)
class TrackedObject:
    """One kind of object and how many units of it sit in a ledger.

    Inside the directory only ``identifier`` and ``display_name`` matter; the
    quantity of a directory entry is never read after registration.
    """

    identifier: Identifier
    display_name: str
    quantity: int = 0
