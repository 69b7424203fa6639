"""Reconciliation core for the received and shipped ledgers.

Every recorded event runs two steps against the ledgers:
1) offset one unit of the identifier in the opposite flow, if outstanding there
2) accumulate one unit of the identifier in the event's own flow
"""

from __future__ import annotations

from .ledger import Ledger
from .processor import ReconciliationProcessor

__all__ = [
    "Ledger",
    "ReconciliationProcessor",
]
