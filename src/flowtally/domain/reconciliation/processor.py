"""Dual-ledger reconciliation of received and shipped units."""

from __future__ import annotations

from logging import getLogger
from threading import RLock
from typing import TYPE_CHECKING

from flowtally.domain.model import Flow, TrackedObject, normalize_identifier

from .ledger import Ledger

if TYPE_CHECKING:
    from flowtally.domain.directory import Directory
    from flowtally.domain.model import Identifier

log = getLogger(__name__)


class ReconciliationProcessor:
    """Apply flow events to the received and shipped ledgers.

    Each event first offsets one unit of the identifier against the opposite
    ledger, then adds one unit to the ledger of its own flow. Display names
    come from the injected :class:`Directory`, which is filled on first sighting
    and survives :meth:`clear`.

    Identifiers are expected to be validated by the caller. Ledger keys are the
    identifiers exactly as supplied, so differently cased spellings of the same
    object occupy separate ledger entries while sharing one directory record.
    """

    def __init__(self, directory: Directory) -> None:
        self._directory = directory
        self._ledgers: dict[Flow, Ledger] = {flow: Ledger() for flow in Flow}
        self._lock = RLock()

    @property
    def directory(self) -> Directory:
        return self._directory

    def record(self, identifier: Identifier, flow: Flow) -> None:
        """Record one unit of ``identifier`` moving through ``flow``."""

        with self._lock:
            resolved = self._resolve(identifier)
            offset = self._ledgers[flow.opposite].offset(identifier)
            quantity = self._ledgers[flow].accumulate(identifier, resolved.display_name)
            log.debug(
                "Recorded %s on %s: offset=%s, quantity=%s",
                identifier,
                flow,
                offset,
                quantity,
            )

    def clear(self) -> None:
        """Empty both ledgers. Directory entries are kept."""

        with self._lock:
            for ledger in self._ledgers.values():
                ledger.clear()
        log.debug("Cleared ledgers")

    def snapshot(self, flow: Flow) -> tuple[TrackedObject, ...]:
        """Return copies of the entries currently outstanding in ``flow``."""

        with self._lock:
            return self._ledgers[flow].snapshot()

    def _resolve(self, identifier: Identifier) -> TrackedObject:
        existing = self._directory.lookup(identifier)
        if existing is not None:
            return existing
        key = normalize_identifier(identifier)
        created = TrackedObject(identifier=key, display_name=key, quantity=1)
        self._directory.register(created)
        return self._directory.lookup(key) or created
