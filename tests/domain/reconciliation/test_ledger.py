from __future__ import annotations

from flowtally.domain.reconciliation import Ledger


def test_accumulate_creates_then_increments_entry() -> None:
    ledger = Ledger()

    assert ledger.accumulate("AA", "Alpha") == 1
    assert ledger.accumulate("AA", "ignored") == 2

    (entry,) = ledger.snapshot()
    assert entry.identifier == "AA"
    assert entry.display_name == "Alpha"
    assert entry.quantity == 2


def test_offset_removes_entry_when_quantity_reaches_zero() -> None:
    ledger = Ledger()
    ledger.accumulate("AA", "Alpha")

    assert ledger.offset("AA") is True
    assert ledger.snapshot() == ()
    assert len(ledger) == 0


def test_offset_missing_identifier_is_noop() -> None:
    ledger = Ledger()
    ledger.accumulate("AA", "Alpha")

    assert ledger.offset("BB") is False
    assert [entry.identifier for entry in ledger.snapshot()] == ["AA"]


def test_snapshot_returns_detached_copies() -> None:
    ledger = Ledger()
    ledger.accumulate("AA", "Alpha")

    (entry,) = ledger.snapshot()
    entry.quantity = 99

    assert [entry.quantity for entry in ledger.snapshot()] == [1]


def test_snapshot_preserves_insertion_order() -> None:
    ledger = Ledger()
    for identifier in ("CC", "AA", "BB"):
        ledger.accumulate(identifier, identifier)

    assert [entry.identifier for entry in ledger.snapshot()] == ["CC", "AA", "BB"]
