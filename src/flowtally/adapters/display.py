"""Plain-text rendering of ledger snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flowtally.domain.model import Flow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from flowtally.domain.model import TrackedObject
    from flowtally.domain.reconciliation import ReconciliationProcessor

NAME_HEADER = "Name"
QUANTITY_HEADER = "Qty"
EMPTY_MARKER = "(empty)"


def render_ledger(title: str, entries: Iterable[TrackedObject]) -> str:
    """Render one ledger as a two-column table of display name and quantity."""

    rows = [(entry.display_name, str(entry.quantity)) for entry in entries]
    if not rows:
        return f"{title}\n  {EMPTY_MARKER}"

    name_width = max(len(NAME_HEADER), *(len(name) for name, _ in rows))
    qty_width = max(len(QUANTITY_HEADER), *(len(qty) for _, qty in rows))
    lines = [
        title,
        f"  {NAME_HEADER:<{name_width}}  {QUANTITY_HEADER:>{qty_width}}",
        f"  {'-' * name_width}  {'-' * qty_width}",
    ]
    lines.extend(f"  {name:<{name_width}}  {qty:>{qty_width}}" for name, qty in rows)
    return "\n".join(lines)


def render_ledgers(processor: ReconciliationProcessor) -> str:
    """Render the received ledger followed by the shipped ledger."""

    return "\n\n".join(
        render_ledger(flow.value.capitalize(), processor.snapshot(flow)) for flow in Flow
    )
