"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from flowtally.adapters.scanner import IdentifierFormat, parse_line
from flowtally.domain.directory import Directory
from flowtally.domain.reconciliation import ReconciliationProcessor

if TYPE_CHECKING:
    from flowtally.domain.model import Flow

log = getLogger(__name__)


@dataclass(slots=True)
class LineResult:
    """Outcome of applying one line of input to a processor."""

    recorded: tuple[str, ...]
    rejected: tuple[str, ...]


def build_processor(directory: Directory | None = None) -> ReconciliationProcessor:
    """Create a processor bound to ``directory`` or to a fresh one."""

    return ReconciliationProcessor(directory if directory is not None else Directory())


def process_line(
    processor: ReconciliationProcessor,
    text: str,
    flow: Flow,
    *,
    fmt: IdentifierFormat | None = None,
) -> LineResult:
    """Record every well-formed identifier of ``text`` on ``flow``.

    Malformed tokens are logged and skipped; they never stop the remaining
    identifiers of the line from being recorded.
    """

    parsed = parse_line(text, fmt=fmt)
    for token in parsed.rejected:
        log.warning("Invalid identifier format: %s", token)
    for identifier in parsed.accepted:
        processor.record(identifier, flow)

    log.info(
        "Processed %s line: recorded=%s, rejected=%s",
        flow,
        len(parsed.accepted),
        len(parsed.rejected),
    )
    return LineResult(recorded=parsed.accepted, rejected=parsed.rejected)
