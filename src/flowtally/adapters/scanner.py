"""Validation of scanned identifier tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Annotated

from pydantic import StringConstraints, TypeAdapter, ValidationError

from flowtally.config import DEFAULT_IDENTIFIER_LENGTH, MAX_IDENTIFIER_LENGTH

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """Tokens of one input line split by validity, in input order."""

    accepted: tuple[str, ...] = ()
    rejected: tuple[str, ...] = ()


@dataclass(frozen=True)
class IdentifierFormat:
    """Fixed-length hexadecimal identifier, matched case-insensitively."""

    length: int = DEFAULT_IDENTIFIER_LENGTH
    _adapter: TypeAdapter[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 1 <= self.length <= MAX_IDENTIFIER_LENGTH:
            raise ValueError(
                f"Identifier length must be between 1 and {MAX_IDENTIFIER_LENGTH}, got {self.length}"
            )
        pattern = rf"^[A-Fa-f0-9]{{{self.length}}}$"
        adapter = TypeAdapter(Annotated[str, StringConstraints(strict=True, pattern=pattern)])
        object.__setattr__(self, "_adapter", adapter)

    def validate(self, token: object) -> str:
        """Return ``token`` unchanged or raise :class:`pydantic.ValidationError`."""

        return self._adapter.validate_python(token)

    def is_valid(self, token: object) -> bool:
        try:
            self.validate(token)
        except ValidationError:
            return False
        return True


def parse_line(text: str, *, fmt: IdentifierFormat | None = None) -> ParsedLine:
    """Split a line of scanner input into accepted and rejected identifiers."""

    effective_format = fmt or IdentifierFormat()
    accepted: list[str] = []
    rejected: list[str] = []
    for token in text.split():
        if effective_format.is_valid(token):
            accepted.append(token)
        else:
            rejected.append(token)
    if rejected:
        log.debug("Rejected %d of %d tokens", len(rejected), len(accepted) + len(rejected))
    return ParsedLine(accepted=tuple(accepted), rejected=tuple(rejected))
