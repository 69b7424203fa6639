"""Runtime settings for tally sessions."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

DEFAULT_IDENTIFIER_LENGTH: Final[int] = 24
MAX_IDENTIFIER_LENGTH: Final[int] = 256
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

IDENTIFIER_LENGTH_ENV: Final[str] = "FLOWTALLY_IDENTIFIER_LENGTH"
LOG_LEVEL_ENV: Final[str] = "FLOWTALLY_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class TallyConfig:
    identifier_length: int = DEFAULT_IDENTIFIER_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not 1 <= self.identifier_length <= MAX_IDENTIFIER_LENGTH:
            raise ConfigurationError(
                f"Identifier length must be between 1 and {MAX_IDENTIFIER_LENGTH}, "
                f"got {self.identifier_length}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")


def _parse_identifier_length(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid identifier length: {value!r}") from exc


def get_tally_config() -> TallyConfig:
    """Build the tally configuration from the environment, falling back to defaults."""

    length_value = os.getenv(IDENTIFIER_LENGTH_ENV)
    level_value = os.getenv(LOG_LEVEL_ENV)

    length = (
        _parse_identifier_length(length_value)
        if length_value and length_value.strip()
        else DEFAULT_IDENTIFIER_LENGTH
    )
    level = level_value.strip().upper() if level_value and level_value.strip() else DEFAULT_LOG_LEVEL
    return TallyConfig(identifier_length=length, log_level=level)
