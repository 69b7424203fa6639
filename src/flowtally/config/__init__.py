"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .tally import (
    DEFAULT_IDENTIFIER_LENGTH,
    DEFAULT_LOG_LEVEL,
    MAX_IDENTIFIER_LENGTH,
    TallyConfig,
    get_tally_config,
)

__all__ = [
    "DEFAULT_IDENTIFIER_LENGTH",
    "DEFAULT_LOG_LEVEL",
    "MAX_IDENTIFIER_LENGTH",
    "ConfigurationError",
    "TallyConfig",
    "configure_logging",
    "get_tally_config",
]
