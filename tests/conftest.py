from __future__ import annotations

import pytest

from flowtally.domain.directory import Directory
from flowtally.domain.reconciliation import ReconciliationProcessor


@pytest.fixture
def directory() -> Directory:
    return Directory()


@pytest.fixture
def processor(directory: Directory) -> ReconciliationProcessor:
    return ReconciliationProcessor(directory)
