"""Write-once registry resolving identifiers to display names."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from flowtally.domain.model import TrackedObject, normalize_identifier

if TYPE_CHECKING:
    from flowtally.domain.model import Identifier

log = getLogger(__name__)


class Directory:
    """Map uppercase identifiers to their canonical :class:`TrackedObject`.

    The first registration for a key wins; later ones are ignored.
    """

    def __init__(self) -> None:
        self._objects: dict[Identifier, TrackedObject] = {}

    def register(self, obj: TrackedObject) -> None:
        key = normalize_identifier(obj.identifier)
        if key in self._objects:
            return
        self._objects[key] = replace(obj, identifier=key)
        log.debug("Registered %s as %r", key, obj.display_name)

    def lookup(self, identifier: Identifier) -> TrackedObject | None:
        return self._objects.get(normalize_identifier(identifier))

    def __len__(self) -> int:
        return len(self._objects)
