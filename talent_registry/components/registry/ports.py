"""
Registry component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from talent_registry.domain.entities import Identity, TalentRecord


class TalentStorePort(Protocol):
    """Identity-keyed record store. Writes always pass a complete record."""

    def get(self, identity: Identity) -> TalentRecord | None:
        """Get the record for an identity, or None if unregistered."""
        ...

    def put(self, identity: Identity, record: TalentRecord) -> None:
        """Store the record, replacing any prior entry for the identity."""
        ...

    def contains(self, identity: Identity) -> bool:
        """Whether the identity has a record."""
        ...
