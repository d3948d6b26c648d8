"""
In-memory talent store.

Dict-backed implementation of TalentStorePort. State lives as long as the
instance; used for the `memory` storage backend and in tests.
"""

from __future__ import annotations

from talent_registry.domain.entities import Identity, TalentRecord


class InMemoryTalentStore:
    def __init__(self) -> None:
        self._records: dict[Identity, TalentRecord] = {}

    def get(self, identity: Identity) -> TalentRecord | None:
        return self._records.get(identity)

    def put(self, identity: Identity, record: TalentRecord) -> None:
        self._records[identity] = record

    def contains(self, identity: Identity) -> bool:
        return identity in self._records
