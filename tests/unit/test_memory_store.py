from talent_registry.adapters.memory import InMemoryTalentStore
from talent_registry.domain.entities import TalentRecord


def _record(identifier: str = "Alice") -> TalentRecord:
    return TalentRecord(
        personal_identifier=identifier,
        base_region="Lisbon",
        expertise_areas=("python",),
        weekly_capacity=5,
    )


def test_empty_store():
    store = InMemoryTalentStore()
    assert store.get("alice") is None
    assert store.contains("alice") is False


def test_put_and_get():
    store = InMemoryTalentStore()
    store.put("alice", _record())

    assert store.contains("alice") is True
    assert store.get("alice") == _record()
    assert store.contains("bob") is False


def test_put_overwrites():
    store = InMemoryTalentStore()
    store.put("alice", _record("First"))
    store.put("alice", _record("Second"))

    assert store.get("alice").personal_identifier == "Second"
