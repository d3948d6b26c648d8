import threading

import pytest

from talent_registry.components.registry import (
    STATUS_NOT_REGISTERED,
    CallerContext,
    GetProfileInput,
    RegistryErrorCode,
    run_count_expertise,
    run_create,
    run_exists,
    run_fetch_expertise,
    run_fetch_record,
    run_full_profile,
    run_modify,
    run_registration_status,
    run_summary,
)
from talent_registry.domain.entities import TalentRecord


# --- Round trip ---
@pytest.mark.parametrize(
    ("identifier", "region", "areas", "capacity"),
    [
        ("A", "R", ("x",), 1),
        ("Name", "Region", tuple(f"area-{i}" for i in range(10)), 40),
        ("n" * 100, "r" * 100, ("e" * 50,), 168),
    ],
)
def test_create_then_fetch_returns_same_fields(
    registry, profile_factory, identifier, region, areas, capacity
):
    caller = CallerContext(identity="alice")
    run_create(caller, profile_factory(identifier, region, areas, capacity), registry)

    result = run_fetch_record(GetProfileInput(identity="alice"), registry)

    assert result.value == TalentRecord(
        personal_identifier=identifier,
        base_region=region,
        expertise_areas=areas,
        weekly_capacity=capacity,
    )


# --- Duplicate rejection ---
def test_second_create_rejected_first_kept(registry, profile_factory):
    caller = CallerContext(identity="alice")
    run_create(caller, profile_factory(identifier="First"), registry)
    second = run_create(caller, profile_factory(identifier="Second"), registry)

    assert second.error is not None
    assert second.error.code == RegistryErrorCode.DUPLICATE_ENTRY
    assert registry.get("alice").personal_identifier == "First"


# --- Missing record on modify ---
@pytest.mark.parametrize("capacity", [0, 5])
def test_modify_unregistered_always_record_missing(registry, profile_factory, capacity):
    result = run_modify(CallerContext(identity="ghost"), profile_factory(capacity=capacity), registry)

    assert result.error is not None
    assert result.error.code == RegistryErrorCode.RECORD_MISSING
    assert registry.is_registered("ghost") is False


# --- Validation gating ---
@pytest.mark.parametrize(
    ("identifier", "areas", "capacity"),
    [("", ("x",), 5), ("Name", (), 5), ("Name", ("x",), 0)],
)
def test_invalid_create_leaves_identity_unregistered(
    registry, profile_factory, identifier, areas, capacity
):
    caller = CallerContext(identity="alice")
    result = run_create(caller, profile_factory(identifier, "Region", areas, capacity), registry)

    assert result.error is not None
    assert result.error.code == RegistryErrorCode.CAPACITY_INVALID
    assert run_exists(GetProfileInput(identity="alice"), registry).value is False


# --- Wholesale replace ---
def test_modify_discards_old_expertise(registry, profile_factory):
    caller = CallerContext(identity="alice")
    run_create(caller, profile_factory("A", "R1", ("x", "y"), 10), registry)
    run_modify(caller, profile_factory("B", "R2", ("z",), 20), registry)

    assert run_fetch_expertise(GetProfileInput(identity="alice"), registry).value == ("z",)


# --- Read idempotence ---
def test_reads_are_repeatable(registry, profile_factory):
    run_create(CallerContext(identity="alice"), profile_factory(), registry)
    query = GetProfileInput(identity="alice")
    views = [run_summary, run_full_profile, run_count_expertise, run_fetch_record]

    first = [view(query, registry) for view in views]
    again = [view(query, registry) for view in reversed(views)]

    assert first == list(reversed(again))


# --- Unregistered defaults ---
def test_unregistered_defaults(registry):
    query = GetProfileInput(identity="never-seen")

    assert run_exists(query, registry).value is False
    assert run_registration_status(query, registry).value == STATUS_NOT_REGISTERED
    result = run_fetch_record(query, registry)
    assert result.error is not None
    assert result.error.code == RegistryErrorCode.RECORD_MISSING


# --- Serialized writes ---
def test_racing_creates_from_same_identity(registry, profile_factory):
    """Exactly one of many concurrent creates for one identity succeeds."""
    caller = CallerContext(identity="alice")
    barrier = threading.Barrier(8)
    outcomes = []

    def attempt(n):
        barrier.wait()
        outcomes.append(run_create(caller, profile_factory(identifier=f"T{n}"), registry))

    threads = [threading.Thread(target=attempt, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    winners = [o for o in outcomes if o.success]
    losers = [o for o in outcomes if not o.success]
    assert len(winners) == 1
    assert all(o.error.code == RegistryErrorCode.DUPLICATE_ENTRY for o in losers)
    assert registry.get("alice") == winners[0].record
