"""Structural bounds of the profile field types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from talent_registry.components.registry import ProfileInput
from talent_registry.domain.entities import TalentRecord


def _fields(**overrides):
    fields = {
        "personal_identifier": "Alice",
        "base_region": "Lisbon",
        "expertise_areas": ("python",),
        "weekly_capacity": 5,
    }
    fields.update(overrides)
    return fields


class TestStructuralBounds:
    @pytest.mark.parametrize("model", [ProfileInput, TalentRecord])
    def test_accepts_upper_bounds(self, model) -> None:
        item = model(
            **_fields(
                personal_identifier="a" * 100,
                base_region="r" * 100,
                expertise_areas=tuple("x" * 50 for _ in range(10)),
            )
        )
        assert len(item.expertise_areas) == 10

    @pytest.mark.parametrize(
        "overrides",
        [
            {"personal_identifier": "a" * 101},
            {"base_region": "r" * 101},
            {"expertise_areas": ("x" * 51,)},
            {"expertise_areas": tuple(f"skill-{i}" for i in range(11))},
            {"weekly_capacity": -1},
        ],
    )
    @pytest.mark.parametrize("model", [ProfileInput, TalentRecord])
    def test_rejects_out_of_bounds(self, model, overrides) -> None:
        with pytest.raises(ValidationError):
            model(**_fields(**overrides))

    def test_content_rules_are_not_structural(self) -> None:
        """Empty text, no expertise and zero capacity pass the type check."""
        profile = ProfileInput(
            personal_identifier="",
            base_region="",
            expertise_areas=(),
            weekly_capacity=0,
        )
        assert profile.weekly_capacity == 0

    @pytest.mark.parametrize("capacity", ["7", True, 7.0])
    @pytest.mark.parametrize("model", [ProfileInput, TalentRecord])
    def test_capacity_must_be_int(self, model, capacity) -> None:
        with pytest.raises(ValidationError):
            model(**_fields(weekly_capacity=capacity))

    def test_list_input_becomes_tuple(self) -> None:
        profile = ProfileInput(**_fields(expertise_areas=["a", "b"]))
        assert profile.expertise_areas == ("a", "b")

    def test_record_is_frozen(self) -> None:
        record = TalentRecord(**_fields())
        with pytest.raises(ValidationError):
            record.weekly_capacity = 99
