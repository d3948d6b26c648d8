"""
Registry component - Data models.

Error taxonomy, caller context, inputs, outputs and read views.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from talent_registry.domain.entities import (
    ExpertiseAreas,
    IdentifierText,
    Identity,
    RegionText,
    TalentRecord,
    WeeklyCapacity,
)

# --- Errors ---


class RegistryErrorCode(IntEnum):
    """Numeric registry error codes."""

    RECORD_MISSING = 404
    DUPLICATE_ENTRY = 409
    # Reserved: no current path produces it.
    EXPERTISE_INVALID = 403
    CAPACITY_INVALID = 400


ERROR_NAMES: dict[RegistryErrorCode, str] = {
    RegistryErrorCode.RECORD_MISSING: "RecordMissing",
    RegistryErrorCode.DUPLICATE_ENTRY: "DuplicateEntry",
    RegistryErrorCode.EXPERTISE_INVALID: "ExpertiseInvalid",
    RegistryErrorCode.CAPACITY_INVALID: "CapacityInvalid",
}


@dataclass(frozen=True)
class RegistryError:
    """Typed registry error."""

    code: RegistryErrorCode
    message: str

    @property
    def name(self) -> str:
        return ERROR_NAMES[self.code]


def record_missing(identity: Identity) -> RegistryError:
    return RegistryError(
        code=RegistryErrorCode.RECORD_MISSING,
        message=f"No profile registered for '{identity}'",
    )


# --- Caller Context ---


@dataclass(frozen=True)
class CallerContext:
    """Authenticated caller issuing an operation."""

    identity: Identity


# --- Input Models ---


class ProfileInput(BaseModel):
    """
    Profile fields submitted to create or modify.

    Construction enforces the structural bounds (lengths, item count,
    non-negative capacity) and raises pydantic.ValidationError on violation.
    Content rules are checked later by validate_profile.
    """

    model_config = ConfigDict(frozen=True)

    personal_identifier: IdentifierText
    base_region: RegionText
    expertise_areas: ExpertiseAreas
    weekly_capacity: WeeklyCapacity


@dataclass(frozen=True)
class GetProfileInput:
    """Input for any read view."""

    identity: Identity


# --- Read Views ---


@dataclass(frozen=True)
class ProfileSummary:
    """Identifier, region and expertise count."""

    identifier: str
    region: str
    expertise_count: int


@dataclass(frozen=True)
class RegionExpertiseView:
    """Region and expertise areas."""

    region: str
    expertise: tuple[str, ...]


@dataclass(frozen=True)
class FullProfileView:
    """All four profile fields under their short names."""

    identifier: str
    region: str
    expertise: tuple[str, ...]
    capacity: int


# --- Output Models ---


@dataclass(frozen=True)
class ProfileWriteOutput:
    """
    Output from create/modify.

    On success `record` is the newly stored record. On failure it is the
    caller's unchanged prior record (None when unregistered).
    """

    success: bool
    record: TalentRecord | None
    confirmation: str | None = None
    error: RegistryError | None = None


@dataclass(frozen=True)
class ProfileViewOutput:
    """Output from a read view."""

    success: bool
    value: Any = None
    error: RegistryError | None = None
