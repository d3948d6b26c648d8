"""
Registry component - Talent profile registration and views.

Shell Layer - wraps the core results in tagged outputs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from talent_registry.domain.entities import TalentRecord

from ._impl import TalentRegistry
from .models import (
    CallerContext,
    FullProfileView,
    GetProfileInput,
    ProfileInput,
    ProfileSummary,
    ProfileViewOutput,
    ProfileWriteOutput,
    RegionExpertiseView,
    record_missing,
)

STATUS_REGISTERED = "Registered"
STATUS_NOT_REGISTERED = "Not Registered"


# --- Write Operations ---


def run_create(
    caller: CallerContext,
    input_data: ProfileInput,
    service: TalentRegistry,
) -> ProfileWriteOutput:
    """Register a profile for the caller."""
    record, confirmation, error = service.create(caller, input_data)
    return ProfileWriteOutput(
        success=error is None,
        record=record,
        confirmation=confirmation,
        error=error,
    )


def run_modify(
    caller: CallerContext,
    input_data: ProfileInput,
    service: TalentRegistry,
) -> ProfileWriteOutput:
    """Replace the caller's profile."""
    record, confirmation, error = service.modify(caller, input_data)
    return ProfileWriteOutput(
        success=error is None,
        record=record,
        confirmation=confirmation,
        error=error,
    )


# --- Read Operations ---


def _view(
    input_data: GetProfileInput,
    service: TalentRegistry,
    projection: Callable[[TalentRecord], Any],
) -> ProfileViewOutput:
    record = service.get(input_data.identity)
    if record is None:
        return ProfileViewOutput(success=False, error=record_missing(input_data.identity))
    return ProfileViewOutput(success=True, value=projection(record))


def run_fetch_record(input_data: GetProfileInput, service: TalentRegistry) -> ProfileViewOutput:
    """Full stored record."""
    return _view(input_data, service, lambda r: r)


def run_fetch_identifier(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    return _view(input_data, service, lambda r: r.personal_identifier)


def run_fetch_region(input_data: GetProfileInput, service: TalentRegistry) -> ProfileViewOutput:
    return _view(input_data, service, lambda r: r.base_region)


def run_fetch_expertise(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    return _view(input_data, service, lambda r: r.expertise_areas)


def run_fetch_capacity(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    return _view(input_data, service, lambda r: r.weekly_capacity)


def run_count_expertise(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    return _view(input_data, service, lambda r: len(r.expertise_areas))


def run_exists(input_data: GetProfileInput, service: TalentRegistry) -> ProfileViewOutput:
    """Registration as a boolean. Never fails."""
    return ProfileViewOutput(success=True, value=service.is_registered(input_data.identity))


def run_registration_status(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    """Registration as a label. Never fails."""
    registered = service.is_registered(input_data.identity)
    return ProfileViewOutput(
        success=True,
        value=STATUS_REGISTERED if registered else STATUS_NOT_REGISTERED,
    )


def run_validate_expertise_nonempty(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    """Whether expertise areas are non-empty (always True for a stored record)."""
    return _view(input_data, service, lambda r: len(r.expertise_areas) > 0)


def run_summary(input_data: GetProfileInput, service: TalentRegistry) -> ProfileViewOutput:
    return _view(
        input_data,
        service,
        lambda r: ProfileSummary(
            identifier=r.personal_identifier,
            region=r.base_region,
            expertise_count=len(r.expertise_areas),
        ),
    )


def run_region_and_expertise(
    input_data: GetProfileInput, service: TalentRegistry
) -> ProfileViewOutput:
    return _view(
        input_data,
        service,
        lambda r: RegionExpertiseView(region=r.base_region, expertise=r.expertise_areas),
    )


def run_full_profile(input_data: GetProfileInput, service: TalentRegistry) -> ProfileViewOutput:
    return _view(
        input_data,
        service,
        lambda r: FullProfileView(
            identifier=r.personal_identifier,
            region=r.base_region,
            expertise=r.expertise_areas,
            capacity=r.weekly_capacity,
        ),
    )
