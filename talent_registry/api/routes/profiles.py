"""Routes for registering and querying talent profiles."""

from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from talent_registry.api.deps import get_caller, get_registry_service
from talent_registry.components.registry import (
    CallerContext,
    GetProfileInput,
    ProfileInput,
    ProfileViewOutput,
    ProfileWriteOutput,
    RegistryError,
    TalentRegistry,
    run_count_expertise,
    run_create,
    run_exists,
    run_fetch_capacity,
    run_fetch_expertise,
    run_fetch_identifier,
    run_fetch_record,
    run_fetch_region,
    run_full_profile,
    run_modify,
    run_region_and_expertise,
    run_registration_status,
    run_summary,
    run_validate_expertise_nonempty,
)
from talent_registry.domain.entities import TalentRecord

router = APIRouter()


# --- Response Models ---


class ProfileResponse(BaseModel):
    personal_identifier: str
    base_region: str
    expertise_areas: list[str]
    weekly_capacity: int


class ProfileWriteResponse(BaseModel):
    message: str
    profile: ProfileResponse


class ValueResponse(BaseModel):
    value: Any


class SummaryResponse(BaseModel):
    identifier: str
    region: str
    expertise_count: int


class RegionExpertiseResponse(BaseModel):
    region: str
    expertise: list[str]


class FullProfileResponse(BaseModel):
    identifier: str
    region: str
    expertise: list[str]
    capacity: int


# --- Helpers ---


def _to_response(record: TalentRecord) -> ProfileResponse:
    return ProfileResponse(
        personal_identifier=record.personal_identifier,
        base_region=record.base_region,
        expertise_areas=list(record.expertise_areas),
        weekly_capacity=record.weekly_capacity,
    )


def _raise_registry_error(error: RegistryError, prior: TalentRecord | None = None) -> NoReturn:
    detail: dict[str, Any] = {
        "code": int(error.code),
        "error": error.name,
        "message": error.message,
    }
    if prior is not None:
        detail["profile"] = _to_response(prior).model_dump()
    raise HTTPException(status_code=int(error.code), detail=detail)


def _write_response(result: ProfileWriteOutput) -> ProfileWriteResponse:
    if not result.success:
        assert result.error is not None
        _raise_registry_error(result.error, result.record)

    assert result.record is not None and result.confirmation is not None
    return ProfileWriteResponse(message=result.confirmation, profile=_to_response(result.record))


def _view_value(result: ProfileViewOutput) -> Any:
    if not result.success:
        assert result.error is not None
        _raise_registry_error(result.error)
    return result.value


# --- Write Routes ---


@router.post("/me", response_model=ProfileWriteResponse, status_code=201)
def create_profile(
    data: ProfileInput,
    caller: CallerContext = Depends(get_caller),
    service: TalentRegistry = Depends(get_registry_service),
) -> ProfileWriteResponse:
    """Register the caller's profile."""
    return _write_response(run_create(caller, data, service))


@router.put("/me", response_model=ProfileWriteResponse)
def modify_profile(
    data: ProfileInput,
    caller: CallerContext = Depends(get_caller),
    service: TalentRegistry = Depends(get_registry_service),
) -> ProfileWriteResponse:
    """Replace the caller's profile."""
    return _write_response(run_modify(caller, data, service))


# --- Read Routes ---


@router.get("/{identity}", response_model=ProfileResponse)
def fetch_record(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ProfileResponse:
    """Get the full stored record."""
    record = _view_value(run_fetch_record(GetProfileInput(identity=identity), service))
    return _to_response(record)


@router.get("/{identity}/identifier", response_model=ValueResponse)
def fetch_identifier(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_fetch_identifier(GetProfileInput(identity=identity), service)
    return ValueResponse(value=_view_value(result))


@router.get("/{identity}/region", response_model=ValueResponse)
def fetch_region(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_fetch_region(GetProfileInput(identity=identity), service)
    return ValueResponse(value=_view_value(result))


@router.get("/{identity}/expertise", response_model=ValueResponse)
def fetch_expertise(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_fetch_expertise(GetProfileInput(identity=identity), service)
    return ValueResponse(value=list(_view_value(result)))


@router.get("/{identity}/expertise/count", response_model=ValueResponse)
def count_expertise(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_count_expertise(GetProfileInput(identity=identity), service)
    return ValueResponse(value=_view_value(result))


@router.get("/{identity}/expertise/valid", response_model=ValueResponse)
def validate_expertise_nonempty(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_validate_expertise_nonempty(GetProfileInput(identity=identity), service)
    return ValueResponse(value=_view_value(result))


@router.get("/{identity}/capacity", response_model=ValueResponse)
def fetch_capacity(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    result = run_fetch_capacity(GetProfileInput(identity=identity), service)
    return ValueResponse(value=_view_value(result))


@router.get("/{identity}/exists", response_model=ValueResponse)
def exists(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    """Registration as a boolean."""
    result = run_exists(GetProfileInput(identity=identity), service)
    return ValueResponse(value=result.value)


@router.get("/{identity}/status", response_model=ValueResponse)
def registration_status(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> ValueResponse:
    """Registration as "Registered" / "Not Registered"."""
    result = run_registration_status(GetProfileInput(identity=identity), service)
    return ValueResponse(value=result.value)


@router.get("/{identity}/summary", response_model=SummaryResponse)
def summary(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> SummaryResponse:
    view = _view_value(run_summary(GetProfileInput(identity=identity), service))
    return SummaryResponse(
        identifier=view.identifier,
        region=view.region,
        expertise_count=view.expertise_count,
    )


@router.get("/{identity}/region-expertise", response_model=RegionExpertiseResponse)
def region_and_expertise(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> RegionExpertiseResponse:
    view = _view_value(run_region_and_expertise(GetProfileInput(identity=identity), service))
    return RegionExpertiseResponse(region=view.region, expertise=list(view.expertise))


@router.get("/{identity}/full", response_model=FullProfileResponse)
def full_profile(
    identity: str,
    service: TalentRegistry = Depends(get_registry_service),
) -> FullProfileResponse:
    view = _view_value(run_full_profile(GetProfileInput(identity=identity), service))
    return FullProfileResponse(
        identifier=view.identifier,
        region=view.region,
        expertise=list(view.expertise),
        capacity=view.capacity,
    )
