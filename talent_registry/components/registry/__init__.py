"""
Registry component - Talent profile registration and views.
"""

from ._impl import TalentRegistry, validate_profile
from .component import (
    STATUS_NOT_REGISTERED,
    STATUS_REGISTERED,
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
from .models import (
    CallerContext,
    FullProfileView,
    GetProfileInput,
    ProfileInput,
    ProfileSummary,
    ProfileViewOutput,
    ProfileWriteOutput,
    RegionExpertiseView,
    RegistryError,
    RegistryErrorCode,
)
from .ports import TalentStorePort

__all__ = [
    # Write entry points
    "run_create",
    "run_modify",
    # Read entry points
    "run_fetch_record",
    "run_fetch_identifier",
    "run_fetch_region",
    "run_fetch_expertise",
    "run_fetch_capacity",
    "run_count_expertise",
    "run_exists",
    "run_registration_status",
    "run_validate_expertise_nonempty",
    "run_summary",
    "run_region_and_expertise",
    "run_full_profile",
    # Models
    "CallerContext",
    "ProfileInput",
    "GetProfileInput",
    "ProfileWriteOutput",
    "ProfileViewOutput",
    "ProfileSummary",
    "RegionExpertiseView",
    "FullProfileView",
    "RegistryError",
    "RegistryErrorCode",
    # Ports
    "TalentStorePort",
    # Core
    "TalentRegistry",
    "validate_profile",
    # Constants
    "STATUS_REGISTERED",
    "STATUS_NOT_REGISTERED",
]
