"""
TalentRegistry - Identity-keyed profile registration.

Functional Core - validation and the create/modify state machine.

Key behaviors:
- One record per identity; the write key is always the caller's identity
- Validation completes before any store mutation
- Modify replaces the whole record, never merges fields
- No delete path
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from talent_registry.domain.entities import Identity, TalentRecord
from talent_registry.rules.models import ConfirmationRules

from .models import (
    CallerContext,
    ProfileInput,
    RegistryError,
    RegistryErrorCode,
    record_missing,
)
from .ports import TalentStorePort

logger = logging.getLogger(__name__)

DEFAULT_CONFIRMATIONS = ConfirmationRules().model_dump()


# --- Validation ---


def validate_profile(
    personal_identifier: str,
    base_region: str,
    expertise_areas: Sequence[str],
    weekly_capacity: int,
) -> RegistryError | None:
    """
    Check profile content rules.

    All rules are evaluated as one condition and any failure reports
    CAPACITY_INVALID without saying which rule failed. Length and item-count
    upper bounds belong to the field types, not to this check.
    """
    valid = (
        len(personal_identifier) > 0
        and len(base_region) > 0
        and len(expertise_areas) > 0
        and weekly_capacity >= 1
    )
    if valid:
        return None
    return RegistryError(
        code=RegistryErrorCode.CAPACITY_INVALID,
        message="Profile fields are invalid",
    )


def build_record(profile: ProfileInput) -> TalentRecord:
    return TalentRecord(
        personal_identifier=profile.personal_identifier,
        base_region=profile.base_region,
        expertise_areas=tuple(profile.expertise_areas),
        weekly_capacity=profile.weekly_capacity,
    )


# --- Registry Service ---


class TalentRegistry:
    """
    Talent registry service.

    Provides:
    - create: Unregistered -> Registered
    - modify: Registered -> Registered (wholesale replace)
    - lookups used by the read views
    """

    def __init__(
        self,
        store: TalentStorePort,
        confirmations: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize registry.

        Args:
            store: Talent store (injected, lives as long as the process)
            confirmations: Optional success messages keyed "create"/"modify"
        """
        self._store = store
        self._confirmations = {**DEFAULT_CONFIRMATIONS, **(confirmations or {})}
        self._write_lock = threading.Lock()

    def get(self, identity: Identity) -> TalentRecord | None:
        """Get the stored record for an identity."""
        return self._store.get(identity)

    def is_registered(self, identity: Identity) -> bool:
        return self._store.contains(identity)

    def create(
        self,
        caller: CallerContext,
        profile: ProfileInput,
    ) -> tuple[TalentRecord | None, str | None, RegistryError | None]:
        """
        Register a profile for the caller.

        Returns:
            Tuple of (record, confirmation, error). On failure the record is
            the caller's existing one (or None) and the store is untouched.
        """
        identity = caller.identity
        with self._write_lock:
            existing = self._store.get(identity)
            if existing is not None:
                error = RegistryError(
                    code=RegistryErrorCode.DUPLICATE_ENTRY,
                    message=f"A profile is already registered for '{identity}'",
                )
                logger.warning(f"create rejected for {identity}: {error.code.value}")
                return existing, None, error

            error = validate_profile(
                profile.personal_identifier,
                profile.base_region,
                profile.expertise_areas,
                profile.weekly_capacity,
            )
            if error is not None:
                logger.warning(f"create rejected for {identity}: {error.code.value}")
                return None, None, error

            record = build_record(profile)
            self._store.put(identity, record)

        logger.info(f"Profile created for {identity}")
        return record, self._confirmations["create"], None

    def modify(
        self,
        caller: CallerContext,
        profile: ProfileInput,
    ) -> tuple[TalentRecord | None, str | None, RegistryError | None]:
        """
        Replace the caller's profile with a new complete record.

        Returns:
            Tuple of (record, confirmation, error). On failure the record is
            the caller's prior one (or None) and the store is untouched.
        """
        identity = caller.identity
        with self._write_lock:
            existing = self._store.get(identity)
            if existing is None:
                error = record_missing(identity)
                logger.warning(f"modify rejected for {identity}: {error.code.value}")
                return None, None, error

            error = validate_profile(
                profile.personal_identifier,
                profile.base_region,
                profile.expertise_areas,
                profile.weekly_capacity,
            )
            if error is not None:
                logger.warning(f"modify rejected for {identity}: {error.code.value}")
                return existing, None, error

            record = build_record(profile)
            self._store.put(identity, record)

        logger.info(f"Profile updated for {identity}")
        return record, self._confirmations["modify"], None
