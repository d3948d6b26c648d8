from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# --- Field limits ---
IDENTIFIER_MAX_LENGTH = 100
REGION_MAX_LENGTH = 100
EXPERTISE_AREA_MAX_LENGTH = 50
EXPERTISE_MAX_ITEMS = 10

# Caller principal issuing an operation; doubles as the store key.
Identity = str

# --- Structural field types ---
IdentifierText = Annotated[str, Field(max_length=IDENTIFIER_MAX_LENGTH)]
RegionText = Annotated[str, Field(max_length=REGION_MAX_LENGTH)]
ExpertiseArea = Annotated[str, Field(max_length=EXPERTISE_AREA_MAX_LENGTH)]
ExpertiseAreas = Annotated[tuple[ExpertiseArea, ...], Field(max_length=EXPERTISE_MAX_ITEMS)]
WeeklyCapacity = Annotated[int, Field(ge=0, strict=True)]


# --- Talent Profiles ---

class TalentRecord(BaseModel):
    """Stored profile for one identity."""

    model_config = ConfigDict(frozen=True)

    personal_identifier: IdentifierText
    base_region: RegionText
    expertise_areas: ExpertiseAreas
    weekly_capacity: WeeklyCapacity
