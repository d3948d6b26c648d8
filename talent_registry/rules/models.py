from typing import Literal

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ConfirmationRules(BaseModel):
    create: str = "Profile created successfully"
    modify: str = "Profile updated successfully"


class RegistryRules(BaseModel):
    confirmations: ConfirmationRules = Field(default_factory=ConfirmationRules)


class StorageRules(BaseModel):
    backend: Literal["sqlite", "memory"] = "sqlite"
    db_filename: str = "talent.db"


class AuthRules(BaseModel):
    token_ttl_minutes: int = Field(default=60 * 24, gt=0)


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    project: ProjectRules
    registry: RegistryRules = Field(default_factory=RegistryRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    auth: AuthRules = Field(default_factory=AuthRules)
    ops: OpsRules = Field(default_factory=OpsRules)
