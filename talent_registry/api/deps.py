from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from talent_registry.api.auth_utils import decode_access_token
from talent_registry.app_shell.config import Settings, build_talent_store
from talent_registry.components.registry import CallerContext, TalentRegistry
from talent_registry.rules.loader import load_rules
from talent_registry.rules.models import Rules


# --- Settings ---
@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Component Services ---
# One registry per process: it owns the store and the write lock.
@lru_cache
def get_registry_service() -> TalentRegistry:
    """Get registry component service."""
    settings = get_settings()
    rules = get_rules()
    return TalentRegistry(
        store=build_talent_store(settings, rules),
        confirmations=rules.registry.confirmations.model_dump(),
    )


# --- Auth ---
bearer_scheme = HTTPBearer(auto_error=False)


async def get_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CallerContext:
    """Resolve the authenticated caller from the bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    identity = payload.get("sub")
    if not identity or not isinstance(identity, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    # Read routes take the identity as one path segment.
    if "/" in identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Identity must not contain '/'",
        )

    return CallerContext(identity=identity)
