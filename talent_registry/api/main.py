import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from talent_registry.adapters.sqlite.migrator import SQLiteMigrator
from talent_registry.api.deps import get_rules, get_settings
from talent_registry.app_shell.config import validate_ops_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_ops_rules(rules, settings)
        logger.info(f"Rules loaded from {settings.rules_path}")
    except Exception as e:
        logger.critical(f"Rules load failed: {e}")
        sys.exit(1)

    if rules.storage.backend == "sqlite":
        SQLiteMigrator(settings.db_path(rules)).run_migrations()

    yield


app = FastAPI(
    title="Talent Registry API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from talent_registry.api.routes import profiles  # noqa: E402

app.include_router(profiles.router, prefix="/api/profiles", tags=["Profiles"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
