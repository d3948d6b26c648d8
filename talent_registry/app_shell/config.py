import logging
import os
import sys
from pathlib import Path

from talent_registry.adapters.memory import InMemoryTalentStore
from talent_registry.adapters.sqlite.repos import SQLiteTalentStore
from talent_registry.components.registry import TalentStorePort
from talent_registry.rules.models import Rules

logger = logging.getLogger(__name__)


class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("TALENT_DATA_DIR", "./data"))
        self.rules_path = Path(
            os.environ.get("TALENT_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )

    def db_path(self, rules: Rules) -> str:
        return str(self.data_dir / rules.storage.db_filename)


def build_talent_store(settings: Settings, rules: Rules) -> TalentStorePort:
    """Create the store for the configured backend."""
    if rules.storage.backend == "memory":
        return InMemoryTalentStore()
    return SQLiteTalentStore(settings.db_path(rules))


def validate_ops_rules(rules: Rules, settings: Settings) -> None:
    """
    Validate operational requirements before startup.
    """
    missing = [env_var for env_var in rules.ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    if rules.storage.backend == "sqlite":
        settings.data_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Configuration validated.")
