import os
import sys

# Add root to pythonpath
sys.path.append(os.getcwd())

from talent_registry.adapters.sqlite.migrator import SQLiteMigrator
from talent_registry.adapters.sqlite.repos import SQLiteTalentStore
from talent_registry.components.registry import (
    CallerContext,
    ProfileInput,
    TalentRegistry,
    run_create,
)

DEMO_PROFILES = {
    "demo-ada": ProfileInput(
        personal_identifier="Ada L.",
        base_region="London",
        expertise_areas=("mathematics", "analytical engines"),
        weekly_capacity=12,
    ),
    "demo-grace": ProfileInput(
        personal_identifier="Grace H.",
        base_region="Arlington",
        expertise_areas=("compilers", "COBOL", "naval logistics"),
        weekly_capacity=20,
    ),
}


def seed():
    data_dir = os.environ.get("TALENT_DATA_DIR", "./data")
    os.makedirs(data_dir, exist_ok=True)

    db_path = f"{data_dir}/talent.db"
    print(f"Seeding to {db_path}")

    SQLiteMigrator(db_path).run_migrations()
    service = TalentRegistry(store=SQLiteTalentStore(db_path))

    for identity, profile in DEMO_PROFILES.items():
        result = run_create(CallerContext(identity=identity), profile, service)
        if result.success:
            print(f"Created profile for {identity}")
        else:
            assert result.error is not None
            print(f"Skipped {identity}: {result.error.name}")


if __name__ == "__main__":
    seed()
