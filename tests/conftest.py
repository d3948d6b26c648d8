import os

import pytest

from talent_registry.adapters.memory import InMemoryTalentStore
from talent_registry.adapters.sqlite.migrator import SQLiteMigrator
from talent_registry.components.registry import ProfileInput, TalentRegistry


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def db_path(test_data_dir):
    """
    Temporary SQLite database with all migrations applied.
    """
    path = os.path.join(test_data_dir, "talent.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def memory_store():
    return InMemoryTalentStore()


@pytest.fixture
def registry(memory_store):
    return TalentRegistry(store=memory_store)


@pytest.fixture
def profile_factory():
    def _make(
        identifier="Alice",
        region="Lisbon",
        expertise=("python", "sql"),
        capacity=10,
    ):
        return ProfileInput(
            personal_identifier=identifier,
            base_region=region,
            expertise_areas=expertise,
            weekly_capacity=capacity,
        )

    return _make
