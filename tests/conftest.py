"""
Shared pytest fixtures.

Provides fresh in-memory fakes for every port and a FastAPI app/TestClient
pair whose repository providers are overridden with those fakes, so no test
needs Supabase credentials.
"""

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.deps import get_daily_workout_repo, get_journal_repo, get_program_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeDailyWorkoutRepository,
    FakeJournalRepository,
    FakeProgramRepository,
    create_program_repo,
)
from tests.fakes.conftest import override_dependency

TEST_USER = "u1"
FIXED_NOW = datetime(2024, 3, 2, 18, 30, tzinfo=timezone.utc)
FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def journal_repo() -> FakeJournalRepository:
    return FakeJournalRepository()


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    """Catalog template tpl-1 plus program prog-1 owned by TEST_USER."""
    return create_program_repo(user_id=TEST_USER)


@pytest.fixture
def daily_repo() -> FakeDailyWorkoutRepository:
    return FakeDailyWorkoutRepository()


@pytest.fixture
def app(journal_repo, program_repo, daily_repo):
    """App built with test settings and all repositories faked."""
    application = create_app(settings=Settings(environment="test", _env_file=None))
    override_dependency(application, get_journal_repo, journal_repo)
    override_dependency(application, get_program_repo, program_repo)
    override_dependency(application, get_daily_workout_repo, daily_repo)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"X-User-Id": TEST_USER}
