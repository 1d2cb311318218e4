"""
Test Fixtures and Helpers for Fake Repositories.

This module provides a helper for overriding FastAPI dependencies with fake
repository instances on a given app.

Usage:
    from tests.fakes.conftest import override_dependency

    def test_something(app):
        repo = override_dependency(app, get_journal_repo, FakeJournalRepository())
        ...
"""

from typing import Any, Callable

from fastapi import FastAPI

# Type for repository dependency getters
RepoGetter = Callable[..., Any]


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> Any:
    """
    Override a FastAPI dependency with a fake instance.

    Args:
        app: Application under test
        getter: The dependency getter function (e.g., get_journal_repo)
        implementation: The fake implementation instance

    Returns:
        The implementation (for seeding data etc.)
    """
    app.dependency_overrides[getter] = lambda: implementation
    return implementation
