"""
Unit tests for FastAPI dependency injection functions.

Verifies the per-request wiring:
- get_db() yields a session from get_session()
- Repositories and use cases are built fresh around that session

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from unittest.mock import MagicMock, Mock, patch

from lecture_catalog.adapters.postgres_lecture_repository import PostgresLectureRepository
from lecture_catalog.entrypoints.http.dependencies import (
    get_create_lecture_use_case,
    get_db,
    get_lecture_repository,
    get_list_courses_use_case,
    get_search_lectures_use_case,
)
from lecture_catalog.use_cases.create_lecture import CreateLecture
from lecture_catalog.use_cases.list_courses import ListCourses
from lecture_catalog.use_cases.search_lectures import SearchLectures


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch("lecture_catalog.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        session = next(generator)

        assert session is mock_session
        mock_context_manager.__enter__.assert_called_once()

        # Finishing the request closes the context manager
        try:
            next(generator)
        except StopIteration:
            pass

        mock_context_manager.__exit__.assert_called_once()


# ==============================================================================
# Repository and Use Case Factories
# ==============================================================================


def test_get_lecture_repository_wraps_session() -> None:
    session = Mock()

    repository = get_lecture_repository(db=session)

    assert isinstance(repository, PostgresLectureRepository)
    assert repository._session is session


def test_use_case_factories_return_fresh_instances() -> None:
    repository = Mock()

    search_1 = get_search_lectures_use_case(repository=repository)
    search_2 = get_search_lectures_use_case(repository=repository)
    create = get_create_lecture_use_case(repository=repository)

    assert isinstance(search_1, SearchLectures)
    assert search_1 is not search_2
    assert isinstance(create, CreateLecture)
    assert search_1._repository is repository
    assert create._repository is repository


def test_get_list_courses_use_case() -> None:
    assert isinstance(get_list_courses_use_case(), ListCourses)
