"""
Dependency injection for FastAPI routes.

Database sessions are per-request; use cases and repositories are built
fresh for every request around that session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from lecture_catalog.adapters.postgres_lecture_repository import PostgresLectureRepository
from lecture_catalog.infra.db.session import get_session
from lecture_catalog.ports.lecture_repository import LectureRepository
from lecture_catalog.use_cases.create_lecture import CreateLecture
from lecture_catalog.use_cases.list_courses import ListCourses
from lecture_catalog.use_cases.search_lectures import SearchLectures


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_lecture_repository(db: Session = Depends(get_db)) -> LectureRepository:
    return PostgresLectureRepository(session=db)


def get_search_lectures_use_case(
    repository: LectureRepository = Depends(get_lecture_repository),
) -> SearchLectures:
    return SearchLectures(lecture_repository=repository)


def get_create_lecture_use_case(
    repository: LectureRepository = Depends(get_lecture_repository),
) -> CreateLecture:
    return CreateLecture(lecture_repository=repository)


def get_list_courses_use_case() -> ListCourses:
    return ListCourses()
