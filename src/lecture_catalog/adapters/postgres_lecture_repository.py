"""PostgreSQL implementation of LectureRepository."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from lecture_catalog.adapters.in_memory_lecture_repository import DUPLICATE_VIDEO_URL_MESSAGE
from lecture_catalog.domain.errors import ConflictError, SourceUnavailableError
from lecture_catalog.domain.lecture import LectureRecord, NewLecture, Paging
from lecture_catalog.infra.db.models.lecture import LectureRow
from lecture_catalog.ports.lecture_repository import LectureRepository

logger = logging.getLogger(__name__)

# SQLSTATE raised by PostgreSQL for unique constraint violations
UNIQUE_VIOLATION = "23505"


class PostgresLectureRepository(LectureRepository):
    """
    PostgreSQL implementation of LectureRepository.

    - Uses SQLAlchemy ORM for database access
    - Orders by rating DESC, then created_at and id for a stable page split
    - Translates unique violations on video_url to ConflictError
    - Translates connection failures to SourceUnavailableError
    - Converts LectureRow (infrastructure) to LectureRecord (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_page(self, paging: Paging) -> list[LectureRecord]:
        """
        Return one page of lectures in rank order.

        Args:
            paging: Page number and size - must be pre-validated

        Returns:
            Up to page_size lectures
        """
        query = (
            select(LectureRow)
            .order_by(
                LectureRow.rating.desc(),
                LectureRow.created_at.asc(),
                LectureRow.id.asc(),
            )
            .offset(paging.offset)
            .limit(paging.page_size)
        )

        try:
            rows = self._session.execute(query).scalars().all()
        except OperationalError as exc:
            raise SourceUnavailableError("Lecture database is unavailable") from exc

        return [self._to_domain(row) for row in rows]

    def create(self, lecture: NewLecture) -> LectureRecord:
        """
        Insert a new lecture.

        Flushes immediately so constraint violations surface here rather
        than at commit time.

        Raises:
            ConflictError: If another lecture already uses the video URL
            SourceUnavailableError: If the database cannot be reached
        """
        row = LectureRow(
            id=uuid.uuid4(),
            title=lecture.title,
            description=lecture.description,
            instructor=lecture.instructor,
            video_url=lecture.video_url,
            thumbnail_url=lecture.thumbnail_url,
            week_number=lecture.week_number,
            course_id=lecture.course_id,
            rating=0.0,
            views=0,
        )

        try:
            self._session.add(row)
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            if _sqlstate(exc) == UNIQUE_VIOLATION:
                raise ConflictError(DUPLICATE_VIDEO_URL_MESSAGE, field="video_url") from exc
            raise
        except OperationalError as exc:
            raise SourceUnavailableError("Lecture database is unavailable") from exc

        logger.info("Lecture stored", extra={"lecture_id": str(row.id), "course_id": row.course_id})
        return self._to_domain(row)

    def _to_domain(self, row: LectureRow) -> LectureRecord:
        """Convert database model (LectureRow) to domain entity (LectureRecord)."""
        return LectureRecord(
            id=str(row.id),  # Convert UUID to string
            title=row.title,
            instructor=row.instructor,
            description=row.description,
            video_url=row.video_url,
            thumbnail_url=row.thumbnail_url,
            week_number=row.week_number,
            course_id=row.course_id,
            rating=row.rating if row.rating is not None else 0.0,
            views=row.views if row.views is not None else 0,
        )


def _sqlstate(exc: IntegrityError) -> str | None:
    # psycopg exposes `sqlstate`, psycopg2 exposes `pgcode`
    return getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
