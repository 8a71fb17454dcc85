from __future__ import annotations

import uuid

from lecture_catalog.domain.errors import ConflictError
from lecture_catalog.domain.lecture import LectureRecord, NewLecture, Paging
from lecture_catalog.ports.lecture_repository import LectureRepository

DUPLICATE_VIDEO_URL_MESSAGE = "This video URL is already in use."


class InMemoryLectureRepository(LectureRepository):
    """
    Canonical contract implementation for tests.

    - Stores lectures in insertion order
    - Pages by rating descending; ties keep insertion order
    - Enforces video URL uniqueness on create
    """

    def __init__(self, lectures: list[LectureRecord] | None = None) -> None:
        self._lectures = list(lectures or [])

    def list_page(self, paging: Paging) -> list[LectureRecord]:
        # Trust that UseCase has validated inputs (contract programming)
        ranked = sorted(self._lectures, key=lambda lecture: -lecture.rating)

        start = paging.offset
        end = paging.offset + paging.page_size
        return ranked[start:end]

    def create(self, lecture: NewLecture) -> LectureRecord:
        if any(existing.video_url == lecture.video_url for existing in self._lectures):
            raise ConflictError(DUPLICATE_VIDEO_URL_MESSAGE, field="video_url")

        record = LectureRecord(
            id=str(uuid.uuid4()),
            title=lecture.title,
            instructor=lecture.instructor,
            description=lecture.description,
            video_url=lecture.video_url,
            thumbnail_url=lecture.thumbnail_url,
            week_number=lecture.week_number,
            course_id=lecture.course_id,
        )
        self._lectures.append(record)
        return record

    def __len__(self) -> int:
        return len(self._lectures)
