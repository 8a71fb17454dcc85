from __future__ import annotations

from lecture_catalog.adapters.in_memory_lecture_repository import InMemoryLectureRepository
from lecture_catalog.domain.errors import SourceUnavailableError
from lecture_catalog.domain.lecture import LectureRecord, NewLecture, Paging
from lecture_catalog.ports.lecture_source import RemoteLectureSource


class InMemoryLectureSource(RemoteLectureSource):
    """
    Canonical contract implementation for tests.

    - Serves pages from an InMemoryLectureRepository (rating descending)
    - Records every requested (page, page_size) in ``requested_pages``
    - ``fail_next_fetches`` makes the following fetches raise
      SourceUnavailableError, to exercise error and retry paths
    """

    def __init__(self, lectures: list[LectureRecord] | None = None) -> None:
        self.repository = InMemoryLectureRepository(lectures)
        self.requested_pages: list[tuple[int, int]] = []
        self._failures: list[str] = []

    def fail_next_fetches(self, count: int = 1, message: str = "Lecture source unavailable") -> None:
        self._failures.extend([message] * count)

    async def fetch_page(self, page: int, page_size: int) -> list[LectureRecord]:
        self.requested_pages.append((page, page_size))
        if self._failures:
            raise SourceUnavailableError(self._failures.pop(0), page=page)
        return self.repository.list_page(Paging(page=page, page_size=page_size))

    async def create_record(self, lecture: NewLecture) -> LectureRecord:
        lecture.validate()
        return self.repository.create(lecture)
