from __future__ import annotations

from abc import ABC, abstractmethod

from lecture_catalog.domain.lecture import LectureRecord, NewLecture


class RemoteLectureSource(ABC):
    """
    Port for the remote lecture collection, as seen by the catalog controller.

    Contract:
        - fetch_page returns records ordered by rating, descending, with a
          stable tie-break so overlapping pages repeat the same records
        - Transport, backend and credential failures surface as
          SourceUnavailableError; nothing else leaks out of an adapter
        - create_record enforces video URL uniqueness (ConflictError)
    """

    @abstractmethod
    async def fetch_page(self, page: int, page_size: int) -> list[LectureRecord]:
        """
        Fetch one page of the rank-ordered collection.

        Args:
            page: 1-based page number
            page_size: Number of records per page

        Returns:
            Up to page_size records; fewer means the collection is exhausted

        Raises:
            SourceUnavailableError: If the source cannot serve the page
        """
        ...

    @abstractmethod
    async def create_record(self, lecture: NewLecture) -> LectureRecord:
        """
        Append a lecture to the collection.

        Raises:
            ConflictError: If the video URL is already used
            ValidationError: If the source rejects the payload
            SourceUnavailableError: If the source cannot be reached
        """
        ...
