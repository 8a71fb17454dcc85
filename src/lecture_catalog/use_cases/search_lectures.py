from __future__ import annotations

from dataclasses import dataclass

from lecture_catalog.domain.lecture import LectureRecord, Paging
from lecture_catalog.ports.lecture_repository import LectureRepository


@dataclass(frozen=True, slots=True)
class SearchLecturesRequest:
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchLecturesResponse:
    lectures: list[LectureRecord]
    paging: Paging

    @property
    def has_more(self) -> bool:
        # A full page may be followed by more; a short page never is
        return len(self.lectures) == self.paging.page_size


class SearchLectures:
    """
    Page through the lecture collection in rank order.

    Filtering and text search are done by the catalog client over its
    cache, so the service only pages.
    """

    def __init__(self, lecture_repository: LectureRepository) -> None:
        self._repository = lecture_repository

    def execute(self, request: SearchLecturesRequest) -> SearchLecturesResponse:
        """
        Execute the page query.

        Args:
            request: Page number and size

        Returns:
            Response containing the lectures of the requested page

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        # Validate inputs (UseCase responsibility per contract)
        request.paging.validate()

        lectures = self._repository.list_page(request.paging)

        return SearchLecturesResponse(lectures=lectures, paging=request.paging)
