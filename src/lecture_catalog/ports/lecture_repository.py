from __future__ import annotations

from abc import ABC, abstractmethod

from lecture_catalog.domain.lecture import LectureRecord, NewLecture, Paging


class LectureRepository(ABC):
    """
    Port for server-side lecture storage.

    Contract (Preconditions):
        - paging and new lectures must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - list_page orders by rating descending, then creation order
    """

    @abstractmethod
    def list_page(self, paging: Paging) -> list[LectureRecord]:
        """
        Return one page of lectures in rank order.

        Precondition: paging must be validated by caller (UseCase).
        """
        ...

    @abstractmethod
    def create(self, lecture: NewLecture) -> LectureRecord:
        """
        Store a new lecture.

        Raises:
            ConflictError: If another lecture already uses the video URL
        """
        ...
