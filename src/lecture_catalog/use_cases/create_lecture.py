"""Create lecture use case."""

from __future__ import annotations

from dataclasses import dataclass

from lecture_catalog.domain.lecture import LectureRecord, NewLecture
from lecture_catalog.ports.lecture_repository import LectureRepository


@dataclass(frozen=True, slots=True)
class CreateLectureRequest:
    lecture: NewLecture


@dataclass(frozen=True, slots=True)
class CreateLectureResponse:
    lecture: LectureRecord


class CreateLecture:
    """
    Use case for storing a new lecture.

    Responsibilities:
    - Validate the payload (required fields, week range, known course)
    - Delegate to repository, which enforces video URL uniqueness
    """

    def __init__(self, lecture_repository: LectureRepository) -> None:
        self._repository = lecture_repository

    def execute(self, request: CreateLectureRequest) -> CreateLectureResponse:
        """
        Execute the create lecture use case.

        Raises:
            ValidationError: If the payload is invalid
            ConflictError: If the video URL is already used
        """
        request.lecture.validate()

        lecture = self._repository.create(request.lecture)

        return CreateLectureResponse(lecture=lecture)
