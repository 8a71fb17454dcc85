"""Upload lecture use case (catalog client side)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lecture_catalog.catalog.controller import CatalogController
from lecture_catalog.domain.errors import UnauthorizedError
from lecture_catalog.domain.lecture import MIN_WEEK, LectureRecord, NewLecture
from lecture_catalog.ports.identity_provider import IdentityProvider
from lecture_catalog.ports.lecture_source import RemoteLectureSource

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = "Please log in to upload a lecture."


@dataclass(frozen=True, slots=True)
class UploadLectureRequest:
    """Form input for a new lecture. The instructor comes from the session."""

    title: str
    video_url: str
    thumbnail_url: str
    course_id: str
    week_number: int = MIN_WEEK
    description: str | None = None


@dataclass(frozen=True, slots=True)
class UploadLectureResponse:
    lecture: LectureRecord
    catalog_refreshed: bool


class UploadLecture:
    """
    Use case for adding a lecture from the catalog view.

    Responsibilities:
    - Require a signed-in user and credit them as instructor
    - Validate required fields before anything reaches the source
    - Create the record; conflicts and validation errors surface to the form
      and leave the catalog untouched
    - On success, trigger the catalog's post-upload full reload
    """

    def __init__(
        self,
        lecture_source: RemoteLectureSource,
        identity_provider: IdentityProvider,
        catalog: CatalogController,
    ) -> None:
        self._source = lecture_source
        self._identity = identity_provider
        self._catalog = catalog

    async def execute(self, request: UploadLectureRequest) -> UploadLectureResponse:
        """
        Execute the upload.

        Args:
            request: Form input

        Returns:
            UploadLectureResponse with the stored lecture and whether the
            catalog reload was accepted

        Raises:
            UnauthorizedError: If nobody is signed in
            ValidationError: If required fields are missing or invalid
            ConflictError: If the video URL is already used
            SourceUnavailableError: If the source cannot be reached
        """
        user = self._identity.current_user()
        if user is None:
            raise UnauthorizedError(LOGIN_REQUIRED_MESSAGE)

        lecture = NewLecture(
            title=request.title,
            video_url=request.video_url,
            thumbnail_url=request.thumbnail_url,
            course_id=request.course_id,
            instructor=user.display_name,
            week_number=request.week_number,
            description=request.description or None,
        )
        lecture.validate()

        record = await self._source.create_record(lecture)
        logger.info(
            "Lecture uploaded",
            extra={"lecture_id": record.id, "course_id": record.course_id, "user_id": user.id},
        )

        refreshed = await self._catalog.on_record_created()

        return UploadLectureResponse(lecture=record, catalog_refreshed=refreshed)
