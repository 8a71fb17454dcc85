from __future__ import annotations

from lecture_catalog.domain.lecture import LectureRecord, NewLecture, Paging
from lecture_catalog.entrypoints.http.dtos.lectures import (
    LectureCreateDTO,
    LecturePageResponseDTO,
    LectureResponseDTO,
    LecturesPageQueryDTO,
)
from lecture_catalog.use_cases.create_lecture import CreateLectureRequest
from lecture_catalog.use_cases.search_lectures import (
    SearchLecturesRequest,
    SearchLecturesResponse,
)


class LectureMapper:
    """Maps between REST DTOs and domain models for lectures.

    Used on both sides of the wire: by the routes and by the HTTP lecture
    source that consumes them.
    """

    @staticmethod
    def to_domain_paging(dto: LecturesPageQueryDTO) -> Paging:
        return Paging(page=dto.page, page_size=dto.page_size)

    @staticmethod
    def to_search_request(dto: LecturesPageQueryDTO) -> SearchLecturesRequest:
        return SearchLecturesRequest(paging=LectureMapper.to_domain_paging(dto))

    @staticmethod
    def to_new_lecture(dto: LectureCreateDTO) -> NewLecture:
        """
        Converts a create payload to the domain creation model.

        A blank description is stored as no description.
        """
        return NewLecture(
            title=dto.title,
            video_url=dto.video_url,
            thumbnail_url=dto.thumbnail_url,
            course_id=dto.course_id,
            instructor=dto.instructor,
            week_number=dto.week_number,
            description=dto.description or None,
        )

    @staticmethod
    def to_create_request(dto: LectureCreateDTO) -> CreateLectureRequest:
        return CreateLectureRequest(lecture=LectureMapper.to_new_lecture(dto))

    @staticmethod
    def to_create_dto(lecture: NewLecture) -> LectureCreateDTO:
        return LectureCreateDTO(
            title=lecture.title,
            description=lecture.description,
            video_url=lecture.video_url,
            thumbnail_url=lecture.thumbnail_url,
            week_number=lecture.week_number,
            course_id=lecture.course_id,
            instructor=lecture.instructor,
        )

    @staticmethod
    def to_lecture_response(lecture: LectureRecord) -> LectureResponseDTO:
        return LectureResponseDTO(
            id=lecture.id,
            title=lecture.title,
            instructor=lecture.instructor,
            description=lecture.description,
            video_url=lecture.video_url,
            thumbnail_url=lecture.thumbnail_url,
            week_number=lecture.week_number,
            course_id=lecture.course_id,
            rating=lecture.rating,
            views=lecture.views,
        )

    @staticmethod
    def to_domain_lecture(dto: LectureResponseDTO) -> LectureRecord:
        return LectureRecord(
            id=dto.id,
            title=dto.title,
            instructor=dto.instructor,
            description=dto.description,
            video_url=dto.video_url,
            thumbnail_url=dto.thumbnail_url,
            week_number=dto.week_number,
            course_id=dto.course_id,
            rating=dto.rating,
            views=dto.views,
        )

    @staticmethod
    def to_page_response(result: SearchLecturesResponse) -> LecturePageResponseDTO:
        """
        Converts a domain page to the REST response with paging metadata.

        Args:
            result: Domain page of lectures

        Returns:
            LecturePageResponseDTO echoing page and page_size
        """
        return LecturePageResponseDTO(
            lectures=[LectureMapper.to_lecture_response(lecture) for lecture in result.lectures],
            page=result.paging.page,
            page_size=result.paging.page_size,
            has_more=result.has_more,
        )
