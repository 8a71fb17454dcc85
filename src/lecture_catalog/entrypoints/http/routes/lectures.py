from fastapi import APIRouter, Depends, status

from lecture_catalog.entrypoints.http.dependencies import (
    get_create_lecture_use_case,
    get_search_lectures_use_case,
)
from lecture_catalog.entrypoints.http.dtos.lectures import (
    LectureCreateDTO,
    LecturePageResponseDTO,
    LectureResponseDTO,
    LecturesPageQueryDTO,
)
from lecture_catalog.entrypoints.http.error_responses import ErrorResponse
from lecture_catalog.entrypoints.http.mappers.lecture_mapper import LectureMapper
from lecture_catalog.use_cases.create_lecture import CreateLecture
from lecture_catalog.use_cases.search_lectures import SearchLectures


router = APIRouter(tags=["Lectures"])


@router.get(
    "/lectures",
    response_model=LecturePageResponseDTO,
    summary="Page through lectures",
    description="""
    Return one page of lectures ordered by rating, highest first.

    Filtering by week, course and text is done by the catalog client over
    the pages it has fetched; the service only pages.

    ## Pagination
    - page starts at 1
    - Default page_size: 12, max 100
    - has_more is false once a page comes back short
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid paging parameters"},
        503: {"model": ErrorResponse, "description": "Lecture database unavailable"},
    },
)
def list_lectures(
    query: LecturesPageQueryDTO = Depends(),
    use_case: SearchLectures = Depends(get_search_lectures_use_case),
) -> LecturePageResponseDTO:
    """Page endpoint following parse → execute → map → return pattern."""
    request = LectureMapper.to_search_request(query)

    result = use_case.execute(request)

    return LectureMapper.to_page_response(result)


@router.post(
    "/lectures",
    response_model=LectureResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a lecture",
    description="""
    Store a new lecture. The video URL must be unique across the collection.
    New lectures start with a rating of 0.
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Video URL already in use"},
        422: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    },
)
def create_lecture(
    payload: LectureCreateDTO,
    use_case: CreateLecture = Depends(get_create_lecture_use_case),
) -> LectureResponseDTO:
    request = LectureMapper.to_create_request(payload)

    result = use_case.execute(request)

    return LectureMapper.to_lecture_response(result.lecture)
