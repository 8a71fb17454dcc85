from fastapi import APIRouter, Depends

from lecture_catalog.entrypoints.http.dependencies import get_list_courses_use_case
from lecture_catalog.entrypoints.http.dtos.courses import CourseCatalogResponseDTO
from lecture_catalog.entrypoints.http.mappers.course_mapper import CourseMapper
from lecture_catalog.use_cases.list_courses import ListCourses


router = APIRouter(tags=["Courses"])


@router.get(
    "/courses",
    response_model=CourseCatalogResponseDTO,
    summary="List the course taxonomy",
)
def list_courses(
    use_case: ListCourses = Depends(get_list_courses_use_case),
) -> CourseCatalogResponseDTO:
    """Academic levels and their courses, in display order."""
    return CourseMapper.to_response(use_case.execute())
