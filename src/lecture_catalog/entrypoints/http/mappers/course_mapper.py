from __future__ import annotations

from lecture_catalog.domain.courses import AcademicLevel, Course
from lecture_catalog.entrypoints.http.dtos.courses import (
    AcademicLevelDTO,
    CourseCatalogResponseDTO,
    CourseDTO,
)
from lecture_catalog.use_cases.list_courses import ListCoursesResponse


class CourseMapper:
    @staticmethod
    def to_course_response(course: Course) -> CourseDTO:
        return CourseDTO(id=course.id, name=course.name, code=course.code)

    @staticmethod
    def to_level_response(level: AcademicLevel) -> AcademicLevelDTO:
        return AcademicLevelDTO(
            id=level.id,
            name=level.name,
            courses=[CourseMapper.to_course_response(course) for course in level.courses],
        )

    @staticmethod
    def to_response(result: ListCoursesResponse) -> CourseCatalogResponseDTO:
        return CourseCatalogResponseDTO(
            levels=[CourseMapper.to_level_response(level) for level in result.levels]
        )
