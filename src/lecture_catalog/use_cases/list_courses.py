from __future__ import annotations

from dataclasses import dataclass

from lecture_catalog.domain.courses import ACADEMIC_LEVELS, AcademicLevel


@dataclass(frozen=True, slots=True)
class ListCoursesResponse:
    levels: tuple[AcademicLevel, ...]


class ListCourses:
    """Expose the fixed course taxonomy used by the course filter."""

    def execute(self) -> ListCoursesResponse:
        return ListCoursesResponse(levels=ACADEMIC_LEVELS)
