from __future__ import annotations

from dataclasses import dataclass, replace

from lecture_catalog.domain.courses import is_known_course
from lecture_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


MIN_WEEK = 1
MAX_WEEK = 52
DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."


@dataclass(frozen=True, slots=True)
class LectureRecord:
    id: str
    title: str
    instructor: str
    video_url: str
    thumbnail_url: str
    week_number: int
    course_id: str
    rating: float = 0.0
    description: str | None = None
    views: int = 0


@dataclass(frozen=True, slots=True)
class NewLecture:
    """A lecture that has not been stored yet (no identity, no rank)."""

    title: str
    video_url: str
    thumbnail_url: str
    course_id: str
    instructor: str
    week_number: int = MIN_WEEK
    description: str | None = None

    def validate(self) -> None:
        """
        Validate the creation payload.

        Collects every problem before raising so a form can flag all
        offending fields at once.

        Raises:
            ValidationError: With one entry per invalid field
        """
        errors: list[dict[str, str]] = []

        for field_name in ("title", "video_url", "thumbnail_url", "course_id", "instructor"):
            if not getattr(self, field_name).strip():
                errors.append({"field": field_name, "message": "Required", "code": "REQUIRED"})

        missing_required = bool(errors)

        if not MIN_WEEK <= self.week_number <= MAX_WEEK:
            errors.append(
                {
                    "field": "week_number",
                    "message": f"Must be between {MIN_WEEK} and {MAX_WEEK}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if self.course_id.strip() and not is_known_course(self.course_id):
            errors.append(
                {
                    "field": "course_id",
                    "message": f"Unknown course: {self.course_id}",
                    "code": "UNKNOWN_COURSE",
                }
            )

        if errors:
            raise ValidationError(
                REQUIRED_FIELDS_MESSAGE if missing_required else None,
                errors=errors,
            )


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Active filter selection.

    None means "no constraint" for that field, never "match empty".
    A blank text query counts as unset.
    """

    week: int | None = None
    course_id: str | None = None
    query: str | None = None

    @property
    def normalized_query(self) -> str | None:
        if self.query is None or not self.query.strip():
            return None
        return self.query.lower()

    def is_empty(self) -> bool:
        return self.week is None and self.course_id is None and self.normalized_query is None

    def with_week(self, week: int | None) -> FilterCriteria:
        return replace(self, week=week)

    def with_course(self, course_id: str | None) -> FilterCriteria:
        return replace(self, course_id=course_id)

    def with_query(self, query: str | None) -> FilterCriteria:
        return replace(self, query=query)

    @staticmethod
    def cleared() -> FilterCriteria:
        return FilterCriteria()

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        if self.week is None:
            return
        if isinstance(self.week, bool) or not isinstance(self.week, int) or self.week < MIN_WEEK:
            raise FilterValidationError("week must be a positive integer")


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
