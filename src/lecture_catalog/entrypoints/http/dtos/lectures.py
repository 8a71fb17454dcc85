from pydantic import BaseModel, ConfigDict, Field

from lecture_catalog.domain.lecture import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_WEEK, MIN_WEEK


class LectureResponseDTO(BaseModel):
    id: str
    title: str
    instructor: str
    description: str | None = None
    video_url: str
    thumbnail_url: str
    week_number: int
    course_id: str
    rating: float
    views: int = 0


class LecturesPageQueryDTO(BaseModel):
    """Query parameters for paging through the rank-ordered collection."""

    page: int = Field(
        default=1,
        description="1-based page number",
        examples=[1],
        ge=1,
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Number of lectures per page",
        examples=[DEFAULT_PAGE_SIZE],
        ge=1,
        le=MAX_PAGE_SIZE,
    )


class LecturePageResponseDTO(BaseModel):
    lectures: list[LectureResponseDTO]
    page: int
    page_size: int
    has_more: bool


class LectureCreateDTO(BaseModel):
    """Request payload for adding a lecture to the collection."""

    title: str = Field(
        description="Lecture title",
        examples=["Week 3: Recursion"],
        min_length=1,
        max_length=200,
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text description",
    )
    video_url: str = Field(
        description="Video URL; must be unique across the collection",
        examples=["https://youtube.com/watch?v=abc123"],
        min_length=1,
    )
    thumbnail_url: str = Field(
        description="Thumbnail image URL",
        examples=["https://example.com/thumbnail.jpg"],
        min_length=1,
    )
    week_number: int = Field(
        default=MIN_WEEK,
        description="Course week the lecture belongs to",
        examples=[3],
        ge=MIN_WEEK,
        le=MAX_WEEK,
    )
    course_id: str = Field(
        description="Course identifier from the course taxonomy",
        examples=["Python"],
        min_length=1,
    )
    instructor: str = Field(
        description="Instructor credited for the lecture",
        examples=["Jane Doe"],
        min_length=1,
        max_length=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Week 3: Recursion",
                "description": "Base cases and the call stack",
                "video_url": "https://youtube.com/watch?v=abc123",
                "thumbnail_url": "https://example.com/thumbnail.jpg",
                "week_number": 3,
                "course_id": "Python",
                "instructor": "Jane Doe",
            }
        }
    )
