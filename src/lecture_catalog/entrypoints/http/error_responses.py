"""Body of every non-2xx response from the lecture service.

Declared on routes through ``responses=`` so the OpenAPI document shows
what a failed search or upload returns.
"""

from pydantic import BaseModel, ConfigDict, Field

_DUPLICATE_VIDEO = {"detail": "This video URL is already in use.", "code": "CONFLICT"}

_MISSING_UPLOAD_FIELDS = {
    "detail": "Please fill in all required fields.",
    "code": "VALIDATION_ERROR",
    "errors": [
        {"field": "title", "message": "Required", "code": "REQUIRED"},
        {"field": "course_id", "message": "Required", "code": "REQUIRED"},
    ],
}


class ErrorDetail(BaseModel):
    field: str = Field(description="Dotted path of the offending field, e.g. 'video_url'")
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """A ``detail`` sentence for people, a ``code`` for clients, per-field ``errors`` when known."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [_DUPLICATE_VIDEO, _MISSING_UPLOAD_FIELDS]}
    )

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
