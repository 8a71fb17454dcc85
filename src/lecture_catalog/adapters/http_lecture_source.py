"""HTTP implementation of RemoteLectureSource."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from lecture_catalog.domain.errors import ConflictError, SourceUnavailableError, ValidationError
from lecture_catalog.domain.lecture import LectureRecord, NewLecture
from lecture_catalog.entrypoints.http.dtos.lectures import (
    LecturePageResponseDTO,
    LectureResponseDTO,
)
from lecture_catalog.entrypoints.http.mappers.lecture_mapper import LectureMapper
from lecture_catalog.infra.config import lecture_api_timeout, lecture_api_url
from lecture_catalog.ports.lecture_source import RemoteLectureSource

logger = logging.getLogger(__name__)

LECTURES_PATH = "/v1/lectures"


class HttpLectureSource(RemoteLectureSource):
    """
    Talks to the lecture service over HTTP with an httpx AsyncClient.

    Error translation:
    - Transport errors, timeouts, 5xx, 401/403, malformed bodies
      -> SourceUnavailableError
    - 409 on create -> ConflictError (duplicate video URL)
    - 422 on create -> ValidationError with the service's field errors
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize the source with an HTTP client.

        Args:
            client: AsyncClient whose base_url points at the lecture service
        """
        self._client = client

    @classmethod
    def from_env(cls) -> HttpLectureSource:
        """Build a source from LECTURE_API_URL / LECTURE_API_TIMEOUT."""
        client = httpx.AsyncClient(base_url=lecture_api_url(), timeout=lecture_api_timeout())
        return cls(client)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpLectureSource:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def fetch_page(self, page: int, page_size: int) -> list[LectureRecord]:
        response = await self._send("GET", LECTURES_PATH, params={"page": page, "page_size": page_size})

        if response.status_code != httpx.codes.OK:
            raise SourceUnavailableError(
                _detail(response, "Could not load lectures"),
                status_code=response.status_code,
            )

        try:
            payload = LecturePageResponseDTO.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            raise SourceUnavailableError("Lecture service returned an invalid page") from exc

        return [LectureMapper.to_domain_lecture(dto) for dto in payload.lectures]

    async def create_record(self, lecture: NewLecture) -> LectureRecord:
        lecture.validate()

        body = LectureMapper.to_create_dto(lecture).model_dump()
        response = await self._send("POST", LECTURES_PATH, json=body)

        if response.status_code == httpx.codes.CONFLICT:
            raise ConflictError(_detail(response, "This video URL is already in use."), field="video_url")

        if response.status_code == 422:  # HTTP_422_UNPROCESSABLE_CONTENT
            raise ValidationError(
                _detail(response, "Validation failed"),
                errors=_field_errors(response),
            )

        if response.status_code != httpx.codes.CREATED:
            raise SourceUnavailableError(
                _detail(response, "Upload failed."),
                status_code=response.status_code,
            )

        try:
            created = LectureResponseDTO.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            raise SourceUnavailableError("Lecture service returned an invalid lecture") from exc

        return LectureMapper.to_domain_lecture(created)

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "Lecture service request failed",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise SourceUnavailableError("Could not reach the lecture service") from exc


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _detail(response: httpx.Response, default: str) -> str:
    detail = _json_body(response).get("detail")
    return detail if isinstance(detail, str) and detail else default


def _field_errors(response: httpx.Response) -> list[dict[str, str]] | None:
    errors = _json_body(response).get("errors")
    if not isinstance(errors, list):
        return None
    return [
        {key: str(value) for key, value in error.items() if value is not None}
        for error in errors
        if isinstance(error, dict)
    ]
