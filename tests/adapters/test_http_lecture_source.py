"""
Test suite for HttpLectureSource.

The lecture service is replaced by an httpx.MockTransport so both the
request shape and the error translation can be checked without a network.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable

import httpx
import pytest

from lecture_catalog.adapters.http_lecture_source import HttpLectureSource
from lecture_catalog.domain.errors import ConflictError, SourceUnavailableError, ValidationError
from lecture_catalog.domain.lecture import NewLecture

BASE_URL = "http://lectures.test"

Handler = Callable[[httpx.Request], httpx.Response]


def _source(handler: Handler) -> HttpLectureSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return HttpLectureSource(client)


def _lecture_json(index: int, **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "id": f"lec-{index}",
        "title": f"Lecture {index}",
        "instructor": "Prof. Anjali Rao",
        "description": None,
        "video_url": f"https://youtube.com/watch?v=vid{index}",
        "thumbnail_url": f"https://img.example.com/{index}.jpg",
        "week_number": 2,
        "course_id": "Python",
        "rating": 4.5,
        "views": 10,
    }
    body.update(overrides)
    return body


def _new_lecture() -> NewLecture:
    return NewLecture(
        title="Week 3: Recursion",
        video_url="https://youtube.com/watch?v=abc123",
        thumbnail_url="https://img.example.com/abc123.jpg",
        course_id="Python",
        instructor="Prof. Anjali Rao",
        week_number=3,
    )


# ==============================================================================
# fetch_page
# ==============================================================================


def test_fetch_page_sends_paging_params_and_parses_lectures() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "lectures": [_lecture_json(0), _lecture_json(1)],
                "page": 2,
                "page_size": 2,
                "has_more": True,
            },
        )

    lectures = asyncio.run(_source(handler).fetch_page(2, 2))

    assert [lecture.id for lecture in lectures] == ["lec-0", "lec-1"]
    assert lectures[0].rating == 4.5
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v1/lectures"
    assert dict(seen[0].url.params) == {"page": "2", "page_size": "2"}


def test_fetch_page_server_error_is_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"detail": "Lecture database is unavailable"})

    with pytest.raises(SourceUnavailableError) as exc_info:
        asyncio.run(_source(handler).fetch_page(1, 12))

    assert exc_info.value.message == "Lecture database is unavailable"
    assert exc_info.value.context == {"status_code": 503}


def test_fetch_page_rejected_credentials_is_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="unauthorized")

    with pytest.raises(SourceUnavailableError, match="Could not load lectures"):
        asyncio.run(_source(handler).fetch_page(1, 12))


def test_fetch_page_transport_error_is_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SourceUnavailableError, match="Could not reach the lecture service"):
        asyncio.run(_source(handler).fetch_page(1, 12))


def test_fetch_page_malformed_body_is_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    with pytest.raises(SourceUnavailableError, match="invalid page"):
        asyncio.run(_source(handler).fetch_page(1, 12))


def test_fetch_page_non_json_body_is_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(SourceUnavailableError):
        asyncio.run(_source(handler).fetch_page(1, 12))


# ==============================================================================
# create_record
# ==============================================================================


def test_create_record_posts_payload_and_parses_created_lecture() -> None:
    seen: list[dict[str, Any]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(201, json=_lecture_json(9, rating=0.0, views=0))

    record = asyncio.run(_source(handler).create_record(_new_lecture()))

    assert record.id == "lec-9"
    assert record.rating == 0.0
    assert seen[0]["video_url"] == "https://youtube.com/watch?v=abc123"
    assert seen[0]["instructor"] == "Prof. Anjali Rao"
    assert seen[0]["week_number"] == 3


def test_create_record_conflict() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"detail": "This video URL is already in use.", "code": "CONFLICT"})

    with pytest.raises(ConflictError) as exc_info:
        asyncio.run(_source(handler).create_record(_new_lecture()))

    assert exc_info.value.message == "This video URL is already in use."


def test_create_record_validation_error_carries_field_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            422,
            json={
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "course_id", "message": "Unknown course", "code": "UNKNOWN_COURSE"}],
            },
        )

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(_source(handler).create_record(_new_lecture()))

    assert exc_info.value.errors == [
        {"field": "course_id", "message": "Unknown course", "code": "UNKNOWN_COURSE"}
    ]


def test_create_record_server_error_is_upload_failed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(SourceUnavailableError, match="Upload failed."):
        asyncio.run(_source(handler).create_record(_new_lecture()))


def test_create_record_invalid_payload_never_sent() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(201, json=_lecture_json(1))

    invalid = NewLecture(
        title="",
        video_url="https://youtube.com/watch?v=x",
        thumbnail_url="https://img.example.com/x.jpg",
        course_id="Python",
        instructor="Prof. Anjali Rao",
    )

    with pytest.raises(ValidationError):
        asyncio.run(_source(handler).create_record(invalid))

    assert calls == []


# ==============================================================================
# Construction
# ==============================================================================


def test_from_env_uses_configured_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LECTURE_API_URL", "http://lectures.internal:8000/")
    monkeypatch.setenv("LECTURE_API_TIMEOUT", "2.5")

    source = HttpLectureSource.from_env()

    try:
        assert source._client.base_url.host == "lectures.internal"
        assert source._client.base_url.port == 8000
        assert source._client.timeout.read == 2.5
    finally:
        asyncio.run(source.aclose())
