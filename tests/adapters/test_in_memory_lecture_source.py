from __future__ import annotations

import asyncio

import pytest

from lecture_catalog.adapters.in_memory_lecture_source import InMemoryLectureSource
from lecture_catalog.domain.errors import SourceUnavailableError, ValidationError
from lecture_catalog.domain.lecture import NewLecture


def test_fetch_page_serves_rank_order_and_records_request(make_lecture) -> None:
    source = InMemoryLectureSource([make_lecture(i) for i in range(5)])

    page = asyncio.run(source.fetch_page(2, 2))

    assert [lecture.id for lecture in page] == ["lec-2", "lec-3"]
    assert source.requested_pages == [(2, 2)]


def test_queued_failures_are_raised_in_order(make_lecture) -> None:
    source = InMemoryLectureSource([make_lecture(0)])
    source.fail_next_fetches(count=2, message="offline")

    for _ in range(2):
        with pytest.raises(SourceUnavailableError, match="offline"):
            asyncio.run(source.fetch_page(1, 10))

    assert len(asyncio.run(source.fetch_page(1, 10))) == 1
    assert source.requested_pages == [(1, 10), (1, 10), (1, 10)]


def test_create_record_validates_before_storing() -> None:
    source = InMemoryLectureSource()
    invalid = NewLecture(
        title="",
        video_url="https://youtube.com/watch?v=x",
        thumbnail_url="https://img.example.com/x.jpg",
        course_id="Python",
        instructor="Dr. Vikram Iyer",
    )

    with pytest.raises(ValidationError):
        asyncio.run(source.create_record(invalid))

    assert len(source.repository) == 0


def test_create_record_is_visible_in_next_fetch() -> None:
    source = InMemoryLectureSource()
    lecture = NewLecture(
        title="Fresh",
        video_url="https://youtube.com/watch?v=x",
        thumbnail_url="https://img.example.com/x.jpg",
        course_id="Python",
        instructor="Dr. Vikram Iyer",
    )

    record = asyncio.run(source.create_record(lecture))

    assert asyncio.run(source.fetch_page(1, 12)) == [record]
