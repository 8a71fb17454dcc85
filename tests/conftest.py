"""Shared pytest fixtures for lecture catalog tests."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from lecture_catalog.adapters.in_memory_lecture_source import InMemoryLectureSource
from lecture_catalog.domain.lecture import LectureRecord


LectureFactory = Callable[..., LectureRecord]


@pytest.fixture()
def make_lecture() -> LectureFactory:
    """
    Build lectures whose rating decreases with the index.

    Rank order therefore equals index order: lecture 0 is the top result.
    """

    def _make(index: int, **overrides: Any) -> LectureRecord:
        fields: dict[str, Any] = {
            "id": f"lec-{index}",
            "title": f"Lecture {index}",
            "instructor": "Dr. Meera Krishnan",
            "video_url": f"https://youtube.com/watch?v=vid{index}",
            "thumbnail_url": f"https://img.example.com/{index}.jpg",
            "week_number": 1,
            "course_id": "Python",
            "rating": 100.0 - index,
        }
        fields.update(overrides)
        return LectureRecord(**fields)

    return _make


class GatedLectureSource(InMemoryLectureSource):
    """In-memory source whose fetches block until ``gate`` is set."""

    def __init__(self, lectures: list[LectureRecord] | None = None) -> None:
        super().__init__(lectures)
        self.gate = asyncio.Event()
        self.started = 0

    async def fetch_page(self, page: int, page_size: int) -> list[LectureRecord]:
        self.started += 1
        await self.gate.wait()
        return await super().fetch_page(page, page_size)


@pytest.fixture()
def gated_source_class() -> type[GatedLectureSource]:
    return GatedLectureSource
