"""
Test suite for UploadLecture.

Runs against the in-memory source and a real CatalogController so the
post-upload reload is observed end to end.
"""

from __future__ import annotations

import asyncio

import pytest

from lecture_catalog.adapters.in_memory_lecture_source import InMemoryLectureSource
from lecture_catalog.adapters.static_identity_provider import StaticIdentityProvider
from lecture_catalog.catalog.controller import CatalogController
from lecture_catalog.domain.errors import ConflictError, UnauthorizedError, ValidationError
from lecture_catalog.domain.lecture import REQUIRED_FIELDS_MESSAGE
from lecture_catalog.domain.user import User
from lecture_catalog.use_cases.upload_lecture import (
    LOGIN_REQUIRED_MESSAGE,
    UploadLecture,
    UploadLectureRequest,
)


@pytest.fixture()
def source(make_lecture) -> InMemoryLectureSource:
    return InMemoryLectureSource([make_lecture(i) for i in range(3)])


@pytest.fixture()
def catalog(source: InMemoryLectureSource) -> CatalogController:
    catalog = CatalogController(source, page_size=12)
    asyncio.run(catalog.start())
    return catalog


@pytest.fixture()
def identity() -> StaticIdentityProvider:
    return StaticIdentityProvider(User(id="u-1", email="asha@example.com", full_name="Asha Verma"))


def _request(**overrides) -> UploadLectureRequest:
    fields = {
        "title": "Week 4: Dictionaries",
        "video_url": "https://youtube.com/watch?v=py-w04",
        "thumbnail_url": "https://img.example.com/py-w04.jpg",
        "course_id": "Python",
        "week_number": 4,
        "description": "",
    }
    fields.update(overrides)
    return UploadLectureRequest(**fields)


def test_upload_credits_user_and_reloads_catalog(
    source: InMemoryLectureSource,
    catalog: CatalogController,
    identity: StaticIdentityProvider,
) -> None:
    use_case = UploadLecture(source, identity, catalog)

    response = asyncio.run(use_case.execute(_request()))

    assert response.lecture.instructor == "Asha Verma"
    assert response.lecture.description is None
    assert response.catalog_refreshed is True
    assert source.requested_pages == [(1, 12), (1, 12)]
    assert response.lecture.id in {lecture.id for lecture in catalog.visible_records}


def test_upload_falls_back_to_email_as_instructor(
    source: InMemoryLectureSource, catalog: CatalogController
) -> None:
    identity = StaticIdentityProvider(User(id="u-2", email="ravi@example.com"))
    use_case = UploadLecture(source, identity, catalog)

    response = asyncio.run(use_case.execute(_request()))

    assert response.lecture.instructor == "ravi@example.com"


def test_upload_requires_signed_in_user(
    source: InMemoryLectureSource, catalog: CatalogController
) -> None:
    use_case = UploadLecture(source, StaticIdentityProvider(), catalog)

    with pytest.raises(UnauthorizedError) as exc_info:
        asyncio.run(use_case.execute(_request()))

    assert exc_info.value.message == LOGIN_REQUIRED_MESSAGE
    assert len(source.repository) == 3


def test_upload_missing_fields_rejected_before_source(
    source: InMemoryLectureSource,
    catalog: CatalogController,
    identity: StaticIdentityProvider,
) -> None:
    use_case = UploadLecture(source, identity, catalog)

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(use_case.execute(_request(title="", video_url=" ")))

    assert exc_info.value.message == REQUIRED_FIELDS_MESSAGE
    assert len(source.repository) == 3
    assert source.requested_pages == [(1, 12)]


def test_upload_conflict_leaves_catalog_untouched(
    source: InMemoryLectureSource,
    catalog: CatalogController,
    identity: StaticIdentityProvider,
) -> None:
    use_case = UploadLecture(source, identity, catalog)
    records_before = catalog.records

    with pytest.raises(ConflictError, match="This video URL is already in use."):
        asyncio.run(use_case.execute(_request(video_url="https://youtube.com/watch?v=vid1")))

    assert catalog.records == records_before
    assert source.requested_pages == [(1, 12)]


def test_signed_out_user_can_no_longer_upload(
    source: InMemoryLectureSource,
    catalog: CatalogController,
    identity: StaticIdentityProvider,
) -> None:
    identity.sign_out()
    use_case = UploadLecture(source, identity, catalog)

    with pytest.raises(UnauthorizedError):
        asyncio.run(use_case.execute(_request()))
