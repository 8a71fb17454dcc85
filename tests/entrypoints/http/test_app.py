"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates a configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health at the root, lectures and courses under /v1)
- OpenAPI schema generation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from lecture_catalog.entrypoints.http.app import build_app


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_new_fastapi_instance() -> None:
    app1 = build_app()
    app2 = build_app()

    assert isinstance(app1, FastAPI)
    assert app1 is not app2


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Lecture Catalog API"
    assert app.version == "0.1.0"
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_routes_registered_with_prefixes() -> None:
    app = build_app()
    paths = {route.path for route in app.routes}

    assert "/health" in paths
    assert "/v1/lectures" in paths
    assert "/v1/courses" in paths


def test_lectures_path_supports_get_and_post() -> None:
    schema = build_app().openapi()

    assert set(schema["paths"]["/v1/lectures"]) == {"get", "post"}


def test_openapi_documents_conflict_response() -> None:
    schema = build_app().openapi()

    assert "409" in schema["paths"]["/v1/lectures"]["post"]["responses"]


def test_docs_endpoint_available() -> None:
    client = TestClient(build_app())

    response = client.get("/openapi.json")

    assert response.status_code == 200
    assert response.json()["info"]["title"] == "Lecture Catalog API"
