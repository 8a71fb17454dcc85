from fastapi import FastAPI

from lecture_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from lecture_catalog.entrypoints.http.routes.courses import router as courses_router
from lecture_catalog.entrypoints.http.routes.health import router as health_router
from lecture_catalog.entrypoints.http.routes.lectures import router as lectures_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Lecture Catalog API",
        description="""
        Video-lecture collection backing the lecture catalog browser.

        ## Features
        - Page through lectures ordered by rating
        - Add lectures (video URL must be unique)
        - List the course taxonomy

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(lectures_router, prefix="/v1")
    app.include_router(courses_router, prefix="/v1")

    return app


app = build_app()
