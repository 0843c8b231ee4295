"""
Tests for the exception hierarchy and the JSON error envelope
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from dualpascal.exception_handlers import register_exception_handlers
from dualpascal.exceptions import (
    AdminRequiredError,
    ArticleNotFoundError,
    DuplicateResourceError,
    ErrorCode,
    InvalidOperationError,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_not_found_details(self):
        exc = ArticleNotFoundError(12)
        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.RESOURCE_NOT_FOUND
        assert exc.message == "Article with id '12' not found"
        assert exc.details == {"resource_type": "Article", "resource_id": 12}

    def test_validation_field(self):
        exc = ValidationError("bad category", field="category_id")
        assert exc.status_code == 422
        assert exc.details == {"field": "category_id"}

    def test_duplicate(self):
        exc = DuplicateResourceError("Translation", "original_article_id", 3)
        assert exc.status_code == 409
        assert exc.error_code == ErrorCode.VALIDATION_DUPLICATE_RESOURCE

    def test_admin_required(self):
        assert AdminRequiredError().status_code == 403


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    class Body(BaseModel):
        title: str

    @app.get("/missing")
    async def missing():
        raise ArticleNotFoundError(5)

    @app.get("/invalid")
    async def invalid():
        raise InvalidOperationError("nope", details={"why": "because"})

    @app.post("/body")
    async def body(payload: Body):
        return payload

    return app


class TestExceptionHandlers:
    async def test_blog_exception_envelope(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.get("/missing")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == "RESOURCE_NOT_FOUND"
        assert error["type"] == "Not Found"
        assert error["path"] == "/missing"
        assert error["details"]["resource_id"] == 5

    async def test_invalid_operation(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.get("/invalid")

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"why": "because"}

    async def test_request_validation(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.post("/body", json={})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["error_code"] == "VALIDATION_FAILED"
        assert error["details"]["validation_errors"][0]["field"] == "title"

    async def test_unknown_route(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"
