import json
import logging

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from dualpascal.middleware.logging import RequestIdFilter, StructuredFormatter, StructuredLoggingMiddleware, request_id_var


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(StructuredLoggingMiddleware)

    @app.get("/{locale}/ping")
    async def ping(locale: str):
        return {"ok": True}

    return app


class TestStructuredLoggingMiddleware:
    async def test_echoes_request_id(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.get("/ja/ping", headers={"X-Request-ID": "req-1"})

        assert response.headers["X-Request-ID"] == "req-1"

    async def test_generates_request_id_and_logs(self, caplog):
        caplog.set_level(logging.INFO, logger="dualpascal.access")
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            response = await client.get("/en/ping")

        assert response.headers["X-Request-ID"]
        record = next(r for r in caplog.records if r.name == "dualpascal.access")
        assert record.status_code == 200
        assert record.path == "/en/ping"


class TestStructuredFormatter:
    def test_json_output_with_request_id(self):
        token = request_id_var.set("abc")
        try:
            record = logging.LogRecord("dualpascal.test", logging.INFO, __file__, 1, "hello %s", ("世界",), None)
            RequestIdFilter().filter(record)
            record.locale = "ja"
            data = json.loads(StructuredFormatter().format(record))
        finally:
            request_id_var.reset(token)

        assert data["message"] == "hello 世界"
        assert data["request_id"] == "abc"
        assert data["locale"] == "ja"
