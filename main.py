import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dualpascal.config import settings
from dualpascal.database import Base, engine
from dualpascal.exception_handlers import register_exception_handlers
from dualpascal.middleware.logging import StructuredLoggingMiddleware, setup_logging
from dualpascal.routes import admin, auth, contacts, dashboard, public
from dualpascal.scheduler import scheduler

setup_logging(log_level="DEBUG" if settings.debug else "INFO", json_format=settings.environment == "production")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.debug:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured (debug mode)")

    scheduler.start()
    logger.info(f"{settings.app_name} {settings.app_version} started in {settings.environment} mode")
    try:
        yield
    finally:
        scheduler.shutdown(wait=False)
        await engine.dispose()
        logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Bilingual (ja/en) multi-author blog API",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/auth", tags=["Auth"])
    app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])
    app.include_router(contacts.router, tags=["Contacts"])
    app.include_router(public.router, tags=["Public"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
