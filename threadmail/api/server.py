"""FastAPI application for the mailbox read API."""

import asyncio
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from threadmail.api.routes import router as mailbox_router
from threadmail.db import init_db
from threadmail.utils.logger import bind_context, clear_context, get_logger

logger = get_logger("threadmail.api.server")


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Create engine and tables before serving; seeding a fresh database can take a moment."""
    await asyncio.to_thread(init_db)
    logger.info("api.startup")
    yield
    logger.info("api.shutdown")


def create_app() -> FastAPI:
    """Create FastAPI app with /health and the /api mailbox router."""
    app = FastAPI(title="Threadmail", version="0.1.0", lifespan=_lifespan)
    app.include_router(mailbox_router)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        clear_context()
        bind_context(request_id=request.headers.get("x-request-id") or uuid.uuid4().hex, path=request.url.path)
        try:
            response = await call_next(request)
            logger.debug("api.request.done", method=request.method, status=response.status_code)
            return response
        except Exception:
            logger.exception("api.request.failed", method=request.method)
            raise
        finally:
            clear_context()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
