# worktales/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from bson.errors import InvalidId
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from worktales.api.v1.auth import router as auth_router
from worktales.api.v1.bids import router as bids_router
from worktales.api.v1.jobs import router as jobs_router
from worktales.api.v1.testimonials import router as testimonials_router
from worktales.core.config import get_settings
from worktales.core.logging_config import configure_logging
from worktales.db.mongo import MongoStore

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


async def _server_error(request: Request, exc: Exception):
    # malformed ids and driver failures end up here; no detail leaks to the client
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "internal server error"})


def create_app(store: Optional[MongoStore] = None) -> FastAPI:
    """
    Build the API. When ``store`` is given it is used as-is and left open at
    shutdown; otherwise a store is opened from settings for the app's lifetime.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            app.state.store = store
            yield
            return
        owned = MongoStore.from_settings(settings)
        try:
            await owned.ping()
        except PyMongoError:
            logger.exception("MongoDB ping failed; serving anyway")
        app.state.store = owned
        try:
            yield
        finally:
            owned.close()

    app = FastAPI(title="WorkTales API", lifespan=lifespan)
    if store is not None:
        # ASGI test transports do not run the lifespan
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidId, _server_error)
    app.add_exception_handler(PyMongoError, _server_error)

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(jobs_router, prefix=API_PREFIX)
    app.include_router(bids_router, prefix=API_PREFIX)
    app.include_router(testimonials_router, prefix=API_PREFIX)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "worktales server is Running"

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server is running on %s", settings.PORT)
    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
