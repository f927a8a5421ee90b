# main.py
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request

from app.config import APP_NAME, APP_VERSION, CONNECT_TIMEOUT_S, HOST, LOG_LEVEL, PORT
from app.domain.errors import StartupFailure
from app.domain.ports import StoragePort
from app.infra.repo.mongo_repo import MongoStorageGateway
from app.presentation.routers import router as api_router

# --- logging config must run before any logger is used ---
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

log = logging.getLogger("catalog")
# own request logger, separate from 'uvicorn.access'
app_logger = logging.getLogger("catalog.request")


def create_app(gateway: StoragePort | None = None) -> FastAPI:
    """
    Build the app. Without `gateway` a MongoStorageGateway is created at
    startup; tests pass a fake. Either way the lifespan connects it before
    serving and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            gw = app.state.gateway or MongoStorageGateway()
            await gw.connect(CONNECT_TIMEOUT_S)
        except StartupFailure:
            log.critical("Storage unreachable at startup, aborting")
            raise
        app.state.gateway = gw
        log.info("Routes: GET /api/products/{id}, GET /api/customers/{id}")
        try:
            yield
        finally:
            # close() logs and swallows its own errors
            await gw.close()

    # only the two lookup routes are served; no docs/openapi pages
    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.gateway = gateway

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        app_logger.info(f"➡️ Incoming {request.method} {request.url.path}")
        try:
            response = await call_next(request)
            app_logger.info(f"⬅️ Completed {request.method} {request.url.path} -> {response.status_code}")
            return response
        except Exception:
            app_logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
            raise

    app.include_router(api_router)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
