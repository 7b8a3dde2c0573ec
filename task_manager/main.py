import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import categories, health, tasks
from .config import Settings, get_settings
from .db.session import create_db_and_tables, get_engine
from .errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    TaskManagerError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    engine = get_engine(settings.database_url, echo=settings.sql_echo)
    create_db_and_tables(engine)
    app.state.engine = engine
    logger.info("Task manager started")
    yield
    engine.dispose()
    logger.info("Task manager stopped")


async def handle_task_manager_error(request: Request, exc: TaskManagerError):
    code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    body = {"error": exc.message}
    field = getattr(exc, "field", None)
    if field:
        body["field"] = field
    return JSONResponse(status_code=code, content=body)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Same 400 body shape as ValidationError
    first = exc.errors()[0] if exc.errors() else {}
    names = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(names)
    message = first.get("msg", "invalid request")
    body = {"error": f"{field}: {message}" if field else message}
    if field:
        body["field"] = field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(title="Task Manager", lifespan=lifespan)
    app.state.settings = settings or get_settings()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    app.add_exception_handler(TaskManagerError, handle_task_manager_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    # Mount routers
    app.include_router(tasks.router, prefix="/v1", tags=["tasks"])
    app.include_router(categories.router, prefix="/v1", tags=["categories"])
    app.include_router(health.router, tags=["health"])

    return app


app = create_app()
