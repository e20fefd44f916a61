"""FastAPI entry point for the academic console service."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import get_settings
from errors.exceptions import ConsoleError
from models.errors import ErrorCode, error_body, format_error
from services.auth_service import AuthService, get_auth_service
from services.evaluation_session import WorkspaceRegistry, get_workspace_registry
from services.middleware import RequestIdMiddleware

logger = logging.getLogger(__name__)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def purge_expired_sessions(auth: AuthService, registry: WorkspaceRegistry) -> int:
    """Expire idle sessions and drop workspaces no live session owns."""
    removed = auth.cleanup_expired()
    registry.retain(auth.active_tokens())
    return removed


async def periodic_session_cleanup(interval_seconds: int = 300) -> None:
    """Drop expired login sessions every *interval_seconds*."""
    auth = get_auth_service()
    registry = get_workspace_registry()
    while True:
        await asyncio.sleep(interval_seconds)
        purge_expired_sessions(auth, registry)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start/stop background housekeeping."""
    cleanup_task = asyncio.create_task(periodic_session_cleanup())
    logger.info(
        "Console service started (simulate_latency=%s)", settings.simulate_latency
    )

    yield

    cleanup_task.cancel()
    try:
        await cleanup_task
    except asyncio.CancelledError:
        pass


app = FastAPI(
    title="Academic Console",
    description="Students, classes and evaluation-weight configuration over in-memory mock data",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware stack (outermost first) ─────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)


# ── Error mapping ───────────────────────────────────────────
@app.exception_handler(ConsoleError)
async def console_error_handler(request: Request, exc: ConsoleError):
    status, body = error_body(exc)
    if status >= 500:
        logger.error(format_error(ErrorCode.INTERNAL_ERROR, str(exc)))
    else:
        logger.debug("%s %s -> %d: %s", request.method, request.url.path, status, exc)
    return JSONResponse(status_code=status, content=body)


# ── Register routers ────────────────────────────────────────
from api.auth import router as auth_router  # noqa: E402
from api.classes import router as classes_router  # noqa: E402
from api.dashboard import router as dashboard_router  # noqa: E402
from api.evaluations import router as evaluations_router  # noqa: E402
from api.health import router as health_router  # noqa: E402
from api.students import router as students_router  # noqa: E402

app.include_router(health_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(students_router)
app.include_router(classes_router)
app.include_router(evaluations_router)


if __name__ == "__main__":
    if settings.debug:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
            reload=True,
        )
    else:
        # Production: prefer gunicorn main:app -c deploy/gunicorn.conf.py
        # Sessions and criteria live in process memory, so keep a single worker.
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
        )
