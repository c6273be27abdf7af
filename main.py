# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Meeting Service
===============
CRUD backend for meetings, notifications, users and role-based permissions.

On startup the schema is created if missing and the bootstrap seeder makes
sure the SuperAdmin / Admin / User roles, their default accounts and their
permission claims exist. Seeding is best-effort and never blocks startup.

PUT /api/v1/notifications/send emails every user one digest of their
notifications for meetings starting more than a day from now.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meeting_service.controllers import meeting_controller, notification_controller, system_controller
from meeting_service.core.config import settings
from meeting_service.core.database import engine
from meeting_service.core.dependencies import get_seeder
from meeting_service.core.logging import get_logger
from meeting_service.core.schema import init_schema
from meeting_service.middleware import MetricsMiddleware, RequestIDMiddleware
from meeting_service.schemas import ErrorResponse

logger = get_logger("meeting-service")


def bootstrap() -> None:
    """Create tables and seed baseline data. Failures are logged, never raised."""
    try:
        init_schema(engine)
    except Exception:
        logger.warning("Could not prepare schema, DB may not be ready yet")
        return
    if settings.SEED_ON_STARTUP:
        get_seeder().initial()


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("Meeting service starting")
    bootstrap()
    yield
    engine.dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Meeting Service",
    description="Meetings, notifications, users and role permissions; emails upcoming-meeting digests.",
    version="1.0.0",
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(notification_controller.router)
app.include_router(meeting_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8005, log_level="info")
