# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Ops endpoints: liveness, database readiness, Prometheus scrape."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.engine import Engine

from meeting_service.core.config import settings
from meeting_service.core.database import ping
from meeting_service.core.dependencies import get_engine, get_meeting_repo
from meeting_service.core.logging import get_logger
from meeting_service.repositories.meeting_repository import MeetingRepository

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME}


@router.get("/health/ready")
def readiness_check(db: Engine = Depends(get_engine),
                    meeting_repo: MeetingRepository = Depends(get_meeting_repo)):
    """Ready once the database answers and the meetings table is readable."""
    try:
        backend = ping(db)
        scheduled = meeting_repo.count_all()
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "service": settings.SERVICE_NAME,
                     "database": "unreachable", "detail": str(exc)},
        )
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "database": backend,
        "meetings_scheduled": scheduled,
        "notify_window_days": settings.NOTIFY_WINDOW_DAYS,
    }


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
