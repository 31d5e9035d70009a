# Liveness and readiness routes

from fastapi import APIRouter, HTTPException, status

from taskboard.config import settings
from taskboard.db import check_db_connection
from taskboard.schemas import HealthResponse, MessageResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=MessageResponse)
async def root():
    return MessageResponse(message="API running")


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report whether the database answers a test query."""
    try:
        await check_db_connection()
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=settings.db_unavailable_hint,
        ) from e
    return HealthResponse(status="ok")
