"""Health check endpoints."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    """
    Liveness check for the editor shell.

    Returns:
        Simple OK response if the service is running
    """
    return {"status": "ok"}
