"""
Health check endpoint.
"""
from fastapi import APIRouter, status


router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK, summary="Health check")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}
