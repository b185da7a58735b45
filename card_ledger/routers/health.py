from fastapi import APIRouter

from ..models.transaction import utcnow

router = APIRouter()


@router.get("/health")
def health():
    return {
        "success": True,
        "message": "API v1 is healthy",
        "timestamp": utcnow().isoformat() + "Z",
    }
