from datetime import datetime, timezone

from fastapi import APIRouter

from ..schemas_pkg.transactions import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, name="health_check")
def health():
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))
