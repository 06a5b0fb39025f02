"""Router exposing the gateway liveness endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from workout_gateway.dependencies import get_recommender_client
from workout_gateway.models.schemas import HealthResponse
from workout_gateway.services.recommender_client import RecommenderClient


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
async def get_health(
    client: RecommenderClient = Depends(get_recommender_client),
) -> dict[str, str]:
    """Return gateway status plus the recommendation service's reachability."""
    return await client.check_health()
