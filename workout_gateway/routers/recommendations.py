"""API endpoints for workout recommendations."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from workout_gateway.dependencies import get_catalog, get_recommender_client
from workout_gateway.errors import GatewayError, InternalError
from workout_gateway.models.schemas import (
    ErrorResponse,
    ProfileRecommendationRequest,
    RecommendationResponse,
    WorkoutRecommendationRequest,
)
from workout_gateway.models.workout_library import Catalog
from workout_gateway.services.recommendation_selector import select_recommendations
from workout_gateway.services.recommender_client import RecommenderClient


logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommendations"])


@router.post(
    "/api/recommend",
    response_model=RecommendationResponse,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/recommend",
    response_model=RecommendationResponse,
    responses={400: {"model": ErrorResponse}},
    deprecated=True,
)
async def recommend_workouts(
    body: WorkoutRecommendationRequest,
    catalog: Catalog = Depends(get_catalog),
) -> RecommendationResponse:
    """
    Recommend catalog exercises for a workout type.

    ``/recommend`` is kept for older clients and shares this handler.

    Returns:
        RecommendationResponse: Matching exercises in catalog order
    """
    try:
        recommendations = select_recommendations(
            catalog, body.workoutType, body.difficultyLevel
        )
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Error in recommend endpoint")
        raise InternalError("Server error while processing recommendation") from exc

    logger.info(
        "Recommended %d exercises | type=%s difficulty=%s",
        len(recommendations),
        body.workoutType,
        body.difficultyLevel or "all",
    )
    return RecommendationResponse(recommendations=recommendations)


@router.post(
    "/api/recommendations",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def recommend_for_profile(
    body: ProfileRecommendationRequest,
    client: RecommenderClient = Depends(get_recommender_client),
):
    """Relay an age/height/weight profile to the recommendation service."""

    return await client.forward_profile(body.age, body.height, body.weight)
