"""Pydantic models describing API payloads."""
from typing import Any

from pydantic import BaseModel


class WorkoutRecommendationRequest(BaseModel):
    """Body for catalog lookups by workout type and difficulty."""

    # Optional here so that absence is reported as a 400, not a 422.
    workoutType: str | None = None
    # Unrecognised values pass through the alias table and simply match nothing.
    difficultyLevel: Any = None


class ProfileRecommendationRequest(BaseModel):
    """Body forwarded to the remote recommendation service."""

    age: Any = None
    height: Any = None
    weight: Any = None


class RecommendationResponse(BaseModel):
    """Successful catalog lookup."""

    success: bool = True
    recommendations: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """Failure payload shared by every route."""

    success: bool = False
    error: str


class HealthResponse(BaseModel):
    """Combined liveness of the gateway and the recommendation service."""

    expressServer: str = "ok"
    pythonServer: str
    error: str | None = None
