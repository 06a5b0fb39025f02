"""FastAPI dependencies exposing process-wide shared objects."""
from fastapi import Request

from workout_gateway.models.workout_library import Catalog
from workout_gateway.services.recommender_client import RecommenderClient


def get_catalog(request: Request) -> Catalog:
    """Return the read-only workout catalog loaded at startup."""
    return request.app.state.catalog


def get_recommender_client(request: Request) -> RecommenderClient:
    """Return the recommendation service client created in the app lifespan."""
    return request.app.state.recommender_client
