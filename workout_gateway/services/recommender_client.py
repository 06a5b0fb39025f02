"""Client for the remote profile-based recommendation service."""
from __future__ import annotations

import logging
import math
from typing import Any

import httpx

from workout_gateway.errors import (
    InternalError,
    InvalidInput,
    ServiceUnavailable,
    UpstreamError,
)


logger = logging.getLogger(__name__)

INVALID_PROFILE_MESSAGE = "Missing required fields or invalid data types"


def _parse_number(value: Any) -> float | None:
    # Falsy values (None, "", 0) count as missing.
    if not value or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_profile(age: Any, height: Any, weight: Any) -> tuple[float, float, float]:
    """Coerce a numeric profile to floats, raising InvalidInput on bad values."""

    parsed = [_parse_number(value) for value in (age, height, weight)]
    if any(value is None for value in parsed):
        raise InvalidInput(INVALID_PROFILE_MESSAGE)
    return parsed[0], parsed[1], parsed[2]


def build_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create the shared upstream client; redirects from the service are followed."""

    return httpx.AsyncClient(follow_redirects=True, **kwargs)


def _upstream_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return "Unknown error"


class RecommenderClient:
    """Thin async wrapper around the remote recommendation service."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        health_timeout: float = 5.0,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._health_timeout = health_timeout

    async def forward_profile(self, age: Any, height: Any, weight: Any) -> Any:
        """
        Forward an age/height/weight profile and relay the upstream body.

        Exactly one request is sent per call. Nothing is sent when the
        profile does not validate.

        Returns:
            The upstream JSON body, unchanged.

        Raises:
            InvalidInput: A value is missing or not numeric
            ServiceUnavailable: The upstream host refused or could not be resolved
            UpstreamError: The upstream finally answered with a non-2xx status
            InternalError: Any other failure
        """
        age_value, height_value, weight_value = parse_profile(age, height, weight)
        payload = {"age": age_value, "height": height_value, "weight": weight_value}

        try:
            response = await self._http.post(
                f"{self._base_url}/api/recommend",
                json=payload,
                timeout=None,
            )
        except httpx.ConnectError as exc:
            logger.error("Recommendation service unreachable at %s: %s", self._base_url, exc)
            raise ServiceUnavailable(
                "Python server is not available. Please try again later."
            ) from exc
        except Exception as exc:
            logger.exception("Request to recommendation service failed")
            raise InternalError("Failed to process request with Python server") from exc

        if not response.is_success:
            message = _upstream_error_message(response)
            logger.warning(
                "Recommendation service returned HTTP %s: %s",
                response.status_code,
                message,
            )
            raise UpstreamError(response.status_code, f"Python server error: {message}")

        try:
            return response.json()
        except ValueError as exc:
            logger.exception("Recommendation service returned an undecodable body")
            raise InternalError("Failed to process request with Python server") from exc

    async def check_health(self) -> dict[str, str]:
        """Report gateway liveness together with the upstream's own health."""

        try:
            response = await self._http.get(
                f"{self._base_url}/api/health",
                timeout=self._health_timeout,
            )
            response.raise_for_status()
            data = response.json()
        except Exception as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.warning("Recommendation service health check failed: %s", reason)
            return {
                "expressServer": "ok",
                "pythonServer": "offline",
                "error": reason,
            }

        status = data.get("status") if isinstance(data, dict) else None
        return {
            "expressServer": "ok",
            "pythonServer": str(status) if status else "ok",
        }
