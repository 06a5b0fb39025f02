"""Run the gateway with uvicorn on the configured port."""
import uvicorn

from workout_gateway.config import get_settings
from workout_gateway.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "workout_gateway.main:app",
        host=settings.host,
        port=settings.port,
        # The gateway dictConfig already routes the uvicorn loggers.
        log_config=None,
    )


if __name__ == "__main__":
    main()
