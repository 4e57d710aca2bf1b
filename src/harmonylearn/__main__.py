"""Run the API with ``python -m harmonylearn``."""

import uvicorn

from harmonylearn.config import settings


def main() -> None:
    uvicorn.run(
        "harmonylearn.main:app",
        host="0.0.0.0",  # nosec B104 - Intentional for containerized deployment
        port=settings.PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
