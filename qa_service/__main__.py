"""Run the API with uvicorn: ``python -m qa_service``.

Settings are resolved before uvicorn starts, so a missing DATABASE_URL
aborts the process with a validation error.
"""

import uvicorn

from qa_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "qa_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
