"""
Run the API with uvicorn: ``python -m app``.

Host and port come from settings (HOST / PORT environment variables).
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production and settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
