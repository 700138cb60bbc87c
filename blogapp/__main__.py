"""Run the API server: `python -m blogapp` (listens on PORT, default 3001)."""

import uvicorn

from blogapp.config import settings


def main() -> None:
    uvicorn.run(
        "blogapp.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
