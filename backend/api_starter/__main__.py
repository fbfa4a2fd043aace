"""Run the API with uvicorn: `python -m api_starter`."""

import uvicorn

from api_starter.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "api_starter.main:app",
        host=settings.host,
        port=settings.port,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
