"""Run the roster server: ``python -m roster.server``.

uvicorn handles SIGINT/SIGTERM; the app lifespan closes the database on the way out.
"""

import uvicorn

from roster.server.settings import RosterServerSettings


def main() -> None:
    settings = RosterServerSettings()
    uvicorn.run(
        "roster.server.app:get_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
