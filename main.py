# main.py

"""Development entry point: ``python main.py`` or the ``travel-planner`` script."""

from uvicorn import run

from app.configs import settings


def main() -> None:
    run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
