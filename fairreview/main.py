import uvicorn

from fairreview.api.app_factory import build_app
from fairreview.config.settings import Settings
from fairreview.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build application -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = build_app(settings)
    Log.info(f"Starting fair competition review service on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
