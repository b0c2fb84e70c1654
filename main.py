import sys
import uvicorn
from drive.server import create_app
from shared.config import Settings, load_settings
from shared.logging_config import setup_logger

# Set up logger
logger = setup_logger(__name__)


def build_server_config(settings: Settings) -> uvicorn.Config:
    """uvicorn configuration serving the drive API for the given settings."""
    return uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.http_port,
        log_level="info",
        reload=False,
        workers=1,
        loop="asyncio",
        timeout_keep_alive=30,
        timeout_graceful_shutdown=10
    )


def main():
    """Main entry point: load settings, make sure the root exists, serve until stopped"""
    try:
        settings = load_settings()
        settings.root_dir.mkdir(parents=True, exist_ok=True)

        config = build_server_config(settings)
        server = uvicorn.Server(config)
        logger.info("Main: Drive API listening on %s:%s", settings.host, settings.http_port)
        server.run()
    except Exception as e:
        logger.critical(f"Application critical error: {str(e)}", exc_info=True)
        sys.exit(1)
    logger.info("Main: Application shutdown complete.")


if __name__ == "__main__":
    main()
