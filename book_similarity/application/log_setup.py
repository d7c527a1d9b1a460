# book_similarity/application/log_setup.py
import sys
from loguru import logger
from book_similarity.application.settings import Settings, get_settings

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
# stdout carries the report; diagnostics go to stderr as bare messages
PLAIN_FORMAT = "{message}"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Loguru once, based on Settings.debug."""
    settings = settings or get_settings()

    logger.remove()  # remove default handler(s) to avoid duplicates on reload
    logger.add(
        sys.stderr,
        level="DEBUG" if settings.debug else "WARNING",
        format=DEBUG_FORMAT if settings.debug else PLAIN_FORMAT,
        colorize=None if settings.debug else False,
        backtrace=False,
        diagnose=False,
    )
