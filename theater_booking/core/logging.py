import sys

from loguru import logger

from theater_booking.core.config import get_settings

LOG_FORMAT = ' | '.join(
    (
        '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>',
        '<level>{level:<8}</level>',
        '<cyan>{name}:{function}:{line}</cyan>',
        '{message}',
    )
)


def setup_logging(level: str | None = None) -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level or get_settings().LOG_LEVEL)
