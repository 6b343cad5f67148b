from loguru import logger

from .config import get_settings

logger.add(
    get_settings().log_file,
    rotation="10 MB",
    retention="7 days",
    serialize=True,
)

__all__ = ["logger"]
