"""Process-wide logging setup."""

import logging

from user_management.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Apply LOG_LEVEL and the service log format to the root logger.

    Modules log through ``logging.getLogger(__name__)``; this is called once
    from the process entry point before the server starts.
    """
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        force=True,
    )
    if settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
