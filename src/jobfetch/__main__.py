"""Process entry point: ``python -m jobfetch`` or the ``jobfetch`` script."""

from __future__ import annotations

import logging
import sys

from pydantic import ValidationError

from jobfetch.config import load_settings
from jobfetch.errors import ConfigurationError
from jobfetch.workflows import DailyFetchWorkflow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("jobfetch")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        settings = load_settings()
    except (ConfigurationError, ValidationError):
        logger.exception("Invalid configuration")
        return 1

    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(
        "Fetching postings for %d role queries: %s",
        len(settings.role_query),
        ", ".join(settings.role_query),
    )
    return DailyFetchWorkflow(settings).run()


if __name__ == "__main__":
    sys.exit(main())
