"""
Console entry point: load the plugin configuration from the environment.

Exits 0 when the configuration is usable, 1 when any variable fails to
coerce. With DEBUG set, the redacted configuration goes to stderr.
"""

import logging
import os
import sys

from drone_helm.config import new_config
from drone_helm.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    setup_logging()
    try:
        cfg = new_config(sys.stdout, sys.stderr)
    except ConfigurationError as e:
        logger.error(f"❌ Failed to load configuration: {e}")
        logger.debug(f"Error context: {e.context}")
        return 1

    logger.info(f"✅ Configuration ready: command={cfg.command or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
