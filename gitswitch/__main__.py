"""Main entry point for direct module execution."""

import logging
import sys

from .cli import cli
from .config import get_settings
from .ui_common import print_warning

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Log to the app directory and show warnings on stderr."""
    settings = get_settings()
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.WARNING)
    handlers: list[logging.Handler] = [stream_handler]
    try:
        settings.app_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    except OSError as e:
        print_warning(f"Cannot write log file {settings.log_file}: {e}")

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)


def main() -> None:
    """Main entry point."""
    setup_logging()
    logger.debug("Starting gitswitch")
    cli(prog_name="gitswitch")


if __name__ == "__main__":
    main()
