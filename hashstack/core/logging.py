"""Console logging setup shared by the web shell and the CLI."""

import logging
import sys

from hashstack.core.config import get_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    """
    Configure application logging.

    Invariants:
    - Exactly one console handler on the root logger; calling again replaces it.
    - Level comes from the argument, else from Settings.log_level.
    - Credentials are never passed to loggers; callers log status codes and counts only.
    """
    level_name = (level or get_config().log_level).upper()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    root.setLevel(level_name)
    # Remove existing handlers so we don't duplicate when called again
    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level_name)
    console.setFormatter(formatter)
    root.addHandler(console)

    # urllib3 logs every connection at DEBUG; keep it quiet unless something breaks.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
