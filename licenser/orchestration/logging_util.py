import logging
import os
import sys
from typing import Optional

from licenser.config_parsers.settings import LOG_FILE_ENV, LOG_LEVEL_ENV, LOGGER_NAME

# $LOG_LEVEL -> level of the licenser logger.
# 0 still lets catalog warnings (empty _licenses/, no match above threshold) reach the terminal.
_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,    # catalog directory and record count
    2: logging.DEBUG,   # every loaded file and the best match per request
}

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _read_level() -> int:
    try:
        level = int(os.getenv(LOG_LEVEL_ENV, "0"))
    except ValueError:
        level = 0  # fallback if env var is invalid
    return 0 if level < 0 else 2 if level > 2 else level


def get_package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging_util(also_stderr: bool = False, log_file: Optional[str] = None) -> int:
    """
    Configure the `licenser` logger used by the catalog, parser and scoring modules.
    - Level comes from $LOG_LEVEL (0 warnings, 1 info, 2 debug; clamped).
    - Log file comes from the argument or $LOG_FILE; it is created even at level 0
      but only receives records when the level is above 0.
    - also_stderr: mirror the package logger to STDERR (the CLI passes True).
    Records do not propagate to the root logger, so an embedding application's
    own handlers are left alone.
    Returns the normalized level actually used (0/1/2).
    """
    lvl = _read_level()
    log_file = log_file or os.getenv(LOG_FILE_ENV)

    logger = get_package_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(_LEVELS[lvl])
    logger.propagate = False

    fmt = logging.Formatter(_FORMAT, "%H:%M:%S")

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        open(log_file, "a", encoding="utf-8").close()
        if lvl > 0:
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    if also_stderr:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s") if lvl == 0 else fmt)
        logger.addHandler(sh)

    return lvl
