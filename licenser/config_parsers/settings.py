'''
This file sets the catalog layout and scoring constants for the license matcher.
'''

import os
from typing import Optional

# Catalog layout (choosealicense.com style records)
LICENSES_DIR_NAME = "_licenses"
LICENSE_FILE_SUFFIX = ".txt"
RECORD_SEPARATOR = b"---\n"
RECORD_SEGMENTS = 3  # front matter marker, YAML metadata, license text
RECORD_ENCODING = "utf-8"

# Environment override for the directory holding _licenses/
BASE_DIR_ENV = "LICENSER_BASE_DIR"

# Coefficient reported when neither text has a single bigram
# (both strings shorter than two characters); 2*0/(0+0) is otherwise undefined.
EMPTY_PAIR_COEFFICIENT = 0.0

# CLI defaults
DEFAULT_TOP_N: Optional[int] = None  # None shows every catalog entry
PERCENT_FORMAT = "{:0.2f}"

# Logging: package logger configured by the CLI from $LOG_FILE / $LOG_LEVEL
LOGGER_NAME = "licenser"
LOG_FILE_ENV = "LOG_FILE"
LOG_LEVEL_ENV = "LOG_LEVEL"


def base_dir_from_env() -> Optional[str]:
    """Return the catalog base directory override from the environment, if set."""
    value = os.getenv(BASE_DIR_ENV, "").strip()
    return value or None
