"""
licenser: identify a license text by bigram similarity to a bundled catalog
"""

from .catalog.catalog import Catalog, load_catalog, resolve_base_path
from .models.types import LicenseRecord, MatchResult
from .orchestration.error_handling import (
    CatalogLoadError,
    InputReadError,
    LicenserError,
    MalformedRecord,
    MetadataParseError,
)
from .scoring.ranking import best_match, score, score_file, score_reader
from .scoring.similarity import bigrams, dice_coefficient

__all__ = [
    "Catalog",
    "load_catalog",
    "resolve_base_path",
    "LicenseRecord",
    "MatchResult",
    "LicenserError",
    "CatalogLoadError",
    "MalformedRecord",
    "MetadataParseError",
    "InputReadError",
    "score",
    "score_file",
    "score_reader",
    "best_match",
    "bigrams",
    "dice_coefficient",
]
