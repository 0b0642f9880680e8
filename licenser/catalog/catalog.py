"""
Reference catalog: every bundled license record, loaded once and then read-only.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from licenser.config_parsers.record_parser import read_license_data
from licenser.config_parsers.settings import (
    LICENSE_FILE_SUFFIX,
    LICENSES_DIR_NAME,
    base_dir_from_env,
)
from licenser.models.types import LicenseRecord, SpdxId
from licenser.orchestration.error_handling import CatalogLoadError, ErrorContext

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Directory of the installed licenser package; _licenses/ ships beside this.
PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Catalog(Sequence):
    """Immutable, ordered collection of LicenseRecord."""

    def __init__(self, records: Iterable[LicenseRecord], base_path: Optional[Path] = None):
        self._records: Tuple[LicenseRecord, ...] = tuple(records)
        self.base_path = base_path

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LicenseRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} licenses, base_path={self.base_path!s})"

    def spdx_ids(self) -> List[SpdxId]:
        return [r.spdx_id for r in self._records]

    def find(self, spdx_id: str) -> List[LicenseRecord]:
        """All records carrying this SPDX id (case-insensitive); duplicates are kept."""
        wanted = spdx_id.strip().lower()
        return [r for r in self._records if r.spdx_id.lower() == wanted]


def resolve_base_path(base_path: Optional[PathLike] = None) -> Path:
    """
    Resolve the directory that holds _licenses/.
    Priority: explicit argument, $LICENSER_BASE_DIR, installed package directory.
    """
    chosen = base_path if base_path else base_dir_from_env()
    base = Path(chosen) if chosen else PACKAGE_DIR

    if not base.is_dir():
        raise CatalogLoadError(
            "could not find base path",
            ErrorContext(file_path=str(base), operation="resolve_base_path"),
        )
    return base


def _discover(license_dir: Path) -> List[Path]:
    try:
        files = [p for p in license_dir.iterdir() if p.suffix == LICENSE_FILE_SUFFIX and p.is_file()]
    except OSError as e:
        raise CatalogLoadError(
            f"could not load license files: {e}",
            ErrorContext(file_path=str(license_dir), operation="discover"),
        ) from e
    # sorted so repeated loads (and ranking ties) are reproducible
    return sorted(files, key=lambda p: p.name)


def load_catalog(base_path: Optional[PathLike] = None) -> Catalog:
    """
    Load every record under <base>/_licenses/*.txt.

    All-or-nothing: the first unreadable or malformed file raises and no
    catalog is returned.
    """
    base = resolve_base_path(base_path)
    license_dir = base / LICENSES_DIR_NAME
    if not license_dir.is_dir():
        raise CatalogLoadError(
            f"license directory {LICENSES_DIR_NAME} not found",
            ErrorContext(file_path=str(license_dir), operation="load_catalog"),
        )

    files = _discover(license_dir)
    if not files:
        logger.warning("no %s files found in %s", LICENSE_FILE_SUFFIX, license_dir)

    records = [read_license_data(f) for f in files]
    logger.info("loaded %d licenses from %s", len(records), license_dir)
    return Catalog(records, base_path=base)
