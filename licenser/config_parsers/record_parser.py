# licenser/config_parsers/record_parser.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Tuple

import yaml
from pydantic import ValidationError

from licenser.config_parsers.settings import (
    RECORD_ENCODING,
    RECORD_SEGMENTS,
    RECORD_SEPARATOR,
)
from licenser.models.types import LicenseMetadata, LicenseRecord
from licenser.orchestration.error_handling import (
    CatalogLoadError,
    ErrorContext,
    MalformedRecord,
    MetadataParseError,
)

logger = logging.getLogger(__name__)


# ---------- Segment splitting ----------

def split_record(raw: bytes, name: str = "<record>") -> Tuple[bytes, bytes, bytes]:
    """
    Split a catalog record into (front matter, metadata, text).

    The record must contain the separator exactly twice. The front segment is
    normally empty and is not interpreted.
    """
    fragments = raw.split(RECORD_SEPARATOR)
    if len(fragments) != RECORD_SEGMENTS:
        raise MalformedRecord(
            f"want {RECORD_SEGMENTS} fragments, got {len(fragments)}",
            ErrorContext(
                file_path=name,
                operation="split_record",
                additional_info={"separators": len(fragments) - 1},
            ),
        )
    front, meta, text = fragments
    return front, meta, text


# ---------- Metadata ----------

def parse_metadata(segment: bytes, name: str = "<record>") -> LicenseMetadata:
    """Parse and validate the YAML metadata block."""
    ctx = ErrorContext(file_path=name, operation="parse_metadata")
    try:
        doc = yaml.safe_load(segment)
    except yaml.YAMLError as e:
        raise MetadataParseError(f"failed to read {name}: {e}", ctx) from e

    if not isinstance(doc, dict):
        raise MetadataParseError(
            f"failed to read {name}: metadata must be a mapping, got {type(doc).__name__}",
            ctx,
        )

    try:
        return LicenseMetadata.model_validate(doc)
    except ValidationError as e:
        raise MetadataParseError(f"failed to read {name}: {e}", ctx) from e


# ---------- Whole record ----------

def parse_record(raw: bytes, name: str = "<record>", path: Path | None = None) -> LicenseRecord:
    _, meta_segment, text_segment = split_record(raw, name)
    meta = parse_metadata(meta_segment, name)

    try:
        text = text_segment.decode(RECORD_ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedRecord(
            f"license text is not valid {RECORD_ENCODING}",
            ErrorContext(file_path=name, spdx_id=meta.spdx_id, operation="parse_record"),
        ) from e
    if not text:
        raise MalformedRecord(
            "license text is empty",
            ErrorContext(file_path=name, spdx_id=meta.spdx_id, operation="parse_record"),
        )

    return LicenseRecord.from_metadata(meta, text, path=path)


def read_license_data(path: str | Path) -> LicenseRecord:
    """Read one catalog file from disk into a LicenseRecord."""
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise CatalogLoadError(
            f"could not read license file: {e}",
            ErrorContext(file_path=str(p), operation="read_license_data"),
        ) from e

    record = parse_record(raw, p.name, path=p)
    logger.debug("loaded %s (%s) from %s", record.spdx_id, record.title, p.name)
    return record
