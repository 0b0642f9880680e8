"""
Rank every catalog license against an input text.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from licenser.catalog.catalog import Catalog
from licenser.config_parsers.settings import RECORD_ENCODING
from licenser.models.types import LicenseRecord, MatchResult
from licenser.orchestration.error_handling import ErrorContext, InputReadError
from licenser.scoring.similarity import bigrams, dice_from_sets

logger = logging.getLogger(__name__)


def _coefficients(records: Iterable[LicenseRecord], text: str) -> List[MatchResult]:
    # input bigrams are built once and reused for every license
    input_bigrams = bigrams(text)
    out: List[MatchResult] = []
    for lic in records:
        coef = dice_from_sets(bigrams(lic.text), input_bigrams)
        out.append(MatchResult(license=lic, coefficient=coef))
    return out


def score(catalog: Catalog, text: str) -> List[MatchResult]:
    """
    Score text against every license in the catalog.

    Returns one MatchResult per catalog entry, best first. Ties keep catalog
    order (sorted() is stable).
    """
    results = sorted(_coefficients(catalog, text), key=lambda m: m.coefficient, reverse=True)
    if results:
        logger.debug("best match %s", results[0])
    return results


def _decode(raw: bytes) -> str:
    # invalid byte sequences become U+FFFD instead of failing the whole request
    return raw.decode(RECORD_ENCODING, errors="replace")


def score_file(catalog: Catalog, path: Union[str, Path]) -> List[MatchResult]:
    """Read a license file from disk and score it."""
    p = Path(path)
    try:
        with p.open("rb") as f:
            raw = f.read()
    except OSError as e:
        raise InputReadError(
            f"failed to read license file: {e.strerror or e}",
            ErrorContext(file_path=str(p), operation="score_file"),
        ) from e
    return score(catalog, _decode(raw))


def score_reader(catalog: Catalog, stream: IO) -> List[MatchResult]:
    """Read a text or binary stream to the end and score it."""
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise InputReadError(
            f"failed to read input stream: {e}",
            ErrorContext(operation="score_reader"),
        ) from e
    if isinstance(data, (bytes, bytearray)):
        data = _decode(bytes(data))
    return score(catalog, data)


def best_match(results: List[MatchResult], min_coefficient: float = 0.0) -> Optional[MatchResult]:
    """Top-ranked result if it reaches min_coefficient, else None."""
    if not results:
        return None
    top = results[0]
    if top.coefficient < min_coefficient:
        logger.info("no license reaches %.2f (best %s)", min_coefficient, top)
        return None
    return top
