# licenser/commands/cli.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from licenser.catalog.catalog import load_catalog
from licenser.config_parsers.settings import DEFAULT_TOP_N
from licenser.models.types import MatchResult
from licenser.orchestration.error_handling import LicenserError, handle_error
from licenser.orchestration.logging_util import setup_logging_util
from licenser.scoring.ranking import score_file

logger = logging.getLogger(__name__)

USAGE = "Usage: licenser [--base-dir DIR] [--top N] LICENSE_FILE\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licenser",
        description="Rank known open-source licenses by similarity to a license file.",
    )
    parser.add_argument("file", help="Path to the license text to identify")
    parser.add_argument("--base-dir", default=None, help="Directory containing _licenses/")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_N, help="Only show the N best matches")
    return parser


def render_matches(matches: List[MatchResult], console: Optional[Console] = None) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("SPDX ID")
    table.add_column("Title")
    table.add_column("Match %", justify="right")
    for m in matches:
        table.add_row(m.spdx_id, m.license.title, m.format_percent())
    (console or Console(highlight=False)).print(table)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        sys.stderr.write(USAGE)
        sys.exit(1)

    args = _build_parser().parse_args(argv)
    setup_logging_util(also_stderr=True)

    try:
        catalog = load_catalog(args.base_dir)
        matches = score_file(catalog, args.file)
    except LicenserError as e:
        handle_error(e, logger)
        return

    if args.top is not None:
        matches = matches[: max(args.top, 0)]
    render_matches(matches)


if __name__ == "__main__":
    main()
