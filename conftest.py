"""
Pytest configuration and fixtures for the entire test suite.
This file provides helpers for building throwaway catalogs on disk.
"""

import logging
import pytest
from pathlib import Path
from typing import Callable, Dict

from licenser.catalog.catalog import load_catalog
from licenser.orchestration.logging_util import get_package_logger


MIT_TEXT = (
    "MIT License\n\n"
    "Permission is hereby granted, free of charge, to any person obtaining a copy\n"
    "of this software and associated documentation files (the \"Software\"), to deal\n"
    "in the Software without restriction, including without limitation the rights\n"
    "to use, copy, modify, merge, publish, distribute, sublicense, and/or sell\n"
    "copies of the Software.\n"
)

APACHE_TEXT = (
    "Apache License\nVersion 2.0, January 2004\n\n"
    "TERMS AND CONDITIONS FOR USE, REPRODUCTION, AND DISTRIBUTION\n\n"
    "1. Definitions. \"License\" shall mean the terms and conditions for use, reproduction,\n"
    "and distribution as defined by Sections 1 through 9 of this document.\n"
    "\"Licensor\" shall mean the copyright owner or entity authorized by the copyright\n"
    "owner that is granting the License. \"Legal Entity\" shall mean the union of the\n"
    "acting entity and all other entities that control, are controlled by, or are under\n"
    "common control with that entity.\n"
    "2. Grant of Copyright License. Subject to the terms and conditions of this License,\n"
    "each Contributor hereby grants to You a perpetual, worldwide, non-exclusive,\n"
    "no-charge, royalty-free, irrevocable copyright license.\n"
)


def make_record(spdx_id: str, text: str, title: str = "", extra_yaml: str = "") -> str:
    title = title or f"{spdx_id} License"
    return f"---\ntitle: {title}\nspdx-id: {spdx_id}\n{extra_yaml}---\n{text}"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging_util (called by the CLI) so handlers never outlive a test."""
    yield
    logger = get_package_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Write {filename: contents} under tmp_path/_licenses and return tmp_path."""

    def _write(files: Dict[str, str]) -> Path:
        lic_dir = tmp_path / "_licenses"
        lic_dir.mkdir(exist_ok=True)
        for name, contents in files.items():
            (lic_dir / name).write_bytes(contents.encode("utf-8"))
        return tmp_path

    return _write


@pytest.fixture
def mit_apache_catalog(write_catalog):
    base = write_catalog({
        "apache-2.0.txt": make_record("Apache-2.0", APACHE_TEXT, title="Apache License 2.0"),
        "mit.txt": make_record("MIT", MIT_TEXT, title="MIT License"),
    })
    return load_catalog(base)


@pytest.fixture
def bundled_catalog():
    """The catalog shipped inside the licenser package."""
    return load_catalog()
