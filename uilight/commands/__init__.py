from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from uilight.dump.parser import load_dump
from uilight.dump.validator import format_issues
from uilight.errors import DumpParseError

if TYPE_CHECKING:
    from pathlib import Path

    from uilight.types import ElementTree


def read_dump(dump_path: Path, section: str) -> ElementTree:
    """Load and parse a dump file, exiting with status 1 if that fails."""
    if not dump_path.exists():
        print(f"Dump file not found: {dump_path}", file=sys.stderr)
        sys.exit(1)

    try:
        return load_dump(dump_path.read_text(encoding="utf-8"), section)
    except DumpParseError as e:
        print(f"✗ Parse error in {dump_path.name}:", file=sys.stderr)
        print(format_issues(e.issues), file=sys.stderr)
        sys.exit(1)
