"""uilight paths <dump> [app]: print a locator expression for every element."""
from __future__ import annotations

import sys
from pathlib import Path

from uilight.commands import read_dump
from uilight.config import load_config
from uilight.dump.paths import accessor_dump


def cmd_paths(dump_file: str, cwd: str, app_name: str | None = None):
    settings = load_config(cwd)
    tree = read_dump(Path(cwd) / dump_file, settings.section)

    paths = accessor_dump(tree, app_name or settings.app_name, settings.plurals)
    for path in paths:
        print(path)

    if tree.issues:
        print(f"⚠ {len(tree.issues)} line(s) left out of the tree; run `uilight check {dump_file}`", file=sys.stderr)
