"""uilight check <dump>: parse a dump and report structural problems."""
from __future__ import annotations

import sys
from pathlib import Path

from uilight.commands import read_dump
from uilight.config import load_config
from uilight.dump.validator import format_issues, validate_tree


def cmd_check(dump_file: str, cwd: str):
    settings = load_config(cwd)
    tree = read_dump(Path(cwd) / dump_file, settings.section)

    issues = tree.issues + validate_tree(tree.root)
    has_errors = any(i.level == "error" for i in issues)

    if has_errors:
        print(f"✗ {dump_file} has structural problems:")
        print(format_issues(issues))
        sys.exit(1)

    print(f"✓ {dump_file}: {len(tree)} element(s)")
    if issues:
        print(format_issues(issues))
