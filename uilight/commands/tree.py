"""uilight tree <dump>: print the reconstructed hierarchy as a Mermaid diagram."""
from __future__ import annotations

from pathlib import Path

from uilight.commands import read_dump
from uilight.config import load_config
from uilight.dump.mermaid import generate_mermaid


def cmd_tree(dump_file: str, cwd: str):
    settings = load_config(cwd)
    tree = read_dump(Path(cwd) / dump_file, settings.section)

    print(f"✓ {dump_file}: {len(tree)} element(s)")
    print()
    print("```mermaid")
    print(generate_mermaid(tree.root))
    print("```")
