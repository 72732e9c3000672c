"""Thin CLI router: dispatches to commands and the MCP server."""
from __future__ import annotations

import logging
import os
import sys

USAGE = """\
uilight: UI element dumps and locator paths

Usage:
  uilight paths <dump> [app]   Print a locator expression for every element
  uilight tree <dump>          Print the element hierarchy as a Mermaid diagram
  uilight check <dump>         Report malformed lines and structural problems

Internal:
  uilight mcp-server           Start MCP Server (stdio)

Settings are read from .uilight.yaml in the current directory.
"""


def _configure_logging(cwd: str) -> None:
    from uilight.config import load_config
    try:
        level = load_config(cwd).log_level
    except ValueError as e:
        print(f"✗ Config error: {e}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    args = sys.argv[1:]
    cwd = os.getcwd()
    command = args[0] if args else None

    if command in ("paths", "tree", "check"):
        if len(args) < 2:
            print(f"Usage: uilight {command} <dump-file>", file=sys.stderr)
            sys.exit(1)
        _configure_logging(cwd)

    if command == "paths":
        from uilight.commands.paths import cmd_paths
        cmd_paths(args[1], cwd, args[2] if len(args) > 2 else None)

    elif command == "tree":
        from uilight.commands.tree import cmd_tree
        cmd_tree(args[1], cwd)

    elif command == "check":
        from uilight.commands.check import cmd_check
        cmd_check(args[1], cwd)

    elif command == "mcp-server":
        from uilight.integrations.mcp_server import run_server
        run_server()

    elif command in ("help", "--help", "-h", None):
        print(USAGE)

    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(USAGE)
        sys.exit(1)
