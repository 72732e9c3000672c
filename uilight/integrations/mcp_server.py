"""MCP Server: exposes uilight_* dump tools."""
from __future__ import annotations

import json
import os

from mcp.server.fastmcp import FastMCP

from uilight.config import load_config
from uilight.dump.mermaid import generate_mermaid
from uilight.dump.parser import load_dump
from uilight.dump.paths import iter_paths
from uilight.dump.validator import validate_tree
from uilight.errors import DumpParseError

mcp = FastMCP("uilight")


def _parse_error(e: DumpParseError) -> str:
    return json.dumps({"error": str(e), "issues": [i.to_dict() for i in e.issues]}, ensure_ascii=False)


@mcp.tool()
def uilight_element_paths(dump: str, app_name: str | None = None) -> str:
    """List a locator expression for every element in a debug description dump."""
    try:
        settings = load_config(os.getcwd())
        tree = load_dump(dump, settings.section)
        app = app_name or settings.app_name
        elements = [
            {"path": path, "type": node.element_type.debug_name, "label": node.label, "identifier": node.identifier}
            for node, path in iter_paths(tree.root, app, settings.plurals)
        ]
        return json.dumps({
            "elements": elements,
            "skipped_lines": [i.to_dict() for i in tree.issues],
        }, ensure_ascii=False, indent=2)
    except DumpParseError as e:
        return _parse_error(e)
    except Exception as e:
        return json.dumps({"error": str(e)}, ensure_ascii=False)


@mcp.tool()
def uilight_element_tree(dump: str) -> str:
    """Render the element hierarchy of a dump as a Mermaid flowchart."""
    try:
        settings = load_config(os.getcwd())
        return generate_mermaid(load_dump(dump, settings.section).root)
    except DumpParseError as e:
        return _parse_error(e)
    except Exception as e:
        return json.dumps({"error": str(e)}, ensure_ascii=False)


@mcp.tool()
def uilight_check_dump(dump: str) -> str:
    """Report malformed lines and structural problems in a dump."""
    try:
        settings = load_config(os.getcwd())
        tree = load_dump(dump, settings.section)
        issues = tree.issues + validate_tree(tree.root)
        return json.dumps({
            "elements": len(tree),
            "issues": [i.to_dict() for i in issues],
        }, ensure_ascii=False, indent=2)
    except DumpParseError as e:
        return _parse_error(e)
    except Exception as e:
        return json.dumps({"error": str(e)}, ensure_ascii=False)


def run_server():
    mcp.run(transport="stdio")
