"""Parse a textual debug description into an ElementNode tree."""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from uilight.dump.validator import DumpIssue
from uilight.element_types import from_debug_name
from uilight.errors import DumpParseError, StructuralError
from uilight.types import ElementNode, ElementTree

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "Element subtree"

_NUM = r"-?[\d.]+"

# <markers><Type> 0x<hex>: [special][{{x, y}, {w, h}}][, key: 'value']*
LINE_RE = re.compile(
    r"^(?P<markers>[ →]*)(?P<type>\S+) 0x(?P<handle>[0-9a-fA-F]+):\s?"
    r"(?P<special>[^{]*)"
    rf"(?P<geometry>\{{?\{{(?P<x>{_NUM}), (?P<y>{_NUM})\}}, \{{(?P<w>{_NUM}), (?P<h>{_NUM})\}}\}}?)?"
    r"(?:, )?(?P<extras>.*)$"
)

_TRAITS_RE = re.compile(r"traits: (\d+)")
_MAIN_WINDOW = "Main Window"

# Title line followed by indented lines, the first starting with " →"
SECTION_RE = re.compile(r"^([^:\n]+):\n( →.*(?:\n .*)*)", re.MULTILINE)

EXTRA_KEYS = {
    "label": "label",
    "identifier": "identifier",
    "value": "value",
    "placeholderValue": "placeholder_value",
}


def _extra(text: str, key: str) -> str | None:
    m = re.search(rf"(?<!\w){key}:\s*'(.*?)'(?=,|$)", text)
    return m.group(1) if m else None


def _float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def parse_line(line: str) -> ElementNode | None:
    """Build a standalone element from one dump line, or None if it doesn't fit the grammar."""
    content = line.rstrip()
    m = LINE_RE.match(content)
    if not m:
        return None

    depth = len(m.group("markers")) // 2 - 1
    if depth < 0:
        return None

    special = m.group("special")
    # Without geometry the key/value pairs are swallowed by the special segment
    extras = m.group("extras") if m.group("geometry") else special + m.group("extras")
    traits = _TRAITS_RE.search(special)

    node = ElementNode(
        element_type=from_debug_name(m.group("type")),
        type_name=m.group("type"),
        handle=int(m.group("handle"), 16),
        x=_float(m.group("x")),
        y=_float(m.group("y")),
        width=_float(m.group("w")),
        height=_float(m.group("h")),
        traits=int(traits.group(1)) if traits else 0,
        is_main_window=_MAIN_WINDOW in special,
        depth=depth,
        source=line,
    )
    for key, attr in EXTRA_KEYS.items():
        setattr(node, attr, _extra(extras, key))
    return node


def build_tree(lines: Iterable[str], *, strict: bool = False) -> ElementTree:
    """Assemble parsed lines into a tree using an explicit ancestor stack.

    Raises DumpParseError listing every malformed line; no partial tree is
    returned in that case. Depth jumps are collected as structural issues and
    the offending line is left out of the tree.
    """
    parsed: list[tuple[int, ElementNode]] = []
    bad: list[DumpIssue] = []
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue
        node = parse_line(line)
        if node is None:
            logger.warning("Malformed dump line %d: %s", line_no, line)
            bad.append(DumpIssue("error", "Malformed element line", line, line_no))
        else:
            parsed.append((line_no, node))

    if bad:
        raise DumpParseError(bad)
    if not parsed:
        raise DumpParseError([DumpIssue("error", "Dump contains no element lines")])

    root: ElementNode | None = None
    stack: list[ElementNode] = []
    issues: list[DumpIssue] = []

    for line_no, node in parsed:
        while stack and stack[-1].depth >= node.depth:
            stack.pop()

        if not stack:
            if root is None:
                root = node
                stack.append(node)
            else:
                issues.append(DumpIssue("error", "Second top-level element", node.source, line_no))
            continue

        top = stack[-1]
        if node.depth - top.depth > 1:
            # keep the stack: later siblings still anchor to the right ancestor
            issues.append(DumpIssue(
                "error",
                f"Depth jumps from {top.depth} to {node.depth}",
                node.source,
                line_no,
            ))
            continue

        node.parent = top
        top.children.append(node)
        stack.append(node)

    for issue in issues:
        logger.warning("Structural problem in dump: %s", issue)

    if strict and issues:
        raise StructuralError(issues)
    return ElementTree(root=root, issues=issues)


def parse_dump(text: str, *, strict: bool = False) -> ElementTree:
    return build_tree(text.splitlines(), strict=strict)


def _normalize_newlines(text: str) -> str:
    return "\n".join(text.splitlines())


def extract_sections(text: str) -> dict[str, str]:
    """Split a full debug description into its titled sections."""
    text = _normalize_newlines(text)
    return {m.group(1).strip(): m.group(2) for m in SECTION_RE.finditer(text)}


def parse_debug_description(
    text: str,
    section: str = DEFAULT_SECTION,
    *,
    strict: bool = False,
) -> ElementTree:
    sections = extract_sections(text)
    if section not in sections:
        raise DumpParseError([DumpIssue("error", f'Section "{section}" not found in debug description')])
    return parse_dump(sections[section], strict=strict)


def load_dump(text: str, section: str = DEFAULT_SECTION, *, strict: bool = False) -> ElementTree:
    """Parse either a full debug description or a bare element listing."""
    text = _normalize_newlines(text)
    if re.search(rf"^{re.escape(section)}:$", text, re.MULTILINE):
        return parse_debug_description(text, section, strict=strict)
    return parse_dump(text, strict=strict)
