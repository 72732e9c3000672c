"""Static checks over a parsed element tree, and issue formatting."""
from __future__ import annotations

from typing import TYPE_CHECKING

from uilight.element_types import ElementType, is_known_debug_name

if TYPE_CHECKING:
    from uilight.types import ElementNode


class DumpIssue:
    def __init__(self, level: str, message: str, line: str | None = None, line_no: int | None = None):
        self.level = level  # "error" | "warning"
        self.message = message
        self.line = line
        self.line_no = line_no

    def __str__(self):
        prefix = f"[line {self.line_no}] " if self.line_no is not None else ""
        suffix = f": {self.line.strip()}" if self.line else ""
        return f"{self.level.upper()}: {prefix}{self.message}{suffix}"

    def __repr__(self):
        return f"DumpIssue({self.level!r}, {self.message!r}, line_no={self.line_no!r})"

    def to_dict(self) -> dict:
        return {"level": self.level, "message": self.message, "line": self.line, "line_no": self.line_no}


def validate_tree(root: ElementNode) -> list[DumpIssue]:
    """Run all static checks on a parsed tree."""
    issues: list[DumpIssue] = []
    issues.extend(_check_depths(root))
    issues.extend(_check_unknown_types(root))
    issues.extend(_check_duplicate_handles(root))
    issues.extend(_check_main_windows(root))
    return issues


def format_issues(issues: list[DumpIssue]) -> str:
    if not issues:
        return ""
    lines = []
    errs = [i for i in issues if i.level == "error"]
    warns = [i for i in issues if i.level == "warning"]
    if errs:
        lines.append(f"  {len(errs)} error(s):")
        for i in errs:
            lines.append(f"    ✗ {i}")
    if warns:
        lines.append(f"  {len(warns)} warning(s):")
        for i in warns:
            lines.append(f"    ⚠ {i}")
    return "\n".join(lines)


# ─── Checks ───

def _check_depths(root: ElementNode) -> list[DumpIssue]:
    """Every child sits exactly one level below its parent."""
    issues: list[DumpIssue] = []
    for node in root.walk():
        for child in node.children:
            if child.depth != node.depth + 1:
                issues.append(DumpIssue(
                    "error",
                    f"Depth {child.depth} under parent at depth {node.depth}",
                    child.source,
                ))
            if child.parent is not node:
                issues.append(DumpIssue("error", "Child does not point back to its parent", child.source))
    return issues


def _check_unknown_types(root: ElementNode) -> list[DumpIssue]:
    """Type names missing from the table were read as Other."""
    issues: list[DumpIssue] = []
    seen: set[str] = set()
    for node in root.walk():
        name = node.type_name
        if node.element_type is ElementType.OTHER and not is_known_debug_name(name) and name not in seen:
            seen.add(name)
            issues.append(DumpIssue("warning", f"Unknown element type '{name}' treated as Other", node.source))
    return issues


def _check_duplicate_handles(root: ElementNode) -> list[DumpIssue]:
    issues: list[DumpIssue] = []
    seen: dict[int, ElementNode] = {}
    for node in root.walk():
        if node.handle in seen:
            issues.append(DumpIssue("warning", f"Handle 0x{node.handle:x} appears more than once", node.source))
        else:
            seen[node.handle] = node
    return issues


def _check_main_windows(root: ElementNode) -> list[DumpIssue]:
    mains = [n for n in root.walk() if n.is_main_window]
    if len(mains) > 1:
        return [DumpIssue("warning", f"{len(mains)} elements are marked as Main Window")]
    return []
