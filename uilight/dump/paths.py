"""Turn parsed elements into locator expressions an external driver can replay.

    app.tables.cells["Settings"].buttons.element(boundBy: 1)

Keyed segments use the element's identifier (or label). Unkeyed elements fall
back on their ordinal among same-type siblings, and drop the suffix entirely
when they are the only one of their type.

The top-level element and the main window both resolve to the bare app name,
so a whole-tree dump lists it twice; each line still maps to one element.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from uilight.element_types import ElementType, plural_name
from uilight.types import ElementNode, ElementTree

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

INVALID_INDEX_SUFFIX = ".element(boundBy: -1)"
FAILED_SUFFIX = ".FAIL()"


def _is_transparent(node: ElementNode) -> bool:
    return node.element_type is ElementType.OTHER and node.index is None


def _quote(index: str) -> str:
    escaped = index.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _chain(node: ElementNode) -> list[ElementNode]:
    """Elements from just below the top-level application down to node."""
    chain: list[ElementNode] = []
    current = node
    while current.parent is not None and current.element_type is not ElementType.APPLICATION:
        chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def segment(node: ElementNode, parent_path: str, plurals: Mapping[ElementType, str] | None = None) -> str:
    """Extend parent_path with the segment that selects node.

    plurals overrides the built-in query name of an element type.
    """
    if _is_transparent(node) or node.is_main_window:
        return parent_path

    prefix = f"{parent_path}.{plural_name(node.element_type, plurals)}"
    if node.index is not None:
        return f"{prefix}[{_quote(node.index)}]"

    position, count = node.cohort_position()
    if position is None:
        return f"{prefix}{INVALID_INDEX_SUFFIX}"
    if count == 0:
        return f"{prefix}{FAILED_SUFFIX}"
    if count == 1:
        return prefix
    return f"{prefix}.element(boundBy: {position})"


def element_path(
    node: ElementNode,
    app_name: str = "app",
    plurals: Mapping[ElementType, str] | None = None,
) -> str | None:
    """Locator expression for node, or None when it can't be expressed."""
    chain = _chain(node)
    if not chain:
        return app_name
    if _is_transparent(chain[-1]):
        return None

    path = app_name
    for elem in chain:
        path = segment(elem, path, plurals)
    return path


def iter_paths(
    root: ElementNode,
    app_name: str = "app",
    plurals: Mapping[ElementType, str] | None = None,
) -> Iterator[tuple[ElementNode, str]]:
    for node in root.walk():
        path = element_path(node, app_name, plurals)
        if path is not None:
            yield node, path


def accessor_dump(
    tree: ElementTree | ElementNode,
    app_name: str = "app",
    plurals: Mapping[ElementType, str] | None = None,
) -> list[str]:
    """Copy-pastable accessors for every representable element, in dump order."""
    root = tree.root if isinstance(tree, ElementTree) else tree
    return [path for _, path in iter_paths(root, app_name, plurals)]
