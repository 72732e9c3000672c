"""Generate a Mermaid flowchart from a parsed element tree."""
from __future__ import annotations

from typing import TYPE_CHECKING

from uilight.element_types import ElementType

if TYPE_CHECKING:
    from uilight.types import ElementNode

_LABEL_LIMIT = 30


def _node_label(node: ElementNode) -> str:
    label = node.element_type.debug_name
    if node.element_type is ElementType.OTHER and node.type_name != label:
        label = f"{node.type_name}?"
    if node.index is not None:
        label += f" {node.index[:_LABEL_LIMIT]}"
    return label.replace('"', "'")


def generate_mermaid(root: ElementNode) -> str:
    ids: dict[int, str] = {}
    nodes: list[str] = []
    edges: list[str] = []

    for n, node in enumerate(root.walk(), 1):
        nid = f"e{n}"
        ids[id(node)] = nid
        label = _node_label(node)

        if node.element_type is ElementType.APPLICATION:
            # Application → stadium
            nodes.append(f'    {nid}(["{label}"])')
        elif node.is_main_window:
            # Main window → double border
            nodes.append(f'    {nid}[["{label}"]]')
        elif node.element_type is ElementType.OTHER and node.index is None:
            # Anonymous container → rounded, drops out of locator paths
            nodes.append(f'    {nid}("{label}")')
        else:
            nodes.append(f'    {nid}["{label}"]')

    for node in root.walk():
        src = ids[id(node)]
        for child in node.children:
            edges.append(f"    {src} --> {ids[id(child)]}")

    lines = ["graph TD"]
    lines.extend(nodes)
    lines.extend(edges)
    return "\n".join(lines)
