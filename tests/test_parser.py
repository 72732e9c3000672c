"""Tests for debug-description parsing and tree reconstruction.

Covers:
- the per-line grammar (depth, type, handle, geometry, special, extras)
- whole-dump failures: every malformed line is reported, no tree returned
- stack-based assembly: re-anchoring after depth drops and invalid jumps
- section extraction from a full debug description
"""
from __future__ import annotations

import pytest

from uilight.dump.parser import (
    build_tree,
    extract_sections,
    load_dump,
    parse_debug_description,
    parse_dump,
    parse_line,
)
from uilight.element_types import ElementType
from uilight.errors import DumpParseError, StructuralError

# ═══════════════════════════════════════════════════════
# Line grammar
# ═══════════════════════════════════════════════════════

def test_line_with_geometry_and_extras():
    node = parse_line(
        "        Button 0x7f8c1a507b80: {{16.0, 150.0}, {343.0, 44.0}}, identifier: 'submit', label: 'Submit'"
    )
    assert node is not None
    assert node.depth == 3
    assert node.element_type is ElementType.BUTTON
    assert node.handle == 0x7F8C1A507B80
    assert (node.x, node.y, node.width, node.height) == (16.0, 150.0, 343.0, 44.0)
    assert node.frame == (16.0, 150.0, 343.0, 44.0)
    assert node.identifier == "submit"
    assert node.label == "Submit"
    assert node.index == "submit"
    assert node.value is None
    assert node.placeholder_value is None


def test_root_arrow_marker_is_depth_zero():
    node = parse_line(" →Application 0x1a2b: {{0.0, 0.0}, {375.0, 667.0}}, label: 'Sample'")
    assert node.depth == 0
    assert node.element_type is ElementType.APPLICATION
    assert node.label == "Sample"


def test_special_segment_main_window_and_traits():
    node = parse_line("    Window 0xabc: Main Window, traits: 8589934592, {{0.0, 0.0}, {375.0, 667.0}}")
    assert node.is_main_window
    assert node.traits == 8589934592
    assert node.depth == 1


def test_plain_window_is_not_main():
    node = parse_line("    Window 0xabc: {{0.0, 0.0}, {375.0, 667.0}}")
    assert not node.is_main_window
    assert node.traits == 0


def test_value_and_placeholder_extras():
    node = parse_line(
        "      TextField 0x5: {{16.0, 100.0}, {343.0, 30.0}}, value: 'hello', placeholderValue: 'Type here'"
    )
    assert node.value == "hello"
    assert node.placeholder_value == "Type here"
    assert node.label is None
    assert node.index is None


def test_extras_without_geometry():
    node = parse_line("      StaticText 0x9: label: 'No frame'")
    assert node.label == "No frame"
    assert node.frame is None
    assert node.x is None


def test_label_with_apostrophe_and_comma():
    node = parse_line("      StaticText 0x9: {{1.0, 2.0}, {3.0, 4.0}}, label: 'Don't stop, ok', identifier: 'msg'")
    assert node.label == "Don't stop, ok"
    assert node.identifier == "msg"


def test_negative_coordinates():
    node = parse_line("      Cell 0x9: {{-10.5, -20.0}, {375.0, 44.0}}")
    assert node.x == -10.5
    assert node.y == -20.0


def test_unparsable_coordinate_is_absent():
    node = parse_line("      Cell 0x9: {{1.2.3, 4.0}, {375.0, 44.0}}")
    assert node is not None
    assert node.x is None
    assert node.y == 4.0
    assert node.frame is None


def test_single_braced_geometry():
    node = parse_line("      Image 0x9: {1.0, 2.0}, {3.0, 4.0}, label: 'logo'")
    assert node.frame == (1.0, 2.0, 3.0, 4.0)
    assert node.label == "logo"


def test_unknown_type_falls_back_to_other():
    node = parse_line("      Sparkle 0x9: {{1.0, 2.0}, {3.0, 4.0}}")
    assert node.element_type is ElementType.OTHER
    assert node.type_name == "Sparkle"


def test_uppercase_hex_handle():
    assert parse_line("    Button 0xABCDEF: ").handle == 0xABCDEF


def test_source_line_retained():
    line = "    Button 0x1: label: 'OK'"
    assert parse_line(line).source == line


@pytest.mark.parametrize("line", [
    "Button 0x1: label: 'no markers'",      # depth -1
    " Button 0x1: label: 'one marker'",     # depth -1
    "    Button 1: label: 'no hex prefix'",
    "    Button 0x1 label: 'no colon'",
    "    just some words",
    "",
])
def test_malformed_lines_rejected(line):
    assert parse_line(line) is None


# ═══════════════════════════════════════════════════════
# Tree assembly
# ═══════════════════════════════════════════════════════

def test_well_formed_dump_keeps_every_node_in_order(dump_line):
    layout = [0, 1, 2, 3, 3, 2, 3, 4, 1, 2]
    lines = [dump_line(d, "Other", handle=i + 1) for i, d in enumerate(layout)]

    tree = build_tree(lines)

    assert tree.ok
    nodes = list(tree)
    assert len(nodes) == len(lines)
    assert len(tree) == len(lines)
    assert [n.handle for n in nodes] == list(range(1, len(lines) + 1))
    for node in nodes:
        for child in node.children:
            assert child.depth == node.depth + 1
            assert child.parent is node


def test_siblings_reanchor_after_deeper_subtree(dump_line):
    tree = build_tree([
        dump_line(0, "Application", 1),
        dump_line(1, "Window", 2),
        dump_line(2, "Table", 3),
        dump_line(3, "Cell", 4),
        dump_line(4, "StaticText", 5),
        dump_line(2, "Button", 6),
        dump_line(1, "Window", 7),
    ])
    root = tree.root
    assert [c.handle for c in root.children] == [2, 7]
    window = root.children[0]
    assert [c.handle for c in window.children] == [3, 6]
    assert window.children[1].parent is window


def test_invalid_jump_in_first_subtree_keeps_second_sibling(dump_line):
    tree = build_tree([
        dump_line(0, "Application", 1),
        dump_line(1, "Other", 2),           # shared parent
        dump_line(2, "Group", 3),           # first subtree
        dump_line(4, "Button", 4),          # jump of +2: invalid
        dump_line(5, "StaticText", 5),      # descendant of the invalid line
        dump_line(3, "Image", 6),           # valid child of the first subtree
        dump_line(2, "Group", 7),           # second subtree
        dump_line(3, "Button", 8),
    ])

    assert not tree.ok
    assert [i.line_no for i in tree.issues] == [4, 5]
    assert all(i.level == "error" for i in tree.issues)
    assert "0x4" in tree.issues[0].line

    shared = tree.root.children[0]
    assert [c.handle for c in shared.children] == [3, 7]
    assert shared.children[1].parent is shared
    assert [c.handle for c in shared.children[0].children] == [6]
    assert [c.handle for c in shared.children[1].children] == [8]
    assert 4 not in {n.handle for n in tree}


def test_second_top_level_element_is_reported(dump_line):
    tree = build_tree([
        dump_line(0, "Application", 1),
        dump_line(1, "Window", 2),
        dump_line(0, "Application", 3),
        dump_line(1, "Window", 4),
    ])
    assert tree.root.handle == 1
    assert [i.line_no for i in tree.issues] == [3, 4]
    assert "Second top-level" in tree.issues[0].message


def test_strict_mode_raises_on_structural_issues(dump_line):
    lines = [dump_line(0, "Application", 1), dump_line(2, "Button", 2)]
    with pytest.raises(StructuralError) as exc:
        build_tree(lines, strict=True)
    assert len(exc.value.issues) == 1


def test_blank_lines_are_ignored(dump_line):
    tree = build_tree(["", dump_line(0, "Application", 1), "   ", dump_line(1, "Window", 2), ""])
    assert len(tree) == 2
    assert tree.ok


def test_every_malformed_line_is_reported(read_dump_file):
    with pytest.raises(DumpParseError) as exc:
        parse_dump(read_dump_file("broken_lines.txt"))
    issues = exc.value.issues
    assert [i.line_no for i in issues] == [3, 5]
    assert "not an element" in issues[0].line
    assert "no markers" in issues[1].line


def test_empty_dump_is_a_parse_error():
    with pytest.raises(DumpParseError):
        parse_dump("\n  \n")


# ═══════════════════════════════════════════════════════
# Full debug descriptions
# ═══════════════════════════════════════════════════════

def test_extract_sections(read_dump_file):
    sections = extract_sections(read_dump_file("sample_app.txt"))
    assert set(sections) == {"Element subtree", "Path to element", "Query chain"}
    assert sections["Element subtree"].startswith(" →Application")
    assert "Switch" in sections["Element subtree"]
    assert "Path to element" not in sections["Element subtree"]


def test_parse_debug_description(read_dump_file):
    tree = parse_debug_description(read_dump_file("sample_app.txt"))
    assert tree.ok
    assert len(tree) == 16
    root = tree.root
    assert root.element_type is ElementType.APPLICATION
    window = root.children[0]
    assert window.is_main_window
    container = window.children[0]
    assert [c.element_type for c in container.children] == [
        ElementType.NAVIGATION_BAR,
        ElementType.TEXT_FIELD,
        ElementType.BUTTON,
        ElementType.TABLE,
        ElementType.SWITCH,
    ]
    table = container.children[3]
    assert [c.children[0].label for c in table.children] == ["First", "Second", "Third"]


def test_missing_section_is_a_parse_error(read_dump_file):
    with pytest.raises(DumpParseError) as exc:
        parse_debug_description(read_dump_file("sample_app.txt"), section="Nope")
    assert "Nope" in exc.value.issues[0].message


def test_load_dump_accepts_both_layouts(read_dump_file, dump_line):
    full = load_dump(read_dump_file("sample_app.txt"))
    assert len(full) == 16

    bare = load_dump("\n".join([dump_line(0, "Application", 1), dump_line(1, "Button", 2)]))
    assert len(bare) == 2


def test_crlf_description_parses_like_lf(read_dump_file):
    text = read_dump_file("sample_app.txt")
    crlf = text.replace("\n", "\r\n")

    assert set(extract_sections(crlf)) == set(extract_sections(text))
    tree = load_dump(crlf)
    assert tree.ok
    assert len(tree) == 16
    assert [n.source for n in tree] == [n.source for n in load_dump(text)]
