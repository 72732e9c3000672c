from uilight.dump.mermaid import generate_mermaid
from uilight.dump.parser import build_tree, load_dump, parse_debug_description, parse_dump, parse_line
from uilight.dump.paths import accessor_dump, element_path
from uilight.dump.validator import DumpIssue, format_issues, validate_tree

__all__ = [
    "DumpIssue",
    "accessor_dump",
    "build_tree",
    "element_path",
    "format_issues",
    "generate_mermaid",
    "load_dump",
    "parse_debug_description",
    "parse_dump",
    "parse_line",
    "validate_tree",
]
