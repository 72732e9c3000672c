"""UI test-automation support: element dump parsing, locator paths, test progress."""
from uilight.dump import accessor_dump, element_path, load_dump, parse_debug_description, parse_dump
from uilight.element_types import ElementType
from uilight.engine import Action, Failing, Flagging, Passing, Screen, apply, blindly, compose, finalize
from uilight.types import ElementNode, ElementTree

__all__ = [
    "Action",
    "ElementNode",
    "ElementTree",
    "ElementType",
    "Failing",
    "Flagging",
    "Passing",
    "Screen",
    "accessor_dump",
    "apply",
    "blindly",
    "compose",
    "element_path",
    "finalize",
    "load_dump",
    "parse_debug_description",
    "parse_dump",
]
