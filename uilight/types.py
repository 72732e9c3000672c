from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from uilight.element_types import ElementType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from uilight.dump.validator import DumpIssue

# ─── Element snapshot (parsed from a debug description) ───

@dataclass(eq=False)
class ElementNode:
    element_type: ElementType = ElementType.OTHER
    type_name: str = "Other"  # raw token from the dump
    handle: int = 0  # memory address in the dumped process; not stable across dumps
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    traits: int = 0
    is_main_window: bool = False
    label: str | None = None
    identifier: str | None = None
    value: str | None = None
    placeholder_value: str | None = None
    depth: int = 0
    parent: ElementNode | None = field(default=None, repr=False)
    children: list[ElementNode] = field(default_factory=list, repr=False)
    source: str = field(default="", repr=False)

    @property
    def index(self) -> str | None:
        """Key used to subscript this element: identifier, else label."""
        return self.identifier if self.identifier is not None else self.label

    @property
    def frame(self) -> tuple[float, float, float, float] | None:
        if None in (self.x, self.y, self.width, self.height):
            return None
        return (self.x, self.y, self.width, self.height)

    def walk(self) -> Iterator[ElementNode]:
        """Pre-order traversal (self first, then children in order)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def children_of_type(self, element_type: ElementType) -> list[ElementNode]:
        return [c for c in self.children if c.element_type is element_type]

    def cohort_position(self) -> tuple[int | None, int]:
        """Position among same-type siblings and the size of that cohort.

        The root counts as the only member of its own cohort.
        """
        if self.parent is None:
            return (0, 1)
        cohort = self.parent.children_of_type(self.element_type)
        for i, sibling in enumerate(cohort):
            if sibling is self:
                return (i, len(cohort))
        return (None, len(cohort))


@dataclass
class ElementTree:
    root: ElementNode
    issues: list[DumpIssue] = field(default_factory=list)  # structural problems found during assembly

    @property
    def ok(self) -> bool:
        return not self.issues

    def __iter__(self) -> Iterator[ElementNode]:
        return self.root.walk()

    def __len__(self) -> int:
        return sum(1 for _ in self.root.walk())
