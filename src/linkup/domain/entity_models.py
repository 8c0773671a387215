from __future__ import annotations

"""
Website Address Tree Data Models.

Provides the node type used to represent the virtual address space of a
website: directories own their children, leaves carry the references and
identifiers extracted from a page.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Entity:
    """
    Represents a directory or leaf (file/page) in the website tree.

    Attributes:
        name: Single path segment naming this node.
        is_directory: True for directories, False for files and pages.
        parent: Back-reference to the owning directory (None for the root).
        full_path: Slash-joined segments from the root, excluding the root itself.
        children: Mapping from segment name to child node (directories only).
        identifier_counts: Occurrences of each element id declared on a page.
        references: Raw reference strings extracted from a page, in document order.
    """
    name: str
    is_directory: bool = False
    parent: Optional["Entity"] = field(default=None, repr=False)
    full_path: str = ""
    children: Dict[str, "Entity"] = field(default_factory=dict, repr=False)
    identifier_counts: Counter = field(default_factory=Counter, repr=False)
    references: List[str] = field(default_factory=list, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def child(self, name: str) -> Optional["Entity"]:
        """Return the direct child registered under 'name', if any."""
        return self.children.get(name)

    def iter_leaves(self):
        """Yield every leaf below this node, depth first."""
        if not self.is_directory:
            yield self
            return
        for child in self.children.values():
            yield from child.iter_leaves()


def create_root() -> Entity:
    """Allocate the parentless directory node anchoring a website tree."""
    return Entity(name="/", is_directory=True)


def attach_child(parent: Entity, name: str, *, is_directory: bool) -> Entity:
    """
    Allocate a new node under 'parent' and register it in the children map.

    The caller guarantees that 'parent' is a directory and that 'name' is
    not yet taken.
    """
    full_path = name if parent.is_root else f"{parent.full_path}/{name}"
    node = Entity(name=name, is_directory=is_directory, parent=parent, full_path=full_path)
    parent.children[name] = node
    return node
