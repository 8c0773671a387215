from __future__ import annotations

"""
Path Resolution Service.

Walks the website tree from a starting node along a sequence of path
components, honouring '..' traversal and directory-index fallback. Absolute
and relative resolution share the same walk; only the starting node differs.
"""

from typing import List, Optional, Sequence

from linkup.domain.entity_models import Entity

# Files that make a directory linkable, in priority order.
INDEX_FILES = ("index.html", "index.htm", "index.tmpl")


def split_path(path: str) -> List[str]:
    """Split a slash-separated path, discarding empty segments."""
    return [c for c in path.split("/") if c]


def resolve(start: Optional[Entity], components: Sequence[str]) -> Optional[Entity]:
    """
    Resolve 'components' relative to 'start'.

    Args:
        start: Node the walk begins from (root for absolute paths, the
               referencing page's directory for relative ones).
        components: Path segments, already split.

    Returns:
        Optional[Entity]: The target node, or None if the path does not exist.
    """
    current = start
    for component in components:
        if current is None:
            return None
        if component == "..":
            current = current.parent
            continue
        current = current.child(component)

    if current is None:
        return None

    if current.is_directory:
        return resolve_index(current)
    return current


def resolve_index(directory: Entity) -> Optional[Entity]:
    """Return the directory's index page, or None if it has none."""
    for name in INDEX_FILES:
        index = directory.child(name)
        if index is not None:
            return index
    return None


def resolve_path(root: Entity, origin: Entity, path: str) -> Optional[Entity]:
    """
    Resolve a reference path as seen from the page 'origin'.

    Paths starting with '/' are resolved from 'root', anything else from
    the directory containing 'origin'.
    """
    start = root if path.startswith("/") else origin.parent
    return resolve(start, split_path(path))
