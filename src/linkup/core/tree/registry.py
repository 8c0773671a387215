from __future__ import annotations

"""
Website Tree Registration Service.

Places files and documents into the website tree, creating intermediate
directories on demand. A registration either succeeds completely or leaves
the tree untouched.
"""

import logging
from collections import Counter
from typing import Iterable, Mapping, Optional

from linkup.core.tree.resolver import split_path
from linkup.domain.entity_models import Entity, attach_child
from linkup.domain.errors import DuplicateEntityError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_site_path(path: str) -> str:
    """Strip the leading slash from a site path; names are root-relative."""
    if path.startswith("/"):
        return path[1:]
    return path


def register_file(root: Entity, path: str) -> Entity:
    """
    Register a non-page asset (image, stylesheet, font, ...) at 'path'.

    Args:
        root: Root directory of the website tree.
        path: Slash-separated path relative to the website root.

    Returns:
        Entity: The newly created leaf.

    Raises:
        DuplicateEntityError: If the path exists or crosses an existing file.
        ValueError: If the path has no segments.
    """
    return _place_leaf(root, path)


def register_document(
        root: Entity,
        path: str,
        references: Iterable[str],
        identifier_counts: Optional[Mapping[str, int]] = None,
) -> Entity:
    """
    Register a page together with its extracted references and identifiers.

    Args:
        root: Root directory of the website tree.
        path: Slash-separated path relative to the website root.
        references: Raw reference strings in document order.
        identifier_counts: Occurrences of each element id on the page.

    Returns:
        Entity: The newly created page leaf.

    Raises:
        DuplicateEntityError: If the path exists or crosses an existing file.
        ValueError: If the path has no segments.
    """
    entity = _place_leaf(root, path)
    entity.references = list(references)
    entity.identifier_counts = Counter(
        {k: v for k, v in (identifier_counts or {}).items() if v >= 1}
    )
    logger.debug(
        f"Registered document '{entity.full_path}' "
        f"({len(entity.references)} references, {len(entity.identifier_counts)} ids)"
    )
    return entity


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _place_leaf(root: Entity, path: str) -> Entity:
    """Walk existing nodes, validate the placement, then create what is missing."""
    name = normalize_site_path(path)
    components = split_path(name)
    if not components:
        raise ValueError(f"cannot register an empty path: '{path}'")

    # Walk the existing prefix of the path without mutating anything.
    current = root
    depth = 0
    while depth < len(components):
        child = current.child(components[depth])
        if child is None:
            break
        if not child.is_directory and depth < len(components) - 1:
            logger.warning(f"Cannot create '{name}': '{child.full_path}' is a file")
            raise DuplicateEntityError(name)
        current = child
        depth += 1

    if depth == len(components):
        logger.warning(f"Entity already registered: '{name}'")
        raise DuplicateEntityError(name)

    for component in components[depth:-1]:
        current = attach_child(current, component, is_directory=True)
    return attach_child(current, components[-1], is_directory=False)
