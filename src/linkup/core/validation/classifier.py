from __future__ import annotations

"""
Reference Classification.

Sanitizes a raw reference string and maps it onto one of the tagged
reference variants, so each validation rule can be applied and tested in
isolation.
"""

from linkup.domain.reference_models import (
    ExternalReference,
    IncompleteFragment,
    PathReference,
    Reference,
    RootReference,
    SameFragmentReference,
)

# Any reference starting with this prefix is treated as an external URL.
EXTERNAL_PREFIX = "http"


def sanitize_reference(raw: str) -> str:
    """Trim surrounding whitespace and normalize backslashes to slashes."""
    return raw.strip().replace("\\", "/")


def classify_reference(raw: str) -> Reference:
    """
    Classify a raw reference string by its shape.

    Args:
        raw: Reference exactly as extracted from the page.

    Returns:
        Reference: The matching tagged variant.
    """
    href = sanitize_reference(raw)

    if href.startswith(EXTERNAL_PREFIX):
        return ExternalReference(url=href)

    if href == "#":
        return IncompleteFragment()

    if href == "/":
        return RootReference()

    hash_index = href.rfind("#")
    if hash_index == 0:
        return SameFragmentReference(href=href, fragment=href[1:])

    if hash_index > 0:
        return PathReference(
            path=href[:hash_index].strip(),
            fragment=href[hash_index + 1:].strip(),
        )

    return PathReference(path=href)
