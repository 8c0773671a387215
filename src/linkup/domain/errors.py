from __future__ import annotations

"""
Link Validation Error Models.

Defines the error categories produced while validating a website and the
immutable record used to report each problem. Link failures are data, not
control flow: they are accumulated and returned once traversal completes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# ERROR CATEGORIES
# -----------------------------------------------------------------------------

class LinkCategory(str, Enum):
    """Kinds of problems detected by the validator."""
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    INCOMPLETE_FRAGMENT = "incomplete_fragment"
    BROKEN_SAME_PAGE_LINK = "broken_same_page_link"
    BROKEN_FRAGMENT_TARGET = "broken_fragment_target"
    BROKEN_ABSOLUTE_LINK = "broken_absolute_link"
    BROKEN_RELATIVE_LINK = "broken_relative_link"
    EXTERNAL_PROBE_FAILED = "external_probe_failed"
    EXTERNAL_STATUS_ERROR = "external_status_error"


# -----------------------------------------------------------------------------
# ERROR RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LinkError:
    """
    A single problem found on a page.

    Attributes:
        page: Full path of the page that emitted the reference.
        category: Problem classification.
        reference: Offending reference string (identifier for duplicates).
        fragment: Fragment that failed to match, when relevant.
        count: Occurrence count for duplicate identifiers.
        status_code: HTTP status returned by an external probe.
    """
    page: str
    category: LinkCategory
    reference: str
    fragment: Optional[str] = None
    count: Optional[int] = None
    status_code: Optional[int] = None

    @property
    def message(self) -> str:
        return f"{self.page}: {_DESCRIBERS[self.category](self)}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record into a JSON-friendly mapping."""
        return {
            "page": self.page,
            "category": self.category.value,
            "reference": self.reference,
            "fragment": self.fragment,
            "count": self.count,
            "status_code": self.status_code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


_DESCRIBERS = {
    LinkCategory.DUPLICATE_IDENTIFIER: lambda e: (
        f"id '{e.reference}' appears {e.count} times on the page (it should only appear once)"
    ),
    LinkCategory.INCOMPLETE_FRAGMENT: lambda e: f"incomplete target '{e.reference}'",
    LinkCategory.BROKEN_SAME_PAGE_LINK: lambda e: f"broken same page link '{e.reference}'",
    LinkCategory.BROKEN_FRAGMENT_TARGET: lambda e: f"broken target link '{e.reference}#{e.fragment}'",
    LinkCategory.BROKEN_ABSOLUTE_LINK: lambda e: f"broken link '{e.reference}'",
    LinkCategory.BROKEN_RELATIVE_LINK: lambda e: f"broken relative link '{e.reference}'",
    LinkCategory.EXTERNAL_PROBE_FAILED: lambda e: f"encountered error when pinging '{e.reference}'",
    LinkCategory.EXTERNAL_STATUS_ERROR: lambda e: (
        f"encountered status code {e.status_code} when pinging '{e.reference}'"
    ),
}


# -----------------------------------------------------------------------------
# REGISTRATION ERRORS
# -----------------------------------------------------------------------------

class DuplicateEntityError(ValueError):
    """Raised when a file or document is registered over an existing entity."""

    def __init__(self, path: str) -> None:
        super().__init__(f"file already registered with name '{path}'")
        self.path = path
