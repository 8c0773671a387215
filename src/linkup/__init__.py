from __future__ import annotations

"""
LinkUp: broken link detection for static websites.

Models a website as a virtual tree of pages and assets and verifies that
every hyperlink, script, image and anchor reference emitted by its pages
resolves to something that exists.
"""

from linkup.domain.errors import DuplicateEntityError, LinkCategory, LinkError
from linkup.website import Website

__version__ = "1.0.0"

__all__ = [
    "Website",
    "LinkError",
    "LinkCategory",
    "DuplicateEntityError",
    "__version__",
]
