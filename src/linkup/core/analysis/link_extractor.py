from __future__ import annotations

"""
HTML Link Extraction Engine.

Parses page markup with BeautifulSoup and collects, in document order, every
reference a page emits (href, src and srcset candidates) together with the
occurrence count of each element identifier declared on the page.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import IO, List, Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TAG CONSTANTS
# -----------------------------------------------------------------------------

HREF_TAGS = frozenset({"a", "link"})
SRC_TAGS = frozenset({"script", "img", "source"})

Markup = Union[str, bytes, IO[str], IO[bytes], BeautifulSoup]


@dataclass
class ExtractedLinks:
    """
    References and identifiers collected from a single page.

    Attributes:
        references: Raw reference strings, in document order.
        identifier_counts: Multiset of element ids declared on the page.
    """
    references: List[str] = field(default_factory=list)
    identifier_counts: Counter = field(default_factory=Counter)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_document(markup: Markup) -> BeautifulSoup:
    """
    Build a document tree from raw markup or a readable stream.

    Attribute values are kept as plain strings (no multi-valued splitting).
    """
    if isinstance(markup, BeautifulSoup):
        return markup
    if hasattr(markup, "read"):
        markup = markup.read()
    return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)


def extract_links(markup: Markup) -> ExtractedLinks:
    """
    Collect references and identifiers from every element of a page.

    Args:
        markup: Raw HTML (str/bytes), a readable stream, or a parsed document.

    Returns:
        ExtractedLinks: Ordered references and the identifier multiset.
    """
    document = parse_document(markup)
    result = ExtractedLinks()

    for element in document.find_all(True):
        tag = (element.name or "").lower()

        if tag in HREF_TAGS:
            href = element.get("href")
            if href is not None:
                result.references.append(href)

        elif tag in SRC_TAGS:
            src = element.get("src")
            if src is not None:
                result.references.append(src)
            srcset = element.get("srcset")
            if srcset is not None:
                result.references.extend(split_srcset(srcset))

        identifier = element.get("id")
        if identifier is not None:
            result.identifier_counts[identifier] += 1

    logger.debug(
        f"Extracted {len(result.references)} references and "
        f"{len(result.identifier_counts)} identifiers"
    )
    return result


def split_srcset(srcset: str) -> List[str]:
    """
    Split a srcset attribute into its candidate URLs.

    Each comma-separated entry contributes the text before its last space,
    or the whole entry when it contains no space. Surrounding whitespace is
    left for the validator to trim.
    """
    urls: List[str] = []
    for candidate in srcset.split(","):
        index = candidate.rfind(" ")
        urls.append(candidate if index < 0 else candidate[:index])
    return urls
