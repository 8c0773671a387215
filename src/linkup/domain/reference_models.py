from __future__ import annotations

"""
Reference Classification Models.

Tagged variants describing the shape of a raw reference string once it has
been sanitized. Each variant carries exactly the data its validation rule
needs.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ExternalReference:
    """A URL pointing outside the website, verified by a network probe."""
    url: str


@dataclass(frozen=True)
class IncompleteFragment:
    """The bare '#' reference, which never names a target."""


@dataclass(frozen=True)
class RootReference:
    """The bare '/' reference, always valid."""


@dataclass(frozen=True)
class SameFragmentReference:
    """
    A '#id' reference resolved against the referencing page itself.

    Attributes:
        href: The sanitized reference, including the leading '#'.
        fragment: Identifier looked up on the current page.
    """
    href: str
    fragment: str


@dataclass(frozen=True)
class PathReference:
    """
    A path to another entity, optionally followed by a '#fragment'.

    Attributes:
        path: Path portion (before '#'), trimmed.
        fragment: Trimmed identifier after '#', or None when absent.
    """
    path: str
    fragment: Optional[str] = None

    @property
    def is_absolute(self) -> bool:
        return self.path.startswith("/")


Reference = Union[
    ExternalReference,
    IncompleteFragment,
    RootReference,
    SameFragmentReference,
    PathReference,
]
