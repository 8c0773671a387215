from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, the per-user data directory used for log
storage, and binary reads of website documents.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "LinkUp"
UNIX_APP_DIR_NAME = ".linkup"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/LinkUp
    - Linux/Mac: ~/.linkup

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts (~/).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def to_site_path(abs_path: str, site_root: str) -> str:
    """Express a file location as a '/'-separated path relative to the site root."""
    rel = os.path.relpath(abs_path, site_root)
    return rel.replace(os.sep, "/")


# -----------------------------------------------------------------------------
# DOCUMENT I/O
# -----------------------------------------------------------------------------

def read_document(path: str) -> bytes:
    """
    Read a website document as raw bytes.

    Encoding detection is left to the HTML parser.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "rb") as f:
        return f.read()
