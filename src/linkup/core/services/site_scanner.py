from __future__ import annotations

"""
Website Discovery Service.

Walks a website directory on disk, pruning excluded entries, and registers
each file with a Website: documents are parsed for links, everything else
is registered as a plain asset.
"""

import logging
import os
import re
from typing import Any, Dict, Iterable, List, Tuple

from linkup.domain.errors import DuplicateEntityError
from linkup.infra.fs import read_document, to_site_path
from linkup.website import Website

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are logged and discarded.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Verify if a name matches at least one compiled regex pattern."""
    return any(rx.search(name) for rx in compiled_patterns)


def yield_site_files(site_path: str, exclude_rx: List[re.Pattern]) -> Iterable[Tuple[str, str]]:
    """
    Traverse the site directory and yield every file that is not excluded.

    Yields:
        Tuple[str, str]: (absolute filesystem path, '/'-separated site path).
    """
    site_abs = os.path.abspath(site_path)

    for root, dirs, files in os.walk(site_abs):
        dirs[:] = [d for d in dirs if not matches_any(d, exclude_rx)]
        dirs.sort()
        files.sort()

        for file_name in files:
            if matches_any(file_name, exclude_rx):
                continue
            file_path = os.path.join(root, file_name)
            yield file_path, to_site_path(file_path, site_abs)


def is_document(file_name: str, document_extensions: List[str]) -> bool:
    """Decide whether a file should be parsed for links."""
    _, ext = os.path.splitext(file_name)
    return ext.lower() in document_extensions


def build_website(cfg: Dict[str, Any]) -> Website:
    """
    Create a Website populated from the directory named in the configuration.

    Args:
        cfg: Validated configuration (see validate_config).

    Returns:
        Website: Tree containing every discovered document and asset.

    Raises:
        OSError: If a document cannot be read.
    """
    site_path = cfg["site_path"]
    exclude_rx = compile_patterns(cfg.get("exclude_patterns", []))
    extensions = cfg.get("document_extensions", [])

    website = Website(cfg)
    documents = assets = 0

    for file_path, site_rel in yield_site_files(site_path, exclude_rx):
        try:
            if is_document(file_path, extensions):
                website.add_document_from_reader(site_rel, read_document(file_path))
                documents += 1
            else:
                website.add_file(site_rel)
                assets += 1
        except DuplicateEntityError as e:
            logger.warning(str(e))

    logger.info(f"Discovered {documents} documents and {assets} assets under {site_path}")
    return website
