from __future__ import annotations

"""
Website Facade.

Owns the virtual address tree of a single website and exposes the
ingestion (files and documents) and validation operations. All files must
be registered before calling validate().
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional

from linkup.core.analysis.link_extractor import Markup, extract_links
from linkup.core.tree import registry
from linkup.core.tree.resolver import resolve, split_path
from linkup.core.validation.validator import validate_website
from linkup.domain.config import DEFAULT_PROBE_TIMEOUT, get_default_config
from linkup.domain.entity_models import Entity, create_root
from linkup.domain.errors import LinkError
from linkup.infra.fs import read_document
from linkup.infra.network.probe_client import Prober, build_prober

logger = logging.getLogger(__name__)


class Website:
    """
    A set of related pages and assets located under a single domain.

    Args:
        config: Optional runtime configuration; missing keys take the
                values from get_default_config().
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.root: Entity = create_root()
        self.config: Dict[str, Any] = get_default_config()
        if config:
            self.config.update(config)

    # -------------------------------------------------------------------------
    # INGESTION
    # -------------------------------------------------------------------------

    def add_file(self, name: str) -> Entity:
        """
        Register a non-HTML file (image, font, stylesheet, ...).

        Raises:
            DuplicateEntityError: If the name is already registered.
        """
        return registry.register_file(self.root, name)

    def add_document(self, name: str, base_dir: Optional[str] = None) -> Entity:
        """
        Read an HTML document from disk and register it.

        Args:
            name: Path relative to the website root.
            base_dir: Directory the site lives in. Defaults to the working directory.

        Raises:
            DuplicateEntityError: If the name is already registered.
            OSError: If the document cannot be read.
        """
        rel = registry.normalize_site_path(name)
        location = os.path.join(base_dir or os.getcwd(), *split_path(rel))
        try:
            content = read_document(location)
        except OSError as e:
            logger.error(f"Unable to read document '{location}': {e}")
            raise
        return self.add_document_from_reader(rel, content)

    def add_document_from_reader(self, name: str, reader: Markup) -> Entity:
        """
        Parse markup (string, bytes or readable stream) and register the page.

        Raises:
            DuplicateEntityError: If the name is already registered.
        """
        links = extract_links(reader)
        return self.register_document(name, links.references, links.identifier_counts)

    def register_document(
            self,
            name: str,
            references: Iterable[str],
            identifier_counts: Optional[Mapping[str, int]] = None,
    ) -> Entity:
        """Register a page from already-extracted references and identifiers."""
        return registry.register_document(self.root, name, references, identifier_counts)

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def lookup(self, path: str) -> Optional[Entity]:
        """Resolve a root-relative path the same way an absolute link would be."""
        return resolve(self.root, split_path(path))

    # -------------------------------------------------------------------------
    # VALIDATION
    # -------------------------------------------------------------------------

    def validate(self, prober: Optional[Prober] = None) -> List[LinkError]:
        """
        Detect broken links across every registered page.

        Args:
            prober: Reachability check for external URLs. Defaults to an HTTP
                    HEAD probe built from the configuration, or no probing at
                    all when 'check_external' is disabled.

        Returns:
            List[LinkError]: Every problem found; order is not significant.
        """
        if prober is None and self.config.get("check_external", True):
            prober = build_prober(
                timeout=float(self.config.get("probe_timeout") or DEFAULT_PROBE_TIMEOUT),
                user_agent=self.config.get("user_agent") or "",
            )

        errors = validate_website(
            self.root,
            prober=prober,
            max_workers=int(self.config.get("max_workers") or 1),
        )
        logger.info(f"Validation finished with {len(errors)} problem(s)")
        return errors
