from __future__ import annotations

"""
Website Link Validation Engine.

Walks every page of the website tree, classifies each reference it emits,
resolves internal paths against the tree, checks fragments against the
target page's identifiers and fans external URLs out to the reachability
prober. All problems are accumulated as LinkError records; none of them
stops the walk.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple

from linkup.core.tree.resolver import resolve_path
from linkup.core.validation.classifier import classify_reference
from linkup.domain.entity_models import Entity
from linkup.domain.errors import LinkCategory, LinkError
from linkup.domain.reference_models import (
    ExternalReference,
    IncompleteFragment,
    PathReference,
    RootReference,
    SameFragmentReference,
)
from linkup.infra.network.probe_client import ProbeResult, Prober

logger = logging.getLogger(__name__)

# (page full path, url) pairs awaiting a network probe
ExternalTask = Tuple[str, str]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_website(
        root: Entity,
        prober: Optional[Prober] = None,
        max_workers: int = 1,
) -> List[LinkError]:
    """
    Validate every page registered under 'root'.

    Args:
        root: Root directory of the website tree.
        prober: Callable used to check external URLs. None skips external
                references entirely.
        max_workers: Upper bound on concurrent probes.

    Returns:
        List[LinkError]: Every problem found. Order is not significant.
    """
    errors: List[LinkError] = []
    external: List[ExternalTask] = []

    pages = 0
    for page in root.iter_leaves():
        pages += 1
        errors.extend(validate_page(root, page, external))

    logger.debug(
        f"Validated {pages} entities: {len(errors)} internal problems, "
        f"{len(external)} external references"
    )

    if external:
        if prober is None:
            logger.info(f"Skipping {len(external)} external references")
        else:
            errors.extend(probe_external(external, prober, max_workers))

    return errors


def validate_page(root: Entity, page: Entity, external: List[ExternalTask]) -> List[LinkError]:
    """
    Validate the identifiers and references of a single page.

    External references are not probed here; they are appended to
    'external' for the caller to dispatch.
    """
    errors: List[LinkError] = []

    for identifier, count in page.identifier_counts.items():
        if count > 1:
            errors.append(LinkError(
                page=page.full_path,
                category=LinkCategory.DUPLICATE_IDENTIFIER,
                reference=identifier,
                count=count,
            ))

    for raw in page.references:
        ref = classify_reference(raw)

        if isinstance(ref, ExternalReference):
            external.append((page.full_path, ref.url))

        elif isinstance(ref, IncompleteFragment):
            errors.append(LinkError(
                page=page.full_path,
                category=LinkCategory.INCOMPLETE_FRAGMENT,
                reference="#",
            ))

        elif isinstance(ref, RootReference):
            continue

        elif isinstance(ref, SameFragmentReference):
            if ref.fragment not in page.identifier_counts:
                errors.append(LinkError(
                    page=page.full_path,
                    category=LinkCategory.BROKEN_SAME_PAGE_LINK,
                    reference=ref.href,
                    fragment=ref.fragment,
                ))

        elif isinstance(ref, PathReference):
            error = _check_path(root, page, ref)
            if error is not None:
                errors.append(error)

    return errors


def probe_external(
        tasks: List[ExternalTask],
        prober: Prober,
        max_workers: int = 1,
) -> List[LinkError]:
    """
    Probe external references, in parallel when 'max_workers' > 1.

    Args:
        tasks: (page, url) pairs, one per reference occurrence.
        prober: Reachability check for a single URL.
        max_workers: Thread pool size.

    Returns:
        List[LinkError]: Failures mapped back to their originating page.
    """
    errors: List[LinkError] = []
    workers = max(1, min(max_workers, len(tasks)))
    logger.info(f"Probing {len(tasks)} external references ({workers} workers)")

    if workers == 1:
        for page, url in tasks:
            error = _probe_error(page, url, _run_prober(prober, url))
            if error is not None:
                errors.append(error)
        return errors

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(prober, url): (page, url) for page, url in tasks}
        for future in as_completed(futures):
            page, url = futures[future]
            try:
                result = future.result()
            except Exception as e:
                result = _crashed_probe(url, e)
            error = _probe_error(page, url, result)
            if error is not None:
                errors.append(error)

    return errors


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_path(root: Entity, page: Entity, ref: PathReference) -> Optional[LinkError]:
    """Resolve a path reference and, when present, verify its fragment."""
    target = resolve_path(root, page, ref.path)

    if target is None:
        category = (
            LinkCategory.BROKEN_ABSOLUTE_LINK if ref.is_absolute
            else LinkCategory.BROKEN_RELATIVE_LINK
        )
        return LinkError(page=page.full_path, category=category, reference=ref.path)

    if ref.fragment is not None and ref.fragment not in target.identifier_counts:
        return LinkError(
            page=page.full_path,
            category=LinkCategory.BROKEN_FRAGMENT_TARGET,
            reference=ref.path,
            fragment=ref.fragment,
        )
    return None


def _run_prober(prober: Prober, url: str) -> ProbeResult:
    """Invoke the prober, turning an unexpected exception into a failed probe."""
    try:
        return prober(url)
    except Exception as e:
        return _crashed_probe(url, e)


def _crashed_probe(url: str, exc: Exception) -> ProbeResult:
    logger.error(f"Prober crashed for {url}: {exc}")
    return ProbeResult(url=url, error=str(exc) or type(exc).__name__)


def _probe_error(page: str, url: str, result: ProbeResult) -> Optional[LinkError]:
    """Map a probe outcome to an error record, or None on success."""
    if result.error is not None:
        return LinkError(
            page=page,
            category=LinkCategory.EXTERNAL_PROBE_FAILED,
            reference=url,
        )
    if not result.ok:
        return LinkError(
            page=page,
            category=LinkCategory.EXTERNAL_STATUS_ERROR,
            reference=url,
            status_code=result.status_code,
        )
    return None
