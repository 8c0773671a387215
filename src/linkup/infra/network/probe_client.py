from __future__ import annotations

"""
External Reachability Client.

Issues a single HEAD request per URL under a bounded timeout and reports
either the response status code or the transport failure. Nothing raised by
the HTTP stack escapes this module, including URL parsing errors that
urllib3 raises as ValueError.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from linkup.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a reachability probe.

    Attributes:
        url: Probed URL.
        status_code: HTTP status received, None on transport failure.
        error: Transport error description, None when a response arrived.
    """
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status_code == SUCCESS_STATUS


Prober = Callable[[str], ProbeResult]


def probe_url(url: str, timeout: float = DEFAULT_TIMEOUT, user_agent: str = "") -> ProbeResult:
    """
    Check that a remote URL exists using a HEAD request.

    Args:
        url: Absolute URL to probe.
        timeout: Seconds allowed for connection and response.
        user_agent: Optional User-Agent override.

    Returns:
        ProbeResult: Status code or transport error.
    """
    headers = {"User-Agent": user_agent or USER_AGENT}
    try:
        response = requests.head(url, headers=headers, timeout=timeout, allow_redirects=True)
        response.close()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.debug(f"Probe failed for {url}: {e}")
        return ProbeResult(url=url, error=str(e) or type(e).__name__)

    logger.debug(f"Probe {url} -> {response.status_code}")
    return ProbeResult(url=url, status_code=response.status_code)


def build_prober(timeout: float = DEFAULT_TIMEOUT, user_agent: str = "") -> Prober:
    """Bind probe settings into a single-argument callable."""
    def _prober(url: str) -> ProbeResult:
        return probe_url(url, timeout=timeout, user_agent=user_agent)
    return _prober
