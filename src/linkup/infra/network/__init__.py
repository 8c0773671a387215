from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the HTTP collaborators used to verify external references.
"""

from linkup.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT
from linkup.infra.network.probe_client import ProbeResult, build_prober, probe_url

__all__ = [
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "ProbeResult",
    "build_prober",
    "probe_url",
]
