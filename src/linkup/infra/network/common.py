from __future__ import annotations

USER_AGENT = "LinkUp-Checker/1.0.0"
DEFAULT_TIMEOUT = 2.0
