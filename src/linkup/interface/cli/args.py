from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the linkup CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="linkup",
        description="Detect broken links, missing anchors and duplicate ids on a static website.",
    )

    p.add_argument(
        "site_path",
        nargs="?",
        default=None,
        help="Root directory of the website (defaults to the current directory).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )

    # --- Discovery ---
    p.add_argument(
        "--ext",
        dest="document_extensions",
        default=None,
        help="Comma-separated extensions parsed as HTML documents (default: .html,.htm).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regex patterns for file and directory names to skip.",
    )

    # --- External probing ---
    p.add_argument(
        "--no-external",
        action="store_true",
        help="Do not ping external URLs.",
    )
    p.add_argument(
        "--timeout",
        dest="probe_timeout",
        type=float,
        default=None,
        help="Seconds to wait for each external probe.",
    )
    p.add_argument(
        "--workers",
        dest="max_workers",
        type=int,
        default=None,
        help="Maximum number of concurrent external probes.",
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the report as JSON.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress information.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually supplied are returned.
    """
    overrides: Dict[str, Any] = {}

    if args.site_path:
        overrides["site_path"] = args.site_path
    if args.document_extensions:
        overrides["document_extensions"] = _split_csv(args.document_extensions)
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.no_external:
        overrides["check_external"] = False
    if args.probe_timeout is not None:
        overrides["probe_timeout"] = args.probe_timeout
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
