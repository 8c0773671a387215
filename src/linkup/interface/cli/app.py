from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging, website discovery, validation and report rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from linkup.core.services.site_scanner import build_website
from linkup.core.validation.config_validator import validate_config
from linkup.domain.config import load_config
from linkup.domain.errors import LinkError
from linkup.infra.logging import LoggingConfig, configure_logging, get_logger
from linkup.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BROKEN_LINKS = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when no problems were found, 1 when broken links were
             reported, 2 on invalid input, 130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 2. Configuration hierarchy: defaults < config file < CLI flags
    raw_conf = load_config(args.config_path)
    raw_conf.update(cli_args.args_to_overrides(args))

    try:
        conf, warnings = validate_config(raw_conf, strict=False)
    except (TypeError, ValueError) as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    site_path = conf["site_path"]
    if not os.path.isdir(site_path):
        msg = f"Site directory does not exist: {site_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    # 3. Discovery and validation
    logger.info(f"Checking website at {site_path}")
    try:
        website = build_website(conf)
        errors = website.validate()
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.critical(f"Unable to load website: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    # 4. Rendering
    if args.json_output:
        print(json.dumps(_build_report(site_path, errors), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(errors)

    return EXIT_BROKEN_LINKS if errors else EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _build_report(site_path: str, errors: List[LinkError]) -> Dict[str, Any]:
    """Assemble the JSON report; errors are sorted for stable output."""
    ordered = sorted(errors, key=lambda e: e.message)
    return {
        "site": site_path,
        "count": len(ordered),
        "errors": [e.to_dict() for e in ordered],
    }


def _print_human_summary(errors: List[LinkError]) -> None:
    """Print one problem per line on stdout and a summary on stderr."""
    for message in sorted(e.message for e in errors):
        print(message)

    if errors:
        print(f"{len(errors)} problem(s) found.", file=sys.stderr)
    else:
        print("No broken links found.", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
