from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Omitted options produce no overrides.
"""

from linkup.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_no_flags_no_overrides():
    assert args_to_overrides(parse_args([])) == {}


def test_cli_flags_mapping():
    args = parse_args(["public", "--no-external", "--timeout", "5", "--workers", "2"])
    overrides = args_to_overrides(args)

    assert overrides["site_path"] == "public"
    assert overrides["check_external"] is False
    assert overrides["probe_timeout"] == 5.0
    assert overrides["max_workers"] == 2


def test_cli_csv_list_parsing():
    args = parse_args(["--ext", ".html, .tmpl,", "--exclude", r"^\.,drafts"])
    overrides = args_to_overrides(args)

    assert overrides["document_extensions"] == [".html", ".tmpl"]
    assert overrides["exclude_patterns"] == [r"^\.", "drafts"]


def test_output_flags_do_not_leak_into_config():
    args = parse_args(["--json", "--debug", "-v", "--log-file", "x.log"])
    assert args.json_output and args.debug and args.verbose
    assert args.log_file == "x.log"
    assert args_to_overrides(args) == {}
