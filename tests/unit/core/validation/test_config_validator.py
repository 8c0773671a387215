from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default injection, type coercion with warnings, and strict mode.
"""

import os
from typing import Any, Dict

import pytest

from linkup.core.validation.config_validator import validate_config
from linkup.domain.config import get_default_config, load_config


def test_defaults_pass_through_cleanly() -> None:
    clean, warnings = validate_config(get_default_config())
    assert warnings == []
    assert clean["probe_timeout"] == 2.0
    assert clean["document_extensions"] == [".html", ".htm"]
    assert clean["check_external"] is True


def test_non_dict_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_non_dict_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_coercions_emit_warnings(tmp_path) -> None:
    raw: Dict[str, Any] = {
        "site_path": str(tmp_path),
        "check_external": "no",
        "probe_timeout": "5",
        "max_workers": 3.0,
        "document_extensions": "HTML, tmpl",
    }
    clean, warnings = validate_config(raw)

    assert clean["site_path"] == os.path.abspath(str(tmp_path))
    assert clean["check_external"] is False
    assert clean["probe_timeout"] == 5.0
    assert clean["max_workers"] == 3
    assert clean["document_extensions"] == [".html", ".tmpl"]
    assert len(warnings) >= 3


def test_invalid_numbers_use_fallback() -> None:
    clean, warnings = validate_config({"probe_timeout": -1, "max_workers": True})
    assert clean["probe_timeout"] == 2.0
    assert clean["max_workers"] == 8
    assert len(warnings) == 2


def test_strict_mode_rejects_bad_types() -> None:
    with pytest.raises(TypeError):
        validate_config({"check_external": "maybe"}, strict=True)


def test_unknown_keys_are_dropped() -> None:
    clean, warnings = validate_config({"colour": "blue"})
    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_load_config_merges_json(tmp_path) -> None:
    cfg_file = tmp_path / "linkup.json"
    cfg_file.write_text('{"check_external": false, "max_workers": 2}', encoding="utf-8")

    conf = load_config(str(cfg_file))
    assert conf["check_external"] is False
    assert conf["max_workers"] == 2
    assert conf["probe_timeout"] == 2.0


def test_load_config_tolerates_missing_and_corrupt_files(tmp_path) -> None:
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_config(str(broken)) == get_default_config()
