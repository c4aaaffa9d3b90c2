"""Tests for configuration loading."""

import json

import pytest

from genomeconcord.config import load_config


def test_packaged_defaults():
    """Test the packaged defaults are loaded without a user file."""
    cfg = load_config()
    assert cfg["mendelian_error_warning_rate"] == 1.0
    assert cfg["analysis_threads"] == 1
    assert cfg["trait_tables"] == ["traits", "wellness"]
    assert cfg["html_report"] is False
    assert cfg["haplogroup_rules_file"] is None


def test_user_file_overrides(tmp_path):
    """Test a partial user file overrides only the keys it names."""
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"analysis_threads": 4, "report_title": "Mine"}))
    cfg = load_config(str(path))
    assert cfg["analysis_threads"] == 4
    assert cfg["report_title"] == "Mine"
    assert cfg["mendelian_error_warning_rate"] == 1.0


def test_missing_file(tmp_path):
    """Test a missing user file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
def test_invalid_file(tmp_path, content):
    """Test invalid JSON or a non-object raises ValueError."""
    path = tmp_path / "cfg.json"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_config(str(path))
