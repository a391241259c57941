from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ncpass_tli.config.loader import ConfigLoadError, load_profile, validate_profile
from ncpass_tli.config.schema import DEFAULT_PROFILE, RequestProfile


def test_defaults_match_host_expectations() -> None:
    profile = RequestProfile()

    assert profile == DEFAULT_PROFILE
    assert profile.system_id == "NCTLI"
    assert profile.direction_id == "1"
    assert profile.requestor_id == "TCP"
    assert profile.terminal_id == "WEBTERM"
    assert profile.target_supplementary == "TLI"
    assert profile.token_type == 11


def test_validate_profile_partial_override() -> None:
    profile = validate_profile({"terminal_id": "KIOSK"})

    assert profile.terminal_id == "KIOSK"
    assert profile.requestor_id == "TCP"


def test_validate_profile_none_is_defaults() -> None:
    assert validate_profile(None) == DEFAULT_PROFILE


def test_rejects_unknown_keys() -> None:
    with pytest.raises(ConfigLoadError) as exc:
        validate_profile({"terminal": "KIOSK"}, source="inline")

    assert "extra" in str(exc.value).lower()
    assert "inline" in str(exc.value)


def test_rejects_unencodable_text() -> None:
    with pytest.raises(ConfigLoadError) as exc:
        validate_profile({"terminal_id": "終端"})

    assert "terminal_id" in str(exc.value)
    assert "cp1047" in str(exc.value)


@pytest.mark.parametrize("token_type", [-1, 0x10000])
def test_rejects_token_type_out_of_range(token_type: int) -> None:
    with pytest.raises(ConfigLoadError) as exc:
        validate_profile({"token_type": token_type})

    assert "token_type" in str(exc.value)


def test_profile_is_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_PROFILE.terminal_id = "OTHER"  # type: ignore[misc]


def test_load_profile_yaml(tmp_path: Path) -> None:
    path = tmp_path / "ncpass.yml"
    path.write_text("terminal_id: KIOSK\ntoken_type: 12\n", encoding="utf-8")

    profile = load_profile(path)

    assert profile.terminal_id == "KIOSK"
    assert profile.token_type == 12


def test_load_profile_json(tmp_path: Path) -> None:
    path = tmp_path / "ncpass.json"
    path.write_text('{"requestor_id": "SNA"}', encoding="utf-8")

    assert load_profile(path).requestor_id == "SNA"


def test_load_profile_section(tmp_path: Path) -> None:
    yaml_text = """
service:
  name: portal
ncpass:
  system_id: NCTST
"""
    path = tmp_path / "app.yaml"
    path.write_text(yaml_text, encoding="utf-8")

    assert load_profile(path, section="ncpass").system_id == "NCTST"

    with pytest.raises(ConfigLoadError) as exc:
        load_profile(path, section="missing")
    assert "section 'missing' not found" in str(exc.value)


def test_load_profile_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError) as exc:
        load_profile(tmp_path / "missing.yml")

    assert "Profile file not found" in str(exc.value)


def test_load_profile_unsupported_format(tmp_path: Path) -> None:
    path = tmp_path / "ncpass.toml"
    path.write_text("terminal_id = 'KIOSK'\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as exc:
        load_profile(path)

    assert "Unsupported profile format" in str(exc.value)


def test_load_profile_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as exc:
        load_profile(path)

    assert "Empty YAML document" in str(exc.value)
