from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from ncpass_tli.config.schema import RequestProfile

_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def load_profile(path: str | Path, *, section: str | None = None) -> RequestProfile:
    """
    Load a RequestProfile from a YAML or JSON file.

    ``section`` selects a top-level key when the profile is embedded in a
    larger application config, e.g. ``section="ncpass"``.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigLoadError(f"Profile file not found: {config_path}")

    document = _read_document(config_path)
    if section is not None:
        document = _select_section(document, section, config_path)

    return validate_profile(document, source=str(config_path))


def validate_profile(data: Any, *, source: str = "<memory>") -> RequestProfile:
    if data is None:
        # an empty section means "all defaults"
        data = {}
    try:
        return RequestProfile.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(format_validation_error(exc, source=source)) from exc


def _read_document(path: Path) -> Any:
    raw_text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix in _YAML_SUFFIXES:
        try:
            parsed = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"YAML parse error in {path}: {exc}") from exc
        if parsed is None:
            raise ConfigLoadError(f"Empty YAML document: {path}")
        return parsed

    if suffix == ".json":
        try:
            return json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(f"JSON parse error in {path}: {exc}") from exc

    raise ConfigLoadError(f"Unsupported profile format '{path.suffix}'. Use .yml/.yaml or .json.")


def _select_section(document: Any, section: str, path: Path) -> Any:
    if not isinstance(document, Mapping):
        raise ConfigLoadError(f"{path}: expected a mapping at the top level to select '{section}'")
    if section not in document:
        raise ConfigLoadError(f"{path}: section '{section}' not found")
    return document[section]


def format_validation_error(error: ValidationError, *, source: str) -> str:
    lines: list[str] = [f"Invalid NCPASS request profile in {source}"]
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        lines.append(f" - {location}: {item.get('msg', 'invalid value')} ({item.get('type', 'validation_error')})")
    return "\n".join(lines)


__all__ = ["ConfigLoadError", "load_profile", "validate_profile", "format_validation_error"]
