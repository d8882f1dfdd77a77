"""Configuration model and loaders for localeyaml.

Responsibilities:
- Define run settings (indent width, sorting, write strategy) as a typed dataclass.
- Provide loader entry points for environment- and file-based configuration.

Key types:
- `LocaleYamlConfig`: explicit settings passed to every pipeline run.
- `ConfigLoader`: static construction helpers for `LocaleYamlConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .text.quoting import INDENT_SIZE


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def _normalize_optional_string(value: object) -> str | None:
    """Return the stripped text of `value`, or `None` when it is blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_boolean(value: object, label: str) -> bool:
    """Parse a permissive boolean token (`true/false`, `1/0`, `yes/no`, `on/off`)."""

    if isinstance(value, bool):
        return value
    token = (_normalize_optional_string(value) or "").lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(f"{label} must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`).")


def _parse_positive_int(value: object, label: str) -> int:
    """Parse a strictly positive integer from text or an `int`."""

    if isinstance(value, bool):
        raise ValueError(f"{label} must be a positive integer.")
    try:
        parsed = value if isinstance(value, int) else int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"{label} must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"{label} must be a positive integer.")
    return parsed


@dataclass(slots=True)
class LocaleYamlConfig:
    """Settings for one clean, parse, or dump run.

    Attributes:
        indent_size: Spaces per nesting level.
        sort: Whether keys are sorted recursively after parsing.
        atomic_write: Whether `clean` replaces files through a temporary file.
        output_path: Optional destination for `clean`; the source is kept when set.
    """

    indent_size: int = INDENT_SIZE
    sort: bool = True
    atomic_write: bool = True
    output_path: Path | None = None

    def validate(self) -> None:
        """Validate configuration values before a run."""

        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ValueError("`indent_size` must be a positive integer.")
        if self.indent_size <= 0:
            raise ValueError("`indent_size` must be a positive integer.")

    def with_overrides(self, **overrides: Any) -> LocaleYamlConfig:
        """Return a copy with every non-`None` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


class ConfigLoader:
    """Factory methods for creating `LocaleYamlConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset({"indent_size", "sort", "atomic_write", "output_path"})
    _ENV_KEYS = {
        "LOCALEYAML_INDENT_SIZE": "indent_size",
        "LOCALEYAML_SORT": "sort",
        "LOCALEYAML_ATOMIC_WRITE": "atomic_write",
        "LOCALEYAML_OUTPUT_PATH": "output_path",
    }

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> LocaleYamlConfig:
        """Create a validated config from `LOCALEYAML_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            field_name: env_map[env_key]
            for env_key, field_name in ConfigLoader._ENV_KEYS.items()
            if _normalize_optional_string(env_map.get(env_key)) is not None
        }
        return ConfigLoader._build_config(payload, source_label="Environment")

    @staticmethod
    def from_yaml(path: Path) -> LocaleYamlConfig:
        """Create a validated config from a YAML settings file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(raw_text, path)
        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_KEYS)
        if unknown:
            raise ValueError(f"YAML `{path}` includes unsupported key(s): {', '.join(unknown)}.")
        nested = sorted(str(key) for key, value in payload.items() if isinstance(value, (dict, list)))
        if nested:
            raise ValueError(f"YAML `{path}` key(s) must be scalars: {', '.join(nested)}.")
        return ConfigLoader._build_config(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config(payload: Mapping[str, Any], source_label: str) -> LocaleYamlConfig:
        """Build a validated config from a flat mapping of raw values."""

        config = LocaleYamlConfig()
        values: dict[str, Any] = {}
        if _normalize_optional_string(payload.get("indent_size")) is not None:
            values["indent_size"] = _parse_positive_int(
                payload["indent_size"], f"{source_label} field `indent_size`"
            )
        for key in ("sort", "atomic_write"):
            if _normalize_optional_string(payload.get(key)) is not None:
                values[key] = _parse_boolean(payload[key], f"{source_label} field `{key}`")
        output_path = _normalize_optional_string(payload.get("output_path"))
        if output_path is not None:
            values["output_path"] = Path(output_path)

        config = config.with_overrides(**values)
        config.validate()
        return config
