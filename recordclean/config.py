"""Configuration model and loaders for recordclean.

Responsibilities:
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ConfigLoader`: static construction helpers for `NormalizationConfig`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigurationError
from .parsing import normalize_optional_string, parse_required_boolean, parse_token_list
from .settings import DEFAULT_ABBREVIATIONS, NormalizationConfig


class ConfigLoader:
    """Factory methods for creating `NormalizationConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"abbreviations", "ignore_case"})
    _ENV_ABBREVIATIONS = "RECORDCLEAN_ABBREVIATIONS"
    _ENV_IGNORE_CASE = "RECORDCLEAN_IGNORE_CASE"

    @staticmethod
    def from_yaml(path: Path) -> NormalizationConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizationConfig:
        """Create a validated config from environment variables.

        Unset or blank variables fall back to the defaults.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        abbreviations = parse_token_list(
            env_map.get(ConfigLoader._ENV_ABBREVIATIONS),
            ConfigLoader._ENV_ABBREVIATIONS,
        ) or DEFAULT_ABBREVIATIONS
        raw_ignore_case = normalize_optional_string(env_map.get(ConfigLoader._ENV_IGNORE_CASE))
        ignore_case = (
            parse_required_boolean(raw_ignore_case, ConfigLoader._ENV_IGNORE_CASE)
            if raw_ignore_case is not None
            else True
        )

        config = NormalizationConfig(abbreviations=abbreviations, ignore_case=ignore_case)
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ConfigurationError(
                f"YAML config `{path}` must contain a top-level mapping/object."
            )
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> NormalizationConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown:
            raise ConfigurationError(
                f"{source_label} has unsupported key(s): {', '.join(unknown)}."
            )

        abbreviations = (
            parse_token_list(payload.get("abbreviations"), "abbreviations")
            or DEFAULT_ABBREVIATIONS
        )
        ignore_case = True
        if payload.get("ignore_case") is not None:
            ignore_case = parse_required_boolean(payload["ignore_case"], "ignore_case")

        config = NormalizationConfig(abbreviations=abbreviations, ignore_case=ignore_case)
        config.validate()
        return config
