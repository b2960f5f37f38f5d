"""
Configuration for markdown rendering.
"""

import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

import yaml


DEFAULT_FALLBACK_MESSAGE = (
    "Sorry, this did not seem to work! Maybe your markdown was not well formed, "
    "have you hit [Enter] after your last line?"
)


class MarkdownSettingsError(Exception):
    """Exception raised for invalid settings files or values."""


@dataclass
class MarkdownSettings:
    """Settings that control how documents are parsed and rendered."""

    # Pass user text and attribute values through html.escape
    escape_html: bool = False

    # Add a missing line terminator to the end of a non-empty document before parsing
    terminate_final_line: bool = False

    # Returned in place of HTML whenever a document fails to parse
    fallback_message: str = DEFAULT_FALLBACK_MESSAGE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MarkdownSettings':
        """
        Create settings from a mapping, checking keys and value types.

        Args:
            data: Mapping of setting names to values

        Returns:
            The settings

        Raises:
            MarkdownSettingsError: If a key is unknown or a value has the wrong type
        """
        known = {f.name: f for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                raise MarkdownSettingsError(f"Unknown setting: {key}")

            expected_type = bool if known[key].type in (bool, 'bool') else str
            if not isinstance(value, expected_type):
                raise MarkdownSettingsError(
                    f"Setting '{key}' must be of type {expected_type.__name__}, got {type(value).__name__}"
                )

        return cls(**data)

    @classmethod
    def load_from_file(cls, config_path: str) -> 'MarkdownSettings':
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            The settings; keys not present keep their defaults

        Raises:
            FileNotFoundError: If the file does not exist
            MarkdownSettingsError: If the file is not a valid settings mapping
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)

            except yaml.YAMLError as e:
                raise MarkdownSettingsError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise MarkdownSettingsError(
                f"Invalid {config_path}: expected a mapping, got {type(data).__name__}"
            )

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the settings to a plain mapping.

        Returns:
            Mapping of setting names to values
        """
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """
        Save the settings to a YAML file.

        Args:
            config_path: Path to write to
        """
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
