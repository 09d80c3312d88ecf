"""
Configuration Manager
====================

Manages i18nsmith settings and API credentials.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from ..core.exceptions import ConfigError

DEFAULT_CONFIG_FILE = "i18nsmith.json"


class ApiProvider(Enum):
    """Translation API providers."""
    DEEPL = "deepl"
    OPENAI = "openai"
    PSEUDO = "pseudo"

    @classmethod
    def from_string(cls, name: str) -> "ApiProvider":
        normalized = (name or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ConfigError(f"Unknown provider: {name}. Supported: deepl, openai, pseudo")

    @property
    def env_var_name(self) -> Optional[str]:
        if self is ApiProvider.DEEPL:
            return "DEEPL_API_KEY"
        if self is ApiProvider.OPENAI:
            return "OPENAI_API_KEY"
        return None

    @property
    def requires_key(self) -> bool:
        return self.env_var_name is not None


@dataclass
class ExtractionSettings:
    """String extraction settings."""
    output_dir: str = "./i18n"
    base_language: str = "fr"
    # Extra words the candidate filter should never extract
    excluded_strings: List[str] = field(default_factory=list)
    # Directory names skipped while walking a source tree
    skip_dirs: List[str] = field(default_factory=lambda: ["node_modules", "dist", "build", ".git"])


@dataclass
class ReplaceSettings:
    """Code replacement settings."""
    strategy: str = "react-i18n"
    in_place: bool = False


@dataclass
class TranslationSettings:
    """Translation-related settings."""
    provider: str = "deepl"
    source_language: str = "auto"
    request_delay: float = 0.1
    max_retries: int = 1
    timeout: int = 30
    # Texts shorter than this are copied untranslated
    min_text_length: int = 2
    pseudo_mode: str = "both"


@dataclass
class ApiKeys:
    """API keys for the translation services."""
    deepl_api_key: str = ""
    openai_api_key: str = ""


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.logger = logging.getLogger(__name__)
        self.config_file = Path(config_file)

        # Default configuration
        self.extraction_settings = ExtractionSettings()
        self.replace_settings = ReplaceSettings()
        self.translation_settings = TranslationSettings()
        self.api_keys = ApiKeys()

        # Load existing configuration
        self.load_config()

    def load_config(self) -> bool:
        """Load configuration from file. Returns False when defaults are used."""
        if not self.config_file.exists():
            self.logger.info("Config file doesn't exist, using defaults")
            return False

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            if 'extraction_settings' in config_data:
                self.extraction_settings = ExtractionSettings(**config_data['extraction_settings'])
            if 'replace_settings' in config_data:
                self.replace_settings = ReplaceSettings(**config_data['replace_settings'])
            if 'translation_settings' in config_data:
                self.translation_settings = TranslationSettings(**config_data['translation_settings'])
            if 'api_keys' in config_data:
                self.api_keys = ApiKeys(**config_data['api_keys'])
        except (OSError, ValueError, TypeError) as e:
            raise ConfigError(f"Error loading configuration {self.config_file}: {e}") from e

        self.logger.info("Configuration loaded from %s", self.config_file)
        return True

    def save_config(self) -> bool:
        """Save configuration to file."""
        config_data = {
            'extraction_settings': asdict(self.extraction_settings),
            'replace_settings': asdict(self.replace_settings),
            'translation_settings': asdict(self.translation_settings),
            'api_keys': asdict(self.api_keys),
        }

        try:
            # Create backup if file exists
            if self.config_file.exists():
                backup_file = self.config_file.with_suffix('.json.bak')
                try:
                    self.config_file.replace(backup_file)
                except OSError as e:
                    self.logger.warning(f"Could not create backup: {e}")

            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(config_data, f, indent=4, ensure_ascii=False)

            self.logger.info("Configuration saved successfully")
            return True

        except OSError as e:
            self.logger.error(f"Error saving configuration: {e}")
            return False

    def get_api_key(self, provider: ApiProvider) -> str:
        """Get API key for a provider from the config file."""
        return getattr(self.api_keys, f"{provider.value}_api_key", "")

    def set_api_key(self, provider: ApiProvider, api_key: str) -> None:
        setattr(self.api_keys, f"{provider.value}_api_key", api_key)

    def resolve_api_key(self, provider: ApiProvider, cli_api_key: Optional[str] = None) -> str:
        """
        Resolve the API key with priority:
        1. CLI flag
        2. Environment variable
        3. Config file
        """
        if not provider.requires_key:
            return ""

        if cli_api_key is not None:
            if not cli_api_key:
                raise ConfigError("API key provided via CLI is empty")
            self.logger.debug("Using API key from CLI flag")
            return cli_api_key

        env_var = provider.env_var_name
        if env_var in os.environ:
            key = os.environ[env_var]
            if not key:
                raise ConfigError(f"Environment variable {env_var} is empty")
            self.logger.debug("Using API key from environment variable: %s", env_var)
            return key

        key = self.get_api_key(provider)
        if key:
            self.logger.debug("Using API key from %s", self.config_file)
            return key

        raise ConfigError(
            f"API key not found. Set {env_var} environment variable or use --api-key flag"
        )

    def _section(self, name: str):
        sections = {
            'extraction': self.extraction_settings,
            'replace': self.replace_settings,
            'translation': self.translation_settings,
        }
        return sections.get(name)

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value using dot notation (e.g., 'replace.strategy')."""
        parts = key.split('.')
        if len(parts) != 2:
            return default
        section = self._section(parts[0])
        if section is None:
            return default
        return getattr(section, parts[1], default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value using dot notation (e.g., 'replace.strategy')."""
        parts = key.split('.')
        section = self._section(parts[0]) if len(parts) == 2 else None
        if section is None or not hasattr(section, parts[1]):
            raise ConfigError(f"Unknown setting: {key}")
        setattr(section, parts[1], value)

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self.extraction_settings = ExtractionSettings()
        self.replace_settings = ReplaceSettings()
        self.translation_settings = TranslationSettings()
        self.api_keys = ApiKeys()
        self.logger.info("Configuration reset to defaults")
