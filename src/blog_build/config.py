"""
Configuration management with YAML loading and environment variable support.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_ARCHIVE_NAME,
    DEFAULT_GENERATOR,
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RECIPE,
    DEFAULT_THEME,
    DEPLOY_ENDPOINT,
    TOKEN_ENV_VAR,
)
from .errors import ConfigurationError

CONFIG_ENV_VAR = "BLOG_BUILD_CONFIG"
SECTIONS = ["paths", "generator", "deploy", "logging"]
TRUE_STRINGS = {"true", "yes", "on", "1"}
FALSE_STRINGS = {"false", "no", "off", "0"}


def _env_path(env_var: str, default: str) -> Path:
    """Get path from environment variable or return default."""
    if value := os.environ.get(env_var):
        return Path(value)
    return Path(default)


def _env_str(env_var: str, default: str | None) -> str | None:
    return os.environ.get(env_var) or default


def _to_bool(key: str, value) -> bool:
    """Coerce YAML scalars like "false" or 0 to a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    raise ConfigurationError(f"{key} must be true or false, got {value!r}")


@dataclass
class PathsConfig:
    """Paths configuration - input and output can be overridden via environment variables."""

    input_dir: Path = field(default_factory=lambda: _env_path("BLOG_BUILD_INPUT_DIR", DEFAULT_INPUT_DIR))
    output_dir: Path = field(default_factory=lambda: _env_path("BLOG_BUILD_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    archive_path: Path = field(default_factory=lambda: Path(DEFAULT_ARCHIVE_NAME))


@dataclass
class GeneratorConfig:
    executable: str = field(default_factory=lambda: _env_str("BLOG_BUILD_GENERATOR", DEFAULT_GENERATOR))
    recipe: str = DEFAULT_RECIPE
    theme: str = DEFAULT_THEME
    update_packages: bool = True


@dataclass
class DeployConfig:
    # Must be set explicitly; there is no default site
    site: str | None = field(default_factory=lambda: _env_str("BLOG_BUILD_SITE", None))
    endpoint: str = DEPLOY_ENDPOINT
    token_env: str = TOKEN_ENV_VAR

    @property
    def url(self) -> str | None:
        """Deploy endpoint with the site name filled in, None when no site is set."""
        if not self.site:
            return None
        return self.endpoint.format(site=self.site)


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    paths: PathsConfig = field(default_factory=PathsConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    deploy: DeployConfig = field(default_factory=DeployConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "AppConfig":
        """Create config from dictionary. Unknown sections and keys are ignored."""
        config = cls()

        for section_name in SECTIONS:
            values = data.get(section_name)
            if not isinstance(values, dict):
                continue
            section = getattr(config, section_name)
            for key, value in values.items():
                if not hasattr(section, key):
                    continue
                if section_name == "paths" and isinstance(value, str):
                    value = Path(value)
                elif isinstance(getattr(section, key), bool):
                    value = _to_bool(f"{section_name}.{key}", value)
                setattr(section, key, value)

        return config

    def with_overrides(self, input_dir: Path | None = None, output_dir: Path | None = None) -> "AppConfig":
        """Return a copy with CLI path overrides applied."""
        data = self._to_dict()
        if input_dir is not None:
            data["paths"]["input_dir"] = str(input_dir)
        if output_dir is not None:
            data["paths"]["output_dir"] = str(output_dir)
        return AppConfig._from_dict(data)

    def _to_dict(self) -> dict:
        """Convert config to dictionary."""
        result = {}
        for attr in SECTIONS:
            section = getattr(self, attr)
            result[attr] = {
                key: str(value) if isinstance(value, Path) else value for key, value in vars(section).items()
            }
        return result


def find_config_file() -> Path | None:
    """
    Search for a config file in standard locations.

    Search order:
    1. $BLOG_BUILD_CONFIG
    2. ./blog-build.yaml
    3. ./config.yaml
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)

    for path in (Path.cwd() / "blog-build.yaml", Path.cwd() / "config.yaml"):
        if path.exists():
            return path
    return None


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load configuration.

    Args:
        config_path: Path to config file (default: searches standard locations)

    Returns:
        AppConfig (defaults if no file is found)
    """
    if config_path is None:
        config_path = find_config_file()

    return AppConfig.from_yaml(config_path) if config_path else AppConfig()
