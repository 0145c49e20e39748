"""
Configuration system for docfix

Provides configuration management with support for files and environment variables.
Includes validation, default value handling, and configuration merging.
"""

import codecs
import json
import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .errors import DocFixError

logger = logging.getLogger(__name__)


class ConfigurationError(DocFixError):
    """Raised when configuration validation fails."""

    pass


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value.lower() in ("1", "true", "yes", "on")


class ConfigurationManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_PATHS = [
        "docfix.json",
        "docfix.yaml",
        "docfix.yml",
        ".docfix.json",
        ".docfix.yaml",
        ".docfix.yml",
        os.path.expanduser("~/.docfix.json"),
        os.path.expanduser("~/.docfix.yaml"),
    ]

    @staticmethod
    def find_config_file(search_paths: Optional[List[str]] = None) -> Optional[str]:
        """Find the first existing configuration file."""
        paths = search_paths or ConfigurationManager.DEFAULT_CONFIG_PATHS

        for path in paths:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def load_config_file(config_path: str) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def load_env_config() -> Dict[str, Any]:
        """Load configuration from DOCFIX_* environment variables."""
        config = {}

        fix = {}
        if os.getenv("DOCFIX_ENCODING"):
            fix["encoding"] = os.getenv("DOCFIX_ENCODING")

        dryrun = _env_flag("DOCFIX_DRYRUN")
        if dryrun is not None:
            fix["dryrun"] = dryrun

        if os.getenv("DOCFIX_MAX_DEPTH"):
            try:
                fix["max_depth"] = int(os.getenv("DOCFIX_MAX_DEPTH"))
            except ValueError:
                logger.warning("Invalid DOCFIX_MAX_DEPTH value, using default")

        if os.getenv("DOCFIX_EXCLUDED_PATTERNS"):
            fix["excluded_patterns"] = [
                p.strip() for p in os.getenv("DOCFIX_EXCLUDED_PATTERNS").split(",") if p.strip()
            ]

        if fix:
            config["fix"] = fix

        task = {}
        if os.getenv("DOCFIX_SOURCE_DIRECTORY"):
            task["source_directory"] = os.getenv("DOCFIX_SOURCE_DIRECTORY")

        if task:
            config["task"] = task

        no_rich = _env_flag("DOCFIX_NO_RICH")
        if no_rich is not None:
            config["output"] = {"use_rich": not no_rich}

        return config

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries, with later ones taking precedence."""
        result = {}

        for config in configs:
            if not config:
                continue

            for key, value in config.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = ConfigurationManager.merge_configs(result[key], value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def validate_config(config_data: Dict[str, Any]) -> None:
        """Validate configuration data."""
        if "fix" in config_data:
            fix = config_data["fix"]

            if "max_depth" in fix:
                max_depth = fix["max_depth"]
                if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth <= 0:
                    raise ConfigurationError("max_depth must be a positive integer")

            _check_types("fix", fix, bool, ("dryrun", "follow_symlinks"))
            _check_string_list("fix.excluded_patterns", fix.get("excluded_patterns"))

            if fix.get("encoding") is not None:
                _validate_encoding("fix.encoding", fix["encoding"])

            if "file_extensions" in fix:
                extensions = fix["file_extensions"]
                if not extensions or not all(
                    isinstance(ext, str) and ext.startswith(".") for ext in extensions
                ):
                    raise ConfigurationError(
                        "file_extensions must be a non-empty list like ['.java']"
                    )

        if "task" in config_data:
            task = config_data["task"]
            _check_types("task", task, bool, ("dryrun",))
            _check_types("task", task, str, ("source_directory",))
            if "encoding" in task:
                _validate_encoding("task.encoding", task["encoding"])

        if "output" in config_data:
            _check_types("output", config_data["output"], bool, ("use_rich", "show_changed_lines"))


def _check_types(section: str, data: Dict[str, Any], expected: type, keys) -> None:
    for key in keys:
        if key in data and not isinstance(data[key], expected):
            raise ConfigurationError(
                f"{section}.{key} must be a {expected.__name__}, got {data[key]!r}"
            )


def _check_string_list(key: str, value: Any) -> None:
    if value is not None and (
        not isinstance(value, list) or not all(isinstance(item, str) for item in value)
    ):
        raise ConfigurationError(f"{key} must be a list of strings")


def _validate_encoding(key: str, name: Any) -> None:
    if not isinstance(name, str):
        raise ConfigurationError(f"{key} must be a charset name")
    try:
        codecs.lookup(name)
    except LookupError:
        raise ConfigurationError(f"{key} is not a known charset: {name}")


@dataclass
class FixConfig:
    """Configuration for fixing files and directories."""

    encoding: Optional[str] = None  # None means detect per file
    dryrun: bool = False
    max_depth: int = 63
    follow_symlinks: bool = False
    file_extensions: List[str] = field(default_factory=lambda: [".java"])
    excluded_patterns: List[str] = field(default_factory=lambda: [".git", ".svn", ".hg"])


@dataclass
class TaskConfig:
    """Defaults for the build plugin's docfix task."""

    source_directory: str = "src/main/java"
    encoding: str = "UTF-8"
    dryrun: bool = False


@dataclass
class OutputConfig:
    """Terminal output settings."""

    use_rich: bool = True
    show_changed_lines: bool = True


@dataclass
class DocFixConfig:
    """Main configuration class for docfix."""

    fix_settings: FixConfig = field(default_factory=FixConfig)
    task_settings: TaskConfig = field(default_factory=TaskConfig)
    output_settings: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def default(cls) -> "DocFixConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        use_env: bool = True,
        validate: bool = True,
    ) -> "DocFixConfig":
        """
        Load configuration from multiple sources with precedence:
        1. Default values
        2. Configuration file
        3. Environment variables (if use_env=True)

        Args:
            config_path: Path to configuration file. If None, searches for default files.
            use_env: Whether to load environment variables
            validate: Whether to validate the configuration
        """
        configs_to_merge = []

        file_config = {}
        if config_path:
            file_config = ConfigurationManager.load_config_file(config_path)
        else:
            found_config = ConfigurationManager.find_config_file()
            if found_config:
                file_config = ConfigurationManager.load_config_file(found_config)
                logger.info(f"Loaded configuration from: {found_config}")

        configs_to_merge.append(file_config)

        if use_env:
            configs_to_merge.append(ConfigurationManager.load_env_config())

        merged_config = ConfigurationManager.merge_configs(*configs_to_merge)

        if validate:
            ConfigurationManager.validate_config(merged_config)

        return cls(
            fix_settings=_apply_section(FixConfig(), merged_config.get("fix")),
            task_settings=_apply_section(TaskConfig(), merged_config.get("task")),
            output_settings=_apply_section(OutputConfig(), merged_config.get("output")),
        )

    @classmethod
    def from_file(cls, config_path: str) -> "DocFixConfig":
        """Load configuration from a JSON or YAML file."""
        return cls.load(config_path=config_path, use_env=False)

    @classmethod
    def from_env(cls) -> "DocFixConfig":
        """Load configuration from environment variables."""
        return cls.load(config_path=None, use_env=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "fix": asdict(self.fix_settings),
            "task": asdict(self.task_settings),
            "output": asdict(self.output_settings),
        }

    def to_file(self, config_path: str, format: str = "json") -> None:
        """
        Save configuration to file.

        Args:
            config_path: Path to save configuration
            format: File format ('json' or 'yaml')
        """
        config_data = self.to_dict()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                if format.lower() in ("yaml", "yml"):
                    yaml.dump(config_data, f, default_flow_style=False, indent=2)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration file: {e}")

    def validate(self) -> None:
        """Validate the current configuration."""
        ConfigurationManager.validate_config(self.to_dict())

    def get_config_summary(self) -> str:
        """Get a human-readable summary of the configuration."""
        return f"""docfix Configuration Summary:
Fix:
  - Encoding: {self.fix_settings.encoding or 'auto-detect'}
  - Dry run: {self.fix_settings.dryrun}
  - Max depth: {self.fix_settings.max_depth}
  - File extensions: {', '.join(self.fix_settings.file_extensions)}
  - Excluded patterns: {len(self.fix_settings.excluded_patterns)} patterns

Task:
  - Source directory: {self.task_settings.source_directory}
  - Encoding: {self.task_settings.encoding}
  - Dry run: {self.task_settings.dryrun}

Output:
  - Rich output: {self.output_settings.use_rich}
  - Show changed lines: {self.output_settings.show_changed_lines}
"""


def _apply_section(section, data: Optional[Dict[str, Any]]):
    if data:
        for key, value in data.items():
            if hasattr(section, key):
                setattr(section, key, value)
            else:
                logger.warning("Ignoring unknown configuration key: %s", key)
    return section


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> DocFixConfig:
    """
    Load configuration from file and/or environment variables.

    Args:
        config_path: Path to configuration file
        use_env: Whether to load environment variables

    Returns:
        DocFixConfig: Loaded configuration
    """
    return DocFixConfig.load(config_path=config_path, use_env=use_env)
