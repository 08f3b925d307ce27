"""
Configuration management for the PRD task tree compiler.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, and validation. The compiler itself takes no
configuration; these settings govern the input layer, JSON output and
logging around it.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os
import yaml


DEFAULT_MAX_INPUT_BYTES = 5 * 1024 * 1024


@dataclass
class InputConfig:
    """Configuration for reading PRD files."""
    max_size_bytes: int = field(default_factory=lambda: int(os.getenv(
        "PRDTREE_MAX_INPUT_BYTES",
        str(DEFAULT_MAX_INPUT_BYTES)
    )))
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.max_size_bytes <= 0:
            raise ValueError(f"max_size_bytes must be positive, got {self.max_size_bytes}")


@dataclass
class OutputConfig:
    """Configuration for report output formatting."""
    pretty_print: bool = True
    indent: int = 2
    ensure_ascii: bool = False
    include_sections: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("PRDTREE_LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Unknown keys inside a section raise TypeError from the
        dataclass constructor, which is surfaced as ValueError.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        try:
            return cls(
                input=InputConfig(**(data.get('input') or {})),
                output=OutputConfig(**(data.get('output') or {})),
                logging=LoggingConfig(**(data.get('logging') or {})),
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            'input': {
                'max_size_bytes': self.input.max_size_bytes,
                'encoding': self.input.encoding,
            },
            'output': {
                'pretty_print': self.output.pretty_print,
                'indent': self.output.indent,
                'ensure_ascii': self.output.ensure_ascii,
                'include_sections': self.output.include_sections,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """Get the default application configuration."""
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. ./config/default.yaml
    3. ./config.yaml
    4. ~/.prdtree/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("config/default.yaml"),
        Path("config.yaml"),
        Path.home() / ".prdtree" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
