"""Configuration management for symsearch CLI.

Supports configuration from multiple sources with the following priority:
1. Command-line arguments
2. Environment variables
3. Configuration file (~/.symsearch/config.yaml)
4. Default values
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
import logging

import yaml


logger = logging.getLogger(__name__)

# Configuration file locations to check
CONFIG_LOCATIONS = [
    Path.home() / ".symsearch" / "config.yaml",
    Path.home() / ".symsearch" / "config.json",
    Path.cwd() / ".symsearch" / "config.yaml",
    Path.cwd() / ".symsearch" / "config.json",
    Path.cwd() / "symsearch.yaml",
    Path.cwd() / "symsearch.json",
]

# Default configuration
DEFAULT_CONFIG = {
    "corpus_path": str(Path.home() / ".symsearch" / "pkg-data.json"),
    "limit": 32,
    "output": "table",
    "package": None,
    "verbose": False,
}


def get_config_file() -> Optional[Path]:
    """Find configuration file in standard locations.

    Returns:
        Path to config file if found, None otherwise
    """
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            logger.debug(f"Found config file at {config_path}")
            return config_path
    return None


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """Load configuration from file (YAML or JSON).

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        IOError: If file cannot be read
        ValueError: If file format is invalid
    """
    if not config_path.exists():
        raise IOError(f"Configuration file not found: {config_path}")

    if config_path.suffix not in [".yaml", ".yml", ".json"]:
        raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    try:
        content = config_path.read_text()
    except OSError as e:
        raise IOError(f"Error reading config file {config_path}: {e}")

    try:
        if config_path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return data


def save_config_file(config: Dict[str, Any], config_path: Path, format: str = "json") -> bool:
    """Save configuration to file.

    Args:
        config: Configuration dictionary
        config_path: Path where to save configuration
        format: File format (json or yaml)

    Returns:
        True if successful, False otherwise
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if format == "yaml":
            content = yaml.safe_dump(config, default_flow_style=False)
        else:
            content = json.dumps(config, indent=2)

        config_path.write_text(content)
        logger.info(f"Configuration saved to {config_path}")
        return True

    except OSError as e:
        logger.error(f"Error saving config file: {e}")
        return False


def validate_corpus_exists(corpus_path: str) -> bool:
    """Check if the package data file exists."""
    return os.path.isfile(corpus_path)


def get_config(override: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Get CLI configuration from all sources.

    Configuration priority (highest to lowest):
    1. Override parameters (None values are ignored)
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        override: Configuration overrides (typically from CLI args)

    Returns:
        Complete configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    config_file = get_config_file()
    if config_file:
        try:
            file_config = load_config_file(config_file)
            config.update(file_config)
            logger.debug(f"Loaded config from {config_file}")
        except (IOError, ValueError) as e:
            logger.warning(f"Could not load config file: {e}")

    if not isinstance(config["limit"], int):
        try:
            config["limit"] = int(config["limit"])
        except (TypeError, ValueError):
            logger.warning(f"Invalid limit in config file: {config['limit']!r}")
            config["limit"] = DEFAULT_CONFIG["limit"]

    if "SYMSEARCH_CORPUS" in os.environ:
        config["corpus_path"] = os.environ["SYMSEARCH_CORPUS"]
    if "SYMSEARCH_OUTPUT" in os.environ:
        config["output"] = os.environ["SYMSEARCH_OUTPUT"]
    if "SYMSEARCH_PACKAGE" in os.environ:
        config["package"] = os.environ["SYMSEARCH_PACKAGE"] or None
    if "SYMSEARCH_LIMIT" in os.environ:
        try:
            config["limit"] = int(os.environ["SYMSEARCH_LIMIT"])
        except ValueError:
            logger.warning("Invalid SYMSEARCH_LIMIT environment variable")
    if "SYMSEARCH_VERBOSE" in os.environ:
        config["verbose"] = os.environ["SYMSEARCH_VERBOSE"].lower() in ["true", "1", "yes"]

    if override:
        config.update({k: v for k, v in override.items() if v is not None})

    return config


def init_config(config_path: Optional[Path] = None, values: Optional[Dict[str, Any]] = None) -> bool:
    """Initialize a new configuration file.

    Args:
        config_path: Path where to create config file (default: ~/.symsearch/config.json)
        values: Settings that replace the defaults in the written file

    Returns:
        True if successful, False otherwise
    """
    if config_path is None:
        config_path = Path.home() / ".symsearch" / "config.json"

    format = "yaml" if config_path.suffix in [".yaml", ".yml"] else "json"
    config = DEFAULT_CONFIG.copy()
    if values:
        config.update({k: v for k, v in values.items() if v is not None})
    return save_config_file(config, config_path, format=format)
