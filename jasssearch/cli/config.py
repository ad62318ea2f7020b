"""Configuration management for jasssearch CLI.

Supports configuration from multiple sources with the following priority:
1. Command-line arguments
2. Environment variables
3. Configuration file (~/.jasssearch/config.yaml)
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
    Path.home() / ".jasssearch" / "config.yaml",
    Path.home() / ".jasssearch" / "config.json",
    Path.cwd() / ".jasssearch" / "config.yaml",
    Path.cwd() / ".jasssearch" / "config.json",
    Path.cwd() / "jasssearch.yaml",
    Path.cwd() / "jasssearch.json",
]

DEFAULT_SOURCES = [
    "https://raw.githubusercontent.com/lep/jassdoc/master/Blizzard.j",
    "https://raw.githubusercontent.com/lep/jassdoc/master/common.j",
    "https://raw.githubusercontent.com/lep/jassdoc/master/common.ai",
]

# Default configuration
DEFAULT_CONFIG = {
    "sources": DEFAULT_SOURCES,
    "display_limit": 200,
    "threshold": 0.3,
    "min_match_length": 2,
    "timeout": 30.0,
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
            return json.loads(content)
        return yaml.safe_load(content) or {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")


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


def _env_number(name: str, cast) -> Optional[Any]:
    """Read a numeric environment variable, ignoring unparseable values."""
    try:
        return cast(os.environ[name])
    except ValueError:
        logger.warning(f"Invalid {name} environment variable")
        return None


def get_config(override: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Get CLI configuration from all sources.

    Configuration priority (highest to lowest):
    1. Override parameters
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        override: Configuration overrides (typically from CLI args)

    Returns:
        Complete configuration dictionary
    """
    # Start with defaults
    config = DEFAULT_CONFIG.copy()
    config["sources"] = list(DEFAULT_SOURCES)

    # Layer in config file if it exists
    config_file = get_config_file()
    if config_file:
        try:
            file_config = load_config_file(config_file)
            config.update(file_config)
            logger.debug(f"Loaded config from {config_file}")
        except (IOError, ValueError) as e:
            logger.warning(f"Could not load config file: {e}")

    # Layer in environment variables
    if "JASSSEARCH_SOURCES" in os.environ:
        config["sources"] = [
            url.strip() for url in os.environ["JASSSEARCH_SOURCES"].split(",") if url.strip()
        ]
    numeric_vars = [
        ("JASSSEARCH_LIMIT", "display_limit", int),
        ("JASSSEARCH_THRESHOLD", "threshold", float),
        ("JASSSEARCH_TIMEOUT", "timeout", float),
    ]
    for env_name, key, cast in numeric_vars:
        if env_name in os.environ:
            value = _env_number(env_name, cast)
            if value is not None:
                config[key] = value
    if "JASSSEARCH_VERBOSE" in os.environ:
        config["verbose"] = os.environ["JASSSEARCH_VERBOSE"].lower() in ["true", "1", "yes"]

    # Layer in overrides (highest priority)
    if override:
        config.update(override)

    return config


def init_config(config_path: Optional[Path] = None) -> bool:
    """Initialize a new configuration file.

    Args:
        config_path: Path where to create config file (default: ~/.jasssearch/config.json)

    Returns:
        True if successful, False otherwise
    """
    if config_path is None:
        config_path = Path.home() / ".jasssearch" / "config.json"

    format = "yaml" if config_path.suffix in [".yaml", ".yml"] else "json"
    return save_config_file(DEFAULT_CONFIG, config_path, format=format)
