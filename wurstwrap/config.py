"""Configuration file management for the WurstScript wrapper.

This module handles loading and validation of the optional
`wrapper_config.toml` file in the current working directory. A missing file
is not an error; a file that exists must parse and validate.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# Check Python version for tomllib support (Python 3.11+)
if sys.version_info < (3, 11):
    raise RuntimeError(
        "wurstwrap requires Python 3.11 or greater for tomllib support. "
        f"Current version: {sys.version_info.major}.{sys.version_info.minor}"
    )

import tomllib  # Python 3.11+ standard library

from .errors import ConfigError
from .profiles import PROFILES

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "wrapper_config.toml"

SIZE_KEYS = ("initial_heap_size", "maximum_heap_size", "thread_stack_size")
STRING_KEYS = ("java_path", "wurst_path", "profile")


@dataclass(frozen=True)
class Settings:
    """Values read from wrapper_config.toml.

    Every field is optional; None (or an empty java_args) means
    "use the default or auto-detect".
    """
    initial_heap_size: Optional[int] = None
    maximum_heap_size: Optional[int] = None
    thread_stack_size: Optional[int] = None
    java_path: Optional[str] = None
    wurst_path: Optional[str] = None
    java_args: Tuple[str, ...] = ()
    profile: Optional[str] = None
    verbose: bool = False


def find_config_file(cwd: Path) -> Optional[Path]:
    """Return the path of wrapper_config.toml in cwd, or None if there is none."""
    config_file = Path(cwd) / CONFIG_FILE_NAME
    if config_file.is_file():
        return config_file
    return None


def validate_config(config: Dict[str, Any], config_file: Path) -> Settings:
    """Validate configuration values and build Settings from them.

    Unknown keys are ignored so older wrappers keep working with newer
    config files.

    Args:
        config: Dictionary of configuration values
        config_file: Path to config file (for error messages)

    Returns:
        Settings populated with the keys present in config

    Raises:
        ConfigError: If any validation fails
    """
    values: Dict[str, Any] = {}

    for key in SIZE_KEYS:
        if key not in config:
            continue
        value = config[key]
        # bool is a subclass of int in Python
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(
                f"Invalid value for '{key}' in {config_file}: "
                f"expected integer (megabytes), got {type(value).__name__}"
            )
        if value < 0:
            raise ConfigError(
                f"Invalid value for '{key}' in {config_file}: "
                f"must be non-negative, got {value}"
            )
        values[key] = value

    for key in STRING_KEYS:
        if key not in config:
            continue
        value = config[key]
        if not isinstance(value, str):
            raise ConfigError(
                f"Invalid value for '{key}' in {config_file}: "
                f"expected string, got {type(value).__name__}"
            )
        values[key] = value

    if "profile" in values and values["profile"] not in PROFILES:
        known = ", ".join(f"'{name}'" for name in PROFILES)
        raise ConfigError(
            f"Invalid value for 'profile' in {config_file}: "
            f"must be one of {known}, got '{values['profile']}'"
        )

    if "java_args" in config:
        java_args = config["java_args"]
        if not isinstance(java_args, list) or not all(isinstance(a, str) for a in java_args):
            raise ConfigError(
                f"Invalid value for 'java_args' in {config_file}: "
                "expected a list of strings"
            )
        values["java_args"] = tuple(java_args)

    if "verbose" in config:
        if not isinstance(config["verbose"], bool):
            raise ConfigError(
                f"Invalid value for 'verbose' in {config_file}: "
                f"expected boolean, got {type(config['verbose']).__name__}"
            )
        values["verbose"] = config["verbose"]

    return Settings(**values)


def load_config(cwd: Optional[Path] = None) -> Settings:
    """Load wrapper_config.toml from cwd, returning empty Settings if not found.

    Raises an exception if the config file exists but cannot be parsed, so users can fix errors.

    Args:
        cwd: Directory to look in. If None, uses Path.cwd()

    Returns:
        Settings with only the keys the file specified populated

    Raises:
        ConfigError: If config file exists but contains invalid TOML, values, or cannot be read
    """
    if cwd is None:
        cwd = Path.cwd()

    config_file = find_config_file(cwd)
    if config_file is None:
        logger.debug(f"No {CONFIG_FILE_NAME} in {cwd}, using defaults")
        return Settings()

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Found wrapper config file but unable to parse {config_file}: "
            f"Invalid TOML syntax - {e}"
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Found wrapper config file but unable to parse {config_file}: "
            f"file is not valid UTF-8 - {e}"
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Failed to read {config_file}: {e}"
        ) from e

    settings = validate_config(data, config_file)
    logger.debug(f"Loaded {config_file}: {settings}")
    return settings


def init_config(cwd: Optional[Path] = None) -> int:
    """Generate a new wrapper_config.toml file with all options commented out.

    Args:
        cwd: Directory to write into. If None, uses Path.cwd()

    Returns:
        0 on success, 1 on error
    """
    if cwd is None:
        cwd = Path.cwd()

    existing_config = find_config_file(cwd)
    if existing_config is not None:
        print(
            f"Error: Configuration file already exists at {existing_config}",
            file=sys.stderr
        )
        print(
            "Refusing to generate a new config file. "
            "Delete or rename the existing file first.",
            file=sys.stderr
        )
        return 1

    config_file = Path(cwd) / CONFIG_FILE_NAME

    config_content = """# WurstScript wrapper configuration file
# Uncomment and modify values as needed

# Initial Java heap size in megabytes (-Xms)
# initial_heap_size = 256

# Maximum Java heap size in megabytes (-Xmx)
# maximum_heap_size = 1024

# Thread stack size in megabytes (-Xss)
# thread_stack_size = 4

# Extra arguments passed to Java, in order, after the memory settings
# java_args = ["-XX:+UseG1GC"]

# Java executable to use instead of searching JAVA_HOME and PATH
# java_path = "C:\\\\Program Files\\\\Java\\\\bin\\\\javaw.exe"

# Folder containing wurstscript.jar
# wurst_path = "C:\\\\Users\\\\me\\\\.wurst"

# Launch profile: "windowed" (javaw.exe, jar in ~/.wurst)
# or "console" (java.exe, jar in the working directory) (default: "windowed")
# profile = "windowed"

# Enable verbose logging on stderr (default: false)
# verbose = false
"""

    try:
        config_file.write_text(config_content, encoding="utf-8")
        print(f"Created configuration file at {config_file}")
        return 0
    except OSError as e:
        print(f"Error: Failed to write configuration file: {e}", file=sys.stderr)
        return 1
