"""Launcher for the WurstScript compiler.

Finds a Java runtime and wurstscript.jar, applies the settings from
wrapper_config.toml and runs the jar with the wrapper's arguments.
"""

from wurstwrap.config import Settings, load_config
from wurstwrap.errors import WrapperError
from wurstwrap.launcher import CommandSpec, LaunchResult

__version__ = "0.1.0"

__all__ = [
    'Settings',
    'load_config',
    'WrapperError',
    'CommandSpec',
    'LaunchResult',
]
