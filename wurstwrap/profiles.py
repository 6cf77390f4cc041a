"""Launch profiles: which Java executable to look for and where the archive lives.

Two ways of launching WurstScript exist. The windowed launcher starts
``javaw.exe`` and expects ``wurstscript.jar`` under ``~/.wurst``; the console
launcher starts ``java.exe`` and expects the jar next to the working
directory. Both run the same pipeline, so they are expressed as data and
selected by the ``profile`` configuration key.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "wurstscript.jar"

# Archive resolution strategies
ARCHIVE_HOME = "home"
ARCHIVE_LOCAL = "local"

DEFAULT_PROFILE = "windowed"


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform.startswith('win')


@dataclass(frozen=True)
class LaunchProfile:
    """Capability set selecting the runtime executable and archive strategy.

    Attributes:
        name: Profile name as used in wrapper_config.toml.
        windows_executable: Java executable file name on Windows.
        posix_executable: Java executable file name elsewhere.
        archive_strategy: ARCHIVE_HOME or ARCHIVE_LOCAL.
    """
    name: str
    windows_executable: str
    posix_executable: str
    archive_strategy: str

    def executable_name(self, windows: Optional[bool] = None) -> str:
        if windows is None:
            windows = is_windows()
        return self.windows_executable if windows else self.posix_executable


PROFILES = {
    "windowed": LaunchProfile(
        name="windowed",
        windows_executable="javaw.exe",
        posix_executable="java",
        archive_strategy=ARCHIVE_HOME,
    ),
    "console": LaunchProfile(
        name="console",
        windows_executable="java.exe",
        posix_executable="java",
        archive_strategy=ARCHIVE_LOCAL,
    ),
}


def get_profile(name: Optional[str] = None) -> LaunchProfile:
    """Look up a launch profile by name, falling back to the default profile.

    Raises:
        KeyError: If the name is not a known profile.
    """
    if name is None:
        name = DEFAULT_PROFILE
    profile = PROFILES[name]
    logger.debug(f"Using launch profile '{profile.name}'")
    return profile
