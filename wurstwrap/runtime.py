"""Java runtime discovery.

Candidate directories come from JAVA_HOME and from PATH entries that mention
"java". Each candidate is probed for the executable directly and under
``bin``; the first existing file wins and there is no further fallback.
"""

import logging
import os
from typing import Callable, List, Mapping, Optional

from .config import Settings
from .errors import InvalidPathError, RuntimeNotFoundError
from .profiles import LaunchProfile

logger = logging.getLogger(__name__)

HOME_VARIABLE = "JAVA_HOME"
SEARCH_PATH_VARIABLE = "PATH"


def candidate_paths(env: Mapping[str, str], pathsep: str = os.pathsep) -> List[str]:
    """Build the ordered list of directories to search for a Java executable.

    Args:
        env: Environment mapping (usually os.environ).
        pathsep: Separator used by the search path variable.

    Returns:
        JAVA_HOME (if set) followed by every PATH entry containing "java",
        case-insensitively, in PATH order.
    """
    candidates = []

    java_home = env.get(HOME_VARIABLE)
    if java_home:
        candidates.append(java_home)

    search_path = env.get(SEARCH_PATH_VARIABLE)
    if search_path:
        candidates.extend(
            entry for entry in search_path.split(pathsep)
            if "java" in entry.lower()
        )

    return candidates


def find_runtime(
    candidates: List[str],
    executable: str,
    exists: Callable[[str], bool] = os.path.exists,
    join: Callable[..., str] = os.path.join,
) -> str:
    """Return the first existing executable among the candidate directories.

    Raises:
        RuntimeNotFoundError: If no candidate holds the executable.
    """
    for directory in candidates:
        for option in (join(directory, executable), join(directory, "bin", executable)):
            if exists(option):
                logger.debug(f"Found Java runtime at {option}")
                return option
            logger.debug(f"No Java runtime at {option}")

    raise RuntimeNotFoundError(executable, candidates)


def resolve_runtime(
    settings: Settings,
    profile: LaunchProfile,
    env: Optional[Mapping[str, str]] = None,
    exists: Callable[[str], bool] = os.path.exists,
    join: Callable[..., str] = os.path.join,
    windows: Optional[bool] = None,
    pathsep: str = os.pathsep,
) -> str:
    """Determine the Java executable to launch.

    An explicit java_path from the configuration takes precedence over
    auto-detection and must exist.

    Raises:
        InvalidPathError: If the configured java_path does not exist.
        RuntimeNotFoundError: If auto-detection finds nothing.
    """
    if settings.java_path is not None:
        if not exists(settings.java_path):
            raise InvalidPathError(
                f"Found configured java path '{settings.java_path}' but file not found. "
                "Consider commenting out or deleting java_path from your "
                "wrapper_config.toml to automatically detect a java path."
            )
        logger.debug(f"Using configured java path {settings.java_path}")
        return settings.java_path

    if env is None:
        env = os.environ

    candidates = candidate_paths(env, pathsep)
    logger.debug(f"Java candidate directories: {candidates}")
    return find_runtime(candidates, profile.executable_name(windows), exists, join)
