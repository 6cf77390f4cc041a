"""Locating wurstscript.jar."""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from .config import Settings
from .errors import ArchiveNotFoundError, InvalidPathError
from .profiles import ARCHIVE_HOME, ARCHIVE_NAME, LaunchProfile

logger = logging.getLogger(__name__)

WURST_DIR_NAME = ".wurst"


def user_home() -> Optional[str]:
    """Return the user's home directory, or None if it cannot be determined."""
    try:
        return str(Path.home())
    except RuntimeError:
        return None


def default_archive_dir(
    profile: LaunchProfile,
    cwd: str,
    home: Callable[[], Optional[str]] = user_home,
    join: Callable[..., str] = os.path.join,
) -> str:
    """Directory expected to hold the archive when none is configured."""
    if profile.archive_strategy == ARCHIVE_HOME:
        home_dir = home()
        if home_dir is not None:
            return join(home_dir, WURST_DIR_NAME)
        logger.warning("Failed to get user home, looking for the archive in the working directory")
    return cwd


def resolve_archive(
    settings: Settings,
    profile: LaunchProfile,
    cwd: Optional[str] = None,
    home: Callable[[], Optional[str]] = user_home,
    exists: Callable[[str], bool] = os.path.exists,
    join: Callable[..., str] = os.path.join,
) -> str:
    """Return the path of wurstscript.jar.

    A configured wurst_path wins and must exist. Otherwise the profile's
    archive strategy picks ~/.wurst or the working directory.

    Raises:
        InvalidPathError: If the configured wurst_path does not exist.
        ArchiveNotFoundError: If the archive is not in the chosen directory.
    """
    if cwd is None:
        cwd = os.getcwd()

    if settings.wurst_path is not None:
        if not exists(settings.wurst_path):
            raise InvalidPathError(
                f"Found configured wurst path '{settings.wurst_path}' but file not found. "
                f"Make sure the {ARCHIVE_NAME} is inside the provided folder"
            )
        directory = settings.wurst_path
    else:
        directory = default_archive_dir(profile, cwd, home, join)

    archive = join(directory, ARCHIVE_NAME)
    if not exists(archive):
        raise ArchiveNotFoundError(archive)

    logger.debug(f"Using archive {archive}")
    return archive
