"""Exception classes for wrapper errors.

Every fatal condition the wrapper can hit is raised as a subclass of
WrapperError. Library code only raises; the command-line layer catches
WrapperError once, prints the message and turns it into exit code 1.
"""


class WrapperError(Exception):
    """Base exception for wrapper errors.

    All wrapper-specific exceptions inherit from this class,
    allowing callers to catch all of them with a single handler.
    """
    pass


class ConfigError(WrapperError):
    """Raised when the configuration file cannot be read, parsed or validated."""
    pass


class InvalidPathError(WrapperError):
    """Raised when a path given explicitly in the configuration does not exist."""
    pass


class RuntimeNotFoundError(WrapperError):
    """Raised when no Java executable can be found among the candidate directories.

    Attributes:
        executable: File name that was searched for.
        candidates: Directories that were searched, in order.
    """

    def __init__(self, executable: str, candidates: list[str]):
        self.executable = executable
        self.candidates = candidates
        super().__init__(f"Failed to locate {executable}")


class ArchiveNotFoundError(WrapperError):
    """Raised when wurstscript.jar does not exist at the resolved location."""

    def __init__(self, archive: str):
        self.archive = archive
        super().__init__(f"wurstscript.jar could not be found! (looked for {archive})")


class LaunchError(WrapperError):
    """Raised when the Java process cannot be started at all."""
    pass


__all__ = [
    'WrapperError',
    'ConfigError',
    'InvalidPathError',
    'RuntimeNotFoundError',
    'ArchiveNotFoundError',
    'LaunchError',
]
