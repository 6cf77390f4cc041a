"""Running the Java process and relaying its output.

The child runs synchronously with stdout and stderr captured in full. Once it
exits the captured output is printed and its exit code is handed back to the
caller, which exits with it.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO, Tuple

from .errors import LaunchError

logger = logging.getLogger(__name__)

# Exit code reported when the child's own code is unavailable (killed by a signal)
UNAVAILABLE_EXIT_CODE = -1


@dataclass(frozen=True)
class CommandSpec:
    """Fully resolved Java command.

    Attributes:
        runtime: Path to the Java executable.
        flags: JVM flags, in order.
        archive: Path to wurstscript.jar.
        forwarded: Arguments passed through from the wrapper's command line.
    """
    runtime: str
    flags: Tuple[str, ...]
    archive: str
    forwarded: Tuple[str, ...]

    def argv(self) -> list[str]:
        return [self.runtime, *self.flags, "-jar", self.archive, *self.forwarded]


@dataclass
class LaunchResult:
    """Result of running the Java process.

    Attributes:
        stdout: Standard output from the process.
        stderr: Standard error from the process.
        exit_code: Exit code of the process, or UNAVAILABLE_EXIT_CODE.
    """
    stdout: str
    stderr: str
    exit_code: int


def build_command(
    runtime: str,
    flags: Sequence[str],
    archive: str,
    forwarded: Sequence[str],
) -> CommandSpec:
    return CommandSpec(
        runtime=runtime,
        flags=tuple(flags),
        archive=archive,
        forwarded=tuple(forwarded),
    )


def run_command(
    spec: CommandSpec,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> LaunchResult:
    """Run the command and wait for it to finish, capturing all output.

    No timeout is applied; the wrapper waits for as long as Java runs.

    Args:
        spec: The command to run.
        runner: Callable with the signature of subprocess.run.

    Returns:
        LaunchResult with the decoded output and exit code.

    Raises:
        LaunchError: If the process could not be started.
    """
    cmd = spec.argv()
    logger.debug(f"Running {cmd}")

    try:
        completed = runner(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as e:
        raise LaunchError(f"Failed to start {spec.runtime}: {e}") from e

    # Negative return codes mean the child was terminated by a signal
    exit_code = completed.returncode
    if exit_code is None or exit_code < 0:
        logger.debug(f"Child exit code unavailable ({exit_code}), using {UNAVAILABLE_EXIT_CODE}")
        exit_code = UNAVAILABLE_EXIT_CODE

    return LaunchResult(
        stdout=(completed.stdout or b"").decode('utf-8', errors='replace'),
        stderr=(completed.stderr or b"").decode('utf-8', errors='replace'),
        exit_code=exit_code,
    )


def relay_output(result: LaunchResult, out: Optional[TextIO] = None) -> None:
    """Print the child's stdout, a blank line, then its stderr."""
    print(f"{result.stdout}\n\n{result.stderr}", file=out)
