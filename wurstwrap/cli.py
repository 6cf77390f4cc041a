"""Command-line interface for the WurstScript wrapper.

`wurstwrap` forwards every argument it receives to wurstscript.jar and owns
no options of its own. `wurstwrap-config` is the companion tool for creating
a config file and inspecting the resolved command.
"""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from .archive import resolve_archive, user_home
from .config import Settings, init_config, load_config
from .errors import WrapperError
from .flags import build_runtime_flags
from .launcher import CommandSpec, build_command, relay_output, run_command
from .profiles import get_profile
from .runtime import resolve_runtime

logger = logging.getLogger(__name__)

VERBOSE_VARIABLE = "WURSTWRAP_VERBOSE"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    By default, logging does not output to console so the child's output is
    relayed unchanged. In verbose mode, DEBUG-level logs are shown on stderr.
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        root_logger.addHandler(console_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.WARNING)


def verbose_from_env(env: Mapping[str, str]) -> bool:
    return env.get(VERBOSE_VARIABLE, "").strip().lower() in ("1", "true", "yes")


def prepare_command(
    settings: Settings,
    forwarded: List[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    exists: Callable[[str], bool] = os.path.exists,
    join: Callable[..., str] = os.path.join,
    home: Callable[[], Optional[str]] = user_home,
    windows: Optional[bool] = None,
) -> CommandSpec:
    """Resolve archive, runtime and flags into the command to run.

    Raises:
        WrapperError: If the runtime or archive cannot be resolved.
    """
    if cwd is None:
        cwd = Path.cwd()
    if env is None:
        env = os.environ

    profile = get_profile(settings.profile)
    archive = resolve_archive(settings, profile, str(cwd), home, exists, join)
    runtime = resolve_runtime(settings, profile, env, exists, join, windows)
    flags = build_runtime_flags(settings)

    return build_command(runtime, flags, archive, forwarded)


def run(
    forwarded: List[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> int:
    """Load config, resolve the command, run Java and relay its output.

    Returns:
        The child's exit code, or 1 if the child could not be prepared or started.
    """
    if env is None:
        env = os.environ

    setup_logging(verbose_from_env(env))

    try:
        settings = load_config(cwd)
        if settings.verbose:
            setup_logging(True)
        spec = prepare_command(settings, forwarded, cwd, env)
    except WrapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Forwarded run arguments: {list(spec.forwarded)}")
    print(f"Java arguments: {list(spec.flags)}")

    try:
        result = run_command(spec, runner)
    except WrapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    relay_output(result)
    logger.debug(f"Java exited with code {result.exit_code}")
    return result.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: forward all arguments to wurstscript.jar."""
    if argv is None:
        argv = sys.argv[1:]
    return run(list(argv))


def cmd_show(args: argparse.Namespace) -> int:
    """Print the command that would be run, one token per line."""
    try:
        settings = load_config(args.dir)
        spec = prepare_command(settings, [], args.dir)
    except WrapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for token in spec.argv():
        print(token)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for wurstwrap-config."""
    parser = argparse.ArgumentParser(
        prog="wurstwrap-config",
        description="Manage the WurstScript wrapper configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wurstwrap-config --init              Create wrapper_config.toml here
  wurstwrap-config --show              Show the Java command wurstwrap would run
  wurstwrap-config --show --dir DIR    Resolve using DIR as working directory
""",
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--init",
        action="store_true",
        help="Generate a new wrapper_config.toml file with all options commented out",
    )
    commands.add_argument(
        "--show",
        action="store_true",
        help="Resolve Java, wurstscript.jar and flags and print the command without running it",
    )

    parser.add_argument(
        "--dir",
        type=Path,
        metavar="DIR",
        default=None,
        help="Directory to use instead of the current working directory",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def config_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for wurstwrap-config."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.init:
        return init_config(args.dir)
    elif args.show:
        return cmd_show(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
