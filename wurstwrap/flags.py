"""Translation of Settings into JVM flags."""

from typing import List

from .config import Settings


def build_runtime_flags(settings: Settings) -> List[str]:
    """Build the JVM flag list for the given settings.

    Order is fixed: -Xms, -Xmx, -Xss (each only when set), then the
    configured java_args in their original order.

    Example:
        >>> build_runtime_flags(Settings(initial_heap_size=256, java_args=("-ea",)))
        ['-Xms256m', '-ea']
    """
    flags = []

    if settings.initial_heap_size is not None:
        flags.append(f"-Xms{settings.initial_heap_size}m")

    if settings.maximum_heap_size is not None:
        flags.append(f"-Xmx{settings.maximum_heap_size}m")

    if settings.thread_stack_size is not None:
        flags.append(f"-Xss{settings.thread_stack_size}m")

    flags.extend(settings.java_args)
    return flags
