#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/decorators.py
"""Utility decorators for mdstream parsers and renderers."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from mdstream.exceptions import DependencyError
from mdstream.utils.packages import collect_dependency_problems


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required packages before the decorated method runs.

    The check runs on every call until it first succeeds; after that the
    method is called directly.

    Parameters
    ----------
    converter_name : str
        Component name shown in the error message (e.g., "markdown")
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec)

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, text):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        satisfied = False

        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            nonlocal satisfied
            if not satisfied:
                problems = collect_dependency_problems(packages)
                if problems:
                    raise DependencyError(
                        converter_name=converter_name,
                        missing_packages=problems.missing,
                        version_mismatches=problems.version_mismatches,
                        original_import_error=problems.first_import_error,
                    ) from problems.first_import_error
                satisfied = True

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the block took, at DEBUG, when DEBUG is enabled.

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (html)"):
        ...     html = renderer.render_events(events)
        ... # Logs: "Rendering (html) completed in 0.01s"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    try:
        yield
    finally:
        logger.debug(f"{operation} completed in {time.perf_counter() - start_time:.2f}s")
