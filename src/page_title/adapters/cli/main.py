"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Run ``page-title`` and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from page_title import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, preserved_traceback_state

if TYPE_CHECKING:
    from page_title.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code.

    The traceback is complete under ``--traceback`` and truncated otherwise.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # lib_cli_exit_tools.run_cli cannot pass ctx.obj, so Click is driven directly.
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit from CONFIG_ERROR paths and KeyboardInterrupt land here too.
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # A worker thread running main() must not stop logging for the process.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the ``page-title`` CLI and return its exit code.

    Shared by the console script and ``python -m page_title``.

    Args:
        argv: CLI arguments. None uses ``sys.argv[1:]``.
        restore_traceback: Undo ``--traceback`` changes to lib_cli_exit_tools
            once the command finishes.
        services_factory: Factory returning AppServices. Callers outside the
            adapters layer pass ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from page_title.composition import build_production
        >>> main(["title", "News"], services_factory=build_production)  # doctest: +SKIP
        News - Super Application
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        with preserved_traceback_state(restore=restore_traceback):
            return _run_cli(args, services_factory)
    finally:
        _shutdown_logging()


__all__ = ["main"]
