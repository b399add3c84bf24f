"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    * 0-1: generic success / failure
    * 22: EINVAL, e.g. an unknown config section
    * 78: EX_CONFIG (sysexits.h), e.g. an invalid ``[page_title]`` section
    * 128+N: signal N

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
