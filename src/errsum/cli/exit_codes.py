# topmark:header:start
#
#   project      : ErrSum
#   file         : exit_codes.py
#   file_relpath : src/errsum/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the ErrSum CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ErrSum CLI.

    Attributes:
        SUCCESS (int): No error diagnostics were found.
        FAILURE (int): At least one error diagnostic was found.
        USAGE_ERROR (int): Invalid command-line usage (sysexits ``EX_USAGE``).
        IO_ERROR (int): The input could not be read (sysexits ``EX_IOERR``).
        CONFIG_ERROR (int): Invalid configuration (sysexits ``EX_CONFIG``).

    Usage:
        ```python
        import subprocess
        from errsum.cli.exit_codes import ExitCode

        result = subprocess.run(["errsum", "build.log"])
        if result.returncode == ExitCode.FAILURE:
            print("The build log contains errors.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    IO_ERROR = 74
    CONFIG_ERROR = 78
