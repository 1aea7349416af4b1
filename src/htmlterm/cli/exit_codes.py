# topmark:header:start
#
#   project      : htmlterm
#   file         : exit_codes.py
#   file_relpath : src/htmlterm/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the htmlterm CLI.

htmlterm aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.

Inputs that cannot be read or parsed do **not** change the exit code: they are
reported on stderr and the remaining inputs are still rendered.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the htmlterm CLI.

    Attributes:
        SUCCESS: All inputs were processed (per-input errors are only reported).
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (unreadable/invalid config file).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
