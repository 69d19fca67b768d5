# topmark:header:start
#
#   project      : AdventRun
#   file         : exit_codes.py
#   file_relpath : src/adventrun/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the AdventRun CLI.

AdventRun aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. Argument errors reuse Click's own
usage-error status (2) so that errors detected by Click's parser and by AdventRun's
parameter types cannot be told apart by exit status.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AdventRun CLI.

    Attributes:
        SUCCESS: The answer was computed and printed.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (missing, malformed or
            out-of-range day/part). Same value as ``click.UsageError.exit_code``.
        ENCODING_ERROR: Input file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNIMPLEMENTED_DAY: No solver is registered for the requested day.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        SOLVER_ERROR: The solver unit failed (malformed puzzle input or a bug).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: The input file exists but could not be read. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2  # click.UsageError.exit_code

    # sysexits-aligned values
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNIMPLEMENTED_DAY = 69  # EX_UNAVAILABLE
    SOLVER_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
