"""
Error types for ptime.

Every failure the pipeline can raise derives from PtimeError. Each class
declares two things as class attributes:

- fatal: whether the error aborts a bulk collection, or whether the
  offending file is skipped and the scan continues
- exit_code: the process status the command line reports for it

I/O-class errors (the environment is unreliable) exit with status 3, all
other errors with status 1. Callers decide skip-vs-abort and exit status
from these attributes alone.
"""

from pathlib import Path

EXIT_IO_ERROR = 3
EXIT_FAILURE = 1


class PtimeError(Exception):
    """Base class for all ptime errors."""

    fatal = True
    exit_code = EXIT_FAILURE


class PathResolutionError(PtimeError):
    """The scan root cannot be canonicalized."""

    exit_code = EXIT_IO_ERROR

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to canonicalize path {path}: {cause}")


class TraversalError(PtimeError):
    """A directory cannot be read during the walk."""

    exit_code = EXIT_IO_ERROR

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory {path}: {cause}")


class RelativePathError(PtimeError):
    """A discovered file does not live under the canonical scan root."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Failed to compute relative path for {path}")


class FileReadError(PtimeError):
    """A candidate file cannot be opened or read."""

    exit_code = EXIT_IO_ERROR

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read file {path}: {cause}")


class MetadataError(PtimeError):
    """The EXIF container in a file could not be parsed."""

    fatal = False

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to read EXIF from {path}: {message}")


def exit_code_for(error: BaseException) -> int:
    """
    Map an exception to a process exit status.

    Args:
        error: Any exception raised by the pipeline

    Returns:
        3 for I/O-class errors, 1 for everything else
    """
    if isinstance(error, PtimeError):
        return error.exit_code
    if isinstance(error, OSError):
        return EXIT_IO_ERROR
    return EXIT_FAILURE
