"""
Directory scanning for discovering image files.

The walk is depth-first over an explicit stack of directories. Each
directory is listed inside an ``os.scandir`` context manager, so a failure
anywhere in the tree unwinds without leaking handles. Symbolic links are
never followed: a link to a directory is not descended into and a link to
a file is not reported.

Unreadable directories are fatal. A photo library with a directory the scan
cannot see would otherwise produce silently wrong answers.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List

from ptime.errors import PathResolutionError, RelativePathError, TraversalError
from ptime.models import Candidate

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ("jpg", "jpeg")


def scan_candidates(root: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> List[Candidate]:
    """
    Find every image file beneath a directory.

    Args:
        root: Directory to scan (relative paths resolve against the cwd)
        extensions: Accepted extensions, matched case-insensitively

    Returns:
        Candidates in traversal order (not sorted)

    Raises:
        PathResolutionError: If root cannot be canonicalized
        TraversalError: If a directory cannot be read
        RelativePathError: If a file falls outside the canonical root

    Example:
        >>> candidates = scan_candidates(Path("~/Pictures").expanduser())
        >>> print(candidates[0].relative_path)
    """
    canonical_root = resolve_root(root)
    return list(iter_candidates(canonical_root, extensions))


def resolve_root(root: Path) -> Path:
    """
    Canonicalize a scan root.

    Args:
        root: Directory path as given by the user

    Returns:
        Absolute path with symlinks resolved

    Raises:
        PathResolutionError: If the path does not exist or cannot be resolved
    """
    try:
        return Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        # RuntimeError is raised for symlink loops on older interpreters
        cause = e if isinstance(e, OSError) else OSError(str(e))
        raise PathResolutionError(Path(root), cause) from e


def iter_candidates(canonical_root: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> Iterator[Candidate]:
    """
    Lazily yield image candidates beneath an already canonical root.

    Args:
        canonical_root: Root returned by resolve_root()
        extensions: Accepted extensions, matched case-insensitively

    Yields:
        Candidate for each matching regular file
    """
    accepted = frozenset(ext.lower().lstrip(".") for ext in extensions)

    for file_path in _walk_files(canonical_root):
        if not is_image_file(file_path.name, accepted):
            continue
        yield Candidate(
            absolute_path=file_path,
            relative_path=compute_relative_path(canonical_root, file_path),
        )


def _walk_files(root: Path) -> Iterator[Path]:
    """Yield regular files under root, depth-first, without following links."""
    stack = [root]

    while stack:
        directory = stack.pop()
        subdirectories = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        subdirectories.append(Path(entry.path))
                    elif entry.is_file(follow_symlinks=False):
                        yield Path(entry.path)
        except OSError as e:
            raise TraversalError(directory, e) from e

        # Reversed so the first-listed subdirectory is visited first
        stack.extend(reversed(subdirectories))


def is_image_file(filename: str, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> bool:
    """
    Check if a filename has an accepted image extension.

    Args:
        filename: The filename to check
        extensions: Accepted extensions without leading dots

    Returns:
        True if the final extension matches, ignoring case
    """
    suffix = Path(filename).suffix
    if not suffix:
        return False
    return suffix[1:].lower() in {ext.lower() for ext in extensions}


def compute_relative_path(root: Path, absolute_path: Path) -> Path:
    """
    Strip the canonical root prefix from a discovered path.

    Raises:
        RelativePathError: If absolute_path is not under root
    """
    try:
        return absolute_path.relative_to(root)
    except ValueError as e:
        raise RelativePathError(absolute_path) from e
