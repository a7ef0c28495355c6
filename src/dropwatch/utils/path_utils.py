"""
Path and file utilities for DropWatch
"""

import os


def join_target_path(directory_path: str, file_name: str) -> str:
    """Build the full path of the drop file.
    
    The directory is joined with the file name as given: no resolution,
    no separator normalization. A trailing separator on the directory is
    tolerated, so 'drop/' and 'drop' produce the same result.
    """
    return os.path.join(directory_path, file_name)


def paths_match(path: str, target: str) -> bool:
    """Case-insensitive exact comparison of two path strings.
    
    Paths that denote the same file through a different representation
    (relative vs absolute, mixed separators) do not match.
    """
    return path.lower() == target.lower()


def is_watchable_directory(path: str) -> bool:
    """Check that a path exists, is a directory and can be listed."""
    return os.path.isdir(path) and os.access(path, os.R_OK | os.X_OK)
