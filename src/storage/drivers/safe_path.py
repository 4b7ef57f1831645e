# Translation of caller-supplied logical names into paths confined to a base directory.

import os
import posixpath
import re

from .errors import PathTraversalError

# normpath hoists unresolvable ".." segments to the front, so only leading ones need stripping
_LEADING_PARENT_SEGMENTS = re.compile(r"^(\.\.(?:[/\\]|$))+")


def to_safe_local_path(base_path: str, logical_name: str, sep: str = os.sep) -> str:
    """
    Maps a logical, forward-slash separated name onto a path beneath base_path.

    The name is normalized lexically, any leading parent segments are stripped,
    and the remainder is joined onto base_path. Forward slashes are rewritten to
    `sep` when the host separator differs. The filesystem is never consulted.
    """
    safe_name = posixpath.normpath(logical_name or ".")
    safe_name = _LEADING_PARENT_SEGMENTS.sub("", safe_name).lstrip("/")

    if safe_name in ("", "."):
        file_path = base_path
    else:
        file_path = posixpath.normpath(posixpath.join(base_path, safe_name))

    if sep != "/":
        file_path = file_path.replace("/", sep)

    return file_path


def ensure_confined(base_path: str, file_path: str) -> str:
    """Raises PathTraversalError unless file_path equals or lies beneath base_path."""
    base = os.path.normpath(os.path.abspath(base_path))
    target = os.path.normpath(os.path.abspath(file_path))
    try:
        common = os.path.commonpath([base, target])
    except ValueError:
        # Different drives on Windows
        raise PathTraversalError(base_path, file_path)
    if common != base:
        raise PathTraversalError(base_path, file_path)
    return file_path
