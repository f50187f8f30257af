# filesystem/paths.py

import re
from dataclasses import dataclass

from rmsm_kit.errors import InvalidPathError

_LEADING_OR_TRAILING_DOTS_AND_SLASHES = re.compile(r"^[./]+|[./]+$")


@dataclass(frozen=True)
class PathParts:
    dirs: tuple[str, ...]
    basename: str


def split_path(path: str) -> PathParts:
    """
    Normalize a user-supplied path and split it into directories and basename.
    - Leading/trailing runs of '.' and '/' are dropped
    - Empty and '.' segments collapse away
    - '..' is kept as an ordinary segment; nothing resolves to a parent
    - Raises InvalidPathError when nothing is left
    """
    stripped = _LEADING_OR_TRAILING_DOTS_AND_SLASHES.sub("", path.strip())
    parts = [part.strip() for part in stripped.split("/")]
    parts = [part for part in parts if part and part != "."]
    if not parts:
        raise InvalidPathError()
    return PathParts(dirs=tuple(parts[:-1]), basename=parts[-1])
