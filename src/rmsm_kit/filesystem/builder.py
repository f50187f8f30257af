# filesystem/builder.py

import logging
from typing import cast

from rmsm_kit.errors import PathConflictError

from .paths import split_path
from .tree import Directory, File, VirtualFileSystemTree

logger = logging.getLogger(__name__)


def insert_file(tree: VirtualFileSystemTree, path: str, contents: str) -> str:
    """Write ``contents`` at ``path``, creating directories as needed.

    Returns the normalized path. Re-declaring an existing file overwrites
    it. A file standing where a directory is needed, or a directory where
    the file should go, raises PathConflictError and leaves the tree as
    it was.
    """
    parts = split_path(path)

    # Validate the whole walk before creating anything
    node: VirtualFileSystemTree | None = tree
    for i, part in enumerate(parts.dirs):
        entry = node.get(part) if node is not None else None
        if isinstance(entry, File):
            raise PathConflictError("/".join(parts.dirs[: i + 1]), "file")
        node = entry.children if isinstance(entry, Directory) else None

    normalized = "/".join((*parts.dirs, parts.basename))
    if node is not None and isinstance(node.get(parts.basename), Directory):
        raise PathConflictError(normalized, "directory")

    for part in parts.dirs:
        # The walk above rules out a File at every directory segment
        entry = cast(Directory, tree.setdefault(part, Directory()))
        tree = entry.children

    if parts.basename in tree:
        logger.debug("Overwriting %s", normalized)
    tree[parts.basename] = File(contents=contents)
    return normalized
