from .builder import insert_file
from .merge import merge_trees
from .paths import PathParts, split_path
from .payload import ProjectPayload, tree_from_payload, tree_to_payload
from .tree import (
    Directory,
    File,
    FileEntry,
    VirtualFileSystemTree,
    copy_tree,
    iter_files,
)

__all__ = [
    "Directory",
    "File",
    "FileEntry",
    "PathParts",
    "ProjectPayload",
    "VirtualFileSystemTree",
    "copy_tree",
    "insert_file",
    "iter_files",
    "merge_trees",
    "split_path",
    "tree_from_payload",
    "tree_to_payload",
]
