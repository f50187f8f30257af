# filesystem/tree.py

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class File:
    contents: str


@dataclass(frozen=True)
class Directory:
    children: "VirtualFileSystemTree" = field(default_factory=dict)


FileEntry: TypeAlias = File | Directory
VirtualFileSystemTree: TypeAlias = dict[str, FileEntry]


def describe(entry: FileEntry) -> str:
    return "file" if isinstance(entry, File) else "directory"


def iter_files(tree: VirtualFileSystemTree, prefix: str = "") -> Iterator[tuple[str, str]]:
    """Yield ``(path, contents)`` for every file, depth first."""
    for name, entry in tree.items():
        path = f"{prefix}/{name}" if prefix else name
        if isinstance(entry, File):
            yield path, entry.contents
        else:
            yield from iter_files(entry.children, path)


def copy_tree(tree: VirtualFileSystemTree) -> VirtualFileSystemTree:
    """Deep copy of the directory structure; File values are shared."""
    return {name: copy_entry(entry) for name, entry in tree.items()}


def copy_entry(entry: FileEntry) -> FileEntry:
    if isinstance(entry, File):
        return entry
    return Directory(children=copy_tree(entry.children))
