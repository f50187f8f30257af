# filesystem/merge.py

from collections.abc import Iterable

from rmsm_kit.errors import MergeConflictError

from .tree import Directory, File, VirtualFileSystemTree, copy_entry, describe


def merge_trees(
    trees: Iterable[VirtualFileSystemTree],
) -> tuple[VirtualFileSystemTree, list[MergeConflictError]]:
    """Fold several trees into a new one.

    Directories merge recursively. Identical files merge silently. On any
    other clash the entry seen first is kept and a conflict is reported;
    the remaining entries keep merging.
    """
    merged: VirtualFileSystemTree = {}
    conflicts: list[MergeConflictError] = []
    for tree in trees:
        _merge_into(merged, tree, "", conflicts)
    return merged, conflicts


def _merge_into(
    target: VirtualFileSystemTree,
    source: VirtualFileSystemTree,
    prefix: str,
    conflicts: list[MergeConflictError],
) -> None:
    for name, incoming in source.items():
        path = f"{prefix}/{name}" if prefix else name
        existing = target.get(name)

        if existing is None:
            target[name] = copy_entry(incoming)
        elif isinstance(existing, Directory) and isinstance(incoming, Directory):
            _merge_into(existing.children, incoming.children, path, conflicts)
        elif isinstance(existing, File) and isinstance(incoming, File):
            if existing.contents != incoming.contents:
                conflicts.append(MergeConflictError(path, "file contents differ"))
        else:
            conflicts.append(
                MergeConflictError(
                    path,
                    f"defined as a {describe(existing)} and as a {describe(incoming)}",
                )
            )
