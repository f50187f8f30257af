# filesystem/payload.py

"""Wire form of a virtual filesystem tree.

Each entry is ``{"file": {"contents": ...}}`` or ``{"directory": {...}}``,
the shape sandbox runtimes mount directly.
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter

from .tree import Directory, File, FileEntry, VirtualFileSystemTree


class FileContentsPayload(BaseModel):
    contents: str

    class Config:
        extra = "forbid"


class FileNodePayload(BaseModel):
    file: FileContentsPayload

    class Config:
        extra = "forbid"


class DirectoryNodePayload(BaseModel):
    directory: dict[str, "FileNodePayload | DirectoryNodePayload"]

    class Config:
        extra = "forbid"


DirectoryNodePayload.model_rebuild()

TreePayload = dict[str, FileNodePayload | DirectoryNodePayload]

_tree_adapter: TypeAdapter[TreePayload] = TypeAdapter(TreePayload)


class ProjectPayload(BaseModel):
    filesystem: TreePayload
    startup: str | None = None
    errors: list[str] | None = None

    class Config:
        extra = "forbid"


def tree_to_payload(tree: VirtualFileSystemTree) -> dict[str, Any]:
    return {name: _entry_to_payload(entry) for name, entry in tree.items()}


def tree_from_payload(data: Any) -> VirtualFileSystemTree:
    """Validate a wire-form tree and rebuild it.

    Raises pydantic.ValidationError on malformed input.
    """
    return _tree_from_models(_tree_adapter.validate_python(data))


def _entry_to_payload(entry: FileEntry) -> dict[str, Any]:
    if isinstance(entry, File):
        return {"file": {"contents": entry.contents}}
    return {"directory": tree_to_payload(entry.children)}


def _tree_from_models(models: TreePayload) -> VirtualFileSystemTree:
    tree: VirtualFileSystemTree = {}
    for name, model in models.items():
        if isinstance(model, FileNodePayload):
            tree[name] = File(contents=model.file.contents)
        else:
            tree[name] = Directory(children=_tree_from_models(model.directory))
    return tree
