# src/rmsm_kit/protocols.py

"""Classification of code blocks by the protocol token in their meta string.

``file://<path>`` names the output file explicitly. ``rmsm://<directive>``
marks a reserved, non-file block. Anything else is a plain file whose
name is derived from its headings.
"""

import re
from dataclasses import dataclass
from typing import Literal, cast

Directive = Literal["startup"]

RESERVED_DIRECTIVES: frozenset[str] = frozenset({"startup"})

_PROTOCOL = re.compile(r"(^|\s)(file|rmsm)://(\S+)($|\s)")


@dataclass(frozen=True)
class FileBlock:
    path: str | None = None


@dataclass(frozen=True)
class DirectiveBlock:
    directive: Directive


@dataclass(frozen=True)
class InvalidDirective:
    value: str

    @property
    def message(self) -> str:
        return f"Invalid rmsm protocol value: {self.value}"


BlockKind = FileBlock | DirectiveBlock | InvalidDirective


def resolve_block_kind(meta: str | None) -> BlockKind:
    if not meta:
        return FileBlock()

    match = _PROTOCOL.search(meta)
    if match is None:
        return FileBlock()

    scheme, value = match.group(2), match.group(3)
    if scheme == "file":
        return FileBlock(path=value)

    if value not in RESERVED_DIRECTIVES:
        return InvalidDirective(value=value)
    return DirectiveBlock(directive=cast(Directive, value))
