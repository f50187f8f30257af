# src/rmsm_kit/filtering.py

from collections.abc import Collection

from .identifiers import code_id, heading_id
from .markdown.models import LocalizedCodeBlock


def block_is_included(block: LocalizedCodeBlock, ids: Collection[str]) -> bool:
    """
    Whether a block is selected by the requested ids.

    Every block is selected when no ids are requested. Otherwise the
    block's own id or any enclosing heading's id must be requested.
    """
    if not ids:
        return True

    own = code_id(block.code)
    if own is not None and own in ids:
        return True

    return any(
        (ancestor := heading_id(heading)) is not None and ancestor in ids
        for heading in block.ancestors
    )
