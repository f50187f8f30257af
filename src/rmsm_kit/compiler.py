# src/rmsm_kit/compiler.py

"""Compile literate Markdown documents into a virtual project.

Pipeline for one document:
1. Pair every code block with its enclosing headings.
2. Keep the blocks selected by the requested ids (all blocks when none).
3. Classify each block by its meta protocol: a file, or a reserved
   ``rmsm://`` directive.
4. Write files into the tree, naming unlabeled blocks after their headings.

Problems with a single block never abort the parse; they are reported in
``errors``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from time import monotonic
from typing import Any

from rmsm_kit.observability import names
from rmsm_kit.observability.base import MetricsHook, NoOpMetricsHook

from .errors import ProjectBuildError, StartupBlockError
from .filesystem.builder import insert_file
from .filesystem.merge import merge_trees
from .filesystem.payload import ProjectPayload, tree_to_payload
from .filesystem.tree import VirtualFileSystemTree, copy_tree
from .filtering import block_is_included
from .markdown.base import MarkdownParser
from .markdown.factory import create_markdown_parser
from .markdown.models import LocalizedCodeBlock
from .markdown.scope import localize_code_blocks
from .naming import FallbackNamer
from .protocols import DirectiveBlock, FileBlock, InvalidDirective, resolve_block_kind

logger = logging.getLogger(__name__)

STARTUP_LANGUAGE = "bash"


@dataclass(frozen=True)
class ParseResult:
    filesystem: VirtualFileSystemTree = field(default_factory=dict)
    startup: str | None = None
    errors: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """Wire form; ``startup`` and ``errors`` are omitted when unset/empty."""
        payload = ProjectPayload(
            filesystem=tree_to_payload(self.filesystem),
            startup=self.startup,
            errors=list(self.errors) or None,
        )
        return payload.model_dump(exclude_none=True)


@dataclass(frozen=True)
class MergedResult(ParseResult):
    document_count: int = 0


class ProjectBuilder:
    """Mutable state for a single document parse."""

    def __init__(self) -> None:
        self.filesystem: VirtualFileSystemTree = {}
        self.startup: str | None = None
        self.errors: list[str] = []
        self.files_written = 0
        self._namer = FallbackNamer()

    def append(self, block: LocalizedCodeBlock) -> str | None:
        """Apply one block. Returns the diagnostic when the block is skipped."""
        try:
            self._apply(block)
        except ProjectBuildError as e:
            return self._report(str(e))
        return None

    def result(self) -> ParseResult:
        return ParseResult(
            filesystem=copy_tree(self.filesystem),
            startup=self.startup,
            errors=tuple(self.errors),
        )

    def _apply(self, block: LocalizedCodeBlock) -> None:
        code = block.code
        kind = resolve_block_kind(code.meta)

        match kind:
            case InvalidDirective():
                raise ProjectBuildError(kind.message)
            case DirectiveBlock(directive="startup"):
                self._set_startup(block)
            case FileBlock(path=path):
                name = path if path is not None else self._namer(block)
                written = insert_file(self.filesystem, name, code.content)
                self.files_written += 1
                logger.debug("Wrote %s (%s)", written, code.language)

    def _set_startup(self, block: LocalizedCodeBlock) -> None:
        if self.startup is not None:
            raise StartupBlockError("Multiple startup blocks provided, using the first one")
        if block.code.language != STARTUP_LANGUAGE:
            raise StartupBlockError("Startup blocks must be bash scripts")
        self.startup = block.code.content

    def _report(self, message: str) -> str:
        logger.warning("Skipping code block: %s", message)
        self.errors.append(message)
        return message


def parse(
    content: str,
    *ids: str,
    parser: MarkdownParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Compile one Markdown document.

    Args:
        content: Markdown text.
        *ids: Block or heading ids to select. Selects every block when empty.
        parser: Markdown parser; defaults to a CommonMark parser.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A fresh ParseResult. Diagnostics are collected in ``errors``.

    Example:
        >>> result = parse("```ts file://a/b.ts\\nCONTENT\\n```")
        >>> result.to_payload()
        {'filesystem': {'a': {'directory': {'b.ts': {'file': {'contents': 'CONTENT'}}}}}}
    """
    start = monotonic()
    parser = parser or create_markdown_parser()
    requested = frozenset(ids)

    blocks = localize_code_blocks(parser.parse(content))
    included = [block for block in blocks if block_is_included(block, requested)]
    logger.debug(
        "Selected %d of %d code blocks (ids=%s)",
        len(included),
        len(blocks),
        sorted(requested) or "all",
    )

    builder = ProjectBuilder()
    for block in included:
        builder.append(block)
    result = builder.result()

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.CODE_BLOCKS_TOTAL, len(blocks))
    metrics_hook.increment(names.CODE_BLOCKS_INCLUDED, len(included))
    metrics_hook.increment(names.FILES_WRITTEN_TOTAL, builder.files_written)
    if result.errors:
        metrics_hook.increment(names.PARSE_DIAGNOSTICS_TOTAL, len(result.errors))

    logger.info(
        "Parsed document: %d files written, startup=%s, %d diagnostics",
        builder.files_written,
        result.startup is not None,
        len(result.errors),
    )
    return result


def multiparse(
    documents: Iterable[str],
    *ids: str,
    parser: MarkdownParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> MergedResult:
    """Compile several documents with the same id filter and merge them.

    Filesystems merge entry by entry; conflicting entries keep the first
    definition and add a diagnostic. Startup scripts of every document are
    joined with newlines. Diagnostics of every document come first, merge
    diagnostics last.
    """
    start = monotonic()
    parser = parser or create_markdown_parser()

    results = [
        parse(document, *ids, parser=parser, metrics_hook=metrics_hook)
        for document in documents
    ]

    filesystem, conflicts = merge_trees(result.filesystem for result in results)
    for conflict in conflicts:
        logger.warning("Merge conflict: %s", conflict)

    startups = [result.startup for result in results if result.startup is not None]
    errors = [error for result in results for error in result.errors]
    errors.extend(str(conflict) for conflict in conflicts)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.MULTIPARSE_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.MULTIPARSE_DOCUMENTS, len(results))
    if conflicts:
        metrics_hook.increment(names.MERGE_CONFLICTS_TOTAL, len(conflicts))

    return MergedResult(
        filesystem=filesystem,
        startup="\n".join(startups) if startups else None,
        errors=tuple(errors),
        document_count=len(results),
    )
