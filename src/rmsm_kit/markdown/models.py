# markdown/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class HeadingNode:
    depth: int
    text: str | None
    # Position of the heading in its document; stable identity within one parse
    index: int


@dataclass(frozen=True)
class CodeBlockNode:
    content: str
    language: str | None = None
    meta: str | None = None


@dataclass(frozen=True)
class OtherNode:
    """Any node the compiler does not act on (paragraphs, lists, html, ...)."""

    type: str


MarkdownNode = HeadingNode | CodeBlockNode | OtherNode


@dataclass(frozen=True)
class MarkdownDocument:
    nodes: tuple[MarkdownNode, ...]


@dataclass(frozen=True)
class LocalizedCodeBlock:
    """A code block together with the headings whose scope encloses it.

    Ancestors are ordered root to nearest.
    """

    code: CodeBlockNode
    ancestors: tuple[HeadingNode, ...] = ()

    @property
    def nearest_heading(self) -> HeadingNode | None:
        return self.ancestors[-1] if self.ancestors else None
