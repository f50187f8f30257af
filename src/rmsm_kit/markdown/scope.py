# markdown/scope.py

from .base import walk
from .models import (
    CodeBlockNode,
    HeadingNode,
    LocalizedCodeBlock,
    MarkdownDocument,
    OtherNode,
)


class HeadingScopeTracker:
    """Visitor that pairs each code block with its enclosing headings.

    Keeps a monotonic stack: a heading of depth d closes every open
    heading of depth >= d before it is pushed. Code blocks never touch
    the stack.
    """

    def __init__(self) -> None:
        self._stack: list[HeadingNode] = []
        self.blocks: list[LocalizedCodeBlock] = []

    def visit_heading(self, node: HeadingNode) -> None:
        while self._stack and self._stack[-1].depth >= node.depth:
            self._stack.pop()
        self._stack.append(node)

    def visit_code(self, node: CodeBlockNode) -> None:
        self.blocks.append(LocalizedCodeBlock(code=node, ancestors=tuple(self._stack)))

    def visit_other(self, node: OtherNode) -> None:
        pass


def localize_code_blocks(document: MarkdownDocument) -> list[LocalizedCodeBlock]:
    tracker = HeadingScopeTracker()
    walk(document, tracker)
    return tracker.blocks
