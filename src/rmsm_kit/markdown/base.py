# markdown/base.py

from abc import ABC, abstractmethod
from typing import Protocol, assert_never

from .models import CodeBlockNode, HeadingNode, MarkdownDocument, OtherNode


class MarkdownParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> MarkdownDocument:
        """
        Parse Markdown text into a flat, document-ordered node sequence.

        Requirements:
        - Deterministic output for same input
        - Headings and code blocks nested in containers are still emitted
        - Heading indexes are unique within one document
        """
        raise NotImplementedError


class MarkdownVisitor(Protocol):
    def visit_heading(self, node: HeadingNode) -> None: ...

    def visit_code(self, node: CodeBlockNode) -> None: ...

    def visit_other(self, node: OtherNode) -> None: ...


def walk(document: MarkdownDocument, visitor: MarkdownVisitor) -> None:
    for node in document.nodes:
        match node:
            case HeadingNode():
                visitor.visit_heading(node)
            case CodeBlockNode():
                visitor.visit_code(node)
            case OtherNode():
                visitor.visit_other(node)
            case _:
                assert_never(node)
