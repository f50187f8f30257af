from .base import MarkdownParser, MarkdownVisitor, walk
from .config import ParserConfig
from .factory import create_markdown_parser
from .markdown_it_parser import MarkdownItParser
from .models import (
    CodeBlockNode,
    HeadingNode,
    LocalizedCodeBlock,
    MarkdownDocument,
    MarkdownNode,
    OtherNode,
)
from .scope import HeadingScopeTracker, localize_code_blocks

__all__ = [
    "CodeBlockNode",
    "HeadingNode",
    "HeadingScopeTracker",
    "LocalizedCodeBlock",
    "MarkdownDocument",
    "MarkdownItParser",
    "MarkdownNode",
    "MarkdownParser",
    "MarkdownVisitor",
    "OtherNode",
    "ParserConfig",
    "create_markdown_parser",
    "localize_code_blocks",
    "walk",
]
