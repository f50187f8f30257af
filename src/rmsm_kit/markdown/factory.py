# src/rmsm_kit/markdown/factory.py

from .base import MarkdownParser
from .config import ParserConfig

_SUPPORTED_PRESETS = ("commonmark", "default")


def create_markdown_parser(config: ParserConfig | None = None) -> MarkdownParser:
    """Create a Markdown parser from config.

    Args:
        config: Parser configuration. Defaults to ``ParserConfig()``.

    Returns:
        Configured MarkdownParser implementation.

    Raises:
        ValueError: If preset is unknown.

    Example:
        >>> parser = create_markdown_parser(ParserConfig(preset="commonmark"))
        >>> document = parser.parse("# Title")
    """
    config = config or ParserConfig()

    if config.preset in _SUPPORTED_PRESETS:
        from .markdown_it_parser import MarkdownItParser

        return MarkdownItParser(preset=config.preset)

    raise ValueError(f"Unknown markdown preset: {config.preset}")
