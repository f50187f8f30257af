# markdown/markdown_it_parser.py

import logging
from collections.abc import Sequence

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.token import Token

from .base import MarkdownParser
from .models import CodeBlockNode, HeadingNode, MarkdownDocument, MarkdownNode, OtherNode

logger = logging.getLogger(__name__)

# Inline tokens that count as literal heading text
_TEXT_TOKENS = frozenset({"text", "text_special", "softbreak"})


class MarkdownItParser(MarkdownParser):
    """
    Markdown parser backed by markdown-it-py.
    - Walks the block-level token stream in order
    - Emits headings, fenced/indented code, and an OtherNode for every
      remaining opening or leaf block token
    """

    def __init__(self, preset: str = "commonmark") -> None:
        self.preset = preset
        self._md = MarkdownIt(preset)

    def parse(self, text: str) -> MarkdownDocument:
        tokens = self._md.parse(text)
        nodes: list[MarkdownNode] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            index = len(nodes)

            if token.type == "heading_open":
                # heading_open, inline, heading_close
                inline = tokens[i + 1] if i + 1 < len(tokens) else None
                nodes.append(
                    HeadingNode(
                        depth=int(token.tag[1:]),
                        text=self._heading_text(inline),
                        index=index,
                    )
                )
                i += 3
                continue

            if token.type == "fence":
                language, meta = self._split_info(token.info)
                nodes.append(
                    CodeBlockNode(
                        content=self._strip_final_newline(token.content),
                        language=language,
                        meta=meta,
                    )
                )
            elif token.type == "code_block":
                nodes.append(
                    CodeBlockNode(content=self._strip_final_newline(token.content))
                )
            elif token.nesting >= 0 and token.type != "inline":
                nodes.append(OtherNode(type=token.type))

            i += 1

        logger.debug("Parsed markdown into %d nodes (preset=%s)", len(nodes), self.preset)
        return MarkdownDocument(nodes=tuple(nodes))

    def _heading_text(self, inline: Token | None) -> str | None:
        """
        Literal text directly under the heading.
        Runs interrupted by inline markup are joined with a space;
        text nested inside emphasis, links, etc. is not literal.
        """
        if inline is None or inline.type != "inline" or not inline.children:
            return None
        return _join_text_runs(inline.children)

    def _split_info(self, info: str) -> tuple[str | None, str | None]:
        info = unescapeAll(info).strip()
        if not info:
            return None, None
        parts = info.split(maxsplit=1)
        language = parts[0]
        meta = parts[1].strip() if len(parts) > 1 else ""
        return language, meta or None

    def _strip_final_newline(self, content: str) -> str:
        return content[:-1] if content.endswith("\n") else content


def _join_text_runs(children: Sequence[Token]) -> str | None:
    runs: list[str] = []
    current: list[str] = []
    depth = 0

    def flush() -> None:
        if current:
            runs.append("".join(current))
            current.clear()

    for child in children:
        if child.nesting == -1:
            depth -= 1
            flush()
            continue

        if depth == 0 and child.type in _TEXT_TOKENS:
            current.append("\n" if child.type == "softbreak" else child.content)
        else:
            flush()

        if child.nesting == 1:
            depth += 1

    flush()
    return " ".join(runs) if runs else None
