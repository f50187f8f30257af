# src/rmsm_kit/identifiers.py

"""Stable identifiers for code blocks and headings.

A code block is identified by an explicit ``#id`` token in its meta
string. A heading is identified by a kebab-case slug of its text.
"""

import re

from .markdown.models import CodeBlockNode, HeadingNode

_HASHTAG_ID = re.compile(r"(^|\s)#([A-Za-z0-9_-]+)($|\s)")

_SPECIAL_CHARACTERS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def code_id(code: CodeBlockNode) -> str | None:
    if not code.meta:
        return None
    match = _HASHTAG_ID.search(code.meta)
    return match.group(2) if match else None


def heading_id(heading: HeadingNode) -> str | None:
    if heading.text is None:
        return None
    return slugify(heading.text)


def slugify(text: str) -> str | None:
    """Kebab-case slug, or None when nothing survives the cleanup."""
    slug = _SPECIAL_CHARACTERS.sub("", text.strip().lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug).strip("-")
    return slug or None
