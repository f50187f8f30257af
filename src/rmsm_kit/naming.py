# src/rmsm_kit/naming.py

import logging
from collections import defaultdict

from .identifiers import code_id, heading_id
from .markdown.models import LocalizedCodeBlock

logger = logging.getLogger(__name__)


class FallbackNamer:
    """Derives file names for code blocks that carry no ``file://`` path.

    One instance per document parse. Blocks outside any heading are
    numbered by an orphan counter; unlabeled blocks under a heading are
    numbered per heading, keyed by the heading's document index.
    """

    def __init__(self) -> None:
        self._orphan_count = 1
        self._unnamed_by_heading: defaultdict[int, int] = defaultdict(int)

    def __call__(self, block: LocalizedCodeBlock) -> str:
        code = block.code
        own_id = code_id(code)
        heading = block.nearest_heading

        if heading is None:
            if own_id:
                return _with_extension(own_id, code.language)
            return self._next_orphan(code.language)

        # A heading like "package.json" names its block verbatim
        if (
            code.language
            and heading.text
            and heading.text.endswith(f".{code.language}")
        ):
            return heading.text

        if own_id:
            return _with_extension(own_id, code.language)

        slug = heading_id(heading)
        if slug is None:
            logger.debug("Heading %d has no usable text, numbering as orphan", heading.index)
            return self._next_orphan(code.language)

        self._unnamed_by_heading[heading.index] += 1
        count = self._unnamed_by_heading[heading.index]
        return _with_extension(f"{slug}-{count}", code.language)

    def _next_orphan(self, language: str | None) -> str:
        name = _with_extension(str(self._orphan_count), language)
        self._orphan_count += 1
        return name


def _with_extension(stem: str, language: str | None) -> str:
    return f"{stem}.{language}" if language else stem
