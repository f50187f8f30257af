# src/rmsm_kit/markdown/config.py

from dataclasses import dataclass
from typing import Literal

Preset = Literal["commonmark", "default"]


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the Markdown parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    preset: Preset = "commonmark"
