"""Centralized configuration for tokenization and sampling.

Defines immutable defaults for the byte delimiters recognized by the
tokenizer, the glyphs used when rendering synthetic tokens, and the seed and
sample size used by the text generation driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Tokenizer delimiters (single bytes)
    SENTENCE_DELIMITER: int = 0x0A
    WORD_DELIMITER: int = 0x20

    # Rendering of synthetic tokens
    NULL_GLYPH: str = "ε"
    UNKNOWN_GLYPH: str = "\N{REPLACEMENT CHARACTER}"

    # Word bytes are rendered one byte per character
    DISPLAY_ENCODING: str = "latin-1"

    # Encoding applied when a corpus is built from ``str``
    TEXT_ENCODING: str = "utf-8"

    # Sampling driver
    RANDOM_SEED: int = 42
    DEFAULT_SAMPLE_COUNT: int = 10


# Convenience re-exports and constants
RANDOM_SEED: int = Config.RANDOM_SEED
NULL_GLYPH: str = Config.NULL_GLYPH
UNKNOWN_GLYPH: str = Config.UNKNOWN_GLYPH


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
