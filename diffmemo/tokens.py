"""Whitespace tokenization with normalized forms and source offsets."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "Token",
    "TokenSequence",
    "normalize_word",
    "tokenize",
]

_WORD_RE = re.compile(r"\S+")
# Edge runs of anything that is not a letter or digit (underscore included).
_EDGE_RE = re.compile(r"^[\W_]+|[\W_]+$")


@dataclass(frozen=True)
class Token:
    original: str
    normalized: str
    start: int
    end: int


TokenSequence = Tuple[Token, ...]


def normalize_word(word: str) -> str:
    """Lower-case a word and strip punctuation from both edges.

    Internal characters are kept, so "don't" and "e-mail" survive while
    '"Hello!"' becomes "hello". A word made only of punctuation normalizes
    to the empty string.
    """
    return _EDGE_RE.sub("", word.lower())


def tokenize(text: str) -> TokenSequence:
    """Split ``text`` on whitespace runs, keeping offsets into ``text``."""
    return tuple(
        Token(
            original=m.group(0),
            normalized=normalize_word(m.group(0)),
            start=m.start(),
            end=m.end(),
        )
        for m in _WORD_RE.finditer(text)
    )
