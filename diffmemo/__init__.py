"""Word-level diffing of recalled text against a reference text."""

from .alignment import MatchSet, compute_lcs
from .config import DEFAULT_SETTINGS, Settings, load_settings
from .diff import compute_diff
from .markup import escape_html, markup_to_text
from .render import DiffResult, generate_diff
from .tokens import Token, normalize_word, tokenize

__all__ = [
    "Token",
    "MatchSet",
    "DiffResult",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "normalize_word",
    "tokenize",
    "compute_lcs",
    "generate_diff",
    "escape_html",
    "markup_to_text",
    "compute_diff",
]
__version__ = "0.1.0"
