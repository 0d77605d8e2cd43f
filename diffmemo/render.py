"""Render an alignment as annotated markup over the user's own text.

Whitespace in the output is always copied from the answer text: gaps
between answer tokens are reproduced verbatim right before the next
answer-derived chunk, and missing placeholders are empty, so nothing is
ever added or dropped between rounds of diffing the rendered text again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Literal, Mapping, Optional, Tuple, TypedDict

from typing_extensions import NotRequired

from .alignment import MatchSet
from .config import DEFAULT_SETTINGS, Settings
from .markup import escape_html
from .tokens import TokenSequence

__all__ = [
    "SegmentRecord",
    "DiffResult",
    "build_segments",
    "segments_to_html",
    "generate_diff",
]

SegmentKind = Literal["matched", "extra", "missing", "gap"]


class SegmentRecord(TypedDict):
    kind: SegmentKind
    text: str
    index: NotRequired[int]


@dataclass(frozen=True)
class DiffResult:
    """Rendered markup and counts. Segments are read-only views of the records."""

    html: str
    extra_count: int
    missing_count: int
    segments: Tuple[Mapping[str, Any], ...] = field(default=(), repr=False, compare=False)

    @property
    def is_exact(self) -> bool:
        return self.extra_count == 0 and self.missing_count == 0


def build_segments(
    target: TokenSequence,
    answer: TokenSequence,
    answer_text: str,
    matches: MatchSet,
) -> List[SegmentRecord]:
    """
    Merge the alignment with the answer text into tagged segments.

    ``matches`` must come from ``compute_lcs(target, answer)`` and ``answer``
    from ``tokenize(answer_text)``; this is not checked.

    Each gap between matched pairs (and the tail after the last one) lists
    the missing target words first, then the extra answer words. Text of
    "gap" segments is the raw whitespace between answer tokens.
    """
    segments: List[SegmentRecord] = []
    cursor = 0

    def emit_answer(k: int, kind: SegmentKind) -> None:
        nonlocal cursor
        token = answer[k]
        if token.start > cursor:
            segments.append({"kind": "gap", "text": answer_text[cursor : token.start]})
        segments.append({"kind": kind, "text": token.original, "index": k})
        cursor = token.end

    ti = ai = 0
    # Sentinel pair flushes the tail after the last real match
    for tm, am in matches.pairs + [(len(target), len(answer))]:
        while ti < tm:
            segments.append({"kind": "missing", "text": "", "index": ti})
            ti += 1
        while ai < am:
            emit_answer(ai, "extra")
            ai += 1
        if tm < len(target):
            emit_answer(am, "matched")
            ti, ai = tm + 1, am + 1

    if cursor < len(answer_text):
        segments.append({"kind": "gap", "text": answer_text[cursor:]})
    return segments


def segments_to_html(
    segments: List[SegmentRecord], settings: Settings = DEFAULT_SETTINGS
) -> str:
    parts = []
    for seg in segments:
        kind = seg["kind"]
        if kind == "missing":
            parts.append(f'<span class="{settings.missing_class}"></span>')
        elif kind == "extra":
            text = escape_html(seg["text"], settings.line_break)
            parts.append(f'<span class="{settings.extra_class}">{text}</span>')
        else:
            parts.append(escape_html(seg["text"], settings.line_break))
    return "".join(parts)


def generate_diff(
    target: TokenSequence,
    answer: TokenSequence,
    answer_text: str,
    matches: MatchSet,
    settings: Optional[Settings] = None,
) -> DiffResult:
    settings = settings or DEFAULT_SETTINGS
    segments = build_segments(target, answer, answer_text, matches)
    return DiffResult(
        html=segments_to_html(segments, settings),
        extra_count=len(answer) - len(matches.answer_matches),
        missing_count=len(target) - len(matches.target_matches),
        segments=tuple(MappingProxyType(seg) for seg in segments),
    )
