from __future__ import annotations

import logging
from typing import Optional

from .alignment import compute_lcs
from .config import Settings
from .render import DiffResult, generate_diff
from .tokens import tokenize

__all__ = ["compute_diff"]

logger = logging.getLogger(__name__)


def compute_diff(
    target_text: str, answer_text: str, settings: Optional[Settings] = None
) -> DiffResult:
    """Diff recalled ``answer_text`` against the reference ``target_text``."""
    target = tokenize(target_text)
    answer = tokenize(answer_text)
    matches = compute_lcs(target, answer)
    result = generate_diff(target, answer, answer_text, matches, settings)

    logger.debug(
        "diff: %d target tokens, %d answer tokens, %d matched, %d extra, %d missing",
        len(target),
        len(answer),
        len(matches),
        result.extra_count,
        result.missing_count,
    )
    return result
