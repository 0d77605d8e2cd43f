from __future__ import annotations

from typing import Any, Collection, Dict, List, Tuple

from .alignment import MatchSet, compute_lcs
from .tokens import TokenSequence, tokenize

__all__ = [
    "recall_metrics",
    "unmatched_runs",
    "is_premature_stop",
    "build_report",
    "evaluate_recall",
]


def recall_metrics(
    target: TokenSequence, answer: TokenSequence, matches: MatchSet
) -> Dict[str, Any]:
    """Precision over the answer words, recall over the reference words."""
    tp = len(matches)
    prec = tp / len(answer) if answer else 0.0
    rec = tp / len(target) if target else 0.0
    f1 = 2 * prec * rec / (prec + rec) if (prec + rec) else 0.0
    return {
        "precision": prec,
        "recall": rec,
        "f1": f1,
        "matched": tp,
        "support": len(target),
    }


# --- Group consecutive unmatched tokens into runs ---
def unmatched_runs(
    tokens: TokenSequence, matched: Collection[int], text: str
) -> List[Dict[str, Any]]:
    runs = []
    i = 0
    while i < len(tokens):
        if i in matched:
            i += 1
            continue
        j = i
        while j + 1 < len(tokens) and (j + 1) not in matched:
            j += 1
        char_begin = tokens[i].start
        char_end = tokens[j].end
        runs.append(
            {
                "i_start": i,
                "i_end": j,
                "char_begin": char_begin,
                "char_end": char_end,
                # slice keeps the source spacing between the words
                "text": text[char_begin:char_end],
            }
        )
        i = j + 1
    return runs


def is_premature_stop(target: TokenSequence, matches: MatchSet) -> Tuple[bool, int]:
    """
    Returns (premature, covered).

    ``covered`` is one past the last matched reference word. The answer
    stopped early when something matched but the reference goes on after
    it; an answer with no match at all is not reported as premature.
    """
    if not matches.target_matches:
        return (False, 0)
    covered = max(matches.target_matches) + 1
    return (covered < len(target), covered)


def build_report(
    target_text: str,
    answer_text: str,
    target: TokenSequence,
    answer: TokenSequence,
    matches: MatchSet,
    verbose: bool = False,
) -> Dict[str, Any]:
    """Report for an alignment that was already computed from the two texts."""
    result = {
        "extra_count": len(answer) - len(matches.answer_matches),
        "missing_count": len(target) - len(matches.target_matches),
        "metrics": recall_metrics(target, answer, matches),
    }

    if verbose:
        premature, covered = is_premature_stop(target, matches)
        result["verbose"] = {
            "missing": unmatched_runs(target, matches.target_matches, target_text),
            "extra": unmatched_runs(answer, matches.answer_matches, answer_text),
            "premature_stop": premature,
            "covered": covered,
        }

    return result


def evaluate_recall(
    target_text: str, answer_text: str, verbose: bool = False
) -> Dict[str, Any]:
    target = tokenize(target_text)
    answer = tokenize(answer_text)
    matches = compute_lcs(target, answer)
    return build_report(target_text, answer_text, target, answer, matches, verbose)
