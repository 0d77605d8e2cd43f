from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple

from .tokens import TokenSequence

__all__ = [
    "MatchSet",
    "lcs_table",
    "compute_lcs",
]


@dataclass(frozen=True)
class MatchSet:
    """Indices of target and answer tokens taking part in the alignment.

    Both sets have the same size, and pairing their sorted elements gives
    the matched pairs; the alignment never crosses.
    """

    target_matches: FrozenSet[int]
    answer_matches: FrozenSet[int]

    @property
    def pairs(self) -> List[Tuple[int, int]]:
        return list(zip(sorted(self.target_matches), sorted(self.answer_matches)))

    def __len__(self) -> int:
        return len(self.target_matches)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.pairs)


def lcs_table(target: TokenSequence, answer: TokenSequence) -> List[List[int]]:
    """Suffix LCS lengths: ``table[i][j]`` covers ``target[i:]`` vs ``answer[j:]``."""
    n, m = len(target), len(answer)
    table = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n - 1, -1, -1):
        word = target[i].normalized
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if word == answer[j].normalized:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def compute_lcs(target: TokenSequence, answer: TokenSequence) -> MatchSet:
    """Align two token sequences on their normalized forms.

    The alignment is recovered by scanning forward from the start of both
    sequences: a pair is taken as soon as the words agree without losing
    the optimum, and otherwise the target side is advanced whenever that
    keeps the optimum. With duplicate words this matches the earliest
    occurrence on each side, e.g. "the the" against "the cat and the dog
    and the bird" matches target words 0 and 3.
    """
    table = lcs_table(target, answer)
    n, m = len(target), len(answer)

    target_matches, answer_matches = set(), set()
    i = j = 0
    while i < n and j < m:
        if (
            target[i].normalized == answer[j].normalized
            and table[i][j] == table[i + 1][j + 1] + 1
        ):
            target_matches.add(i)
            answer_matches.add(j)
            i += 1
            j += 1
        elif table[i + 1][j] == table[i][j]:
            i += 1
        else:
            j += 1

    return MatchSet(frozenset(target_matches), frozenset(answer_matches))
