"""Edit distance for typo-tolerant "did you mean" alternatives."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(s1: str, s2: str, max_distance: int | None = None) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Insertions, deletions and substitutions each cost 1. Two DP rows are
    kept; when ``max_distance`` is given the scan bails out as soon as every
    cell of a row exceeds it.

    Args:
        s1: First string.
        s2: Second string.
        max_distance: If provided, return max_distance+1 early when
            distance is guaranteed to exceed this threshold.

    Returns:
        The minimum number of single-character edits needed to change s1
        into s2, or max_distance+1 if that bound was exceeded.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("a", "a")
        0
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Shorter string as columns
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)

    if max_distance is not None and n - m > max_distance:
        return max_distance + 1

    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        row_min = j
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
            row_min = min(row_min, curr_row[i])

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1

        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def within_distance(term: str, vocabulary: Iterable[str], max_distance: int) -> list[str]:
    """Return vocabulary words at most ``max_distance`` edits from ``term``.

    Vocabulary order is preserved.
    """
    matches: list[str] = []
    for word in vocabulary:
        if abs(len(word) - len(term)) > max_distance:
            continue
        if levenshtein_distance(term, word, max_distance) <= max_distance:
            matches.append(word)
    return matches
