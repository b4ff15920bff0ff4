"""Levenshtein edit distance."""


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. ``table[i][j]``
    holds the distance between the first ``i`` characters of ``b`` and the
    first ``j`` characters of ``a``.

    Examples:
        >>> edit_distance("eletrecista", "eletricista")
        1
        >>> edit_distance("", "abc")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    table = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    table[0] = list(range(len(a) + 1))

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            cost = 0 if a[j - 1] == b[i - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )

    return table[len(b)][len(a)]
