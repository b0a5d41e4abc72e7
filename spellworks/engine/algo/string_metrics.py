"""
String distance used by :mod:`suggest <spellworks.engine.algo.suggest>`.

.. autofunction:: levenshtein
.. autofunction:: length_difference
"""


def levenshtein(s1: str, s2: str) -> int:
    """
    Classic Levenshtein (edit) distance: minimal number of single-character insertions, deletions
    and substitutions turning ``s1`` into ``s2``. Characters are Python ``str`` characters (Unicode
    code points), not bytes, so "кот" -> "кит" is 1, not 2.

    It is the textbook dynamic programming algorithm, but instead of the full ``len(s1) x len(s2)``
    matrix only two rows are kept (previous and current), and rows are built along the shorter
    string, so auxiliary memory is ``O(min(len(s1), len(s2)))``::

        >>> levenshtein('kitten', 'sitting')
        3
        >>> levenshtein('', 'abc')
        3
    """

    if s1 == s2:
        return 0

    # rows go along the shorter string
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            current.append(min(
                previous[j] + 1,                # deletion
                current[j - 1] + 1,             # insertion
                previous[j - 1] + (c1 != c2),   # substitution (or match)
            ))
        previous = current

    return previous[-1]


def length_difference(s1: str, s2: str) -> int:
    """
    Lower bound of :func:`levenshtein`: it is never less than the difference of lengths.
    """
    return abs(len(s1) - len(s2))
