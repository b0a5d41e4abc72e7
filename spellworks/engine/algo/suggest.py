"""
The "suggest correction for this misspelling" module.

On a bird-eye view level, suggest does:

* takes dictionary words of about the same length as the misspelling (no more than
  ``length_band`` characters longer or shorter), but no more than ``max_candidates`` of them;
* calculates :func:`levenshtein <spellworks.engine.algo.string_metrics.levenshtein>` distance to
  each of them;
* keeps those not farther than ``max_edit_distance``, closest first.

Scoring the candidates is independent for each of them, so for large candidate lists it is spread
over a thread pool, in chunks. The pool is created on first need and reused by every later call
until :meth:`Suggest.close`. Distance computation is pure Python and holds the GIL, so the pool
structures the work rather than speeding it up; lists below ``parallel_threshold`` are scored
inline. ``Executor.map`` returns results in input order, so the result doesn't depend on how the
work was split: words with equal distance stay in dictionary iteration order.

To follow algorithm details, start reading from :meth:`Suggest.__call__`

.. autoclass:: Suggest

.. autoclass:: Suggestion
    :members:
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional, Sequence

from spellworks.engine import config
from spellworks.engine.algo.string_metrics import levenshtein, length_difference

logger = logging.getLogger(__name__)

#: Candidates per unit of work sent to the pool
CHUNK_SIZE = 128


@dataclass(frozen=True)
class Suggestion:
    """
    Suggestion with the information about how good it is.
    """

    #: Actual suggestion text
    text: str
    #: Edit distance to the misspelling
    distance: int

    def __repr__(self):
        return f"Suggestion[{self.distance}]({self.text})"


class Suggest:
    """
    ``Suggest`` object is created for a dictionary, typically by
    :class:`SpellChecker <spellworks.engine.checker.SpellChecker>`, but it is usable standalone::

        >>> suggest = Suggest(dictionary)
        >>> [*suggest('wrold')]
        ['world']
        >>> suggest.suggestions('wrold')
        [Suggestion[2](world)]

    **Main methods**

    .. automethod:: __call__
    .. automethod:: suggestions
    .. automethod:: candidates
    .. automethod:: close
    """

    def __init__(self, dictionary, *,   # pylint: disable=too-many-arguments
                 max_suggestions: int = config.MAX_SUGGESTIONS,
                 max_edit_distance: int = config.MAX_EDIT_DISTANCE,
                 length_band: int = config.LENGTH_BAND,
                 max_candidates: int = config.MAX_CANDIDATES,
                 parallel_threshold: int = config.PARALLEL_THRESHOLD,
                 max_workers: Optional[int] = None):
        self.dictionary = dictionary
        self.max_suggestions = max_suggestions
        self.max_edit_distance = max_edit_distance
        self.length_band = length_band
        self.max_candidates = max_candidates
        self.parallel_threshold = parallel_threshold
        self.max_workers = max_workers
        self._pool: Optional[ThreadPoolExecutor] = None

    def __call__(self, word: str) -> Iterator[str]:
        """
        Outer "public" interface: suggestion texts, best first.

        Args:
            word: misspelled word, normalized the same way dictionary words are
        """
        yield from (suggestion.text for suggestion in self.suggestions(word))

    def suggestions(self, word: str) -> List[Suggestion]:
        # Nothing sensible can be suggested for one letter or a number
        if len(word) <= 1 or word.isdigit():
            return []

        # ...and there is nothing to correct in a known word
        if word in self.dictionary.words:
            return []

        candidates = self.candidates(word)
        if not candidates:
            return []

        distances = self.score(word, candidates)

        found = [
            Suggestion(candidate, distance)
            for candidate, distance in zip(candidates, distances)
            if distance <= self.max_edit_distance
        ]
        # sort is stable, so equal distances keep dictionary order
        found.sort(key=lambda suggestion: suggestion.distance)

        return found[:self.max_suggestions]

    def candidates(self, word: str) -> List[str]:
        """
        Dictionary words of similar length. Length difference is a lower bound of the edit distance,
        so words outside the band can't be close enough anyway.
        """
        similar = (
            candidate for candidate in self.dictionary.words
            if length_difference(candidate, word) <= self.length_band
        )
        return list(islice(similar, self.max_candidates))

    def score(self, word: str, candidates: Sequence[str]) -> List[int]:
        if len(candidates) < self.parallel_threshold:
            return _distances(word, candidates)

        chunks = [candidates[i:i + CHUNK_SIZE] for i in range(0, len(candidates), CHUNK_SIZE)]
        logger.debug('Scoring %d candidates for %r in %d chunks', len(candidates), word, len(chunks))

        scored = self.executor().map(_distances, [word] * len(chunks), chunks)
        return [distance for chunk in scored for distance in chunk]

    def executor(self) -> ThreadPoolExecutor:
        if self._pool is None:
            self._pool = ThreadPoolExecutor(max_workers=self.max_workers)
        return self._pool

    def close(self):
        """
        Shuts the worker pool down, if it was started. The object stays usable: the next large
        candidate list starts a new pool.
        """
        if self._pool is not None:
            self._pool.shutdown()
            self._pool = None

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()


def _distances(word: str, candidates: Sequence[str]) -> List[int]:
    return [levenshtein(word, candidate) for candidate in candidates]
