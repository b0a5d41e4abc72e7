"""
The "is this word correct?" decision.

Dictionary lookup by itself is too strict for real documents: names, acronyms and identifiers are
mostly absent from dictionaries, yet they are rarely misspellings. So the decision is layered:

* session ignore list and user's own words come first;
* then the :meth:`Dictionary.contains <spellworks.engine.dictionary.Dictionary.contains>` lookup,
  cached per spelling;
* then category leniency: proper nouns and acronyms which :func:`looks_reasonable`, and short code
  identifiers, are accepted even if the dictionary doesn't know them;
* and finally, for words still considered incorrect, a :func:`confidence` score: how sure are we
  that this is a misspelling and not something the dictionary just doesn't know. Only confident
  misspellings are reported.

With ``heuristics=False`` (strict mode) the last two steps are skipped: whatever is not in the
dictionary is reported.

To follow the algorithm, start reading from :meth:`Lookup.__call__`.

.. autoclass:: Lookup
.. autoclass:: Verdict

.. autofunction:: confidence
.. autofunction:: looks_reasonable
"""

from dataclasses import dataclass
from itertools import groupby
from typing import Set

from spellworks.engine import config
from spellworks.engine.data.analysis import WordType

#: How likely it is for a word of this category, being not in the dictionary, to be a real misspelling
CATEGORY_FACTORS = {
    WordType.NORMAL: 1.2,
    WordType.ACRONYM: 0.4,
    WordType.PROPER_NOUN: 0.6,
    WordType.TECHNICAL_TERM: 0.8,
}
CODE_IDENTIFIER_FACTOR = 0.3
NON_CODE_IDENTIFIER_FACTOR = 0.8
OTHER_FACTOR = 0.2

VOWELS = frozenset('aeiouyàáâãäåæèéêëìíîïòóôõöøùúûüýÿаеёиоуыэюяіїє')


@dataclass(frozen=True)
class Verdict:
    #: Whether the word is considered correct after all leniencies
    correct: bool
    #: 1.0 for correct words, the misspelling confidence for incorrect ones
    confidence: float
    #: Incorrect *and* confident enough to be shown to the user
    reported: bool


CORRECT = Verdict(correct=True, confidence=1.0, reported=False)


class Lookup:
    """
    Created by :class:`SpellChecker <spellworks.engine.checker.SpellChecker>` for each document check,
    binding together everything the decision depends on.

    Args:
        dictionary: :class:`Dictionary <spellworks.engine.dictionary.Dictionary>` of the language
        cache: :class:`CorrectnessCache <spellworks.engine.cache.CorrectnessCache>`
        ignored: session ignore list (normalized words)
        case_sensitive:
        heuristics: apply category leniency and confidence threshold
        threshold: minimal confidence for a misspelling to be reported
    """

    def __init__(self, dictionary, cache, ignored: Set[str], *,
                 case_sensitive: bool = False,
                 heuristics: bool = True,
                 threshold: float = config.CONFIDENCE_THRESHOLD):
        self.dictionary = dictionary
        self.cache = cache
        self.ignored = ignored
        self.case_sensitive = case_sensitive
        self.heuristics = heuristics
        self.threshold = threshold

    def __call__(self, word: str, word_type: WordType, *, is_code: bool = False) -> Verdict:
        normalized = self.dictionary.normalize(word)

        if normalized in self.ignored or normalized in self.dictionary.user_words:
            return CORRECT

        # only dictionary membership is cached: leniency depends on the category of each occurrence
        key = self.cache.key(self.dictionary.language,
                             self.dictionary.casing.lookup_form(word, self.case_sensitive))
        known = self.cache.get(key)
        if known is None:
            known = self.dictionary.contains(word, case_sensitive=self.case_sensitive)
            self.cache.put(key, known)

        if known:
            return CORRECT

        if not self.heuristics:
            return Verdict(correct=False, confidence=1.0, reported=True)

        if self.lenient(word, word_type):
            return CORRECT

        score = confidence(word, word_type, is_code=is_code)
        return Verdict(correct=False, confidence=score, reported=score >= self.threshold)

    def lenient(self, word: str, word_type: WordType) -> bool:   # pylint: disable=no-self-use
        """
        Whether a word unknown to the dictionary is still accepted because of its category.
        """
        if word_type in (WordType.PROPER_NOUN, WordType.ACRONYM):
            return looks_reasonable(word)
        if word_type == WordType.CODE_IDENTIFIER:
            return len(word) <= config.CODE_IDENTIFIER_LENIENT_LENGTH

        return False


def confidence(word: str, word_type: WordType, *, is_code: bool = False) -> float:
    """
    How sure we are that a word not found in the dictionary is really misspelled, from 0 to 1::

        >>> confidence('recieve', WordType.NORMAL)   # 0.5 * 1.2 * 1.3 ("ie")
        0.78
        >>> confidence('fooBar', WordType.CODE_IDENTIFIER, is_code=True)
        0.15
    """
    if word_type == WordType.CODE_IDENTIFIER:
        factor = CODE_IDENTIFIER_FACTOR if is_code else NON_CODE_IDENTIFIER_FACTOR
    else:
        factor = CATEGORY_FACTORS.get(word_type, OTHER_FACTOR)

    score = config.CONFIDENCE_BASE * factor

    if len(word) < config.SHORT_WORD_LENGTH:
        score *= config.SHORT_WORD_FACTOR
    elif len(word) > config.LONG_WORD_LENGTH:
        score *= config.LONG_WORD_FACTOR

    if '_' in word or '-' in word:
        score *= config.SEPARATOR_FACTOR

    lower = word.lower()
    if any(pattern in lower for pattern in config.TYPO_PATTERNS):
        score *= config.TYPO_PATTERN_FACTOR

    return round(min(max(score, 0.0), 1.0), 4)


def looks_reasonable(word: str) -> bool:
    """
    Whether an unknown capitalized word or acronym looks like a real word rather than a typo or
    garbage: not too long, mostly letters, no long runs of the same character, and has a vowel
    (unless it is short, like "XML").
    """
    if not word or len(word) > config.REASONABLE_MAX_LENGTH:
        return False

    letters = sum(1 for c in word if c.isalpha())
    if letters / len(word) <= config.REASONABLE_LETTER_RATIO:
        return False

    if any(len(list(run)) > config.REASONABLE_MAX_REPEAT for _, run in groupby(word)):
        return False

    return len(word) <= config.REASONABLE_VOWELLESS_LENGTH or any(c in VOWELS for c in word.lower())
