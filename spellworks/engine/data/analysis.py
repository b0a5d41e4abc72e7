"""
Results of checking a document.

:class:`DocumentAnalysis` stores only what can't be derived: the ordered sequence of
:class:`WordCheck` and a few facts about the run. Totals, accuracy and unique-word count are
computed from ``words`` each time, so they can never disagree with it.

.. autoclass:: WordType
.. autoclass:: WordCheck
.. autoclass:: DocumentAnalysis
"""

import math
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from spellworks.engine.data.language import Language

WordType = Enum('WordType', 'NORMAL CODE_IDENTIFIER ACRONYM PROPER_NOUN TECHNICAL_TERM NUMBER SYMBOL SHORT_WORD')
"""
Semantic category of a token, see :mod:`spellworks.engine.algo.classify` for how it is decided:

* ``NORMAL``: regular word
* ``CODE_IDENTIFIER``: ``snake_case``, ``camelCase``, ``get_something`` and such (in code only)
* ``ACRONYM``: ``HTTP``, ``UTF8``
* ``PROPER_NOUN``: capitalized word
* ``TECHNICAL_TERM``: ``well-known-term``
* ``NUMBER``, ``SYMBOL``, ``SHORT_WORD``: never checked
"""


@dataclass(frozen=True)
class WordCheck:
    """One occurrence of a word in the document, with a verdict."""

    #: Word as it is in the text
    word: str
    #: Form used for lookups (lowercased, unless the language is CJK)
    normalized: str
    #: UTF-8 byte offsets inside the line, ``end - start`` is the byte length of ``word``
    start: int
    end: int
    #: 1-based
    line: int
    #: 1-based, ``start + 1``
    column: int
    is_correct: bool
    confidence: float
    word_type: WordType
    suggestions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'normalized': self.normalized,
            'start': self.start,
            'end': self.end,
            'line': self.line,
            'column': self.column,
            'is_correct': self.is_correct,
            'confidence': self.confidence,
            'word_type': self.word_type.name.lower(),
            'suggestions': list(self.suggestions),
        }


@dataclass(frozen=True)
class DocumentAnalysis:
    words: Tuple[WordCheck, ...]
    language: Language
    #: Number of lines scanned
    lines_checked: int = 0
    check_duration_ms: float = 0.0
    is_code: bool = False
    #: ``False`` if the check was cancelled before the last line
    complete: bool = field(default=True)

    @classmethod
    def empty(cls, language: Language, *, is_code: bool = False) -> 'DocumentAnalysis':
        return cls(words=(), language=language, is_code=is_code)

    @property
    def total_words(self) -> int:
        return len(self.words)

    @property
    def misspelled_words(self) -> int:
        return sum(1 for word in self.words if not word.is_correct)

    @property
    def accuracy(self) -> float:
        """
        Percentage of correct words, rounded half-up to a whole number. 100 for an empty document.
        """
        total = self.total_words
        if total == 0:
            return 100.0
        return float(math.floor((total - self.misspelled_words) / total * 100 + 0.5))

    @property
    def suggestions_count(self) -> int:
        return sum(len(word.suggestions) for word in self.words)

    @property
    def unique_words(self) -> int:
        return len({word.normalized for word in self.words})

    @property
    def misspellings(self) -> Tuple[WordCheck, ...]:
        return tuple(word for word in self.words if not word.is_correct)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_words': self.total_words,
            'misspelled_words': self.misspelled_words,
            'accuracy': self.accuracy,
            'suggestions_count': self.suggestions_count,
            'unique_words': self.unique_words,
            'language': self.language.serialize(),
            'lines_checked': self.lines_checked,
            'check_duration_ms': self.check_duration_ms,
            'is_code': self.is_code,
            'complete': self.complete,
            'words': [word.to_dict() for word in self.words],
        }
