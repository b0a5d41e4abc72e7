"""
Text statistics, sharing tokenization with the checker.

.. autofunction:: extract_words
.. autofunction:: word_frequency
.. autofunction:: most_common_words
.. autofunction:: reading_time
.. autofunction:: build_wordlist
"""

from collections import Counter
from typing import Dict, List, Tuple

from spellworks.engine.algo import casing, tokenize
from spellworks.engine.data.language import ENGLISH

WORDS_PER_MINUTE = 200


def extract_words(text: str, language, is_code: bool = False) -> List[str]:
    """
    All words of the text in order, normalized for the language (lowercased unless it is CJK).
    """
    pattern = tokenize.pattern_for(language, is_code)
    normalize = casing.for_language(language).normalize
    return [
        normalize(token.word)
        for line in tokenize.split_lines(text)
        for token in tokenize.tokenize(line, pattern)
    ]


def word_frequency(text: str, language, is_code: bool = False) -> Dict[str, int]:
    return Counter(extract_words(text, language, is_code))


def most_common_words(frequency: Dict[str, int], n: int) -> List[Tuple[str, int]]:
    """
    ``n`` most frequent words, ties in alphabetical order (unlike ``Counter.most_common``, which
    keeps insertion order for ties).
    """
    return sorted(frequency.items(), key=lambda item: (-item[1], item[0]))[:n]


def reading_time(text: str, language=ENGLISH) -> Tuple[int, int]:
    """
    ``(minutes, seconds)`` to read the text at 200 words per minute.
    """
    words = len(extract_words(text, language))
    return words // WORDS_PER_MINUTE, (words % WORDS_PER_MINUTE) * 60 // WORDS_PER_MINUTE


def build_wordlist(text: str, language) -> List[str]:
    """
    Unique words of the text, sorted: a starting point for a dictionary made out of a text corpus.
    Numbers and one-letter tokens are left out.
    """
    return sorted({
        word for word in extract_words(text, language)
        if len(word) > 1 and any(c.isalpha() for c in word)
    })
