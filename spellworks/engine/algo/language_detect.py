"""
Guessing the language of a text: used when the active language is "auto-detect", and to choose which
dictionary an imported word list belongs to.

Texts that are mostly CJK are decided by the script alone: statistical detectors are unreliable on
short CJK snippets, while kana and Hangul are unambiguous. Everything else goes to ``langdetect``.

.. autofunction:: detect_language
.. autofunction:: detect_languages
"""

import logging
from typing import List, Tuple

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from spellworks.engine.data.language import Language, ENGLISH, CHINESE, JAPANESE, KOREAN
from spellworks.engine.algo.tokenize import is_cjk_char

logger = logging.getLogger(__name__)

# Make language detection deterministic
DetectorFactory.seed = 0

#: Share of CJK characters (of all non-space characters) after which the text is considered CJK
CJK_RATIO = 0.3
MAX_CANDIDATES = 3


def detect_language(text: str) -> Language:
    """
    The most probable language of the text among the known ones. Empty, undetectable, or written in a
    language we have no dictionary for, text is considered English.
    """
    candidates = detect_languages(text)
    if not candidates:
        return ENGLISH
    return candidates[0][0]


def detect_languages(text: str) -> List[Tuple[Language, float]]:
    """
    Up to 3 most probable known languages with their probabilities, most probable first.
    """
    if not text.strip():
        return []

    cjk = _cjk_language(text)
    if cjk is not None:
        return [(cjk, 1.0)]

    try:
        guesses = detect_langs(text)
    except LangDetectException as e:
        logger.debug('Language detection failed: %s', e)
        return []

    result: List[Tuple[Language, float]] = []
    for guess in guesses:
        language = Language.from_code(guess.lang)
        if language.custom or language in (lang for lang, _ in result):
            continue
        result.append((language, guess.prob))

    return result[:MAX_CANDIDATES]


def _cjk_language(text: str):
    chars = [c for c in text if not c.isspace()]
    cjk = [c for c in chars if is_cjk_char(c)]
    if not chars or len(cjk) / len(chars) <= CJK_RATIO:
        return None

    if any('\u3040' <= c <= '\u30ff' for c in cjk):
        return JAPANESE
    if any('\uac00' <= c <= '\ud7af' for c in cjk):
        return KOREAN
    return CHINESE
