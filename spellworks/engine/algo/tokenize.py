"""
Splitting text into words.

There are three word patterns, and which one is used is decided only by the language and by
whether the document is source code (see :func:`pattern_for`):

* ``WORD_PATTERN``: any letters and digits, with apostrophes and hyphens allowed *inside*
  the word ("don't", "well-known"), but not at its edges;
* ``CJK_PATTERN``: same, but a run of Han/Hiragana/Katakana/Hangul characters is a word by itself,
  even without spaces around it ("東京に行く" is one token, "Tokyo東京" are two);
* ``CODE_PATTERN``: identifiers (letters, digits, underscores, starting with a letter or an
  underscore); tokens with less than 3 letters are dropped.

:func:`tokenize` works on one line and reports UTF-8 *byte* offsets inside this line, so that
``end - start == len(word.encode('utf-8'))``.

.. autoclass:: Token
.. autofunction:: tokenize
.. autofunction:: split_lines
.. autofunction:: pattern_for
.. autofunction:: sanitize_word
.. autofunction:: is_valid_word
.. autofunction:: is_cjk_text
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Pattern

CJK_RANGES = r'\u4e00-\u9fff\u3400-\u4dbf\u3040-\u309f\u30a0-\u30ff\uac00-\ud7af'

# letter or digit, no underscore
_ALNUM = r"[^\W_]"
_SEPARATOR = r"['’\-]"
_NON_CJK_ALNUM = rf"(?:(?![{CJK_RANGES}]){_ALNUM})"

WORD_PATTERN = re.compile(rf"{_ALNUM}+(?:{_SEPARATOR}{_ALNUM}+)*")
CJK_PATTERN = re.compile(rf"[{CJK_RANGES}]+|{_NON_CJK_ALNUM}+(?:{_SEPARATOR}{_NON_CJK_ALNUM}+)*")
CODE_PATTERN = re.compile(r"[^\W\d]\w*")

#: Code tokens with fewer letters than this are not words
CODE_MIN_LETTERS = 3


@dataclass(frozen=True)
class Token:
    word: str
    #: UTF-8 byte offsets inside the line
    start: int
    end: int


def pattern_for(language, is_code: bool) -> Pattern:
    """
    Choose the tokenization pattern. CJK languages always get the CJK pattern (code in Japanese is
    still mostly Japanese comments), others get the code pattern for code.
    """
    if language.is_cjk:
        return CJK_PATTERN
    if is_code:
        return CODE_PATTERN
    return WORD_PATTERN


def tokenize(line: str, pattern: Pattern) -> Iterator[Token]:
    """
    Yield non-empty, non-overlapping tokens of the line, left to right. It is a generator, so calling
    it again on the same line restarts from the beginning.

    Byte offsets are computed incrementally: only the text between the previous token and the current
    one gets encoded, not the whole prefix.
    """

    code = pattern is CODE_PATTERN

    byte_pos = 0
    char_pos = 0
    for m in pattern.finditer(line):
        word = m.group(0)
        byte_pos += len(line[char_pos:m.start()].encode('utf-8'))
        char_pos = m.start()

        if code and sum(1 for c in word if c.isalpha()) < CODE_MIN_LETTERS:
            continue

        start = byte_pos
        end = start + len(word.encode('utf-8'))
        yield Token(word, start, end)


def split_lines(text: str) -> List[str]:
    """
    Lines of the text: split by ``\\n``, one trailing ``\\r`` removed from each line. A newline at the
    very end of the text does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def sanitize_word(word: str) -> str:
    """
    Clean up the word before adding it to (or ignoring it in) the dictionary: only letters and
    digits are kept, apostrophes and hyphens only when they are between two letters::

        >>> sanitize_word("  'don't!  ")
        "don't"
    """
    chars = word.strip()
    result = []
    for i, c in enumerate(chars):
        if c.isalnum():
            result.append(c)
        elif c in "'-" and 0 < i < len(chars) - 1 and chars[i - 1].isalpha() and chars[i + 1].isalpha():
            result.append(c)
    return ''.join(result)


def is_valid_word(word: str) -> bool:
    """Non-empty, has at least one letter, at least 2 characters long."""
    word = word.strip()
    return len(word) >= 2 and any(c.isalpha() for c in word)


def is_cjk_text(text: str) -> bool:
    return any(is_cjk_char(c) for c in text)


def is_cjk_char(c: str) -> bool:
    return ('\u4e00' <= c <= '\u9fff' or '\u3400' <= c <= '\u4dbf' or '\u3040' <= c <= '\u309f' or
            '\u30a0' <= c <= '\u30ff' or '\uac00' <= c <= '\ud7af')
