"""
Deciding what kind of token we are looking at, and whether it should be checked at all.

:meth:`Classifier.classify` gives each token exactly one :class:`WordType`, trying categories in a
fixed order, first match wins:

1. ``NUMBER``: all characters are digits
2. ``SYMBOL``: no letters at all
3. ``SHORT_WORD``: 2 characters or less (so "OK" is a short word, not an acronym)
4. ``ACRONYM``: only uppercase letters, digits and underscores, and 6 characters or less
5. ``PROPER_NOUN``: capitalized, longer than 2 characters, not a capitalized function word ("The")
6. ``CODE_IDENTIFIER``: only in code; has an underscore, mixes cases, or has a typical affix
7. ``TECHNICAL_TERM``: hyphenated and longer than 5 characters
8. ``NORMAL``: everything else

The order matters: ``"HTTP"`` is an acronym and not a proper noun only because acronyms are tried
first, and ``"getValue"`` in code is a code identifier only because it is not capitalized.

:meth:`Classifier.should_skip` then decides which tokens are not spelling targets at all.

.. autoclass:: Classifier
    :members:
"""

import logging
from typing import Iterable, Optional, Set

from spellworks.engine.data.analysis import WordType
from spellworks.engine.algo.casing import Casing, Type as CapType
from spellworks.engine.readers import read_wordlist

logger = logging.getLogger(__name__)

#: Capitalized forms of function words, which are not proper nouns even if capitalized
CAPITALIZED_FUNCTION_WORDS = frozenset({'I', 'A', 'The', 'And', 'But', 'Or', 'For', 'Nor', 'Yet', 'So'})

#: Acronyms never reported, in addition to the per-language ``acronyms_<code>.txt``
COMMON_ACRONYMS = frozenset({
    'api', 'http', 'https', 'url', 'uri', 'cpu', 'gpu', 'ram', 'rom', 'ssd', 'hdd', 'usb',
    'html', 'css', 'xml', 'json', 'yaml', 'toml', 'csv', 'pdf', 'svg', 'png', 'jpg', 'gif',
    'sql', 'db', 'tcp', 'udp', 'ip', 'dns', 'ssh', 'ssl', 'tls', 'ftp', 'smtp', 'imap',
    'os', 'ui', 'ux', 'gui', 'cli', 'ide', 'sdk', 'jdk', 'jvm', 'npm', 'gcc', 'llvm',
    'ai', 'ml', 'nlp', 'io', 'utf8', 'ascii', 'id', 'uuid', 'rest', 'rpc', 'grpc', 'ci', 'cd',
    'aws', 'gcp', 'vm', 'tbd', 'todo', 'faq', 'pr', 'qa', 'ceo', 'cto', 'nasa', 'etc',
})

CODE_PREFIXES = ('get_', 'set_')
CODE_SUFFIXES = ('_t', '_ptr', 'Handler', 'Service')

#: Code identifiers this short are never checked
CODE_SKIP_LENGTH = 3
ACRONYM_MAX_LENGTH = 6
SHORT_WORD_MAX_LENGTH = 2
#: Hyphenated words longer than this are technical terms
TECHNICAL_TERM_LENGTH = 5


class Classifier:
    """
    Classifier is configured per language: it knows which acronyms are common (built-in ones plus the
    language's ``acronyms_<code>.txt``) and which proper nouns the user has declared correct
    (``proper_<code>.txt``). Proper nouns are compared normalized, with the language's casing.

    Args:
        acronyms: lowercase acronyms to skip, ``COMMON_ACRONYMS`` are always added
        proper_nouns: proper nouns to skip
        casing: used to normalize proper nouns
    """

    def __init__(self, *, acronyms: Iterable[str] = (), proper_nouns: Iterable[str] = (),
                 casing: Optional[Casing] = None):
        self.casing = casing or Casing()
        self.acronyms: Set[str] = set(COMMON_ACRONYMS) | {a.lower() for a in acronyms}
        self.proper_nouns: Set[str] = {self.casing.normalize(p) for p in proper_nouns}

    @classmethod
    def load(cls, paths, language, casing: Casing) -> 'Classifier':
        """
        Creates classifier for the language, reading its acronym and proper noun lists from the user
        directory. Missing lists are just empty; unreadable ones are logged and treated as empty.
        """
        return cls(acronyms=_read_optional(paths.acronyms_file(language)),
                   proper_nouns=_read_optional(paths.proper_file(language)),
                   casing=casing)

    def classify(self, word: str, is_code: bool) -> WordType:   # pylint: disable=too-many-return-statements
        if word.isdigit():
            return WordType.NUMBER
        if not any(c.isalpha() for c in word):
            return WordType.SYMBOL
        if len(word) <= SHORT_WORD_MAX_LENGTH:
            return WordType.SHORT_WORD
        if len(word) <= ACRONYM_MAX_LENGTH and all(c.isupper() or c.isdigit() or c == '_' for c in word):
            return WordType.ACRONYM
        if word[0].isupper() and word not in CAPITALIZED_FUNCTION_WORDS:
            return WordType.PROPER_NOUN
        if is_code and self.looks_like_identifier(word):
            return WordType.CODE_IDENTIFIER
        if '-' in word and len(word) > TECHNICAL_TERM_LENGTH:
            return WordType.TECHNICAL_TERM
        return WordType.NORMAL

    def looks_like_identifier(self, word: str) -> bool:
        if '_' in word:
            return True
        if self.casing.guess(word) in (CapType.HUH, CapType.HUHINIT):
            return True
        return word.startswith(CODE_PREFIXES) or word.endswith(CODE_SUFFIXES)

    def should_skip(self, word: str, word_type: WordType) -> bool:
        """
        Whether the token is not a spelling target: it is treated as correct without any lookups.
        """
        if word_type in (WordType.NUMBER, WordType.SYMBOL, WordType.SHORT_WORD):
            return True
        if word_type == WordType.ACRONYM:
            return word.lower() in self.acronyms
        if word_type == WordType.CODE_IDENTIFIER:
            return (len(word) <= CODE_SKIP_LENGTH or word.isdigit() or
                    word.lower().startswith('0x') or '__' in word)
        if word_type == WordType.PROPER_NOUN:
            return self.casing.normalize(word) in self.proper_nouns
        return False


def _read_optional(path) -> Set[str]:
    if not path.exists():
        return set()
    try:
        return read_wordlist(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning('Could not read %s, ignoring it: %s', path, e)
        return set()
