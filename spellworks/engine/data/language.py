"""
Languages the engine knows about.

There is a closed set of well-known languages (module-level constants, also available as
``Language.ENGLISH`` etc.), the ``AUTO`` pseudo-language ("detect from the text"), and an open
extension point: :meth:`Language.custom_language` creates a language identified only by its code, for
user-supplied dictionaries::

    >>> Language.from_code('fr')
    Language(fra)
    >>> Language.from_code('tlh')
    Language(custom:tlh)
    >>> Language.parse(Language.custom_language('tlh').serialize()) == Language.custom_language('tlh')
    True

Languages compare and hash by code only, so ``Language.custom_language('eng') == ENGLISH``.

.. autoclass:: Language
.. autodata:: Script
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from spellworks.engine.errors import LanguageError

Script = Enum('Script', 'LATIN CYRILLIC CJK HANGUL')
"""
Writing system of the language, decides tokenization and normalization:

* ``LATIN``, ``CYRILLIC``: words separated by spaces/punctuation, lookups are case-folded
* ``CJK``: Han/Hiragana/Katakana runs are words by themselves, exact-form lookups
* ``HANGUL``: same as CJK, for Korean
"""

CUSTOM_PREFIX = 'custom:'


@dataclass(frozen=True)
class Language:
    #: ISO 639-2-alike three-letter code for known languages, anything for custom ones
    code: str
    #: Human-readable name
    name: str = field(compare=False)
    script: Script = field(default=Script.LATIN, compare=False)
    custom: bool = field(default=False, compare=False)

    @classmethod
    def custom_language(cls, code: str) -> 'Language':
        code = code.strip()
        if not code:
            raise LanguageError('Custom language code can not be empty')
        return cls(code=code, name=code, custom=True)

    @classmethod
    def from_code(cls, code: str) -> 'Language':
        """
        Known language by its two- or three-letter code (case-insensitive), or a custom one.
        """
        known = _BY_CODE.get(code.strip().lower())
        if known is not None:
            return known
        return cls.custom_language(code)

    @classmethod
    def parse(cls, value: str) -> 'Language':
        """
        Inverse of :meth:`serialize`.
        """
        if value.startswith(CUSTOM_PREFIX):
            return cls.custom_language(value[len(CUSTOM_PREFIX):])
        known = _BY_CODE.get(value.strip().lower())
        if known is None:
            raise LanguageError(f'Unknown language: {value!r}')
        return known

    @staticmethod
    def all() -> List['Language']:
        return list(KNOWN)

    def serialize(self) -> str:
        if self.custom:
            return CUSTOM_PREFIX + self.code
        return self.code

    @property
    def is_auto(self) -> bool:
        return self is AUTO or (not self.custom and self.code == AUTO.code)

    @property
    def is_cjk(self) -> bool:
        return self.script in (Script.CJK, Script.HANGUL)

    @property
    def dictionary_filename(self) -> Optional[str]:
        if self.is_auto:
            return None
        return f'dictionary({self.code}).txt'

    def __repr__(self):
        return f'Language({self.serialize()})'


ENGLISH = Language('eng', 'English')
AFRIKAANS = Language('afr', 'Afrikaans')
FRENCH = Language('fra', 'French')
SPANISH = Language('spa', 'Spanish')
GERMAN = Language('deu', 'German')
CHINESE = Language('zho', 'Chinese', Script.CJK)
ITALIAN = Language('ita', 'Italian')
PORTUGUESE = Language('por', 'Portuguese')
RUSSIAN = Language('rus', 'Russian', Script.CYRILLIC)
JAPANESE = Language('jpn', 'Japanese', Script.CJK)
KOREAN = Language('kor', 'Korean', Script.HANGUL)
AUTO = Language('auto', 'Auto-detect')

KNOWN = (ENGLISH, AFRIKAANS, FRENCH, SPANISH, GERMAN, CHINESE, ITALIAN, PORTUGUESE, RUSSIAN,
         JAPANESE, KOREAN, AUTO)

# Short codes are what langdetect (and most people) use
_SHORT_CODES = {
    'en': ENGLISH, 'af': AFRIKAANS, 'fr': FRENCH, 'es': SPANISH, 'de': GERMAN,
    'zh': CHINESE, 'zh-cn': CHINESE, 'zh-tw': CHINESE, 'it': ITALIAN, 'pt': PORTUGUESE,
    'ru': RUSSIAN, 'ja': JAPANESE, 'ko': KOREAN,
}
_BY_CODE = {**{lang.code: lang for lang in KNOWN}, **_SHORT_CODES}

for _name, _lang in zip(
        ('ENGLISH', 'AFRIKAANS', 'FRENCH', 'SPANISH', 'GERMAN', 'CHINESE', 'ITALIAN', 'PORTUGUESE',
         'RUSSIAN', 'JAPANESE', 'KOREAN', 'AUTO'), KNOWN):
    setattr(Language, _name, _lang)
