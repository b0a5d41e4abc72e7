"""
Script-specific word normalization.

Every insertion into a dictionary and every lookup goes through the same :class:`Casing` object,
chosen once per language by :func:`for_language`, so that the normalized forms always agree.
For Latin and Cyrillic scripts the normalized form is lowercase; for CJK scripts there is no case,
and the word is stored and looked up exactly as written.

.. autoclass:: Type

.. autoclass:: Casing
    :members:

.. autoclass:: ExactCasing

.. autofunction:: for_language
"""

from enum import Enum

Type = Enum('Type', 'NO INIT ALL HUHINIT HUH')
"""
Type of capitalization, detected by :meth:`Casing.guess`:

* ``NO``: all lowercase ("foo")
* ``INIT``: titlecase, only initial letter is capitalized ("Foo")
* ``ALL``: all uppercase ("FOO")
* ``HUH``: mixed capitalization ("fooBar")
* ``HUHINIT``: mixed capitalization, first letter is capitalized ("FooBar")
"""


class Casing:
    """
    Case-folding normalization (Latin, Cyrillic and other bicameral scripts).
    """

    def guess(self, word: str) -> Type:     # pylint: disable=no-self-use
        """
        Guess word's capitalization. Words without cased characters ("123", "東京") are ``NO``.
        """

        if word.islower() or not any(c.isupper() for c in word):
            return Type.NO
        if word.isupper():
            return Type.ALL
        if word[:1].isupper():
            return Type.INIT if word[1:].islower() else Type.HUHINIT
        return Type.HUH

    def normalize(self, word: str) -> str:  # pylint: disable=no-self-use
        # turkic "lowercase dot i" to latinic "i", just in case
        return word.lower().replace('i̇', 'i')

    def lookup_form(self, word: str, case_sensitive: bool) -> str:
        """
        Form in which the word should be looked up in the set of normalized words. With
        ``case_sensitive``, the word is looked up as is, so "Paris" is only found if "Paris" itself
        was added.
        """
        if case_sensitive:
            return word
        return self.normalize(word)


class ExactCasing(Casing):
    """
    Normalization for scripts without case: the word is kept exactly as written.
    """

    def normalize(self, word: str) -> str:
        return word

    def lookup_form(self, word: str, case_sensitive: bool) -> str:
        return word


def for_language(language) -> Casing:
    return ExactCasing() if language.is_cjk else Casing()
