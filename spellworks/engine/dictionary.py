"""
.. autoclass:: Dictionary
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Iterable, Optional, Set

from spellworks.engine import config, readers
from spellworks.engine.algo import casing
from spellworks.engine.errors import DictionaryIOError, PersistenceError

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Set of known words of one language, plus the user's additions and ignored words for it.

    Usage::

        from spellworks.engine import Dictionary, ENGLISH
        from spellworks.engine.config import ResourcePaths

        dictionary = Dictionary(ENGLISH, paths=ResourcePaths('dictionary', '~/.spellworks')).load()
        dictionary.contains('Hello')
        # True
        dictionary.contains('Helllo')
        # False

        # In-memory, for experiments
        dictionary = Dictionary.from_words(ENGLISH, ['hello', 'world'])

    All words are stored normalized with the language's :mod:`casing <spellworks.engine.algo.casing>`
    (lowercase, or as is for CJK), and every lookup normalizes the same way.

    Typically, dictionaries are not created directly, but obtained through
    :class:`DictionaryManager <spellworks.engine.manager.DictionaryManager>`, which caches them.

    **Reading**

    .. automethod:: load
    .. automethod:: load_file
    .. automethod:: from_words

    **Lookup**

    .. automethod:: contains
    .. automethod:: normalize

    **Changing**

    Changes of the user's words and ignore list are saved to the user directory immediately.

    .. automethod:: add_word
    .. automethod:: remove_word
    .. automethod:: ignore_word
    .. automethod:: clear_ignored
    .. automethod:: merge
    .. automethod:: save_overlays
    """

    #: All known words: base dictionary, imported and user's words
    words: Set[str]
    #: User's own words, a subset of :attr:`words`, saved to ``user_<code>.txt``
    user_words: Set[str]
    #: Always considered correct, saved to ``ignored_<code>.txt``
    ignored_words: Set[str]

    def __init__(self, language, *, paths: Optional[config.ResourcePaths] = None,
                 min_word_length: int = config.MIN_WORD_LENGTH):
        self.language = language
        self.paths = paths or config.ResourcePaths()
        self.min_word_length = min_word_length

        self.casing = casing.for_language(language)

        self.words = set()
        self.user_words = set()
        self.ignored_words = set()
        self.loaded = False

    @classmethod
    def from_words(cls, language, words: Iterable[str], **kwargs) -> Dictionary:
        """
        Dictionary made of the given words, not reading any files. Note that changes (like
        :meth:`add_word`) are still saved to the user directory of ``paths``.
        """
        dictionary = cls(language, **kwargs)
        dictionary.merge(words)
        dictionary.loaded = True
        return dictionary

    def load(self) -> Dictionary:
        """
        Reads the base dictionary of the language, then the user's words and ignored words.

        Nothing here raises: missing base dictionary leaves the dictionary empty (and nearly every
        word unverifiable), unreadable files are logged and skipped. Repeated calls do nothing.
        """
        if self.loaded:
            return self

        path = self.paths.dictionary_file(self.language)
        if path is None or not path.exists():
            logger.warning('No dictionary file for %s (%s), starting with an empty one',
                           self.language.name, path)
        else:
            try:
                self.load_file(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning('Could not read dictionary %s, starting with an empty one: %s', path, e)

        self.user_words = self._read_overlay(self.paths.user_file(self.language))
        self.words |= self.user_words
        self.ignored_words = self._read_overlay(self.paths.ignored_file(self.language))

        self.loaded = True
        logger.info('Loaded %d words (%d user, %d ignored) for %s',
                    len(self.words), len(self.user_words), len(self.ignored_words), self.language.name)

        return self

    def load_file(self, path) -> int:
        """
        Adds words of a word list file (one per line, shorter than ``min_word_length`` skipped). The
        file is read whole before anything is added, so a broken file changes nothing.

        Returns:
            number of words read

        Raises:
            OSError:
            UnicodeDecodeError:
        """
        new_words = readers.read_wordlist(path, normalize=self.normalize, min_length=self.min_word_length)
        self.words |= new_words
        return len(new_words)

    def _read_overlay(self, path: Path) -> Set[str]:
        if not path.exists():
            return set()
        try:
            return readers.read_wordlist(path, normalize=self.normalize)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning('Could not read %s, ignoring it: %s', path, e)
            return set()

    def normalize(self, word: str) -> str:
        return self.casing.normalize(word)

    def contains(self, word: str, case_sensitive: bool = False) -> bool:
        """
        Checks if the word is known. "Known" is quite lenient here:

        * empty and too short words are always known (they are just fragments of punctuation)
        * so are ignored words
        * and (for non-CJK languages) anything with digits: numbers and identifiers are not
          something to spell-check.

        Args:
            word: Word as it is in the text
            case_sensitive: for non-CJK, look up the word exactly as it is written
        """
        word = word.strip()

        if len(word) < self.min_word_length:
            return True

        normalized = self.normalize(word)
        if normalized in self.ignored_words:
            return True

        if not self.language.is_cjk and any('0' <= c <= '9' for c in word):
            return True

        return self.casing.lookup_form(word, case_sensitive) in self.words

    def add_word(self, word: str) -> bool:
        """
        Adds word to the user's words (and removes it from ignored, if it was there), and saves both
        lists.

        Returns:
            ``False`` if the word is too short to be added

        Raises:
            PersistenceError: the word was added, but couldn't be saved
        """
        normalized = self.normalize(word.strip())
        if len(normalized) < self.min_word_length:
            return False

        self.words.add(normalized)
        self.user_words.add(normalized)
        was_ignored = normalized in self.ignored_words
        self.ignored_words.discard(normalized)

        self._save(self.paths.user_file(self.language), self.user_words, word=normalized)
        if was_ignored:
            self._save(self.paths.ignored_file(self.language), self.ignored_words, word=normalized)

        return True

    def remove_word(self, word: str) -> bool:
        """
        Removes word from the dictionary (if it was the user's word, the user list is saved).

        Returns:
            whether the word was present

        Raises:
            PersistenceError: the word was removed, but the user list couldn't be saved
        """
        normalized = self.normalize(word.strip())
        if normalized not in self.words:
            return False

        self.words.discard(normalized)
        if normalized in self.user_words:
            self.user_words.discard(normalized)
            self._save(self.paths.user_file(self.language), self.user_words, word=normalized)

        return True

    def ignore_word(self, word: str) -> bool:
        """
        Raises:
            PersistenceError: the word is ignored now, but couldn't be saved
        """
        normalized = self.normalize(word.strip())
        if not normalized:
            return False

        self.ignored_words.add(normalized)
        self._save(self.paths.ignored_file(self.language), self.ignored_words, word=normalized)
        return True

    def clear_ignored(self):
        """
        Raises:
            PersistenceError: ignore list is empty now, but the file still has the old one
        """
        self.ignored_words.clear()
        self._save(self.paths.ignored_file(self.language), self.ignored_words)

    def merge(self, words: Iterable[str]) -> int:
        """
        Adds words to the in-memory dictionary only (not to the user's words, nothing is saved).

        Returns:
            number of new words
        """
        before = len(self.words)
        self.words.update(
            self.normalize(word.strip()) for word in words
            if len(word.strip()) >= self.min_word_length
        )
        return len(self.words) - before

    def save_overlays(self):
        """
        Writes user's words and ignored words again. Useful to retry after a
        :class:`PersistenceError <spellworks.engine.errors.PersistenceError>`.
        """
        self._save(self.paths.user_file(self.language), self.user_words)
        self._save(self.paths.ignored_file(self.language), self.ignored_words)

    def export(self, path):
        """
        Writes all known words, sorted, one per line.

        Raises:
            DictionaryIOError:
        """
        try:
            readers.write_wordlist(path, self.words)
        except OSError as e:
            raise DictionaryIOError(f'Could not export dictionary to {path}: {e}', path=path) from e

    def _save(self, path: Path, words: Set[str], *, word: Optional[str] = None):
        try:
            readers.write_wordlist(path, words)
        except OSError as e:
            raise PersistenceError(f'Could not save {path}: {e}', path=path, word=word) from e

    def copy(self) -> Dictionary:
        """
        Independent snapshot: changing the copy's word sets doesn't affect the original.
        """
        result = copy.copy(self)
        result.words = set(self.words)
        result.user_words = set(self.user_words)
        result.ignored_words = set(self.ignored_words)
        return result

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def ignored_count(self) -> int:
        return len(self.ignored_words)

    def __len__(self):
        return len(self.words)

    def __repr__(self):
        return f'Dictionary({self.language!r}, {len(self.words)} words)'
