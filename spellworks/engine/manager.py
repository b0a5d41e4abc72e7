"""
.. autoclass:: DictionaryManager
"""

import logging
import threading
from typing import Callable, Dict, Optional, TypeVar

from spellworks.engine import config
from spellworks.engine.dictionary import Dictionary
from spellworks.engine.errors import LanguageError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DictionaryManager:
    """
    Keeps one loaded :class:`Dictionary <spellworks.engine.dictionary.Dictionary>` per language.

    Callers never hold the cached instance itself: :meth:`get_dictionary` gives out snapshots, and
    changes go through :meth:`mutate`, which runs under the manager's lock. So the cached instance is
    the only authoritative one, and a snapshot taken before a change simply doesn't see it.

    ::

        manager = DictionaryManager(paths)
        dictionary = manager.get_dictionary(ENGLISH)     # loaded on first access
        manager.add_word_to_dictionary('spylls', ENGLISH)
        'spylls' in dictionary.words                     # False, it is a snapshot
        'spylls' in manager.get_dictionary(ENGLISH).words
        # True

    **Access**

    .. automethod:: get_dictionary
    .. automethod:: cached
    .. automethod:: reload

    **Changes**

    .. automethod:: mutate
    .. automethod:: add_word_to_dictionary
    .. automethod:: remove_word
    .. automethod:: ignore_word
    .. automethod:: clear_ignored_words
    .. automethod:: merge
    """

    def __init__(self, paths: Optional[config.ResourcePaths] = None, *,
                 min_word_length: int = config.MIN_WORD_LENGTH):
        self.paths = paths or config.ResourcePaths()
        self.min_word_length = min_word_length
        self._dictionaries: Dict[object, Dictionary] = {}
        self._lock = threading.RLock()

    def get_dictionary(self, language) -> Dictionary:
        """
        Snapshot of the language's dictionary, loading it on first access.

        Raises:
            LanguageError: for auto-detect pseudo-language, which has no dictionary of its own
        """
        with self._lock:
            return self._get_or_load(language).copy()

    def cached(self, language) -> bool:
        with self._lock:
            return language in self._dictionaries

    def reload(self, language) -> Dictionary:
        """
        Forgets the cached dictionary and reads it from files again.
        """
        with self._lock:
            self._dictionaries.pop(language, None)
            return self._get_or_load(language).copy()

    def mutate(self, language, fn: Callable[[Dictionary], T]) -> T:
        """
        Runs ``fn`` on the cached dictionary (loading it first if necessary) while holding the lock,
        returns what ``fn`` returned. If ``fn`` raises, whatever it already changed stays changed.
        """
        with self._lock:
            return fn(self._get_or_load(language))

    def add_word_to_dictionary(self, word: str, language) -> bool:
        return self.mutate(language, lambda dictionary: dictionary.add_word(word))

    def remove_word(self, word: str, language) -> bool:
        return self.mutate(language, lambda dictionary: dictionary.remove_word(word))

    def ignore_word(self, word: str, language) -> bool:
        return self.mutate(language, lambda dictionary: dictionary.ignore_word(word))

    def clear_ignored_words(self, language):
        self.mutate(language, lambda dictionary: dictionary.clear_ignored())

    def merge(self, words, language) -> int:
        return self.mutate(language, lambda dictionary: dictionary.merge(words))

    def _get_or_load(self, language) -> Dictionary:
        if language.is_auto:
            raise LanguageError('Auto-detect has no dictionary, detect the language first')

        dictionary = self._dictionaries.get(language)
        if dictionary is None:
            dictionary = Dictionary(language, paths=self.paths, min_word_length=self.min_word_length).load()
            self._dictionaries[language] = dictionary
        return dictionary
