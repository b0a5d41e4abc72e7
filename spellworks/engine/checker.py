"""
.. autoclass:: SpellChecker
"""

import time
import logging
import threading
from typing import Dict, List, Optional, Set

from spellworks.engine import config as cfg
from spellworks.engine.algo import code_detect, tokenize
from spellworks.engine.algo.casing import for_language as casing_for
from spellworks.engine.algo.classify import Classifier
from spellworks.engine.algo.language_detect import detect_language
from spellworks.engine.algo.lookup import CORRECT, Lookup
from spellworks.engine.algo.suggest import Suggest
from spellworks.engine.cache import CorrectnessCache
from spellworks.engine.data.analysis import DocumentAnalysis, WordCheck
from spellworks.engine.data.language import ENGLISH, Language
from spellworks.engine.dictionary import Dictionary
from spellworks.engine.errors import ConfigError, DictionaryIOError
from spellworks.engine.manager import DictionaryManager
from spellworks.engine.readers import read_wordlist

logger = logging.getLogger(__name__)


class SpellChecker:
    """
    The main interface to ``spellworks.engine`` as a library: checks documents in the active
    language and manages the user's dictionary.

    Usage::

        from spellworks.engine import SpellChecker, ENGLISH, load_config

        checker = SpellChecker(ENGLISH, config=load_config('spellworks.json'))

        analysis = checker.check_document("We recieve letters", filename='notes.txt')
        analysis.accuracy
        # 67.0
        for word in analysis.misspellings:
            print(word.line, word.column, word.word, word.suggestions)
        # 1 4 recieve ('receive',)

        checker.add_word_to_dictionary('recieve')

    ``check_document`` for every line: splits it into words (:mod:`tokenize
    <spellworks.engine.algo.tokenize>`), decides each word's kind (:mod:`classify
    <spellworks.engine.algo.classify>`), decides whether it is correct (:mod:`lookup
    <spellworks.engine.algo.lookup>`), and, for reported misspellings, finds corrections
    (:mod:`suggest <spellworks.engine.algo.suggest>`).

    Whether the document is code is decided once, before checking: by file extension if the file name
    is given, by content otherwise.

    If the active language is ``AUTO``, each document's language is detected before checking.
    Dictionary changes (add/ignore/remove/import/export) then go to the language of the last checked
    document (English before the first check).

    **Checking**

    .. automethod:: check_document

    **Settings**

    .. automethod:: set_language
    .. automethod:: set_case_sensitive
    .. automethod:: enable_suggestions
    .. automethod:: set_confidence_threshold
    .. automethod:: set_heuristics

    **User dictionary**

    .. automethod:: add_word_to_dictionary
    .. automethod:: remove_word
    .. automethod:: ignore_word
    .. automethod:: clear_ignored_words
    .. automethod:: import_dictionary
    .. automethod:: export_dictionary
    .. automethod:: flush

    **State**

    .. automethod:: current_language
    .. automethod:: word_count
    .. automethod:: ignored_word_count
    .. automethod:: user_word_count
    """

    #: Settings, see :class:`CheckerConfig <spellworks.engine.config.CheckerConfig>`
    config: cfg.CheckerConfig
    #: Dictionaries of all languages used so far
    manager: DictionaryManager
    #: Cached dictionary lookups
    cache: CorrectnessCache
    #: Session ignore list of the active language
    ignore_list: Set[str]

    def __init__(self, language: Language = ENGLISH, *,
                 config: Optional[cfg.CheckerConfig] = None,
                 manager: Optional[DictionaryManager] = None):
        self.config = (config or cfg.CheckerConfig()).validate()
        self.manager = manager or DictionaryManager(self.config.paths,
                                                    min_word_length=self.config.min_word_length)
        self.cache = CorrectnessCache()
        self.ignore_list = set()

        self._language: Optional[Language] = None
        self._detected: Language = ENGLISH
        self._classifiers: Dict[Language, Classifier] = {}

        self.set_language(language)

    # Checking
    # --------

    def check_document(self, text: str, filename: Optional[str] = None, *,
                       cancel: Optional[threading.Event] = None) -> DocumentAnalysis:
        """
        Checks the whole document. Never raises on the document contents; a missing dictionary
        produces an empty analysis.

        Args:
            text: Document text
            filename: File name (or path) of the document, only its extension is used
            cancel: When set (from another thread), checking stops before the next line, and the
                    analysis has ``complete=False``
        """
        started = time.perf_counter()

        is_code = code_detect.is_code_document(text, filename)
        if not text:
            return DocumentAnalysis.empty(self._target_language(), is_code=is_code)

        language = self._resolve_language(text)
        logger.debug('Checking %d characters as %s%s', len(text), language.name, ' code' if is_code else '')

        dictionary = self.manager.get_dictionary(language)
        if not dictionary.words:
            logger.warning('Dictionary for %s is empty, nothing can be checked', language.name)
            return DocumentAnalysis.empty(language, is_code=is_code)

        classifier = self._classifier(language, dictionary)
        ignored = self.ignore_list if language == self._language else dictionary.ignored_words
        lookup = Lookup(dictionary, self.cache, ignored,
                        case_sensitive=self.config.case_sensitive,
                        heuristics=self.config.heuristics,
                        threshold=self.config.confidence_threshold)
        suggest = self._suggester(dictionary) if self.config.suggestions_enabled else None
        pattern = tokenize.pattern_for(language, is_code)

        words: List[WordCheck] = []
        lines_checked = 0
        complete = True

        try:
            for line_no, line in enumerate(tokenize.split_lines(text), start=1):
                if cancel is not None and cancel.is_set():
                    logger.debug('Check cancelled at line %d', line_no)
                    complete = False
                    break

                for token in tokenize.tokenize(line, pattern):
                    word_type = classifier.classify(token.word, is_code)
                    if classifier.should_skip(token.word, word_type):
                        verdict = CORRECT
                    else:
                        verdict = lookup(token.word, word_type, is_code=is_code)

                    normalized = dictionary.normalize(token.word)
                    suggestions = ()
                    if verdict.reported and suggest is not None:
                        suggestions = tuple(suggest(normalized))

                    words.append(WordCheck(
                        word=token.word,
                        normalized=normalized,
                        start=token.start,
                        end=token.end,
                        line=line_no,
                        column=token.start + 1,
                        is_correct=not verdict.reported,
                        confidence=verdict.confidence,
                        word_type=word_type,
                        suggestions=suggestions,
                    ))

                lines_checked += 1
        finally:
            if suggest is not None:
                suggest.close()

        analysis = DocumentAnalysis(
            words=tuple(words),
            language=language,
            lines_checked=lines_checked,
            check_duration_ms=(time.perf_counter() - started) * 1000,
            is_code=is_code,
            complete=complete,
        )
        logger.debug('Checked %d words in %d lines, %d misspelled, %.1fms',
                     analysis.total_words, lines_checked, analysis.misspelled_words, analysis.check_duration_ms)

        return analysis

    def _resolve_language(self, text: str) -> Language:
        if not self._language.is_auto:
            return self._language
        self._detected = detect_language(text)
        logger.debug('Detected language: %s', self._detected.name)
        return self._detected

    def _classifier(self, language: Language, dictionary: Dictionary) -> Classifier:
        if language not in self._classifiers:
            self._classifiers[language] = Classifier.load(self.config.paths, language, dictionary.casing)
        return self._classifiers[language]

    def _suggester(self, dictionary: Dictionary) -> Suggest:
        return Suggest(
            dictionary,
            max_suggestions=self.config.max_suggestions,
            max_edit_distance=self.config.max_edit_distance,
            length_band=self.config.length_band,
            max_candidates=self.config.max_candidates,
            parallel_threshold=self.config.parallel_threshold,
            max_workers=self.config.max_workers,
        )

    # Settings
    # --------

    def set_language(self, language: Language):
        """
        Makes the language active: loads its dictionary (if it wasn't yet), re-reads its proper noun
        and acronym lists, resets the session ignore list to the saved one, and clears cached
        verdicts. Setting the same language again does nothing.

        ``AUTO`` loads nothing until a document is checked.
        """
        if language == self._language:
            return

        if language.is_auto:
            self.ignore_list = set()
        else:
            dictionary = self.manager.get_dictionary(language)
            self.ignore_list = set(dictionary.ignored_words)
            self._classifiers[language] = Classifier.load(self.config.paths, language, dictionary.casing)

        self._language = language
        self.cache.clear()
        logger.info('Language set to %s', language.name)

    def set_case_sensitive(self, sensitive: bool):
        if sensitive != self.config.case_sensitive:
            self.config.case_sensitive = sensitive
            self.cache.clear()

    def enable_suggestions(self, enabled: bool):
        self.config.suggestions_enabled = enabled

    def set_confidence_threshold(self, threshold: float):
        if not 0.0 <= threshold <= 1.0:
            raise ConfigError(f'confidence_threshold should be in [0, 1], got {threshold!r}')
        self.config.confidence_threshold = threshold

    def set_heuristics(self, enabled: bool):
        """
        Switch between lenient (default) and strict checking, see
        :mod:`lookup <spellworks.engine.algo.lookup>`.
        """
        self.config.heuristics = enabled

    # User dictionary
    # ---------------

    def add_word_to_dictionary(self, word: str) -> bool:
        """
        Adds the word to the user's dictionary of the active language and saves it. The word is
        cleaned up first (see :func:`sanitize_word <spellworks.engine.algo.tokenize.sanitize_word>`);
        if nothing sensible remains, nothing happens.

        Returns:
            whether the word was added

        Raises:
            PersistenceError: the word is added for this session, but wasn't saved
        """
        clean = self._sanitize(word)
        if clean is None:
            return False

        language = self._target_language()
        normalized = casing_for(language).normalize(clean)

        self.ignore_list.discard(normalized)
        self.cache.put(self.cache.key(language, normalized), True)

        return self.manager.add_word_to_dictionary(clean, language)

    def remove_word(self, word: str) -> bool:
        """
        Removes the word from the active dictionary (and the user's dictionary, saving it). Also a way
        to discard a word whose :meth:`add_word_to_dictionary` failed to save.

        Raises:
            PersistenceError:
        """
        clean = self._sanitize(word)
        if clean is None:
            return False

        try:
            return self.manager.remove_word(clean, self._target_language())
        finally:
            self.cache.clear()

    def ignore_word(self, word: str) -> bool:
        """
        Ignores the word in the active language, now and in future sessions.

        Raises:
            PersistenceError: the word is ignored for this session, but wasn't saved
        """
        clean = self._sanitize(word)
        if clean is None:
            return False

        language = self._target_language()
        self.ignore_list.add(casing_for(language).normalize(clean))

        return self.manager.ignore_word(clean, language)

    def clear_ignored_words(self):
        """
        Raises:
            PersistenceError: ignore list is cleared for this session, but the saved one wasn't
        """
        self.ignore_list.clear()
        self.cache.clear()
        self.manager.clear_ignored_words(self._target_language())

    def import_dictionary(self, path) -> Language:
        """
        Merges words from a word list file into a dictionary (for this session; they are not added
        to the user's words). The dictionary is chosen by detecting the language of the words: if it
        is other than English, that language, otherwise the active one.

        Returns:
            language the words were merged into

        Raises:
            DictionaryIOError: file can't be read
        """
        try:
            words = read_wordlist(path)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryIOError(f'Could not import dictionary from {path}: {e}', path=path) from e

        detected = detect_language(' '.join(sorted(words)))
        language = detected if detected != ENGLISH else self._target_language()

        added = self.manager.merge(words, language)
        self.cache.clear()

        logger.info('Imported %d words (%d new) from %s into %s', len(words), added, path, language.name)
        return language

    def export_dictionary(self, path):
        """
        Writes all words of the active dictionary, sorted, one per line.

        Raises:
            DictionaryIOError: file can't be written
        """
        dictionary = self.manager.get_dictionary(self._target_language())
        dictionary.export(path)
        logger.info('Exported %d words to %s', len(dictionary.words), path)

    def flush(self):
        """
        Saves the user's words and ignore list of the active language again: a retry after a
        :class:`PersistenceError <spellworks.engine.errors.PersistenceError>`.
        """
        self.manager.mutate(self._target_language(), lambda dictionary: dictionary.save_overlays())

    def _sanitize(self, word: str) -> Optional[str]:
        clean = tokenize.sanitize_word(word)
        if not tokenize.is_valid_word(clean):
            logger.debug('Not a word: %r', word)
            return None
        return clean

    def _target_language(self) -> Language:
        if self._language.is_auto:
            return self._detected
        return self._language

    # State
    # -----

    def current_language(self) -> Language:
        return self._language

    def word_count(self) -> int:
        return self.manager.mutate(self._target_language(), lambda dictionary: dictionary.word_count)

    def ignored_word_count(self) -> int:
        if self._language.is_auto:
            return self.manager.mutate(self._detected, lambda dictionary: dictionary.ignored_count)
        return len(self.ignore_list)

    def user_word_count(self) -> int:
        return self.manager.mutate(self._target_language(), lambda dictionary: len(dictionary.user_words))

