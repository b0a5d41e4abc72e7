"""
Exceptions raised by :mod:`spellworks.engine`.

Only explicit user actions raise: importing/exporting a dictionary, or persisting a change to the
user's overlay files. Problems met while *loading* dictionaries (missing or undecodable files) are
logged and recovered from, so that checking a document never fails because of a missing resource.

.. autoclass:: SpellCheckerError
.. autoclass:: DictionaryIOError
.. autoclass:: PersistenceError
.. autoclass:: LanguageError
.. autoclass:: ConfigError
"""

from typing import Optional


class SpellCheckerError(Exception):
    """Base class for all errors of the engine."""


class DictionaryIOError(SpellCheckerError):
    """
    Reading or writing a dictionary-related file failed. The underlying ``OSError`` (or
    ``UnicodeDecodeError``) is available as ``__cause__``.
    """

    def __init__(self, message: str, *, path=None):
        super().__init__(message)
        self.path = path


class PersistenceError(DictionaryIOError):
    """
    The in-memory dictionary was changed, but the change could not be written to the overlay file.

    The in-memory change is *not* rolled back: until the write succeeds (see
    :meth:`SpellChecker.flush <spellworks.engine.checker.SpellChecker.flush>`) it lives only for the
    current session. The caller decides whether to retry or to discard it.
    """

    def __init__(self, message: str, *, path=None, word: Optional[str] = None):
        super().__init__(message, path=path)
        self.word = word


class LanguageError(SpellCheckerError):
    """Language value can't be parsed or used for the requested operation."""


class ConfigError(SpellCheckerError):
    """Invalid configuration value."""
