from .checker import SpellChecker
from .config import CheckerConfig, ResourcePaths, load_config
from .dictionary import Dictionary
from .manager import DictionaryManager
from .data.analysis import DocumentAnalysis, WordCheck, WordType
from .data.language import (
    Language, ENGLISH, AFRIKAANS, FRENCH, SPANISH, GERMAN, CHINESE, ITALIAN, PORTUGUESE, RUSSIAN,
    JAPANESE, KOREAN, AUTO
)
from .errors import SpellCheckerError, DictionaryIOError, PersistenceError, LanguageError, ConfigError

__all__ = [
    "SpellChecker",
    "CheckerConfig",
    "ResourcePaths",
    "load_config",
    "Dictionary",
    "DictionaryManager",
    "DocumentAnalysis",
    "WordCheck",
    "WordType",
    "Language",
    "ENGLISH",
    "AFRIKAANS",
    "FRENCH",
    "SPANISH",
    "GERMAN",
    "CHINESE",
    "ITALIAN",
    "PORTUGUESE",
    "RUSSIAN",
    "JAPANESE",
    "KOREAN",
    "AUTO",
    "SpellCheckerError",
    "DictionaryIOError",
    "PersistenceError",
    "LanguageError",
    "ConfigError"
]
