"""
Checker configuration.

Settings can come from three places, applied in this order:

1. defaults of :class:`CheckerConfig`
2. JSON file (``load_config('/path/to/spellworks.json')``)
3. environment variables (``SPELLWORKS_CASE_SENSITIVE=true``)

Heuristic constants (confidence multipliers, length limits and such) are defined here as named
module-level values rather than inline literals. None of them is a law of nature, they are
defaults which proved to give reasonably quiet output on prose and source code.

.. autoclass:: CheckerConfig
.. autoclass:: ResourcePaths
.. autofunction:: load_config
"""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from spellworks.engine.errors import ConfigError

logger = logging.getLogger(__name__)

# Suggestions
# -----------

MAX_SUGGESTIONS = 5
MAX_EDIT_DISTANCE = 2
#: Dictionary words whose length differs from the misspelling by more than this are never scored
LENGTH_BAND = 3
#: Upper bound of scored candidates per misspelling
MAX_CANDIDATES = 2000
#: Candidate lists shorter than this are scored inline, without the worker pool
PARALLEL_THRESHOLD = 256

# Dictionary
# ----------

MIN_WORD_LENGTH = 2

# Confidence
# ----------

CONFIDENCE_THRESHOLD = 0.7
CONFIDENCE_BASE = 0.5
SHORT_WORD_LENGTH = 3
SHORT_WORD_FACTOR = 0.3
LONG_WORD_LENGTH = 20
LONG_WORD_FACTOR = 0.7
SEPARATOR_FACTOR = 1.1
TYPO_PATTERN_FACTOR = 1.3
#: Substrings English writers most often get wrong
TYPO_PATTERNS = ('ie', 'ei', 'tion', 'sion', 'able', 'ible', 'ment', 'ness', 'ough')

# "Looks like a reasonable word" check for proper nouns and acronyms
# ------------------------------------------------------------------

REASONABLE_MAX_LENGTH = 25
REASONABLE_LETTER_RATIO = 0.7
REASONABLE_MAX_REPEAT = 4
REASONABLE_VOWELLESS_LENGTH = 4

#: Code identifiers up to this length are assumed intentional
CODE_IDENTIFIER_LENIENT_LENGTH = 15

DEFAULT_DICTIONARY_DIR = Path('dictionary')
DEFAULT_USER_DIR = Path('~/.spellworks')


@dataclass
class ResourcePaths:
    """
    Where the per-language files live. Base dictionaries are shipped with the installation
    (``dictionary_dir``), overlays are the user's own (``user_dir``). All names are derived
    from the language code only::

        dictionary_dir/dictionary(eng).txt
        user_dir/user_eng.txt
        user_dir/ignored_eng.txt
        user_dir/proper_eng.txt
        user_dir/acronyms_eng.txt
    """

    dictionary_dir: Path = DEFAULT_DICTIONARY_DIR
    user_dir: Path = DEFAULT_USER_DIR

    def __post_init__(self):
        self.dictionary_dir = Path(self.dictionary_dir).expanduser()
        self.user_dir = Path(self.user_dir).expanduser()

    def dictionary_file(self, language) -> Optional[Path]:
        filename = language.dictionary_filename
        if filename is None:
            return None
        return self.dictionary_dir / filename

    def user_file(self, language) -> Path:
        return self.user_dir / f'user_{language.code}.txt'

    def ignored_file(self, language) -> Path:
        return self.user_dir / f'ignored_{language.code}.txt'

    def proper_file(self, language) -> Path:
        return self.user_dir / f'proper_{language.code}.txt'

    def acronyms_file(self, language) -> Path:
        return self.user_dir / f'acronyms_{language.code}.txt'


@dataclass
class CheckerConfig:
    """
    Everything :class:`SpellChecker <spellworks.engine.checker.SpellChecker>` needs to know before
    a check. ``heuristics=False`` switches to "strict" mode: no category leniency and no confidence
    gating, every token which is not skipped and not in the dictionary is reported.
    """

    case_sensitive: bool = False
    suggestions_enabled: bool = True
    max_suggestions: int = MAX_SUGGESTIONS
    confidence_threshold: float = CONFIDENCE_THRESHOLD
    heuristics: bool = True

    max_edit_distance: int = MAX_EDIT_DISTANCE
    length_band: int = LENGTH_BAND
    max_candidates: int = MAX_CANDIDATES
    parallel_threshold: int = PARALLEL_THRESHOLD
    max_workers: Optional[int] = None

    min_word_length: int = MIN_WORD_LENGTH

    paths: ResourcePaths = field(default_factory=ResourcePaths)

    def validate(self) -> 'CheckerConfig':
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ConfigError(f'confidence_threshold should be in [0, 1], got {self.confidence_threshold!r}')
        for name in ('max_suggestions', 'max_candidates', 'min_word_length'):
            if getattr(self, name) < 1:
                raise ConfigError(f'{name} should be positive, got {getattr(self, name)!r}')
        if self.max_edit_distance < 0 or self.length_band < 0:
            raise ConfigError('max_edit_distance and length_band can not be negative')
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError(f'max_workers should be positive, got {self.max_workers!r}')
        return self


def load_config(path: Union[str, Path, None] = None, *, env: Optional[Dict[str, str]] = None) -> CheckerConfig:
    """
    Build configuration from defaults, optional JSON file and environment.

    JSON file is a flat object with :class:`CheckerConfig` field names, plus optional
    ``dictionary_dir`` and ``user_dir``::

        {"case_sensitive": false, "confidence_threshold": 0.6, "user_dir": "~/.config/spellworks"}

    Args:
        path: JSON file; missing file is not an error
        env: mapping to read variables from (``os.environ`` by default)
    """
    config = CheckerConfig()

    if path is not None:
        path = Path(path)
        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    _apply_dict_to_config(config, json.load(f))
            except (json.JSONDecodeError, OSError) as e:
                raise ConfigError(f'Could not load config file {path}: {e}') from e
        else:
            logger.debug('Config file %s not found, using defaults', path)

    _apply_env_to_config(config, os.environ if env is None else env)

    return config.validate()


def _apply_dict_to_config(config: CheckerConfig, data: Dict[str, Any]):
    if not isinstance(data, dict):
        raise ConfigError(f'Config should be a JSON object, got {type(data).__name__}')

    for key, value in data.items():
        if key in ('dictionary_dir', 'user_dir'):
            setattr(config.paths, key, Path(value).expanduser())
        elif key != 'paths' and hasattr(config, key):
            setattr(config, key, value)
        else:
            logger.warning('Unknown config key %r ignored', key)


def _apply_env_to_config(config: CheckerConfig, env):
    env_mappings = {
        'SPELLWORKS_CASE_SENSITIVE': ('case_sensitive', _parse_bool),
        'SPELLWORKS_SUGGESTIONS': ('suggestions_enabled', _parse_bool),
        'SPELLWORKS_MAX_SUGGESTIONS': ('max_suggestions', int),
        'SPELLWORKS_CONFIDENCE_THRESHOLD': ('confidence_threshold', float),
        'SPELLWORKS_HEURISTICS': ('heuristics', _parse_bool),
        'SPELLWORKS_MAX_WORKERS': ('max_workers', int),
    }

    for env_var, (key, converter) in env_mappings.items():
        value = env.get(env_var)
        if value is not None:
            try:
                setattr(config, key, converter(value))
            except ValueError as e:
                raise ConfigError(f'Invalid env var {env_var}={value!r}: {e}') from e

    if env.get('SPELLWORKS_DICTIONARY_DIR'):
        config.paths.dictionary_dir = Path(env['SPELLWORKS_DICTIONARY_DIR']).expanduser()
    if env.get('SPELLWORKS_USER_DIR'):
        config.paths.user_dir = Path(env['SPELLWORKS_USER_DIR']).expanduser()


def _parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ('true', '1', 'yes', 'on'):
        return True
    if value in ('false', '0', 'no', 'off'):
        return False
    raise ValueError(f'not a boolean: {value!r}')
