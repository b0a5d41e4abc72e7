"""
Cache of dictionary lookups: whether a spelling is known in a language. Category leniency is not
cached, it is applied to each occurrence.

Keys are ``"<language code>_<normalized word>"`` (the word as written, when checking is
case-sensitive), so the same spelling in two languages never shares an entry. The cache is never
invalidated partially: anything that could change a lookup result (language switch, case
sensitivity toggle, dictionary content change, ignore list clear, import) clears it whole.

.. autoclass:: CorrectnessCache
    :members:
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class CorrectnessCache:
    """
    Thread-safe ``key -> bool`` mapping. A :meth:`clear` is visible to every read started after it
    returned.
    """

    def __init__(self):
        self._verdicts: Dict[str, bool] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(language, normalized: str) -> str:
        return f'{language.code}_{normalized}'

    def get(self, key: str) -> Optional[bool]:
        with self._lock:
            return self._verdicts.get(key)

    def put(self, key: str, correct: bool):
        with self._lock:
            self._verdicts[key] = correct

    def clear(self):
        with self._lock:
            self._verdicts.clear()
        logger.debug('Correctness cache cleared')

    def __len__(self):
        with self._lock:
            return len(self._verdicts)

    def __contains__(self, key: str):
        with self._lock:
            return key in self._verdicts
