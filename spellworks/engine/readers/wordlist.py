"""
Word list files: UTF-8, one word per line, no header. Blank lines and surrounding whitespace are
ignored on reading. That's the format of base dictionaries, user overlays, ignore lists, proper noun
and acronym lists, and of dictionary import/export.

.. autofunction:: read_wordlist
.. autofunction:: write_wordlist
"""

import os
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Set

from spellworks.engine.readers.file_reader import BaseReader, FileReader

logger = logging.getLogger(__name__)


def read_wordlist(source, *, normalize: Optional[Callable[[str], str]] = None,
                  min_length: int = 1) -> Set[str]:
    """
    Reads words from a path, or from a :class:`BaseReader`.

    Args:
        source: path (``str`` or ``Path``) or an already constructed reader
        normalize: applied to every word before it gets into the result
        min_length: shorter words (in characters, before normalization) are skipped

    Raises:
        OSError: file can't be opened
        UnicodeDecodeError: file is not valid UTF-8
    """
    reader = source if isinstance(source, BaseReader) else FileReader(source)

    result = set()
    with reader:
        for _, word in reader:
            if len(word) < min_length:
                continue
            result.add(normalize(word) if normalize else word)

    return result


def write_wordlist(path, words: Iterable[str]):
    """
    Writes words sorted, one per line. The file is written to a temporary neighbour first and then
    moved in place, so a failed write never leaves a half-written list behind.

    Raises:
        OSError: directory can't be created or file can't be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp = path.with_name(path.name + '.tmp')
    try:
        with open(tmp, 'w', encoding='utf-8') as f:
            for word in sorted(words):
                f.write(word + '\n')
        os.replace(tmp, path)
    except OSError:
        if tmp.exists():
            tmp.unlink()
        raise

    logger.debug('Wrote %s', path)
