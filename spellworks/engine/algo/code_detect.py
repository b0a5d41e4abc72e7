"""
Is the document source code?

Decided once per document, before checking. Code documents are tokenized with the identifier pattern
and their identifiers get the code leniencies (see :mod:`classify <spellworks.engine.algo.classify>`
and :mod:`lookup <spellworks.engine.algo.lookup>`).

.. autofunction:: is_code_document
.. autofunction:: is_code_file
.. autofunction:: is_likely_code
"""

from pathlib import PurePath
from typing import Optional

CODE_EXTENSIONS = frozenset({
    'rs', 'py', 'js', 'ts', 'jsx', 'tsx', 'java', 'cpp', 'c', 'cc', 'cxx',
    'go', 'rb', 'php', 'cs', 'swift', 'kt', 'scala', 'hs', 'lua',
    'pl', 'r', 'm', 'f', 'f90', 'f95', 'f03', 'f08', 'v', 'sv',
    'vhd', 'vhdl', 'asm', 's', 'sh', 'bash', 'zsh', 'fish',
    'ps1', 'bat', 'cmd', 'yml', 'yaml', 'toml', 'json', 'xml', 'html',
    'htm', 'css', 'scss', 'less', 'md', 'markdown', 'tex', 'bib',
})

STATEMENT_MARKERS = ('->', '=>', 'fn ', 'def ', 'function ', 'class ', 'import ', 'export ', '#include',
                     'pub ', 'let ', 'const ', 'var ', 'return ')

#: Only this many first lines are looked at
SAMPLE_LINES = 10
#: Shorter documents are never considered code
MIN_LINES = 3
MIN_INDICATORS = 2


def is_code_document(text: str, filename: Optional[str] = None) -> bool:
    """
    If the file name is known, its extension decides; otherwise, the content.
    """
    if filename:
        return is_code_file(filename)
    return is_likely_code(text)


def is_code_file(filename: str) -> bool:
    suffix = PurePath(filename).suffix
    return suffix[1:].lower() in CODE_EXTENSIONS


def is_likely_code(text: str) -> bool:
    """
    Content heuristic. Each of the first lines may give up to two "indicators":

    * one for braces, a ``;`` (unless the line is a ``//`` comment), an arrow, or a keyword-looking
      statement start (``def``, ``let``, ``#include``...);
    * one for an assignment (``=`` but not ``==``), a pair of parentheses or a pair of brackets.

    Two indicators make the text code.
    """
    lines = text.splitlines()
    if len(lines) < MIN_LINES:
        return False

    indicators = 0
    for line in lines[:SAMPLE_LINES]:
        line = line.strip()

        if ('{' in line or '}' in line or (';' in line and not line.startswith('//')) or
                any(marker in line for marker in STATEMENT_MARKERS)):
            indicators += 1

        if (('=' in line and '==' not in line) or
                ('(' in line and ')' in line) or ('[' in line and ']' in line)):
            indicators += 1

    return indicators >= MIN_INDICATORS
