import io

import pytest

from spellworks.engine.readers import BaseReader, FileReader


def test_base_reader():
  reader = BaseReader(io.StringIO('\ufefffoo\n\n  bar  \nbaz'))
  assert [*reader] == [(1, 'foo'), (3, 'bar'), (4, 'baz')]


def test_file_reader(fixtures):
  with FileReader(fixtures / 'bom-wordlist.txt') as reader:
    assert [*reader] == [(1, 'cat'), (3, 'dog'), (5, 'mouse')]


def test_file_reader_broken(fixtures):
  with FileReader(fixtures / 'broken-utf8.txt') as reader:
    with pytest.raises(UnicodeDecodeError):
      [*reader]


def test_file_reader_missing(tmp_path):
  with pytest.raises(OSError):
    FileReader(tmp_path / 'nope.txt')
