import shutil
from pathlib import Path

import pytest

from spellworks.engine import SpellChecker, CheckerConfig, ResourcePaths, ENGLISH

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixtures():
  return FIXTURES


@pytest.fixture
def paths(tmp_path):
  dictionary_dir = tmp_path / 'dictionary'
  dictionary_dir.mkdir()
  return ResourcePaths(dictionary_dir, tmp_path / 'user')


@pytest.fixture
def make_dictionary(paths):
  def make(words, language=ENGLISH):
    path = paths.dictionary_file(language)
    path.write_text(''.join(word + '\n' for word in words), encoding='utf-8')
    return path

  return make


@pytest.fixture
def english_dictionary(paths):
  return shutil.copy(FIXTURES / 'dictionary(eng).txt', paths.dictionary_file(ENGLISH))


@pytest.fixture
def make_checker(paths, make_dictionary):
  def make(words=None, language=ENGLISH, **settings):
    if words is not None:
      make_dictionary(words, language)
    return SpellChecker(language, config=CheckerConfig(paths=paths, **settings))

  return make
