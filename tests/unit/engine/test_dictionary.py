import logging
import shutil

import pytest

from spellworks.engine.data.language import ENGLISH, FRENCH, JAPANESE
from spellworks.engine.dictionary import Dictionary
from spellworks.engine.errors import DictionaryIOError, PersistenceError


def test_load(paths, english_dictionary):
  dictionary = Dictionary(ENGLISH, paths=paths).load()

  assert dictionary.loaded
  assert 'hello' in dictionary.words
  assert 'paris' in dictionary.words
  assert 'a' not in dictionary.words
  assert '' not in dictionary.words
  assert dictionary.word_count == 29


def test_load_is_idempotent(paths, make_dictionary):
  make_dictionary(['hello'])
  dictionary = Dictionary(ENGLISH, paths=paths).load()
  make_dictionary(['hello', 'world'])

  assert dictionary.load() is dictionary
  assert dictionary.words == {'hello'}


def test_load_missing(paths, caplog):
  with caplog.at_level(logging.WARNING):
    dictionary = Dictionary(FRENCH, paths=paths).load()

  assert dictionary.loaded
  assert dictionary.words == set()
  assert 'No dictionary file for French' in caplog.text


def test_load_broken(paths, fixtures, caplog):
  shutil.copy(fixtures / 'broken-utf8.txt', paths.dictionary_file(ENGLISH))

  with caplog.at_level(logging.WARNING):
    dictionary = Dictionary(ENGLISH, paths=paths).load()

  assert dictionary.words == set()
  assert 'Could not read dictionary' in caplog.text


def test_load_overlays(paths, make_dictionary):
  make_dictionary(['hello'])
  paths.user_dir.mkdir()
  paths.user_file(ENGLISH).write_text('Spylls\n', encoding='utf-8')
  paths.ignored_file(ENGLISH).write_text('wrold\n', encoding='utf-8')

  dictionary = Dictionary(ENGLISH, paths=paths).load()

  assert dictionary.words == {'hello', 'spylls'}
  assert dictionary.user_words == {'spylls'}
  assert dictionary.ignored_words == {'wrold'}


def test_contains(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['Hello', 'world'], paths=paths)

  assert dictionary.contains('hello')
  assert dictionary.contains('HELLO')
  assert not dictionary.contains('helo')

  # too short to check
  assert dictionary.contains('')
  assert dictionary.contains('x')
  # digits
  assert dictionary.contains('abc123')


def test_contains_ignored(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)
  dictionary.ignored_words.add('wrold')
  assert dictionary.contains('Wrold')


def test_contains_case_sensitive(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)
  assert dictionary.contains('hello', case_sensitive=True)
  assert not dictionary.contains('Hello', case_sensitive=True)


def test_contains_normalization_invariant(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello', 'Straße', 'İstanbul'], paths=paths)
  for word in ['hello', 'HeLLo', 'STRASSE', 'Straße', 'wrold', 'İstanbul', 'ISTANBUL']:
    assert dictionary.contains(word) == dictionary.contains(word.lower())


def test_contains_cjk(paths):
  dictionary = Dictionary.from_words(JAPANESE, ['東京', 'Tokyo'], paths=paths)
  assert dictionary.contains('東京')
  assert dictionary.contains('Tokyo')
  assert not dictionary.contains('tokyo')
  assert not dictionary.contains('京都')
  assert not dictionary.contains('東京1')


def test_add_word(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello', 'world'], paths=paths)
  dictionary.ignored_words.add('spylls')

  assert dictionary.add_word('Spylls')

  assert 'spylls' in dictionary.words
  assert dictionary.user_words == {'spylls'}
  assert dictionary.ignored_words == set()
  assert paths.user_file(ENGLISH).read_text(encoding='utf-8') == 'spylls\n'
  assert paths.ignored_file(ENGLISH).read_text(encoding='utf-8') == ''


def test_add_word_too_short(paths):
  dictionary = Dictionary.from_words(ENGLISH, [], paths=paths)
  assert not dictionary.add_word('x')
  assert not paths.user_file(ENGLISH).exists()


def test_add_word_persistence_error(tmp_path, paths):
  paths.user_dir = tmp_path / 'blocker'
  paths.user_dir.write_text('not a directory')
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)

  with pytest.raises(PersistenceError) as error:
    dictionary.add_word('spylls')

  assert error.value.word == 'spylls'
  assert isinstance(error.value.__cause__, OSError)
  # no rollback
  assert 'spylls' in dictionary.words


def test_save_overlays_after_failure(tmp_path, paths):
  good_dir = paths.user_dir
  paths.user_dir = tmp_path / 'blocker'
  paths.user_dir.write_text('not a directory')
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)

  with pytest.raises(PersistenceError):
    dictionary.add_word('spylls')

  paths.user_dir = good_dir
  dictionary.save_overlays()
  assert paths.user_file(ENGLISH).read_text(encoding='utf-8') == 'spylls\n'


def test_remove_word(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello', 'world'], paths=paths)
  dictionary.add_word('spylls')

  assert dictionary.remove_word('Spylls')
  assert dictionary.remove_word('world')
  assert not dictionary.remove_word('missing')

  assert dictionary.words == {'hello'}
  assert paths.user_file(ENGLISH).read_text(encoding='utf-8') == ''


def test_ignore_word(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)

  assert dictionary.ignore_word('Wrold')
  assert dictionary.ignored_count == 1
  assert dictionary.contains('wrold')
  assert paths.ignored_file(ENGLISH).read_text(encoding='utf-8') == 'wrold\n'

  dictionary.clear_ignored()
  assert not dictionary.contains('wrold')
  assert paths.ignored_file(ENGLISH).read_text(encoding='utf-8') == ''


def test_merge(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)
  assert dictionary.merge(['Hello', 'World', ' spaced ', 'x']) == 2
  assert dictionary.words == {'hello', 'world', 'spaced'}
  assert dictionary.user_words == set()


def test_export(paths, tmp_path):
  dictionary = Dictionary.from_words(ENGLISH, ['world', 'hello'], paths=paths)
  dictionary.export(tmp_path / 'out' / 'words.txt')
  assert (tmp_path / 'out' / 'words.txt').read_text(encoding='utf-8') == 'hello\nworld\n'


def test_export_and_load_back(paths, english_dictionary, tmp_path):
  dictionary = Dictionary(ENGLISH, paths=paths).load()
  dictionary.export(tmp_path / 'words.txt')

  fresh = Dictionary(ENGLISH, paths=paths)
  fresh.load_file(tmp_path / 'words.txt')
  assert fresh.words == dictionary.words


def test_export_error(paths, tmp_path):
  (tmp_path / 'blocker').write_text('not a directory')
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)
  with pytest.raises(DictionaryIOError):
    dictionary.export(tmp_path / 'blocker' / 'words.txt')


def test_copy(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['hello'], paths=paths)
  snapshot = dictionary.copy()
  snapshot.words.add('world')
  snapshot.ignored_words.add('wrold')

  assert dictionary.words == {'hello'}
  assert dictionary.ignored_words == set()
  assert snapshot.language == ENGLISH
