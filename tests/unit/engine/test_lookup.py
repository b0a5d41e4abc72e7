import pytest

from spellworks.engine.algo.lookup import Lookup, confidence, looks_reasonable
from spellworks.engine.cache import CorrectnessCache
from spellworks.engine.data.analysis import WordType as T
from spellworks.engine.data.language import ENGLISH
from spellworks.engine.dictionary import Dictionary


@pytest.fixture
def dictionary(paths):
  return Dictionary.from_words(ENGLISH, ['hello', 'world', 'receive'], paths=paths)


def make_lookup(dictionary, ignored=(), **kwargs):
  return Lookup(dictionary, CorrectnessCache(), set(ignored), **kwargs)


def test_confidence():
  assert confidence('wrold', T.NORMAL) == pytest.approx(0.6)
  assert confidence('recieve', T.NORMAL) == pytest.approx(0.78)
  assert confidence('Helllo', T.PROPER_NOUN) == pytest.approx(0.3)
  assert confidence('QWRT', T.ACRONYM) == pytest.approx(0.2)
  assert confidence('well-knwon', T.TECHNICAL_TERM) == pytest.approx(0.44)


def test_confidence_code_identifiers():
  assert confidence('fooBar', T.CODE_IDENTIFIER, is_code=True) == pytest.approx(0.15)
  assert confidence('fooBar', T.CODE_IDENTIFIER, is_code=False) == pytest.approx(0.4)
  assert confidence('foo_bar', T.CODE_IDENTIFIER, is_code=True) == pytest.approx(0.165)


def test_confidence_length():
  assert confidence('xy', T.NORMAL) == pytest.approx(0.18)
  assert confidence('abcdefghijklmnopqrstuvw', T.NORMAL) == pytest.approx(0.42)


def test_confidence_other_categories():
  assert confidence('12345', T.NUMBER) == pytest.approx(0.1)


def test_confidence_range():
  for word in ['recieve-ment_ough', 'x', 'tionsionableiblementness']:
    for word_type in T:
      assert 0.0 <= confidence(word, word_type) <= 1.0


def test_looks_reasonable():
  assert looks_reasonable('Paris')
  assert looks_reasonable('XML')
  assert looks_reasonable('Xqzt')
  assert not looks_reasonable('Bcdfgh')
  assert not looks_reasonable('Aaaaaab')
  assert not looks_reasonable('A1b2c3')
  assert not looks_reasonable('Supercalifragilisticexpial')
  assert looks_reasonable('Supercalifragilisticexpia')


def test_dictionary_words(dictionary):
  lookup = make_lookup(dictionary)
  verdict = lookup('hello', T.NORMAL)
  assert verdict.correct
  assert verdict.confidence == 1.0
  assert not verdict.reported
  assert lookup('Hello', T.PROPER_NOUN).correct


def test_low_confidence_not_reported(dictionary):
  verdict = make_lookup(dictionary)('wrold', T.NORMAL)
  assert not verdict.correct
  assert verdict.confidence == pytest.approx(0.6)
  assert not verdict.reported


def test_confident_reported(dictionary):
  verdict = make_lookup(dictionary)('recieve', T.NORMAL)
  assert not verdict.correct
  assert verdict.reported


def test_threshold(dictionary):
  assert make_lookup(dictionary, threshold=0.5)('wrold', T.NORMAL).reported
  assert not make_lookup(dictionary, threshold=0.9)('recieve', T.NORMAL).reported


def test_leniency(dictionary):
  lookup = make_lookup(dictionary)
  assert lookup('Helllo', T.PROPER_NOUN).correct
  assert lookup('QWRT', T.ACRONYM).correct
  assert lookup('getValeu', T.CODE_IDENTIFIER, is_code=True).correct
  assert not lookup('averyveryverylongidentifier', T.CODE_IDENTIFIER, is_code=True).correct
  assert not lookup('Bcdfghjk', T.PROPER_NOUN).correct


def test_strict(dictionary):
  lookup = make_lookup(dictionary, heuristics=False)
  verdict = lookup('Helllo', T.PROPER_NOUN)
  assert not verdict.correct
  assert verdict.reported
  assert lookup('wrold', T.NORMAL).reported
  assert not lookup('hello', T.NORMAL).reported


def test_ignored_and_user_words(dictionary):
  dictionary.user_words.add('spylls')
  lookup = make_lookup(dictionary, ignored=['wrold'])
  assert lookup('wrold', T.NORMAL).correct
  assert lookup('Wrold', T.PROPER_NOUN).correct
  assert lookup('spylls', T.NORMAL).correct
  assert len(lookup.cache) == 0


def test_caches_verdicts(dictionary):
  lookup = make_lookup(dictionary, heuristics=False)
  lookup('wrold', T.NORMAL)
  lookup('Hello', T.PROPER_NOUN)
  assert lookup.cache.get('eng_wrold') is False
  assert lookup.cache.get('eng_hello') is True


def test_uses_cached_verdicts(dictionary):
  lookup = make_lookup(dictionary, heuristics=False)
  lookup.cache.put('eng_wrold', True)
  assert lookup('wrold', T.NORMAL).correct


def test_case_sensitive(dictionary):
  lookup = make_lookup(dictionary, case_sensitive=True, heuristics=False)
  assert lookup('hello', T.NORMAL).correct
  assert not lookup('HELLO', T.PROPER_NOUN).correct
  assert lookup.cache.get('eng_hello') is True
  assert lookup.cache.get('eng_HELLO') is False
  assert lookup('hello', T.NORMAL).correct


def test_leniency_is_per_occurrence(dictionary):
  lookup = make_lookup(dictionary)
  assert lookup('Recieve', T.PROPER_NOUN).correct
  assert lookup.cache.get('eng_recieve') is False
  assert lookup('recieve', T.NORMAL).reported

  assert lookup('fooBar', T.CODE_IDENTIFIER, is_code=True).correct
  assert not lookup('fooBar', T.NORMAL).correct
