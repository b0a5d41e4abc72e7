import pytest

from spellworks.engine.algo.string_metrics import levenshtein
from spellworks.engine.algo.suggest import Suggest, Suggestion
from spellworks.engine.data.language import ENGLISH, RUSSIAN
from spellworks.engine.dictionary import Dictionary

WORDS = ['hello', 'world', 'word', 'would', 'worlds', 'cold', 'help', 'hell', 'yellow', 'test']


@pytest.fixture
def dictionary(paths):
  return Dictionary.from_words(ENGLISH, WORDS, paths=paths)


def test_suggest(paths):
  suggest = Suggest(Dictionary.from_words(ENGLISH, ['hello', 'world'], paths=paths))
  assert [*suggest('helllo')] == ['hello']
  assert suggest.suggestions('wrold') == [Suggestion('world', 2)]


def test_far_words_excluded(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['sitting'], paths=paths)
  assert levenshtein('kitten', 'sitting') == 3
  assert [*Suggest(dictionary)('kitten')] == []


def test_top_k(paths):
  dictionary = Dictionary.from_words(ENGLISH, ['sitting', 'mitten'], paths=paths)
  assert [*Suggest(dictionary, max_suggestions=1)('kitten')] == ['mitten']


def test_distance_order_and_bound(dictionary):
  for word in ['worl', 'wold', 'helo', 'yelow', 'tset']:
    suggestions = Suggest(dictionary, max_suggestions=10).suggestions(word)
    distances = [suggestion.distance for suggestion in suggestions]
    assert distances == sorted(distances)
    assert all(distance <= 2 for distance in distances)
    assert all(levenshtein(word, s.text) == s.distance for s in suggestions)


def test_max_suggestions(dictionary):
  assert len(Suggest(dictionary, max_suggestions=10).suggestions('wold')) > 2
  assert len(Suggest(dictionary, max_suggestions=2).suggestions('wold')) == 2


def test_nothing_to_suggest(dictionary):
  suggest = Suggest(dictionary)
  assert suggest.suggestions('w') == []
  assert suggest.suggestions('') == []
  assert suggest.suggestions('12345') == []
  assert suggest.suggestions('hello') == []


def test_candidates(dictionary):
  suggest = Suggest(dictionary, length_band=1)
  assert sorted(suggest.candidates('word')) == ['cold', 'hell', 'hello', 'help', 'test', 'word', 'world', 'would']

  assert len(Suggest(dictionary, max_candidates=3).candidates('word')) == 3


def test_parallel_same_as_inline(paths):
  words = [f'w{a}{b}rd' for a in 'abcdefghij' for b in 'abcdefghijklmnopqrstuvwxyz']
  dictionary = Dictionary.from_words(ENGLISH, words, paths=paths)

  inline = Suggest(dictionary, max_suggestions=50, parallel_threshold=10_000).suggestions('wzzrd')
  parallel = Suggest(dictionary, max_suggestions=50, parallel_threshold=1, max_workers=4).suggestions('wzzrd')

  assert parallel == inline
  assert len(inline) == 50
  assert [s.distance for s in inline[:10]] == [1] * 10


def test_multibyte(paths):
  dictionary = Dictionary.from_words(RUSSIAN, ['привет', 'мир'], paths=paths)
  assert [*Suggest(dictionary)('привт')] == ['привет']


def test_pool_reused_until_closed(paths):
  words = [f'w{a}{b}rd' for a in 'abcdefghij' for b in 'abcdefghijklmnopqrstuvwxyz']
  dictionary = Dictionary.from_words(ENGLISH, words, paths=paths)

  with Suggest(dictionary, parallel_threshold=1, max_workers=2) as suggest:
    first = suggest.suggestions('wzzrd')
    pool = suggest.executor()
    assert suggest.suggestions('wzzrd') == first
    assert suggest.executor() is pool

  assert suggest.suggestions('wzzrd') == first
  suggest.close()
