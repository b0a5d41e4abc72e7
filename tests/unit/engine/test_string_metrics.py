import pytest

from spellworks.engine.algo.string_metrics import levenshtein, length_difference


def full_matrix(s1, s2):
  d = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
  for i in range(len(s1) + 1):
    d[i][0] = i
  for j in range(len(s2) + 1):
    d[0][j] = j
  for i in range(1, len(s1) + 1):
    for j in range(1, len(s2) + 1):
      d[i][j] = min(d[i-1][j] + 1, d[i][j-1] + 1, d[i-1][j-1] + (s1[i-1] != s2[j-1]))
  return d[len(s1)][len(s2)]


def test_reference_values():
  assert levenshtein('kitten', 'sitting') == 3
  assert levenshtein('flaw', 'lawn') == 2
  assert levenshtein('wrold', 'world') == 2
  assert levenshtein('helllo', 'hello') == 1


def test_same_and_empty():
  assert levenshtein('same', 'same') == 0
  assert levenshtein('', '') == 0
  assert levenshtein('', 'abc') == 3
  assert levenshtein('abc', '') == 3
  assert levenshtein('', '東京') == 2


def test_characters_not_bytes():
  assert levenshtein('кот', 'кит') == 1
  assert levenshtein('café', 'cafe') == 1
  assert levenshtein('東京', '京都') == 2


@pytest.mark.parametrize('s1,s2', [
  ('kitten', 'sitting'),
  ('sunday', 'saturday'),
  ('abc', 'cab'),
  ('intention', 'execution'),
  ('a', 'ab'),
  ('receive', 'recieve'),
])
def test_matches_full_matrix(s1, s2):
  assert levenshtein(s1, s2) == full_matrix(s1, s2)
  assert levenshtein(s2, s1) == full_matrix(s1, s2)


def test_length_difference_is_lower_bound():
  for s1, s2 in [('kitten', 'sitting'), ('a', 'abcd'), ('same', 'same')]:
    assert length_difference(s1, s2) <= levenshtein(s1, s2)
