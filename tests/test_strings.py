from collections import Counter

from hypothesis import given, strategies as st

from drills.strings import group_anagrams, is_anagram, is_subsequence, rotate_string

words = st.text(alphabet="abcde", max_size=8)


@given(words, st.randoms())
def test_is_anagram_of_shuffle(s, rnd):
    chars = list(s)
    rnd.shuffle(chars)
    assert is_anagram(s, "".join(chars))


@given(words)
def test_is_anagram_detects_extra_char(s):
    assert not is_anagram(s, s + "z")


@given(words, st.data())
def test_is_subsequence_of_kept_chars(t, data):
    keep = data.draw(st.lists(st.booleans(), min_size=len(t), max_size=len(t)))
    s = "".join(c for c, k in zip(t, keep) if k)
    assert is_subsequence(s, t)


@given(words)
def test_is_subsequence_longer_fails(t):
    assert not is_subsequence(t + "a", t)


@given(words)
def test_empty_is_subsequence(t):
    assert is_subsequence("", t)


def test_is_subsequence_order_matters():
    assert is_subsequence("ace", "abcde")
    assert not is_subsequence("aec", "abcde")


@given(st.lists(words, max_size=15))
def test_group_anagrams_partitions_input(strs):
    groups = group_anagrams(strs)
    flat = [w for g in groups for w in g]
    assert Counter(flat) == Counter(strs)
    keys = [sorted(g[0]) for g in groups]
    for group, key in zip(groups, keys):
        assert all(sorted(w) == key for w in group)
    assert len({"".join(k) for k in keys}) == len(groups)


@given(st.lists(words, min_size=1, max_size=15))
def test_group_anagrams_first_seen_order(strs):
    groups = group_anagrams(strs)
    assert groups[0][0] == strs[0]


@given(st.text(alphabet="abc", min_size=1, max_size=10), st.data())
def test_rotate_string_any_shift(s, data):
    k = data.draw(st.integers(0, len(s) - 1))
    assert rotate_string(s, s[k:] + s[:k])


@given(words)
def test_rotate_string_length_mismatch(s):
    assert not rotate_string(s, s + "a")


def test_rotate_string_empty_is_not_rotation():
    assert not rotate_string("", "")


def test_rotate_string_same_letters_wrong_order():
    assert not rotate_string("abcde", "abced")