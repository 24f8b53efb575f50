import pytest

from daakit.searching import (
    HitKind,
    RabinKarpHit,
    binary_search,
    compute_lps,
    kmp_search,
    rabin_karp,
)


@pytest.mark.parametrize(
    "values, key",
    [([5, 1, 9, 3, 7], 9), ([5, 1, 9, 3, 7], 1), ([4], 4), ([2, 2, 2, 8], 2), ([-3, 10, 0], 0)],
)
def test_binary_search_finds_key_in_sorted_order(values, key):
    index = binary_search(values, key)
    assert sorted(values)[index] == key


@pytest.mark.parametrize("values, key", [([], 3), ([1, 2, 4], 3), ([1, 2, 4], 9), ([1, 2, 4], -1)])
def test_binary_search_missing_key(values, key):
    assert binary_search(values, key) is None


def test_binary_search_every_element_found():
    values = [17, 3, 99, 42, 8, 56, 23]
    ordered = sorted(values)
    for value in values:
        assert ordered[binary_search(values, value)] == value


def test_compute_lps_classic():
    assert compute_lps("AAACAAAA") == [0, 1, 2, 0, 1, 2, 3, 3]


def test_compute_lps_empty_and_single():
    assert compute_lps("") == []
    assert compute_lps("x") == [0]


def test_compute_lps_invariant():
    pattern = "abacabadabacaba"
    for i, length in enumerate(compute_lps(pattern)):
        prefix = pattern[: i + 1]
        assert length <= i
        assert prefix[:length] == prefix[len(prefix) - length:]


def test_kmp_search_classic():
    assert kmp_search("AABAACAADAABAABA", "AABA") == [1, 10, 13]


@pytest.mark.parametrize(
    "text, pattern",
    [("aaaaa", "aa"), ("abcabcabc", "abc"), ("hello", "xyz"), ("ab", "abc"), ("abababa", "aba")],
)
def test_kmp_positions_are_exactly_the_occurrences(text, pattern):
    positions = kmp_search(text, pattern)
    expected = [i + 1 for i in range(len(text)) if text.startswith(pattern, i)]
    assert positions == expected


def test_kmp_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


def test_rabin_karp_textbook_example():
    hits = rabin_karp("2359023141526739921", "31415", 13)
    assert hits == [
        RabinKarpHit(HitKind.MATCH, 7),
        RabinKarpHit(HitKind.SPURIOUS, 13),
    ]


def test_rabin_karp_hits_are_consistent():
    text = "123412341234999123"
    pattern = "123"
    modulus = 7
    hits = rabin_karp(text, pattern, modulus)
    for hit in hits:
        window = text[hit.position - 1: hit.position - 1 + len(pattern)]
        assert int(window) % modulus == int(pattern) % modulus
        assert (hit.kind is HitKind.MATCH) == (window == pattern)


def test_rabin_karp_matches_agree_with_kmp():
    text = "31415926535897932384626433832795"
    pattern = "3"
    matches = [h.position for h in rabin_karp(text, pattern) if h.kind is HitKind.MATCH]
    assert matches == kmp_search(text, pattern)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("12", "12345") == []


@pytest.mark.parametrize("text, pattern", [("12a4", "12"), ("1234", "1b"), ("1234", "")])
def test_rabin_karp_rejects_non_digits(text, pattern):
    with pytest.raises(ValueError):
        rabin_karp(text, pattern)


def test_rabin_karp_rejects_bad_modulus():
    with pytest.raises(ValueError):
        rabin_karp("1234", "23", 0)