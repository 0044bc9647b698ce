import pytest

from randpw import generator
from randpw.generator import (
    Generator,
    insert_shuffled,
    random_element,
    uniform_random_index,
    uniform_random_index_inclusive,
)


def test_uniform_random_index_range():
    for n in range(1, 200):
        r = uniform_random_index(n)
        assert 0 <= r < n


def test_uniform_random_index_inclusive_range():
    for n in range(0, 200):
        r = uniform_random_index_inclusive(n)
        assert 0 <= r <= n


def test_uniform_random_index_rejects_non_positive():
    with pytest.raises(ValueError):
        uniform_random_index(0)
    with pytest.raises(ValueError):
        uniform_random_index(-3)


def test_uniform_random_index_chi_square():
    # n=6 does not divide any power of two, so naive modulo reduction would skew it
    n, samples = 6, 60000
    counts = [0] * n
    for _ in range(samples):
        counts[uniform_random_index(n)] += 1
    assert all(counts)
    expected = samples / n
    chi2 = sum((c - expected) ** 2 / expected for c in counts)
    # 5 degrees of freedom, p = 0.0001
    assert chi2 < 25.74


def test_random_element():
    for s in ("1", "12", "abc", "@#$%^&*()!"):
        assert random_element(s) in s


def test_insert_shuffled_keeps_elements():
    chars = []
    for c in "abcdefghij":
        insert_shuffled(chars, c)
    assert sorted(chars) == list("abcdefghij")


def test_insert_shuffled_positions(monkeypatch):
    picks = iter([0, 0, 1])
    monkeypatch.setattr(generator, "uniform_random_index_inclusive", lambda m: next(picks))
    chars = []
    insert_shuffled(chars, "a")  # ['a']
    insert_shuffled(chars, "b")  # 'b' at 0, 'a' to the end
    insert_shuffled(chars, "c")  # 'c' at 1, 'a' to the end
    assert chars == ["b", "c", "a"]


def test_insert_shuffled_uniform_permutations():
    seen = {}
    trials = 12000
    for _ in range(trials):
        chars = []
        for c in "abc":
            insert_shuffled(chars, c)
        key = "".join(chars)
        seen[key] = seen.get(key, 0) + 1
    assert len(seen) == 6
    expected = trials / 6
    chi2 = sum((c - expected) ** 2 / expected for c in seen.values())
    assert chi2 < 25.74


def test_entropy_failure_propagates(monkeypatch):
    def broken(n):
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(generator, "randbelow", broken)
    g = Generator()
    with pytest.raises(OSError, match="entropy source unavailable"):
        g.generate(1, 1, 1, 1)
    with pytest.raises(OSError, match="entropy source unavailable"):
        g.generate_length(4)
