import random
from collections import Counter
from itertools import permutations

import pytest

from dsadaily.strings import (
    can_form_palindrome,
    generate_ips,
    gray_code,
    largest_swap,
    remove_spaces,
    urlify,
)

SEEDS = range(15)


def _one_swaps(s):
    yield s
    chars = list(s)
    for i in range(len(chars)):
        for j in range(i + 1, len(chars)):
            swapped = chars[:]
            swapped[i], swapped[j] = swapped[j], swapped[i]
            yield "".join(swapped)


@pytest.mark.parametrize("seed", SEEDS)
def test_largest_swap_is_best_single_swap(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("0123456789") for _ in range(rng.randint(1, 7)))
    result = largest_swap(s)
    assert result == max(_one_swaps(s))
    assert sorted(result) == sorted(s)


def test_largest_swap_keeps_descending_number():
    assert largest_swap("9753") == "9753"


def test_generate_ips_single_choice():
    assert generate_ips("255255255255") == ["255.255.255.255"]


@pytest.mark.parametrize("seed", SEEDS)
def test_generate_ips_results_are_valid_and_complete(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("0125") for _ in range(rng.randint(4, 12)))
    result = generate_ips(s)
    assert len(result) == len(set(result))
    for address in result:
        parts = address.split(".")
        assert len(parts) == 4
        assert "".join(parts) == s
        for part in parts:
            assert 0 <= int(part) <= 255
            assert part == str(int(part))
    n = len(s)
    expected = set()
    for a in range(1, n):
        for b in range(a + 1, n):
            for c in range(b + 1, n):
                parts = [s[:a], s[a:b], s[b:c], s[c:]]
                if all(len(p) <= 3 and p == str(int(p)) and int(p) <= 255 for p in parts):
                    expected.add(".".join(parts))
    assert set(result) == expected


@pytest.mark.parametrize("s", ["123", "1234567890123"])
def test_generate_ips_wrong_length(s):
    assert generate_ips(s) == []


def test_generate_ips_rejects_non_digits():
    with pytest.raises(ValueError):
        generate_ips("12a4")


def test_gray_code_two_bits():
    assert gray_code(2) == ["00", "01", "11", "10"]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_gray_code_properties(n):
    codes = gray_code(n)
    assert len(codes) == 2**n
    assert len(set(codes)) == len(codes)
    assert all(len(code) == n and set(code) <= {"0", "1"} for code in codes)
    assert codes[0] == "0" * n
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_rejects_zero_bits():
    with pytest.raises(ValueError):
        gray_code(0)


@pytest.mark.parametrize("seed", SEEDS)
def test_remove_spaces_keeps_other_characters_in_order(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("ab c ") for _ in range(rng.randint(0, 12)))
    result = remove_spaces(s)
    assert " " not in result
    assert len(result) == len(s) - s.count(" ")
    remaining = iter(s)
    assert all(ch in remaining for ch in result)


@pytest.mark.parametrize("seed", SEEDS)
def test_urlify_encodes_every_space(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("ab c ") for _ in range(rng.randint(0, 12)))
    result = urlify(s)
    assert " " not in result
    assert result.count("%20") == s.count(" ")
    assert result.replace("%20", " ") == s


@pytest.mark.parametrize("seed", SEEDS)
def test_can_form_palindrome_matches_permutations(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("abc") for _ in range(rng.randint(1, 6)))
    expected = any(p == p[::-1] for p in map("".join, permutations(s)))
    assert can_form_palindrome(s) == expected


def test_can_form_palindrome_doubled_string():
    s = "xyzzyq"
    assert can_form_palindrome(s + s)
    assert not can_form_palindrome(s) or Counter(s)["q"] % 2 == 0