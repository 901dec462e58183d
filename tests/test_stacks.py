import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.stacks import asteroid_collision, decode_string, is_valid, remove_stars

words = st.text(alphabet="abcxyz", max_size=10)

balanced = st.recursive(
    st.just(""),
    lambda inner: st.tuples(st.sampled_from(["()", "[]", "{}"]), inner, inner).map(
        lambda t: t[0][0] + t[1] + t[0][1] + t[2]
    ),
    max_leaves=20,
)


def test_asteroid_examples():
    assert asteroid_collision([5, 10, -5]) == [5, 10]
    assert asteroid_collision([10, 2, -5]) == [10]


def test_asteroid_equal_sizes_destroy_each_other():
    assert asteroid_collision([8, -8]) == []


@given(st.lists(st.integers(1, 100), max_size=30))
def test_asteroid_same_direction_unchanged(items):
    assert asteroid_collision(items) == items
    negatives = [-x for x in items]
    assert asteroid_collision(negatives) == negatives


@given(st.lists(st.integers(-100, 100).filter(bool), max_size=30))
def test_asteroid_result_is_stable(items):
    result = asteroid_collision(items)
    remaining = iter(items)
    assert all(x in remaining for x in result)
    assert not any(a > 0 and b < 0 for a, b in zip(result, result[1:]))
    assert asteroid_collision(result) == result


def test_decode_example():
    assert decode_string("3[a]2[bc]") == "aaabcbc"


@given(words, st.integers(0, 20))
def test_decode_repeats_group(word, count):
    assert decode_string(f"{count}[{word}]") == word * count


@given(words, words, st.integers(0, 5), st.integers(0, 5))
def test_decode_nested(outer, inner, k1, k2):
    assert decode_string(f"{k1}[{outer}{k2}[{inner}]]") == (outer + inner * k2) * k1


@given(words)
def test_decode_plain_text_unchanged(word):
    assert decode_string(word) == word


def test_decode_stops_at_stray_closing_bracket():
    assert decode_string("ab]cd") == "ab"


@given(words, words)
def test_remove_stars_erases_suffix(prefix, suffix):
    assert remove_stars(prefix + suffix + "*" * len(suffix)) == prefix


def test_remove_stars_without_character_raises():
    with pytest.raises(ValueError):
        remove_stars("a**")


@pytest.mark.parametrize(
    "s, expected",
    [("()", True), ("()[]{}", True), ("{[]}", True), ("(]", False), ("([)]", False),
     ("(", False), (")", False)],
)
def test_is_valid_cases(s, expected):
    assert is_valid(s) is expected


@given(balanced)
def test_balanced_strings_are_valid(s):
    assert is_valid(s) is True
    assert is_valid(s + "(") is False