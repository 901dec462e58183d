import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.queues import RecentCounter, predict_party_victory


def test_recent_counter_example():
    counter = RecentCounter()
    assert [counter.ping(t) for t in (1, 100, 3001, 3002)] == [1, 2, 3, 3]


@given(st.integers(0, 10**6), st.integers(1, 20))
def test_recent_counter_spaced_pings(start, count):
    counter = RecentCounter()
    assert all(counter.ping(start + i * 3001) == 1 for i in range(count))


@given(st.integers(0, 10**6), st.integers(1, 50))
def test_recent_counter_same_time(t, count):
    counter = RecentCounter()
    assert [counter.ping(t) for _ in range(count)] == list(range(1, count + 1))


def test_recent_counter_window_edge_is_inclusive():
    counter = RecentCounter()
    counter.ping(0)
    assert counter.ping(3000) == 2
    assert counter.ping(3001) == 2


@pytest.mark.parametrize(
    "senate, expected",
    [("RD", "Radiant"), ("RDD", "Dire"), ("DR", "Dire"), ("", "Dire"), ("XD", "Radiant")],
)
def test_predict_party_victory_cases(senate, expected):
    assert predict_party_victory(senate) == expected


@given(st.integers(1, 30))
def test_uniform_senate(n):
    assert predict_party_victory("R" * n) == "Radiant"
    assert predict_party_victory("D" * n) == "Dire"


@given(st.text(alphabet="RD", min_size=1, max_size=30))
def test_swapping_parties_swaps_winner(senate):
    swapped = senate.translate(str.maketrans("RD", "DR"))
    winners = {predict_party_victory(senate), predict_party_victory(swapped)}
    assert winners == {"Radiant", "Dire"}