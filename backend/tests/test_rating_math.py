import pytest

from storerate.utils.ratings import average_rating, rating_histogram


@pytest.mark.parametrize("total,count,expected", [
    (0, 0, 0.0),
    (None, None, 0.0),
    (5, 1, 5.0),
    (9, 2, 4.5),
    (7, 4, 1.8),
    (17, 4, 4.3),
    (10, 3, 3.3),
    (11, 3, 3.7),
])
def test_average_rating(total, count, expected):
    assert average_rating(total, count) == expected


def test_histogram_has_every_bucket():
    assert rating_histogram([]) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


def test_histogram_counts_scores():
    assert rating_histogram([5, 5, 1, 3, 5]) == {1: 1, 2: 0, 3: 1, 4: 0, 5: 3}


def test_histogram_ignores_out_of_range_scores():
    assert rating_histogram([0, 6, 2]) == {1: 0, 2: 1, 3: 0, 4: 0, 5: 0}
