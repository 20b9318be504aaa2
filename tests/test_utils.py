import pytest

from leaderboard_proxy.utils.auth import extract_bearer_token
from leaderboard_proxy.utils.validation import to_number


@pytest.mark.parametrize('header, expected', [
    ('Bearer abc123', 'abc123'),
    ('Bearer abc123 trailing', 'abc123'),
    ('Bearer ', None),
    ('bearer abc123', None),
    ('Basic dXNlcjpwYXNz', None),
    ('', None),
    (None, None),
])
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


@pytest.mark.parametrize('value, expected', [
    (7, 7),
    (-3, -3),
    (9.0, 9),
    ('12', 12),
    (' 42 ', 42),
    ('-5', -5),
    ('1e3', 1000),
    (9.5, 9.5),
    ('-2.25', -2.25),
])
def test_to_number_accepts_finite_numbers(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize('value', [
    True, False, float('nan'), float('inf'), 'ten', '', 'NaN', None, [1], {}
])
def test_to_number_rejects(value):
    with pytest.raises(ValueError):
        to_number(value)
