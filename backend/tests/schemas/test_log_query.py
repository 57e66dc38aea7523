"""LogQuery — lenient limit parsing for GET /api/exercise/log."""

import pytest

from app.schemas.exercise import LogQuery


@pytest.mark.parametrize("raw, expected", [
    (None, None),
    ("", None),
    ("abc", None),
    ("0", None),
    ("nan", None),
    ("inf", None),
    ("3", 3),
    (3, 3),
    ("2.9", 2),
    ("-4", 4),
    ("1e30", None),
    ("-1e30", None),
    (str(2**63), None),
    ("1e18", 10**18),
])
def test_limit_parsing(raw, expected):
    assert LogQuery(user_id="u", limit=raw).limit == expected


def test_defaults():
    query = LogQuery()
    assert query.user_id is None
    assert query.start is None and query.end is None
    assert query.limit is None
