import pytest

from graham_hull import data
from graham_hull.data import Point


def test_point_is_a_value():
    assert Point(1, 2) == Point(1, 2)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1, 2), Point(0, 0)}) == 2
    assert Point(1, 2).coords == (1, 2)
    assert str(Point(-1, 2)) == '(-1,2)'


def test_point_is_frozen():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_as_point():
    p = Point(3, 4)
    assert data.as_point(p) is p
    assert data.as_point((3, 4)) == p
    assert data.as_points([(0, 0), Point(1, 1)]) == [Point(0, 0), Point(1, 1)]


def test_unique_keeps_first_occurrence():
    pts = [Point(2, 2), Point(0, 0), Point(2, 2), Point(1, 1), Point(0, 0)]
    assert data.unique(pts) == [Point(2, 2), Point(0, 0), Point(1, 1)]


@pytest.mark.parametrize('text, expected', [
    ('3,4', Point(3, 4)),
    (' -1,2', Point(-1, 2)),
    ('(5, -6)', Point(5, -6)),
])
def test_parse_point(text, expected):
    assert data.parse_point(text) == expected


@pytest.mark.parametrize('text', ['3', '1,2,3', 'a,b', '1.5,2'])
def test_parse_point_invalid(text):
    with pytest.raises(ValueError):
        data.parse_point(text)


def test_format_hull():
    hull = [Point(0, 0), Point(3, 0), Point(3, 3), Point(0, 3)]
    assert data.format_hull(hull) == '[(0,0), (3,0), (3,3), (0,3)]'
    assert data.format_hull([]) == '[]'


def test_empty_input_error_is_value_error():
    assert issubclass(data.EmptyInputError, ValueError)
