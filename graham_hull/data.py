import logging
import typing as t
from dataclasses import dataclass

logger = logging.getLogger(__name__)
COORD_DELIMITER = ","

Coords = t.Tuple[int, int]


class EmptyInputError(ValueError):
    """Raised when a hull is requested for a point set with no points."""


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def __str__(self) -> str:
        return f'({self.x},{self.y})'


PointLike = t.Union[Point, Coords]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def as_points(values: t.Iterable[PointLike]) -> t.List[Point]:
    return [as_point(v) for v in values]


def unique(points: t.Iterable[Point]) -> t.List[Point]:
    """Drop repeated points, keeping the first occurrence of each."""
    return list(dict.fromkeys(points))


def parse_point(text: str) -> Point:
    """
    Parse an ``X,Y`` pair of integers, e.g. ``"3,-4"``. Surrounding
    whitespace and parentheses are ignored.
    """
    fields = text.strip().strip("()").split(COORD_DELIMITER)
    if len(fields) != 2:
        raise ValueError(f'expected X{COORD_DELIMITER}Y, got {text!r}')
    x, y = fields
    return Point(int(x), int(y))


def format_hull(hull: t.Sequence[Point]) -> str:
    return "[" + ", ".join(str(p) for p in hull) + "]"
