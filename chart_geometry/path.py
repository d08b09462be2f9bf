from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union


class Point(NamedTuple):
    x: float
    y: float

    def distance(self, other: Tuple[float, float]) -> float:
        return ((other[0] - self.x) ** 2 + (other[1] - self.y) ** 2) ** 0.5

    def midpoint(self, other: Tuple[float, float]) -> "Point":
        return Point((self.x + other[0]) / 2, (self.y + other[1]) / 2)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Move:
    to: Point


@dataclass(frozen=True)
class Line:
    to: Point


@dataclass(frozen=True)
class QuadCurve:
    to: Point
    control: Point


@dataclass(frozen=True)
class CubicCurve:
    to: Point
    control1: Point
    control2: Point


@dataclass(frozen=True)
class Close:
    pass


Element = Union[Move, Line, QuadCurve, CubicCurve, Close]


@dataclass
class RenderedPath:
    """
    Ordered drawing elements in device space.

    Built once per layout pass by the path builder and handed to the caller;
    the append helpers exist for building, not for editing a finished path.
    """
    elements: List[Element] = field(default_factory=list)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def is_closed(self) -> bool:
        return any(isinstance(e, Close) for e in self.elements)

    def move_to(self, x: float, y: float) -> "RenderedPath":
        self.elements.append(Move(Point(float(x), float(y))))
        return self

    def line_to(self, x: float, y: float) -> "RenderedPath":
        self.elements.append(Line(Point(float(x), float(y))))
        return self

    def quad_to(self, to: Tuple[float, float], control: Tuple[float, float]) -> "RenderedPath":
        self.elements.append(QuadCurve(Point(*map(float, to)), Point(*map(float, control))))
        return self

    def curve_to(
        self,
        to: Tuple[float, float],
        control1: Tuple[float, float],
        control2: Tuple[float, float],
    ) -> "RenderedPath":
        self.elements.append(
            CubicCurve(Point(*map(float, to)), Point(*map(float, control1)), Point(*map(float, control2)))
        )
        return self

    def close(self) -> "RenderedPath":
        self.elements.append(Close())
        return self

    def segments(self) -> Iterator[Tuple[Point, Element, Optional[Point]]]:
        """
        Yield (start, element, subpath_start) for every element.

        A Close carries the subpath start so callers can measure the closing
        edge. A Close with no open subpath yields subpath_start=None.
        """
        cur = ORIGIN
        start: Optional[Point] = None
        for e in self.elements:
            if isinstance(e, Move):
                if start is None:
                    start = e.to
                yield cur, e, start
                cur = e.to
            elif isinstance(e, Close):
                yield cur, e, start
                if start is not None:
                    cur = start
                start = None
            else:
                if start is None:
                    start = cur
                yield cur, e, start
                cur = e.to

    def end_points(self) -> List[Point]:
        return [e.to for e in self.elements if not isinstance(e, Close)]
