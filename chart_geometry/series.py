from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

Number = Union[int, float]
Color = Union[Tuple[int, int, int], str]
ColorFn = Callable[[float], Color]


@dataclass(frozen=True)
class Sample:
    value: float
    label: str = ""


@dataclass(frozen=True)
class DrawSize:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Draw size must be non-negative; got {self.width}x{self.height}")


@dataclass(frozen=True)
class Bounds:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise ValueError(f"Bounds max ({self.max}) must be >= min ({self.min})")

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min

    @property
    def spans_zero(self) -> bool:
        return self.min <= 0 <= self.max

    @classmethod
    def of(cls, values: Sequence[float]) -> Optional["Bounds"]:
        if not values:
            return None
        return cls(float(min(values)), float(max(values)))

    def widened(self, values: Sequence[float]) -> "Bounds":
        """Grow to include the data extent; supplied bounds never narrow the data."""
        if not values:
            return self
        return Bounds(min(self.min, float(min(values))), max(self.max, float(max(values))))


def resolve_bounds(values: Sequence[float], bounds: Optional[Bounds] = None) -> Bounds:
    if bounds is not None:
        return bounds.widened(values)
    return Bounds.of(values) or Bounds(0.0, 0.0)


@dataclass
class SampleSeries:
    """
    Ordered chart samples. The x position of a sample is its index.

    `labels_given` records whether the caller supplied labels, which decides
    whether the magnifier shows a label line above the value.
    """
    samples: List[Sample] = field(default_factory=list)
    labels_given: bool = False
    # Optional explicit bounds; the data extent always wins when larger.
    min_y: Optional[float] = None
    max_y: Optional[float] = None
    color_for: Optional[ColorFn] = None

    @classmethod
    def from_values(cls, values: Iterable[Number], **kw) -> "SampleSeries":
        return cls([Sample(float(v)) for v in values], **kw)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Number]], **kw) -> "SampleSeries":
        return cls([Sample(float(v), str(lbl)) for lbl, v in pairs], labels_given=True, **kw)

    @classmethod
    def from_number_pairs(cls, pairs: Iterable[Tuple[Number, Number]], **kw) -> "SampleSeries":
        # x numbers become labels, formatted the way str() prints them
        return cls([Sample(float(v), str(x)) for x, v in pairs], labels_given=True, **kw)

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, idx: int) -> Sample:
        return self.samples[idx]

    @property
    def values(self) -> List[float]:
        return [s.value for s in self.samples]

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.samples]

    def bounds(self) -> Bounds:
        explicit = None
        if self.min_y is not None and self.max_y is not None:
            explicit = Bounds(float(min(self.min_y, self.max_y)), float(max(self.min_y, self.max_y)))
        return resolve_bounds(self.values, explicit)

    def color_of(self, idx: int, default: Color = "#000000") -> Color:
        if self.color_for is None:
            return default
        return self.color_for(self.samples[idx].value)
