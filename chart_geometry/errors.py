from __future__ import annotations


class ChartGeometryError(ValueError):
    """Base class for geometry input errors."""


class InsufficientSamplesError(ChartGeometryError):
    def __init__(self, count: int, required: int = 2) -> None:
        super().__init__(f"At least {required} samples are required to draw a path; got {count}.")
        self.count = count
        self.required = required


class MalformedPathError(ChartGeometryError):
    """Raised when an x-position query walks into a closed (fill) subpath."""
