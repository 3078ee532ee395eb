"""Treemap input/output value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TreemapItem:
    id: str
    value: float


@dataclass(frozen=True)
class TreemapRect:
    id: str
    x: float
    y: float
    width: float
    height: float
    value: float

    @property
    def area(self) -> float:
        return self.width * self.height
