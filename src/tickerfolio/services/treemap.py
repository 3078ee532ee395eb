"""
Squarified treemap layout (Bruls, Huizing & van Wijk).

Takes items with values and a container rectangle, returns one positioned
rectangle per item. Rectangle areas are proportional to value and the
rectangles tile the container exactly.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from tickerfolio.domain.views import TreemapItem, TreemapRect


@dataclass
class _Rect:
    x: float
    y: float
    width: float
    height: float


def _clean(value: float) -> float:
    """Negative and NaN values occupy no area."""
    return value if value > 0 else 0.0


def worst_aspect_ratio(row: Sequence[float], length: float) -> float:
    """
    Worst aspect ratio of a row of areas laid along a side of ``length``.

    max(L^2 * max / S^2, S^2 / (L^2 * min)); infinite when the row sum or
    any member is zero so such rows are never preferred.
    """
    row_sum = sum(row)
    if row_sum <= 0 or length <= 0:
        return math.inf
    row_min = min(row)
    if row_min <= 0:
        return math.inf
    s2 = row_sum * row_sum
    l2 = length * length
    return max((l2 * max(row)) / s2, s2 / (l2 * row_min))


def _layout_row(
    areas: Sequence[float],
    items: Sequence[TreemapItem],
    rect: _Rect,
    last: bool = False,
) -> tuple[list[TreemapRect], _Rect]:
    """
    Place a closed row as a strip along the shorter side of rect.

    When ``last`` is set the strip takes the whole remaining rectangle, and
    the final member of a non-empty strip always runs to the strip's end, so
    rounding never leaves a sliver uncovered.
    """
    row_sum = sum(areas)
    rects: list[TreemapRect] = []

    if rect.width >= rect.height:
        # Column on the left edge, items stacked top to bottom
        thickness = row_sum / rect.height if rect.height > 0 else 0.0
        if last and thickness > 0:
            thickness = rect.width
        y = rect.y
        end = rect.y + rect.height
        for n, (area, item) in enumerate(zip(areas, items)):
            h = area / thickness if thickness > 0 else 0.0
            if thickness > 0 and n == len(areas) - 1:
                h = end - y
            rects.append(TreemapRect(item.id, rect.x, y, thickness, h, item.value))
            y += h
        remaining = _Rect(rect.x + thickness, rect.y, rect.width - thickness, rect.height)
    else:
        # Row on the top edge, items placed left to right
        thickness = row_sum / rect.width if rect.width > 0 else 0.0
        if last and thickness > 0:
            thickness = rect.height
        x = rect.x
        end = rect.x + rect.width
        for n, (area, item) in enumerate(zip(areas, items)):
            w = area / thickness if thickness > 0 else 0.0
            if thickness > 0 and n == len(areas) - 1:
                w = end - x
            rects.append(TreemapRect(item.id, x, rect.y, w, thickness, item.value))
            x += w
        remaining = _Rect(rect.x, rect.y + thickness, rect.width, rect.height - thickness)

    return rects, remaining


def squarify(
    items: Iterable[TreemapItem],
    width: float,
    height: float,
    x: float = 0.0,
    y: float = 0.0,
) -> list[TreemapRect]:
    """
    Lay out items inside the (x, y, width, height) container.

    Returns [] for an empty list, a non-positive total value, or a
    degenerate container. Items are placed largest first; ties keep input
    order.
    """
    items = list(items)
    if not items or not (width > 0 and height > 0):
        return []

    total_value = sum(_clean(i.value) for i in items)
    if not total_value > 0:
        return []

    total_area = width * height
    ordered = sorted(items, key=lambda i: _clean(i.value), reverse=True)
    areas = [_clean(i.value) / total_value * total_area for i in ordered]

    result: list[TreemapRect] = []
    rect = _Rect(x, y, width, height)
    index = 0

    while index < len(areas):
        length = min(rect.width, rect.height)

        row = [areas[index]]
        row_items = [ordered[index]]
        worst = worst_aspect_ratio(row, length)
        index += 1

        while index < len(areas):
            candidate = worst_aspect_ratio(row + [areas[index]], length)
            if candidate > worst:
                break
            row.append(areas[index])
            row_items.append(ordered[index])
            worst = candidate
            index += 1

        # Areas are sorted, so only zero-area items can follow the last real row
        last = index == len(areas) or areas[index] <= 0
        rects, rect = _layout_row(row, row_items, rect, last=last)
        result.extend(rects)

    return result
