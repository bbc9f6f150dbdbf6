"""
Fixed overlay path around the three finder-pattern separators.

With one pixel per module, the separator strips sit at fixed offsets from
the image edges. The six segments below are walked in order and together
visit 45 modules. Previously issued images depend on this exact order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .bits import Axis, Point

# Finder patterns are 7x7 modules in every QR version.
FINDER_SIZE = 7

# Version 1 symbols are 21x21 modules.
MIN_MODULE_COUNT = 21


@dataclass(frozen=True)
class Segment:
    start: Point
    stop: Point
    axis: Axis

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", Axis(self.axis))

    @property
    def length(self) -> int:
        if self.axis is Axis.VERTICAL:
            return abs(self.stop[1] - self.start[1]) + 1
        return abs(self.stop[0] - self.start[0]) + 1


def overlay_segments(module_count: int) -> Tuple[Segment, ...]:
    """
    Return the six overlay segments for a `module_count` x `module_count` image.

    The caller guarantees `module_count >= MIN_MODULE_COUNT`.
    """
    f = FINDER_SIZE
    w = module_count - 1

    return (
        Segment((f, w), (f, w - f), Axis.VERTICAL),
        Segment((f - 1, w - f), (0, w - f), Axis.HORIZONTAL),
        Segment((0, f), (f, f), Axis.HORIZONTAL),
        Segment((f, f - 1), (f, 0), Axis.VERTICAL),
        Segment((w - f, 0), (w - f, f), Axis.VERTICAL),
        Segment((w - f + 1, f), (w, f), Axis.HORIZONTAL),
    )


# Segment lengths do not depend on the module count.
OVERLAY_BIT_COUNT = sum(s.length for s in overlay_segments(MIN_MODULE_COUNT))
