"""Per-pixel nearest-depth bookkeeping."""

from __future__ import annotations
from typing import Dict, Iterator, NamedTuple, Optional, Set, Tuple


class Pixel(NamedTuple):
    """Discrete screen location."""
    x: int
    y: int


class DepthMap:
    """
    Mapping Pixel -> (depth, vertex index) keeping the nearest vertex.

    Lower depth is nearer. On an exact tie the vertex offered later wins,
    so the outcome depends only on the order vertices are offered in, not
    on dictionary iteration order.

    Attributes:
        skipped: Vertices that could not be discretized (non-finite NDC)
        clipped: Vertices discarded for falling outside the viewport
    """

    def __init__(self):
        self._entries: Dict[Pixel, Tuple[float, int]] = {}
        self.skipped = 0
        self.clipped = 0

    def offer(self, pixel: Pixel, depth: float, index: int) -> bool:
        """
        Record a vertex at a pixel if it is at least as near as the current one.

        Returns:
            True if the vertex now owns the pixel
        """
        current = self._entries.get(pixel)
        if current is not None and depth > current[0]:
            return False
        self._entries[pixel] = (depth, index)
        return True

    def depth_at(self, pixel: Pixel) -> Optional[float]:
        entry = self._entries.get(pixel)
        return None if entry is None else entry[0]

    def source_of(self, pixel: Pixel) -> Optional[int]:
        """Index of the vertex that owns the pixel, if any."""
        entry = self._entries.get(pixel)
        return None if entry is None else entry[1]

    def pixels(self) -> Set[Pixel]:
        return set(self._entries)

    def items(self) -> Iterator[Tuple[Pixel, float]]:
        for pixel, (depth, _) in self._entries.items():
            yield pixel, depth

    def __contains__(self, pixel) -> bool:
        return pixel in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"DepthMap(pixels={len(self)}, skipped={self.skipped}, "
                f"clipped={self.clipped})")
