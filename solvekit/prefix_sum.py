"""Two-dimensional prefix sums and a grid-counting problem built on them."""

from __future__ import annotations

from typing import Sequence


class CumulativeSum2D:
    """Rectangle sums over a ``width`` by ``height`` grid after a build step."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._data = [[0] * (height + 1) for _ in range(width + 1)]

    def add(self, x: int, y: int, z: int) -> None:
        """Add ``z`` to cell ``(x, y)``; cells outside the grid are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._data[x + 1][y + 1] += z

    def build(self) -> None:
        """Turn the added cell values into prefix sums."""
        data = self._data
        for i in range(1, self.width + 1):
            row, above = data[i], data[i - 1]
            for j in range(1, self.height + 1):
                row[j] += row[j - 1] + above[j] - above[j - 1]

    def query(self, sx: int, sy: int, gx: int, gy: int) -> int:
        """Sum of cells with ``sx <= x < gx`` and ``sy <= y < gy``."""
        data = self._data
        return data[gx][gy] - data[sx][gy] - data[gx][sy] + data[sx][sy]


def count_balanced_submatrices(grid: Sequence[Sequence[str]]) -> int:
    """Count top-left-anchored submatrices with at least one 'X' and as many 'X' as 'Y'."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    xs = CumulativeSum2D(rows, cols)
    ys = CumulativeSum2D(rows, cols)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            xs.add(i, j, cell == "X")
            ys.add(i, j, cell == "Y")
    xs.build()
    ys.build()

    count = 0
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            x_total = xs.query(0, 0, i, j)
            if x_total and x_total == ys.query(0, 0, i, j):
                count += 1
    return count