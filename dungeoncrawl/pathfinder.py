"""Distance maps from the player, computed with Dijkstra's algorithm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .heap import FibonacciHeap, HeapNode

INFINITY = 2**31 - 1
"""Cost of a cell that cannot be reached."""

_NEIGHBOURS = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


@dataclass
class PathCell:
    """The distance of one cell from the source and where that path came from."""

    x: int
    y: int
    cost: int = INFINITY
    came_from: Optional[tuple[int, int]] = None


class Pathfinder:
    """Shortest-path costs over a hardness grid indexed ``[y][x]``."""

    def __init__(self, hardness: Sequence[Sequence[int]]) -> None:
        self.hardness = [list(row) for row in hardness]
        self.height = len(self.hardness)
        self.width = len(self.hardness[0]) if self.hardness else 0
        self.cells = [
            [PathCell(x, y) for x in range(self.width)] for y in range(self.height)
        ]

    def _reset(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.cost = INFINITY
                cell.came_from = None

    def _run(
        self,
        pc_x: int,
        pc_y: int,
        passable: Callable[[int], bool],
        step_cost: Callable[[int], int],
    ) -> None:
        self._reset()
        self.cells[pc_y][pc_x].cost = 0

        heap = FibonacciHeap(key=lambda cell: cell.cost)
        pending: dict[tuple[int, int], HeapNode] = {}
        for row in self.cells:
            for cell in row:
                if passable(self.hardness[cell.y][cell.x]):
                    pending[(cell.x, cell.y)] = heap.insert(cell)

        while heap:
            cell = heap.remove_min()
            del pending[(cell.x, cell.y)]
            if cell.cost == INFINITY:
                break
            reached = cell.cost + step_cost(self.hardness[cell.y][cell.x])
            for dx, dy in _NEIGHBOURS:
                node = pending.get((cell.x + dx, cell.y + dy))
                if node is None:
                    continue
                neighbour = node.item
                if neighbour.cost > reached:
                    neighbour.cost = reached
                    neighbour.came_from = (cell.x, cell.y)
                    heap.sift_decreased(node)

    def dijkstra_floor(self, pc_x: int, pc_y: int) -> None:
        """Costs for walkers: only open cells (hardness 0), one per step."""
        self._run(pc_x, pc_y, lambda h: h == 0, lambda h: 1)

    def dijkstra_all(self, pc_x: int, pc_y: int) -> None:
        """Costs for tunnelers: every breakable cell, weighted by the hardness left."""
        self._run(pc_x, pc_y, lambda h: h != 255, lambda h: h // 85 + 1)

    def cost(self, x: int, y: int) -> int:
        """The computed cost of reaching cell (x, y)."""
        return self.cells[y][x].cost

    def render(self) -> str:
        """One line per row: the last digit of each cost, blank if unreachable."""
        return "".join(
            "".join(" " if cell.cost == INFINITY else str(cell.cost % 10) for cell in row)
            + "\n"
            for row in self.cells
        )