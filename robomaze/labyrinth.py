"""Rectangular labyrinth with a robot that looks for a way out."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Sequence, Union

from robomaze.dllaqueue import Queue

Cell = tuple[int, int]

START = "R"
FREE = "*"
PATH_MARK = "o"

# North, south, west, east.
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class LabyrinthError(Exception):
    """Raised when a labyrinth cannot be loaded."""


class Labyrinth:
    """A grid of walls (X), free cells (*) and a start cell (R).

    An exit is a free cell in the first or last row or column.
    """

    def __init__(self, grid: Iterable[Sequence[str]]) -> None:
        self.grid: list[list[str]] = [list(row) for row in grid]
        if not self.grid:
            raise LabyrinthError("Labyrinth is empty")
        start: Cell | None = None
        for r, row in enumerate(self.grid):
            for c, symbol in enumerate(row):
                if symbol == START:
                    start = (r, c)
        if start is None:
            raise LabyrinthError("Start position R not found")
        self.start: Cell = start
        self.rows = len(self.grid)
        self.cols = len(self.grid[0])

    @classmethod
    def from_text(cls, text: str) -> "Labyrinth":
        """Build from tab-separated rows; each cell's first character counts."""
        grid = []
        for line in text.splitlines():
            row = [cell[0] for cell in line.split("\t") if cell]
            if row:
                grid.append(row)
        return cls(grid)

    @classmethod
    def from_file(cls, filename: Union[str, PathLike]) -> "Labyrinth":
        """Load a tab-separated labyrinth file."""
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise LabyrinthError(f"File not found: {filename}") from exc
        return cls.from_text(text)

    def _is_valid(self, r: int, c: int) -> bool:
        return (
            0 <= r < self.rows
            and 0 <= c < self.cols
            and c < len(self.grid[r])
            and self.grid[r][c] in (FREE, START)
        )

    def _is_exit(self, r: int, c: int) -> bool:
        if self.grid[r][c] != FREE:
            return False
        return r in (0, self.rows - 1) or c in (0, self.cols - 1)

    def _bfs(self) -> list[Cell]:
        """Shortest path from the start to an exit, or an empty list."""
        parent: dict[Cell, Cell | None] = {self.start: None}
        queue = Queue()
        queue.push(self.start[0] * self.cols + self.start[1])

        while queue:
            r, c = divmod(queue.pop(), self.cols)
            if self._is_exit(r, c):
                path = []
                current: Cell | None = (r, c)
                while current is not None:
                    path.append(current)
                    current = parent[current]
                path.reverse()
                return path
            for dr, dc in _DIRECTIONS:
                nr, nc = r + dr, c + dc
                if self._is_valid(nr, nc) and (nr, nc) not in parent:
                    parent[(nr, nc)] = (r, c)
                    queue.push(nr * self.cols + nc)
        return []

    def _dfs(self) -> list[Cell]:
        """Depth-first path from the start to an exit, or an empty list."""
        visited = {self.start}
        path = [self.start]
        if self._is_exit(*self.start):
            return path
        pending = [iter(_DIRECTIONS)]
        while pending:
            r, c = path[-1]
            for dr, dc in pending[-1]:
                cell = (r + dr, c + dc)
                if self._is_valid(*cell) and cell not in visited:
                    visited.add(cell)
                    path.append(cell)
                    if self._is_exit(*cell):
                        return path
                    pending.append(iter(_DIRECTIONS))
                    break
            else:
                pending.pop()
                path.pop()
        return []

    def has_path(self) -> bool:
        """Whether the robot can reach an exit."""
        return bool(self._bfs())

    def get_path(self) -> list[Cell]:
        """A path from the start to an exit, or an empty list."""
        return self._bfs()

    def get_path_dfs(self) -> list[Cell]:
        """A path found by depth-first search, or an empty list."""
        return self._dfs()

    def get_shortest_path(self) -> list[Cell]:
        """A path of minimal length, or an empty list."""
        return self._bfs()

    def render_path(self, path: Sequence[Cell]) -> str:
        """The grid with the path marked by 'o', one row per line."""
        if not path:
            return "No path found."
        marked = [list(row) for row in self.grid]
        for r, c in path:
            if self.grid[r][c] != START:
                marked[r][c] = PATH_MARK
        return "\n".join("".join(f"{cell} " for cell in row) for row in marked)

    def format_path_pairs(self, path: Sequence[Cell]) -> str:
        """The path as a list of (row, column) pairs."""
        if not path:
            return "No path found."
        lines = [f"Path ({len(path)} steps):"]
        lines.extend(f"({r}, {c})" for r, c in path)
        return "\n".join(lines)