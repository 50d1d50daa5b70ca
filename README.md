# robomaze

A robot stands somewhere inside a rectangular labyrinth. Some cells are
blocked (`X`), some are free (`*`), and the robot's cell is marked `R`. The
robot moves north, south, east or west. It gets out when it reaches a free
cell in the first or last row or the first or last column.

robomaze answers three questions about such a labyrinth:

- is there a way out at all?
- what is one way out?
- what is a shortest way out?

Breadth-first search runs on a small queue that keeps its nodes in an array
as a doubly linked list (`robomaze.dllaqueue.Queue`). Depth-first search gives
another path, which is not always a shortest one.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The labyrinth file

Write one row per line and separate the cells with tabs. Only the first
character of each cell counts. Empty cells and blank lines are skipped. The
number of columns is taken from the first row.

```
X	*	*	X	X	X	*	*
X	*	X	*	*	*	*	*
X	*	*	*	*	*	X	*
X	X	X	*	*	*	X	*
*	X	*	*	R	X	X	*
*	*	*	X	X	X	X	*
*	*	*	*	*	*	*	X
X	X	X	X	X	X	X	X
```

A labyrinth with no rows, or with no `R`, is rejected.

## Command line

```
robomaze labyrinth.txt
```

The file name is optional; without it, `labyrinth.txt` in the current
directory is read.

If no way out exists, the command prints `No path exists.` If one does, it
prints the path found by breadth-first search, a shortest path, and a path
found by depth-first search. Each path is shown twice: as a list of
`(row, column)` steps, and as the grid with the path's cells marked `o` (the
robot's own cell keeps its `R`).

If the file cannot be read or is not a valid labyrinth, the command prints
`Error: ...` to standard error and exits with status 1.

## Library

```python
from robomaze.labyrinth import Labyrinth, LabyrinthError

maze = Labyrinth.from_file("labyrinth.txt")

if maze.has_path():
    shortest = maze.get_shortest_path()   # list of (row, column) pairs
    print(maze.format_path_pairs(shortest))
    print(maze.render_path(shortest))

    other = maze.get_path_dfs()
    print(maze.render_path(other))
```

- `Labyrinth.from_text(text)` takes the same tab-separated format as a string,
  and `Labyrinth(grid)` takes the rows directly, as sequences of one-character
  strings.
- `get_path()` and `get_shortest_path()` both return a shortest path;
  `get_path_dfs()` returns the path found by depth-first search.
- A path starts at the robot's cell and ends at an exit cell. When there is no
  way out, the path methods return an empty list.
- `format_path_pairs(path)` and `render_path(path)` return strings; for an
  empty path both return `No path found.`
- A labyrinth that cannot be read or built raises `LabyrinthError`.

You can use the queue on its own:

```python
from robomaze.dllaqueue import Queue, QueueEmptyError

q = Queue()
q.push(5)
q.push(1)
q.top()        # 5
q.pop()        # 5
len(q)         # 1
list(q)        # [1]
```

`top` and `pop` on an empty queue raise `QueueEmptyError`, a subclass of
`IndexError`. An empty queue is false in a boolean context.

## What it does not do

robomaze only reads labyrinths and prints text. It does not generate
labyrinths, animate the robot, or offer an interactive or graphical view.