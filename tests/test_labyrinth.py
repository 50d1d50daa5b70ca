import pytest

from robomaze.labyrinth import Labyrinth, LabyrinthError

EXAMPLE = [
    "X\t*\t*\tX\tX\tX\t*\t*",
    "X\t*\tX\t*\t*\t*\t*\t*",
    "X\t*\t*\t*\t*\t*\tX\t*",
    "X\tX\tX\t*\t*\t*\tX\t*",
    "*\tX\t*\t*\tR\tX\tX\t*",
    "*\t*\t*\tX\tX\tX\tX\t*",
    "*\t*\t*\t*\t*\t*\t*\tX",
    "X\tX\tX\tX\tX\tX\tX\tX",
]

ENCLOSED = [
    ["X", "X", "X", "X"],
    ["X", "R", "*", "X"],
    ["X", "X", "X", "X"],
]


@pytest.fixture
def example():
    return Labyrinth.from_text("\n".join(EXAMPLE) + "\n")


def _check_path(lab, path):
    assert path[0] == lab.start
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    assert len(set(path)) == len(path)
    for r, c in path[1:]:
        assert lab.grid[r][c] == "*"
    r, c = path[-1]
    assert r in (0, lab.rows - 1) or c in (0, lab.cols - 1)


def test_parse_example(example):
    assert example.rows == 8
    assert example.cols == 8
    assert example.start == (4, 4)
    assert example.grid[4] == list("*X**RXX*")


def test_has_path(example):
    assert example.has_path() is True


def test_bfs_path_is_valid(example):
    _check_path(example, example.get_path())


def test_shortest_path(example):
    path = example.get_shortest_path()
    assert path == [(4, 4), (4, 3), (4, 2), (5, 2), (5, 1), (5, 0)]
    assert path == example.get_path()


def test_dfs_path_is_valid_and_not_shorter(example):
    path = example.get_path_dfs()
    _check_path(example, path)
    assert len(path) >= len(example.get_shortest_path())


def test_no_path():
    lab = Labyrinth(ENCLOSED)
    assert lab.has_path() is False
    assert lab.get_path() == []
    assert lab.get_path_dfs() == []
    assert lab.get_shortest_path() == []


def test_empty_path_output():
    lab = Labyrinth(ENCLOSED)
    assert lab.render_path([]) == "No path found."
    assert lab.format_path_pairs([]) == "No path found."


def test_render_and_pairs_small():
    lab = Labyrinth([["X", "*", "X"], ["X", "R", "X"], ["X", "X", "X"]])
    path = lab.get_path()
    assert path == [(1, 1), (0, 1)]
    assert lab.render_path(path) == "X o X \nX R X \nX X X "
    assert lab.format_path_pairs(path) == "Path (2 steps):\n(1, 1)\n(0, 1)"


def test_render_marks_every_path_cell_but_start(example):
    path = example.get_path_dfs()
    rendered = example.render_path(path).split("\n")
    assert len(rendered) == example.rows
    rows = [line.split() for line in rendered]
    for r, c in path[1:]:
        assert rows[r][c] == "o"
    assert rows[example.start[0]][example.start[1]] == "R"
    marks = sum(row.count("o") for row in rows)
    assert marks == len(path) - 1


def test_format_pairs_lists_every_cell(example):
    path = example.get_path()
    lines = example.format_path_pairs(path).split("\n")
    assert lines[0] == f"Path ({len(path)} steps):"
    assert lines[1:] == [f"({r}, {c})" for r, c in path]


def test_start_is_not_an_exit():
    lab = Labyrinth([["R", "X"], ["X", "X"]])
    assert lab.has_path() is False
    assert lab.get_path_dfs() == []


def test_last_start_wins():
    lab = Labyrinth.from_text("X\tR\tX\nX\tR\tX\nX\t*\tX\n")
    assert lab.start == (1, 1)
    assert lab.get_path() == [(1, 1), (2, 1)]


def test_from_text_skips_empty_cells_and_lines():
    lab = Labyrinth.from_text("\n\tX\t\tR\t*\n\nX\tX\tX\n")
    assert lab.grid == [["X", "R", "*"], ["X", "X", "X"]]
    assert lab.start == (0, 1)


def test_from_text_uses_first_character():
    lab = Labyrinth.from_text("Xwall\tRobot\t*free\n")
    assert lab.grid == [["X", "R", "*"]]


def test_empty_labyrinth():
    with pytest.raises(LabyrinthError, match="Labyrinth is empty"):
        Labyrinth.from_text("\n\t\n")
    with pytest.raises(LabyrinthError, match="Labyrinth is empty"):
        Labyrinth([])


def test_missing_start():
    with pytest.raises(LabyrinthError, match="Start position R not found"):
        Labyrinth.from_text("X\t*\nX\tX\n")


def test_from_file(tmp_path):
    path = tmp_path / "labyrinth.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    lab = Labyrinth.from_file(path)
    assert lab.start == (4, 4)
    assert lab.has_path()


def test_from_missing_file(tmp_path):
    missing = tmp_path / "nothing.txt"
    with pytest.raises(LabyrinthError, match="File not found"):
        Labyrinth.from_file(missing)