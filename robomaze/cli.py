"""Command line: load a labyrinth and show the robot's ways out."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from robomaze.labyrinth import Labyrinth, LabyrinthError


def _show(lab: Labyrinth, title: str, path) -> str:
    return (
        f"{title}\n"
        f"{lab.format_path_pairs(path)}\n"
        "\n"
        f"{lab.render_path(path)}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="robomaze",
        description="Find a way out of a tab-separated labyrinth.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default="labyrinth.txt",
        help="labyrinth file (default: labyrinth.txt)",
    )
    args = parser.parse_args(argv)

    try:
        lab = Labyrinth.from_file(args.filename)
    except LabyrinthError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    if not lab.has_path():
        out.write("No path exists.\n")
        return 0

    out.write("Path exists from start to exit.\n\n")
    out.write(_show(lab, "Path (marked with 'o'):", lab.get_path()))
    out.write("\n\n")
    out.write(_show(lab, "Shortest path (marked with 'o'):", lab.get_shortest_path()))
    out.write("\n\n")
    out.write(_show(lab, "A path (marked with 'o'):", lab.get_path_dfs()))
    return 0


if __name__ == "__main__":
    sys.exit(main())