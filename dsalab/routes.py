"""Shortest route between two cities over an undirected road list."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path
from typing import Iterable, Optional, Sequence

Graph = list[list[int]]


class CityIndex:
    """Assigns consecutive integer ids to city names in order of first sight."""

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._names: list[str] = []

    def id_of(self, name: str) -> int:
        """Return the id of ``name``, assigning the next free one if it is new."""
        city_id = self._ids.get(name)
        if city_id is None:
            city_id = len(self._names)
            self._ids[name] = city_id
            self._names.append(name)
        return city_id

    def name_of(self, city_id: int) -> str:
        """Return the name that was given ``city_id``."""
        if not 0 <= city_id < len(self._names):
            raise IndexError(f"unknown city id {city_id}")
        return self._names[city_id]

    def __len__(self) -> int:
        return len(self._names)


def build_graph(lines: Iterable[str], index: CityIndex) -> Graph:
    """Build an adjacency list from lines of whitespace-separated city pairs.

    Each line may hold several pairs; an odd trailing name is ignored.
    The graph has a slot for every city known to ``index``.
    """
    graph: Graph = [[] for _ in range(len(index))]
    for line in lines:
        tokens = line.split()
        for first, second in zip(tokens[0::2], tokens[1::2]):
            a = index.id_of(first)
            b = index.id_of(second)
            needed = max(a, b) + 1
            if len(graph) < needed:
                graph.extend([] for _ in range(needed - len(graph)))
            graph[a].append(b)
            graph[b].append(a)
    return graph


def bfs_shortest_path(graph: Graph, start: int, end: int) -> list[int]:
    """Return the fewest-hop path from ``start`` to ``end``, or ``[]`` if none."""
    for vertex in (start, end):
        if not 0 <= vertex < len(graph):
            raise IndexError(f"vertex {vertex} is not in the graph")

    predecessors: dict[int, Optional[int]] = {start: None}
    pending = deque([start])
    while pending:
        current = pending.popleft()
        if current == end:
            break
        for neighbour in graph[current]:
            if neighbour not in predecessors:
                predecessors[neighbour] = current
                pending.append(neighbour)

    if end not in predecessors:
        return []

    path: list[int] = []
    at: Optional[int] = end
    while at is not None:
        path.append(at)
        at = predecessors[at]
    path.reverse()
    return path


def find_route(lines: Sequence[str]) -> list[str]:
    """Find a route from the roads in ``lines``.

    The last line names the start and end cities; the lines before it list
    the roads. Returns the city names along the route, or ``[]`` if there is
    none.
    """
    if not lines:
        raise ValueError("input is empty or does not contain any lines")
    *roads, query = lines
    ends = query.split()
    if len(ends) < 2:
        raise ValueError("last line must name a start and an end city")
    index = CityIndex()
    start = index.id_of(ends[0])
    end = index.id_of(ends[1])
    graph = build_graph(roads, index)
    return [index.name_of(city) for city in bfs_shortest_path(graph, start, end)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read roads from the input file and write the route to the output file."""
    parser = argparse.ArgumentParser(description="Find the shortest route between two cities.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    try:
        route = find_route(lines)
    except ValueError as error:
        print(str(error).capitalize() + ".", file=sys.stderr)
        return 1

    if route:
        text = "".join(f"{name} " for name in route)
    else:
        text = "No path found."
    Path(args.output).write_text(text, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())