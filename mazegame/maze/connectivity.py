"""Flood fill and path queries over a generated maze's passages.

Used by the solver CLI, the session API (``hint``) and the invariant tests.
Everything here only reads through ``maze.is_wall`` so out-of-range
coordinates are walls.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set

from .cells import Coord2D

NEIGHBORS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def reachable(maze, start: Coord2D) -> Set[Coord2D]:
    start = tuple(start)
    if maze.is_wall(*start):
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in NEIGHBORS:
            nxt = (cx + dx, cy + dy)
            if nxt not in visited and not maze.is_wall(*nxt):
                visited.add(nxt)
                q.append(nxt)
    return visited


def shortest_path(maze, start: Coord2D, goal: Coord2D) -> Optional[List[Coord2D]]:
    """BFS path from start to goal inclusive, or None when goal is cut off."""
    start, goal = tuple(start), tuple(goal)
    if maze.is_wall(*start) or maze.is_wall(*goal):
        return None
    parent: Dict[Coord2D, Optional[Coord2D]] = {start: None}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            path = []
            node: Optional[Coord2D] = cur
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path
        cx, cy = cur
        for dx, dy in NEIGHBORS:
            nxt = (cx + dx, cy + dy)
            if nxt not in parent and not maze.is_wall(*nxt):
                parent[nxt] = cur
                q.append(nxt)
    return None


def passage_edge_count(maze) -> int:
    """Number of orthogonally adjacent passage pairs (each pair counted once)."""
    edges = 0
    for x, y in maze.passages():
        if not maze.is_wall(x + 1, y):
            edges += 1
        if not maze.is_wall(x, y + 1):
            edges += 1
    return edges


def is_perfect(maze) -> bool:
    """True when every passage hangs off the start and the passage graph has no cycle."""
    cells = set(maze.passages())
    if not cells:
        return False
    if reachable(maze, maze.start) != cells:
        return False
    return passage_edge_count(maze) == len(cells) - 1


def dead_ends(maze) -> List[Coord2D]:
    out = []
    for x, y in maze.passages():
        open_sides = sum(1 for dx, dy in NEIGHBORS if not maze.is_wall(x + dx, y + dy))
        if open_sides == 1:
            out.append((x, y))
    return out


__all__ = ["reachable", "shortest_path", "passage_edge_count", "is_perfect", "dead_ends"]
