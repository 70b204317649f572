"""
Rebuild polygons from line segments.

The walk is greedy: from each unvisited start vertex, keep stepping to the
first neighbour (in segment order) that no loop has visited yet. Each vertex
ends up in at most one rebuilt face, and walks of two vertices or fewer are
dropped. Start vertices and neighbour lists are both kept in insertion order,
so the winding of the result depends only on the order of the input
segments.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Set

from .geometry import Face, LineSegment


def build_adjacency(lines: Iterable[LineSegment]) -> Dict[int, List[int]]:
    """Map each vertex index to its neighbours, both directions per segment."""
    adjacency: Dict[int, List[int]] = {}
    for seg in lines:
        adjacency.setdefault(seg.start, []).append(seg.end)
        adjacency.setdefault(seg.end, []).append(seg.start)
    return adjacency


def _walk(start: int, adjacency: Dict[int, List[int]], visited: Set[int]) -> List[int]:
    loop: List[int] = []
    current = start
    while True:
        loop.append(current)
        visited.add(current)
        nxt = next((n for n in adjacency.get(current, ()) if n not in visited), None)
        if nxt is None or nxt == start:
            return loop
        current = nxt


def lines_to_faces(lines: Iterable[LineSegment]) -> List[Face]:
    adjacency = build_adjacency(lines)
    visited: Set[int] = set()
    faces: List[Face] = []
    for start in adjacency:
        if start in visited:
            continue
        loop = _walk(start, adjacency, visited)
        if len(loop) > 2:
            faces.append(Face(vertices=loop))
    return faces
