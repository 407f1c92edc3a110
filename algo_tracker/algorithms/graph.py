"""Traversals and shortest paths over :class:`~algo_tracker.models.Graph`.

All functions keep their visited bookkeeping local to the call.
"""

import sys
from collections import deque
from typing import List

from algo_tracker.algorithms.base import recursion_headroom
from algo_tracker.models import Graph

# Distance reported for vertices unreachable from the source.
INFINITY = sys.maxsize

# Above this many vertices DFS switches to an explicit stack.
RECURSIVE_DFS_LIMIT = 5000


def depth_first_search(graph: Graph, start: int) -> List[int]:
    """Visit every vertex reachable from ``start`` once, deepest branch first.

    Neighbours are explored in edge insertion order.

    Returns:
        Vertices in visiting order.
    """
    graph.check_vertex(start)
    if graph.vertices > RECURSIVE_DFS_LIMIT:
        return _dfs_iterative(graph, start)
    visited = [False] * graph.vertices
    order: List[int] = []
    with recursion_headroom(graph.vertices):
        _dfs_visit(graph, start, visited, order)
    return order


def _dfs_visit(graph: Graph, vertex: int, visited: List[bool], order: List[int]) -> None:
    visited[vertex] = True
    order.append(vertex)
    for edge in graph.adjacency_list[vertex]:
        if not visited[edge.destination]:
            _dfs_visit(graph, edge.destination, visited, order)


def _dfs_iterative(graph: Graph, start: int) -> List[int]:
    # Stack of (vertex, next edge index) mirrors the recursive call frames,
    # so the produced order is identical.
    visited = [False] * graph.vertices
    order: List[int] = [start]
    visited[start] = True
    stack = [(start, 0)]
    while stack:
        vertex, idx = stack[-1]
        edges = graph.adjacency_list[vertex]
        while idx < len(edges) and visited[edges[idx].destination]:
            idx += 1
        if idx == len(edges):
            stack.pop()
            continue
        stack[-1] = (vertex, idx + 1)
        nxt = edges[idx].destination
        visited[nxt] = True
        order.append(nxt)
        stack.append((nxt, 0))
    return order


def breadth_first_search(graph: Graph, start: int) -> List[int]:
    """Level-order traversal; vertices are marked when enqueued."""
    graph.check_vertex(start)
    visited = [False] * graph.vertices
    order: List[int] = []
    queue = deque([start])
    visited[start] = True
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for edge in graph.adjacency_list[vertex]:
            if not visited[edge.destination]:
                visited[edge.destination] = True
                queue.append(edge.destination)
    return order


def dijkstra(graph: Graph, source: int) -> List[int]:
    """Single-source shortest distances with O(V^2) minimum selection.

    Weights must be non-negative. Unreachable vertices keep ``INFINITY``.
    """
    graph.check_vertex(source)
    n = graph.vertices
    dist = [INFINITY] * n
    done = [False] * n
    dist[source] = 0
    for _ in range(n):
        u = _closest_pending(dist, done)
        if u is None:
            break
        done[u] = True
        for edge in graph.adjacency_list[u]:
            v = edge.destination
            candidate = dist[u] + edge.weight
            if not done[v] and candidate < dist[v]:
                dist[v] = candidate
    return dist


def _closest_pending(dist: List[int], done: List[bool]) -> int | None:
    best = None
    best_d = INFINITY
    for v, d in enumerate(dist):
        if not done[v] and d < best_d:
            best_d = d
            best = v
    return best
