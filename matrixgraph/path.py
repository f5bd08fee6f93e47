"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

Vertex = int


def reconstruct_path(
    previous: Sequence[Optional[Vertex]],
    root: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``root`` to ``target`` using a predecessor array.

    Args:
        previous: Predecessor index of each vertex, ``None`` if unreached.
            The root is its own predecessor.
        root: Root vertex index.
        target: Target vertex index.

    Returns:
        Vertex indices from root to target (inclusive). Returns an empty list
        if ``target`` was not reached from ``root``.

    Raises:
        IndexError: If ``root`` or ``target`` is out of range.
    """
    n = len(previous)
    if not (0 <= root < n and 0 <= target < n):
        raise IndexError("root/target out of range.")
    if root == target:
        return [root]

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    seen = set()
    while cur is not None and cur not in seen:
        chain.append(cur)
        if cur == root:
            chain.reverse()
            return chain
        seen.add(cur)
        cur = previous[cur]

    return []


__all__ = ["reconstruct_path"]
