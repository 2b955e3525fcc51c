from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, TextIO, Tuple

import networkx as nx


@dataclass(frozen=True)
class TreeInput:
    n: int
    marked: Tuple[int, ...]
    edges: Tuple[Tuple[int, int], ...]


def _ints(tokens: Sequence[str]) -> List[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError as e:
        raise ValueError(f"non-integer token in input: {e}") from None


def parse_tree_input(text: str) -> TreeInput:
    """
    Parse the patrol problem format:

      N M
      s_1 ... s_M
      a_1 b_1
      ...
      a_{N-1} b_{N-1}

    Input is read as a whitespace-separated token stream, so an empty
    marked line (M = 0) or wrapped lines are fine. Trailing tokens are ignored.
    """
    vals = _ints(text.split())
    if len(vals) < 2:
        raise ValueError("expected 'N M' header")
    n, m = vals[0], vals[1]
    if n < 0 or m < 0:
        raise ValueError(f"N and M must be non-negative, got N={n} M={m}")

    need = 2 + m + 2 * max(n - 1, 0)
    if len(vals) < need:
        raise ValueError(f"truncated input: expected {need} integers, got {len(vals)}")

    marked = tuple(vals[2 : 2 + m])
    flat = vals[2 + m : need]
    edges = tuple((flat[i], flat[i + 1]) for i in range(0, len(flat), 2))
    return TreeInput(n=n, marked=marked, edges=edges)


def read_tree_input(stream: TextIO) -> TreeInput:
    return parse_tree_input(stream.read())


def adj_to_nx(adj: Sequence[Sequence[int]]) -> nx.Graph:
    """
    Simple undirected NetworkX graph on 0..n-1 (isolated nodes kept).
    """
    G = nx.Graph()
    G.add_nodes_from(range(len(adj)))
    for u, neigh in enumerate(adj):
        for v in neigh:
            G.add_edge(u, v)
    return G


def tree_input_to_nx(data: TreeInput) -> nx.Graph:
    """
    NetworkX graph of the input tree, with a boolean 'marked' node attribute.
    """
    G = nx.Graph()
    G.add_nodes_from(range(data.n), marked=False)
    G.add_edges_from(data.edges)
    marked = set(data.marked)
    for u in G.nodes:
        G.nodes[u]["marked"] = u in marked
    return G


def nx_diameter(adj: Sequence[Sequence[int]]) -> int:
    """
    Diameter of the non-trivial part of adj computed by networkx,
    used to cross-check the two-sweep result.
    """
    G = adj_to_nx(adj)
    G.remove_nodes_from([u for u in list(G.nodes) if G.degree(u) == 0])
    if G.number_of_nodes() == 0:
        return 0
    return nx.diameter(G)
