"""
Shortest walk through every marked node of a tree, ending at the far
end of the longest path between marked nodes.

Usage:
  treepatrol < input.txt
  treepatrol input.txt --validate --check -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from treepatrol.io.tree_input import TreeInput, nx_diameter, parse_tree_input
from treepatrol.route.patrol import PatrolResult, patrol
from treepatrol.tree.adjlist import build_adjacency
from treepatrol.tree.prune import prune

logger = logging.getLogger(__name__)


def check_against_networkx(data: TreeInput, result: PatrolResult) -> None:
    adj = build_adjacency(data.n, data.edges)
    prune(adj, frozenset(data.marked))
    expected = nx_diameter(adj)
    if expected != result.diameter:
        raise RuntimeError(
            f"diameter mismatch: two-sweep BFS gave {result.diameter}, networkx gave {expected}"
        )
    logger.debug("networkx agrees on diameter %d", expected)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="treepatrol",
        description="Shortest walk through every marked node of a tree.",
    )
    ap.add_argument("input", nargs="?", default=None,
                    help="input file (default: stdin)")
    ap.add_argument("--validate", action="store_true",
                    help="reject malformed trees instead of guessing")
    ap.add_argument("--check", action="store_true",
                    help="cross-check the diameter with networkx")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read input: %s", e)
        return 2

    try:
        data = parse_tree_input(text)
        result = patrol(data.n, data.marked, data.edges, validate=args.validate)
    except ValueError as e:
        logger.error("malformed input: %s", e)
        return 2

    if args.check:
        check_against_networkx(data, result)

    logger.debug("result %s", result)
    print(result.length)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
