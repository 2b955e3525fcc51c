"""
Patrol lengths on random trees, cross-checked against a networkx construction.

For each random tree, the spanning subtree of the marked nodes is rebuilt as
the union of shortest paths between marked pairs, and 2|E| - diam is compared
with the pruning pipeline.

Usage:
  python3 random_patrols.py --n 50 --marked 5 --trials 200
"""
import argparse
import random
from itertools import combinations

import networkx as nx

from treepatrol.route.patrol import patrol


def random_tree(n, seed):
    if hasattr(nx, "random_labeled_tree"):
        return nx.random_labeled_tree(n, seed=seed)
    return nx.random_tree(n, seed=seed)


def patrol_length_nx(T, marked):
    """2|E(S)| - diam(S) where S is the union of paths between marked nodes."""
    if len(marked) < 2:
        return 0
    S = nx.Graph()
    for a, b in combinations(marked, 2):
        nx.add_path(S, nx.shortest_path(T, a, b))
    return 2 * S.number_of_edges() - nx.diameter(S)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=30)
    ap.add_argument("--marked", type=int, default=4)
    ap.add_argument("--trials", type=int, default=100)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    rng = random.Random(args.seed)
    mismatches = 0
    for t in range(args.trials):
        T = random_tree(args.n, seed=rng.randrange(1 << 30))
        marked = rng.sample(range(args.n), min(args.marked, args.n))
        res = patrol(args.n, marked, list(T.edges), validate=True)
        ref = patrol_length_nx(T, marked)
        if res.length != ref:
            mismatches += 1
            print(f"trial {t}: pipeline={res.length} networkx={ref} marked={marked}")

    print(f"{args.trials} trials, {mismatches} mismatches")


if __name__ == "__main__":
    main()
