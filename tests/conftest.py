"""Shared fixtures for graph algorithm tests."""

import random
from collections.abc import Callable

import pytest

from graph import AdjacencyListGraph


def build_random_graph(
    seed: int,
    order: int,
    extra_edges: int,
    *,
    connected: bool = True,
    low: int = -10,
    high: int = 20,
) -> AdjacencyListGraph:
    """
    Seeded random multigraph with integer weights in [low, high].

    When `connected`, a random spanning path is laid down first. Extra edges
    may repeat pairs and include self-loops.
    """
    rng = random.Random(seed)
    graph = AdjacencyListGraph(order)
    if connected:
        shuffled = list(range(order))
        rng.shuffle(shuffled)
        for u, v in zip(shuffled, shuffled[1:]):
            graph.add_edge(u, v, rng.randint(low, high))
    for _ in range(extra_edges):
        u, v = rng.randrange(order), rng.randrange(order)
        graph.add_edge(u, v, rng.randint(low, high))
    return graph


@pytest.fixture
def random_graph() -> Callable[..., AdjacencyListGraph]:
    return build_random_graph
