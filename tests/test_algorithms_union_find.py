"""Tests for utils/union_find.py"""

from graph import AdjacencyListGraph
from utils.union_find import UnionFind


class TestUnionFind:
    def test_singletons(self):
        """Every vertex starts in its own set."""
        uf = UnionFind(AdjacencyListGraph(4))
        assert [uf.find(v) for v in range(4)] == [0, 1, 2, 3]
        assert not uf.connected(0, 1)

    def test_union_connects(self):
        uf = UnionFind(AdjacencyListGraph(5))
        assert uf.union(1, 2)
        assert uf.union(2, 3)
        assert uf.connected(1, 3)
        assert not uf.connected(1, 4)

    def test_union_same_set(self):
        """Merging two vertices already together reports no change."""
        uf = UnionFind(AdjacencyListGraph(3))
        uf.union(0, 1)
        assert not uf.union(1, 0)
        assert not uf.union(2, 2)

    def test_union_by_rank(self):
        """The taller tree's root stays the representative."""
        uf = UnionFind(AdjacencyListGraph(4))
        uf.union(0, 1)
        root = uf.find(0)
        uf.union(2, root)
        assert uf.find(2) == root
        uf.union(3, 2)
        assert uf.find(3) == root

    def test_path_compression(self):
        uf = UnionFind(AdjacencyListGraph(6))
        for v in range(5):
            uf.union(v, v + 1)
        root = uf.find(5)
        for v in range(6):
            assert uf.find(v) == root
            assert uf._parent[v] == root

    def test_get_all_sets(self):
        uf = UnionFind(AdjacencyListGraph(5))
        uf.union(0, 3)
        uf.union(1, 4)
        sets = sorted(map(sorted, uf.get_all_sets().values()))
        assert sets == [[0, 3], [1, 4], [2]]

    def test_empty_graph(self):
        assert UnionFind(AdjacencyListGraph()).get_all_sets() == {}
