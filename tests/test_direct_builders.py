"""Tests for the closed-form graph constructors."""

import numpy as np
import pytest
from scipy.sparse.csgraph import connected_components

from topogen.generators.direct import (
    binary_tree,
    complete_bipartite_graph,
    complete_digraph,
    complete_graph,
    path_digraph,
    path_graph,
    star_digraph,
    star_graph,
    wheel_digraph,
    wheel_graph,
)
from topogen.generators.incremental import cycle_graph
from topogen.graph.simple import SimpleDiGraph
from topogen.graph.validation import validate_graph
from topogen.sizes import SizeOverflow


def adjacency(g) -> list[list[int]]:
    return [g.outneighbors(u).tolist() for u in g.vertices()]


def backward(g) -> list[list[int]]:
    return [g.inneighbors(u).tolist() for u in g.vertices()]


def degrees(g) -> list[int]:
    return [g.degree(u) for u in g.vertices()]


def n_components(g) -> int:
    n, _ = connected_components(g.to_csr(), directed=False)
    return n


class TestCompleteGraph:
    """Every pair of distinct vertices is adjacent."""

    def test_complete_4(self) -> None:
        g = complete_graph(4)
        assert g.nv == 4
        assert g.ne == 6
        assert degrees(g) == [3, 3, 3, 3]

    def test_adjacency_order(self) -> None:
        assert adjacency(complete_graph(3)) == [[2, 3], [1, 3], [1, 2]]

    @pytest.mark.parametrize("n", [1, 2, 5, 9])
    def test_every_pair_adjacent(self, n: int) -> None:
        g = complete_graph(n)
        assert g.ne == n * (n - 1) // 2
        for u in g.vertices():
            for v in g.vertices():
                assert g.has_edge(u, v) == (u != v)

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_is_empty(self, n: int) -> None:
        g = complete_graph(n)
        assert g.nv == 0
        assert g.ne == 0

    def test_single_vertex(self) -> None:
        g = complete_graph(1)
        assert adjacency(g) == [[]]
        assert g.ne == 0

    def test_dtype_from_parameter(self) -> None:
        g = complete_graph(np.int8(5))
        assert g.dtype == np.dtype(np.int8)
        assert all(g.neighbors(u).dtype == np.int8 for u in g.vertices())

    def test_overflow(self) -> None:
        with pytest.raises(SizeOverflow):
            complete_graph(200, dtype=np.int8)

    def test_largest_fitting_size(self) -> None:
        g = complete_graph(np.int8(127))
        assert g.nv == 127
        assert g.ne == 127 * 126 // 2
        assert g.neighbors(127)[-1] == 126

    def test_lists_do_not_share_storage(self) -> None:
        g = complete_graph(4)
        assert not np.shares_memory(g.fadjlist[0], g.fadjlist[1])


class TestCompleteBipartiteGraph:
    """Every cross-block pair adjacent, no intra-block edges."""

    def test_two_by_three(self) -> None:
        g = complete_bipartite_graph(2, 3)
        assert g.nv == 5
        assert g.ne == 6
        assert adjacency(g) == [[3, 4, 5], [3, 4, 5], [1, 2], [1, 2], [1, 2]]

    @pytest.mark.parametrize("n1,n2", [(1, 1), (3, 4), (5, 2)])
    def test_no_intra_block_edges(self, n1: int, n2: int) -> None:
        g = complete_bipartite_graph(n1, n2)
        assert g.ne == n1 * n2
        for u, v in g.edges():
            assert (u <= n1) != (v <= n1)

    def test_empty_block(self) -> None:
        g = complete_bipartite_graph(0, 3)
        assert g.nv == 3
        assert g.ne == 0

    @pytest.mark.parametrize("n1,n2", [(-1, 3), (3, -1)])
    def test_negative_block_is_empty(self, n1: int, n2: int) -> None:
        assert complete_bipartite_graph(n1, n2).nv == 0

    def test_total_size_checked(self) -> None:
        assert complete_bipartite_graph(100, 27, dtype=np.int8).nv == 127
        with pytest.raises(SizeOverflow):
            complete_bipartite_graph(np.int8(100), np.int8(28))

    def test_lists_do_not_share_storage(self) -> None:
        g = complete_bipartite_graph(2, 2)
        assert not np.shares_memory(g.fadjlist[0], g.fadjlist[1])
        assert not np.shares_memory(g.fadjlist[2], g.fadjlist[3])


class TestCompleteDigraph:
    """Arcs in both directions between every pair."""

    def test_three_vertices(self) -> None:
        g = complete_digraph(3)
        assert isinstance(g, SimpleDiGraph)
        assert g.ne == 6
        assert adjacency(g) == [[2, 3], [1, 3], [1, 2]]
        assert backward(g) == [[2, 3], [1, 3], [1, 2]]

    def test_forward_and_backward_are_separate_arrays(self) -> None:
        g = complete_digraph(3)
        assert not np.shares_memory(g.fadjlist[0], g.badjlist[0])

    def test_non_positive_is_empty(self) -> None:
        assert complete_digraph(0).nv == 0


class TestStarGraph:
    """One hub adjacent to all other vertices."""

    def test_star_5(self) -> None:
        g = star_graph(5)
        assert g.ne == 4
        assert degrees(g) == [4, 1, 1, 1, 1]
        assert adjacency(g) == [[2, 3, 4, 5], [1], [1], [1], [1]]

    def test_single_vertex(self) -> None:
        g = star_graph(1)
        assert g.nv == 1
        assert g.ne == 0

    def test_non_positive_is_empty(self) -> None:
        assert star_graph(0).nv == 0

    def test_digraph(self) -> None:
        g = star_digraph(4)
        assert g.ne == 3
        assert adjacency(g) == [[2, 3, 4], [], [], []]
        assert backward(g) == [[], [1], [1], [1]]
        assert star_digraph(-1).nv == 0


class TestPathGraph:
    """Vertices in a line, each adjacent to its immediate neighbors."""

    def test_path_1(self) -> None:
        g = path_graph(1)
        assert g.nv == 1
        assert g.ne == 0

    @pytest.mark.parametrize("n", [0, -4])
    def test_non_positive_is_empty(self, n: int) -> None:
        g = path_graph(n)
        assert g.nv == 0
        assert g.ne == 0

    def test_path_2(self) -> None:
        assert adjacency(path_graph(2)) == [[2], [1]]

    @pytest.mark.parametrize("n", [2, 3, 6, 10])
    def test_degree_sequence_and_acyclic(self, n: int) -> None:
        g = path_graph(n)
        assert degrees(g) == [1] + [2] * (n - 2) + [1]
        assert g.ne == n - 1
        assert n_components(g) == 1  # connected with n - 1 edges: a tree

    def test_interior_order(self) -> None:
        assert path_graph(4).neighbors(3).tolist() == [2, 4]

    def test_digraph(self) -> None:
        g = path_digraph(3)
        assert g.ne == 2
        assert adjacency(g) == [[2], [3], []]
        assert backward(g) == [[], [1], [2]]

    def test_digraph_degenerate(self) -> None:
        assert path_digraph(1).nv == 1
        assert path_digraph(1).ne == 0
        assert path_digraph(0).nv == 0


class TestWheelGraph:
    """Hub joined to every vertex of a rim cycle."""

    def test_wheel_5(self) -> None:
        g = wheel_graph(5)
        assert g.ne == 8
        assert degrees(g) == [4, 3, 3, 3, 3]
        assert adjacency(g) == [
            [2, 3, 4, 5],
            [1, 3, 5],
            [1, 2, 4],
            [1, 3, 5],
            [1, 2, 4],
        ]

    @pytest.mark.parametrize("n", [4, 6, 9, 15])
    def test_hub_and_rim_degrees(self, n: int) -> None:
        g = wheel_graph(n)
        assert g.ne == 2 * (n - 1)
        assert g.degree(1) == n - 1
        assert all(g.degree(u) == 3 for u in range(2, n + 1))

    @pytest.mark.parametrize("n", [2, 3])
    def test_small_sizes_delegate_to_cycle(self, n: int) -> None:
        assert wheel_graph(n) == cycle_graph(n)

    def test_triangle(self) -> None:
        g = wheel_graph(3)
        assert g.ne == 3
        assert degrees(g) == [2, 2, 2]

    def test_degenerate(self) -> None:
        assert wheel_graph(1).nv == 1
        assert wheel_graph(0).nv == 0
        assert wheel_graph(-2).nv == 0


class TestWheelDigraph:
    """Hub points at every rim vertex; rim arcs run 2 -> 3 -> ... -> n -> 2."""

    def test_wheel_digraph_5(self) -> None:
        g = wheel_digraph(5)
        assert g.ne == 8
        assert adjacency(g) == [[2, 3, 4, 5], [3], [4], [5], [2]]
        assert backward(g) == [[], [1, 5], [1, 2], [1, 3], [1, 4]]

    def test_three_vertices_hand_built(self) -> None:
        g = wheel_digraph(3)
        assert g.ne == 4
        assert list(g.edges()) == [(1, 2), (1, 3), (2, 3), (3, 2)]

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_small_sizes_delegate_to_path(self, n: int) -> None:
        assert wheel_digraph(n) == path_digraph(n)

    @pytest.mark.parametrize("n", [4, 7, 12])
    def test_edge_count(self, n: int) -> None:
        g = wheel_digraph(n)
        assert g.ne == 2 * (n - 1)
        assert g.outdegree(1) == n - 1
        assert all(g.outdegree(u) == 1 for u in range(2, n + 1))
        assert all(g.indegree(u) == 2 for u in range(2, n + 1))


class TestBinaryTree:
    """Heap-numbered complete binary tree of depth k."""

    def test_depth_3(self) -> None:
        g = binary_tree(3)
        assert g.nv == 7
        assert g.ne == 6
        assert adjacency(g) == [
            [2, 3],
            [1, 4, 5],
            [1, 6, 7],
            [2],
            [2],
            [3],
            [3],
        ]

    @pytest.mark.parametrize("k", [2, 3, 4, 6])
    def test_degree_laws(self, k: int) -> None:
        g = binary_tree(k)
        n = 2**k - 1
        assert g.nv == n
        assert g.ne == n - 1
        assert g.degree(1) == 2
        leaves = range(2 ** (k - 1), 2**k)
        assert all(g.degree(u) == 1 for u in leaves)
        assert all(g.degree(u) == 3 for u in range(2, 2 ** (k - 1)))
        assert n_components(g) == 1

    def test_depth_1_is_single_vertex(self) -> None:
        g = binary_tree(1)
        assert g.nv == 1
        assert g.ne == 0

    @pytest.mark.parametrize("k", [0, -1])
    def test_non_positive_is_empty(self, k: int) -> None:
        assert binary_tree(k).nv == 0

    def test_overflow(self) -> None:
        assert binary_tree(np.int8(7)).nv == 127
        with pytest.raises(SizeOverflow):
            binary_tree(np.int8(8))
        with pytest.raises(SizeOverflow):
            binary_tree(64)
        with pytest.raises(SizeOverflow):
            binary_tree(10**6)


class TestInvariants:
    """Every direct builder output satisfies the container invariants."""

    @pytest.mark.parametrize(
        "builder",
        [
            complete_graph,
            complete_digraph,
            star_graph,
            star_digraph,
            path_graph,
            path_digraph,
            wheel_graph,
            wheel_digraph,
        ],
    )
    @pytest.mark.parametrize("n", [-1, 0, 1, 2, 3, 4, 5, 8])
    def test_single_parameter_families(self, builder, n: int) -> None:
        assert validate_graph(builder(n)) == []

    @pytest.mark.parametrize("k", [0, 1, 2, 5])
    def test_binary_tree(self, k: int) -> None:
        assert validate_graph(binary_tree(k)) == []

    @pytest.mark.parametrize("n1,n2", [(0, 0), (1, 0), (2, 3), (4, 4)])
    def test_complete_bipartite(self, n1: int, n2: int) -> None:
        assert validate_graph(complete_bipartite_graph(n1, n2)) == []
