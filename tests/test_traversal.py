import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.traversal import bfs_reachable, dfs_order


@st.composite
def adjacency_matrices(draw, max_size=7):
    n = draw(st.integers(1, max_size))
    return [[draw(st.integers(0, 1)) for _ in range(n)] for _ in range(n)]


def test_bfs_chain_excludes_start_and_isolated_vertex():
    adjacency = [
        [0, 1, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert bfs_reachable(adjacency, 0) == [1, 2]


def test_bfs_includes_start_on_cycle():
    adjacency = [[0, 1], [1, 0]]
    assert bfs_reachable(adjacency, 0) == [0, 1]


def test_bfs_no_edges_reaches_nothing():
    adjacency = [[0] * 3 for _ in range(3)]
    assert bfs_reachable(adjacency, 1) == []


def test_bfs_rejects_bad_start():
    with pytest.raises(ValueError):
        bfs_reachable([[0, 1], [1, 0]], 2)
    with pytest.raises(ValueError):
        bfs_reachable([[0, 1], [1, 0]], -1)


def test_bfs_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        bfs_reachable([[0, 1], [1]], 0)


@given(adjacency_matrices(), st.data())
def test_bfs_result_is_closed_under_edges(adjacency, data):
    n = len(adjacency)
    start = data.draw(st.integers(0, n - 1))
    reached = bfs_reachable(adjacency, start)
    assert reached == sorted(set(reached))
    reached_set = set(reached)
    for v in range(n):
        if adjacency[start][v]:
            assert v in reached_set
    for u in reached:
        for v in range(n):
            if adjacency[u][v]:
                assert v in reached_set


@given(adjacency_matrices(), st.data())
def test_bfs_every_reached_vertex_has_a_reached_predecessor(adjacency, data):
    n = len(adjacency)
    start = data.draw(st.integers(0, n - 1))
    reached = set(bfs_reachable(adjacency, start))
    sources = reached | {start}
    for v in reached:
        assert any(adjacency[u][v] for u in sources)


def test_dfs_worked_example():
    adjacency = [
        [0, 1, 1, 0],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert dfs_order(adjacency) == [0, 1, 3, 2]


def test_dfs_without_edges_visits_in_index_order():
    adjacency = [[0] * 5 for _ in range(5)]
    assert dfs_order(adjacency) == list(range(5))


def test_dfs_empty_graph():
    assert dfs_order([]) == []


def test_dfs_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        dfs_order([[0, 1, 0], [1, 0, 0]])


@given(adjacency_matrices())
def test_dfs_visits_every_vertex_once(adjacency):
    order = dfs_order(adjacency)
    assert sorted(order) == list(range(len(adjacency)))


@given(adjacency_matrices())
def test_dfs_new_roots_are_smallest_unvisited(adjacency):
    order = dfs_order(adjacency)
    n = len(adjacency)
    assert order[0] == 0
    for k in range(1, n):
        vertex = order[k]
        earlier = order[:k]
        if not any(adjacency[u][vertex] == 1 for u in earlier):
            assert vertex == min(set(range(n)) - set(earlier))