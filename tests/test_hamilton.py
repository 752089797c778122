import pytest

from euler_hamilton import Graph, GraphUtils, HamiltonSearchAborted, VertexOutOfRangeError


def test_sample_graph_cycle(sample_graph):
    path = sample_graph.hamilton(0)
    assert path == [0, 2, 1, 3, 4, 5, 0]
    assert GraphUtils.is_hamiltonian_cycle(sample_graph, path)


@pytest.mark.parametrize("start", range(6))
def test_sample_graph_every_start(sample_graph, start):
    path = sample_graph.hamilton(start)
    assert len(path) == 7
    assert path[0] == path[-1] == start
    assert sorted(path[:-1]) == list(range(6))
    assert GraphUtils.is_hamiltonian_cycle(sample_graph, path)


def test_repeated_calls_are_identical(sample_graph):
    assert sample_graph.hamilton(0) == sample_graph.hamilton(0)


def test_search_leaves_used_matrix_alone(sample_graph):
    sample_graph.hamilton(0)
    assert not any(any(row) for row in sample_graph.used)


def test_path_graph_has_no_cycle():
    g = Graph.from_edges(3, [(0, 1), (1, 2)])
    assert g.hamilton(0) is None


def test_petersen_graph_has_no_cycle():
    outer = [(k, (k + 1) % 5) for k in range(5)]
    inner = [(5 + k, 5 + (k + 2) % 5) for k in range(5)]
    spokes = [(k, 5 + k) for k in range(5)]
    g = Graph.from_edges(10, outer + inner + spokes)
    assert g.hamilton(0) is None


def test_first_cycle_depends_on_insertion_order():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2), (1, 3)]
    forward = Graph.from_edges(4, edges)
    backward = Graph.from_edges(4, list(reversed(edges)))
    assert forward.hamilton(0) == [0, 1, 2, 3, 0]
    assert backward.hamilton(0) == [0, 2, 3, 1, 0]


def test_empty_graph_not_found():
    assert Graph(0).hamilton(0) is None


def test_single_vertex_without_loop_not_found():
    assert Graph(1).hamilton(0) is None


def test_single_vertex_with_loop_closes():
    g = Graph(1)
    g.add_edge(0, 0)
    assert g.hamilton(0) == [0, 0]


def test_two_vertices_close_over_one_edge():
    g = Graph.from_edges(2, [(0, 1)])
    assert g.hamilton(0) == [0, 1, 0]
    assert g.hamilton(1) == [1, 0, 1]


def test_two_isolated_vertices_not_found():
    assert Graph(2).hamilton(0) is None


@pytest.mark.parametrize("start", [-1, 4])
def test_out_of_range_start_fails_fast(start):
    g = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    with pytest.raises(VertexOutOfRangeError):
        g.hamilton(start)


def _clique_with_isolated_vertex(k):
    edges = [(u, v) for u in range(k) for v in range(u + 1, k)]
    return Graph.from_edges(k + 1, edges)


def test_step_budget_aborts_search():
    g = _clique_with_isolated_vertex(7)
    with pytest.raises(HamiltonSearchAborted) as excinfo:
        g.hamilton(0, max_steps=10)
    assert excinfo.value.budget == 10
    assert "exceeded budget of 10 steps" in str(excinfo.value)


def test_unlimited_search_explores_everything():
    g = _clique_with_isolated_vertex(7)
    assert g.hamilton(0, max_steps=0) is None


def test_budget_large_enough_finds_cycle(sample_graph):
    assert sample_graph.hamilton(0, max_steps=6) == [0, 2, 1, 3, 4, 5, 0]


# -------- explicit-stack search --------
def test_long_cycle_beyond_recursion_limit():
    n = 2000
    g = Graph.from_edges(n, [(i, (i + 1) % n) for i in range(n)])
    path = g.hamilton(0)
    assert len(path) == n + 1
    assert path == list(range(n)) + [0]
    assert GraphUtils.is_hamiltonian_cycle(g, path)


def _insertion_order_graphs():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2), (1, 3)]
    return [Graph.from_edges(4, edges), Graph.from_edges(4, list(reversed(edges)))]


@pytest.mark.parametrize("start", range(6))
def test_recursive_and_iterative_agree_on_sample(sample_graph, start):
    assert sample_graph.hamilton(start, iterative=False) == sample_graph.hamilton(start, iterative=True)


@pytest.mark.parametrize("index", [0, 1])
@pytest.mark.parametrize("start", range(4))
def test_recursive_and_iterative_agree_on_insertion_order(index, start):
    g = _insertion_order_graphs()[index]
    assert g.hamilton(start, iterative=False) == g.hamilton(start, iterative=True)


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (1, [], None),
        (1, [(0, 0)], [0, 0]),
        (2, [(0, 1)], [0, 1, 0]),
        (2, [], None),
        (3, [(0, 1), (1, 2)], None),
    ],
)
@pytest.mark.parametrize("iterative", [True, False])
def test_degenerate_cases_both_forms(n, edges, expected, iterative):
    assert Graph.from_edges(n, edges).hamilton(0, iterative=iterative) == expected


@pytest.mark.parametrize("iterative", [True, False])
def test_step_budget_counts_alike(iterative):
    g = _clique_with_isolated_vertex(7)
    with pytest.raises(HamiltonSearchAborted):
        g.hamilton(0, max_steps=1956, iterative=iterative)
    assert g.hamilton(0, max_steps=1957, iterative=iterative) is None
