import pytest

from euler_hamilton import GraphUtils, generate_graph


@pytest.mark.parametrize("n", [3, 4, 5, 10, 25])
@pytest.mark.parametrize("density", [0.0, 30.0, 70.0, 100.0])
def test_generated_graph_is_eulerian_and_hamiltonian(n, density):
    g = generate_graph(n, density, seed=n)
    assert GraphUtils.is_eulerian(g)
    assert GraphUtils.is_eulerian_circuit(g, g.euler_circuit(0))
    assert GraphUtils.is_hamiltonian_cycle(g, list(range(n)) + [0])


def test_generated_graph_is_simple():
    g = generate_graph(20, 50.0, seed=1)
    keys = [(min(u, v), max(u, v)) for u, v in g.edges()]
    assert len(keys) == len(set(keys))
    assert all(u != v for u, v in keys)


def test_base_cycle_comes_first():
    g = generate_graph(6, 60.0, seed=3)
    assert g.edges()[:6] == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (0, 5)]


def test_density_roughly_respected():
    n = 30
    g = generate_graph(n, 70.0, seed=7)
    target = int(0.7 * n * (n - 1) / 2)
    # parity repair moves the count by at most one edge per odd vertex
    assert abs(g.edge_count() - target) <= n


def test_same_seed_same_graph():
    assert generate_graph(15, 40.0, seed=42).edges() == generate_graph(15, 40.0, seed=42).edges()


@pytest.mark.parametrize("n, density", [(2, 50.0), (0, 50.0), (5, -1.0), (5, 100.5)])
def test_invalid_arguments(n, density):
    with pytest.raises(ValueError):
        generate_graph(n, density)
