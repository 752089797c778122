# =============================
# Euler / Hamilton timing harness
# Compares the DFS engines with NetworkX on random Eulerian + Hamiltonian graphs
# =============================

import time  # timing
import sys


# NetworkX (pure Python graph library)
try:
    import networkx as nx
except ImportError:
    print("Error: networkx not found, install it with:")
    print("  pip install networkx")
    sys.exit(1)


try:
    from euler_hamilton import generate_graph, GraphUtils, HamiltonSearchAborted
except ImportError:
    print("Error: euler_hamilton.py not found, run this script from the project root.")
    sys.exit(1)


# Step budget for one Hamiltonian search; sparse graphs can take exponential time
HAMILTON_MAX_STEPS = 2_000_000


# =============================
# One benchmark case
# Input: vertex count and density in percent
# =============================
def benchmark_one_case(n, density, seed=None):
    """
    Build one random graph, time the Eulerian walk (ours vs NetworkX) and the
    Hamiltonian search, and check both results.
    """
    print(f"\n--- n = {n}, density = {density}% ---")
    g = generate_graph(n, density, seed=seed)
    print(f"Vertices: {g.n}, Edges: {g.edge_count()}")

    # 1. Eulerian circuit (ours)
    start_my = time.time()
    euler_seq = g.euler_circuit(0)
    my_euler_time = time.time() - start_my
    euler_ok = GraphUtils.is_eulerian_circuit(g, euler_seq)
    print(f"[Euler DFS]      Time: {my_euler_time * 1e6:.0f} us | Length: {len(euler_seq)} | Valid: {euler_ok}")

    # 2. Eulerian circuit (NetworkX)
    G = g.to_networkx()
    start_nx = time.time()
    nx_circuit = list(nx.eulerian_circuit(G, source=0))
    nx_time = time.time() - start_nx
    print(f"[NetworkX]       Time: {nx_time * 1e6:.0f} us | Length: {len(nx_circuit) + 1}")

    speedup = nx_time / my_euler_time if my_euler_time > 0 else 0.0
    print(f"Speedup vs NetworkX: {speedup:.2f}x")

    # 3. Hamiltonian cycle (ours, no NetworkX counterpart)
    start_h = time.time()
    try:
        path = g.hamilton(0, max_steps=HAMILTON_MAX_STEPS)
        status = "found" if path is not None else "not found"
    except HamiltonSearchAborted:
        path = None
        status = f"aborted after {HAMILTON_MAX_STEPS} steps"
    ham_time = time.time() - start_h
    print(f"[Hamilton]       Time: {ham_time * 1e6:.0f} us | Cycle: {status}")

    if path is not None and not GraphUtils.is_hamiltonian_cycle(g, path):
        print("Invalid Hamiltonian cycle!")

    return my_euler_time, ham_time


def main():
    print("=========================================")
    print("Benchmark: Euler DFS / Hamilton backtracking vs NetworkX")
    print("=========================================")

    # small n only, larger ones take long
    for n in range(5, 66, 5):
        benchmark_one_case(n, 30.0, seed=n)  # sparse
    for n in range(5, 126, 5):
        benchmark_one_case(n, 70.0, seed=n)  # dense


if __name__ == "__main__":
    main()
