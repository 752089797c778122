import time
import networkx as nx

from euler_hamilton import (
    Graph,
    GraphUtils,
    eulerian_circuit_dfs,
    hamiltonian_cycle_backtracking,
)


def check_circuit(G, circuit):
    """Every edge of G used exactly once by the closed walk."""
    if not circuit or circuit[0] != circuit[-1]:
        return False
    walked = sorted(tuple(sorted(e)) for e in zip(circuit, circuit[1:]))
    return walked == sorted(tuple(sorted(e)) for e in G.edges())


def verify():
    print("--- Verifying euler_hamilton.py (Final Check) ---")

    # 1. Long cycle (recursion depth check)
    # The iterative walk must handle chains far deeper than the recursion limit.
    n = 20000
    G = nx.cycle_graph(n)
    print(f"\n[Cycle n={n}] Running...")

    t0 = time.time()
    circuit = eulerian_circuit_dfs(G, source=0)
    dt = time.time() - t0

    print(f"  Time: {dt:.4f}s")
    print(f"  Circuit Length: {len(circuit)} (Expected: {n + 1})")

    if dt > 1.0:
        print("  [FAIL] Too slow! The walk should be linear in the edge count.")
    else:
        print("  [PASS] Speed is good.")

    if check_circuit(G, circuit):
        print("  [PASS] Circuit is valid.")
    else:
        print("  [FAIL] Circuit does not use every edge exactly once.")

    # 2. Complete graphs with odd order are Eulerian and Hamiltonian
    for k in (5, 7, 9):
        G = nx.complete_graph(k)
        circuit = eulerian_circuit_dfs(G)
        cycle = hamiltonian_cycle_backtracking(G)
        graph = Graph.from_edges(k, G.edges())
        ok = check_circuit(G, circuit) and GraphUtils.is_hamiltonian_cycle(graph, cycle)
        print(f"\n[K{k}] Euler length {len(circuit)}, Hamilton {cycle}: {'[PASS]' if ok else '[FAIL]'}")

    # 3. Petersen graph has no Hamiltonian cycle
    G = nx.petersen_graph()
    cycle = hamiltonian_cycle_backtracking(G)
    print(f"\n[Petersen] Hamilton: {cycle} {'[PASS]' if cycle is None else '[FAIL]'}")


if __name__ == "__main__":
    verify()
