from __future__ import annotations

import os
import sys
import re
import time
import random
import argparse
from dataclasses import dataclass, field, fields
from collections import Counter, deque
from typing import Dict, List, Tuple, Optional, Callable, Any, Iterable

import networkx as nx


# =====================================================
# Errors
# =====================================================
class VertexOutOfRangeError(IndexError, ValueError):
    """A vertex id outside 0..n-1 was passed to the graph or an engine."""


class MatrixFormatError(ValueError):
    pass


class HamiltonSearchAborted(RuntimeError):
    """The Hamiltonian search exceeded its step budget before finishing."""

    def __init__(self, budget: int):
        super().__init__(f"Hamiltonian search exceeded budget of {budget} steps")
        self.budget = budget


# =====================================================
# Graph model
# =====================================================
class Graph:
    """
    Undirected graph over vertices 0..n-1.

    - adjacency[v] keeps neighbours in insertion order (one entry per added edge)
    - used[u][v] is scratch state for the shared-state Eulerian walk; reset it
      with reset_used() before every euler() run
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Vertex count must be >= 0, got {n}")
        self.n = n
        self.adjacency: List[List[int]] = [[] for _ in range(n)]
        self.used: List[List[bool]] = self._fresh_used()
        self._edge_list: List[Tuple[int, int]] = []

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[int, int]]) -> "Graph":
        g = cls(n)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    @classmethod
    def from_matrix(cls, matrix: List[List[int]]) -> "Graph":
        """One add_edge per upper-triangle 1, row-major."""
        n = len(matrix)
        g = cls(n)
        for i in range(n):
            for j in range(i + 1, n):
                if matrix[i][j]:
                    g.add_edge(i, j)
        return g

    def _fresh_used(self) -> List[List[bool]]:
        return [[False] * self.n for _ in range(self.n)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise VertexOutOfRangeError(f"Vertex {v} out of range for n={self.n}")

    # -------- construction --------
    def add_edge(self, u: int, v: int) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)
        self.used[u][v] = self.used[v][u] = False
        self._edge_list.append((u, v))

    def reset_used(self) -> None:
        self.used = self._fresh_used()

    # -------- queries --------
    def edge_count(self) -> int:
        return len(self._edge_list)

    def edges(self) -> List[Tuple[int, int]]:
        return list(self._edge_list)

    def degree(self, v: int) -> int:
        self._check_vertex(v)
        return len(self.adjacency[v])

    def to_matrix(self) -> List[List[int]]:
        matrix = [[0] * self.n for _ in range(self.n)]
        for u, v in self._edge_list:
            matrix[u][v] = matrix[v][u] = 1
        return matrix

    def to_networkx(self) -> nx.MultiGraph:
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self._edge_list)
        return G

    # =====================================================
    # Eulerian traversal
    # =====================================================
    def euler(self, start: int, cycle: List[int]) -> None:
        """
        Edge-consuming DFS from start on the shared used matrix.
        Vertices are appended to cycle in post-order; reverse it for visit order.
        """
        if self.n == 0:
            return
        self._check_vertex(start)
        self._euler_visit(start, cycle, self.used)

    def _euler_visit(self, v: int, cycle: List[int], used: List[List[bool]]) -> None:
        for u in self.adjacency[v]:
            if not used[v][u]:
                used[v][u] = used[u][v] = True
                self._euler_visit(u, cycle, used)
        cycle.append(v)

    def _euler_iterative(self, start: int, cycle: List[int], used: List[List[bool]]) -> None:
        # frames are [vertex, index of the next neighbour to try]
        stack: List[List[int]] = [[start, 0]]
        while stack:
            frame = stack[-1]
            v, i = frame
            neighbours = self.adjacency[v]
            while i < len(neighbours) and used[v][neighbours[i]]:
                i += 1
            if i == len(neighbours):
                stack.pop()
                cycle.append(v)
                continue
            u = neighbours[i]
            frame[1] = i + 1
            used[v][u] = used[u][v] = True
            stack.append([u, 0])

    def euler_circuit(self, start: int, iterative: bool = True) -> List[int]:
        """
        Circuit in visit order, with its own used matrix for this call only.
        Does not check that the graph is Eulerian: on a non-Eulerian graph the
        result is whatever the walk from start produces.
        """
        if self.n == 0:
            return []
        self._check_vertex(start)

        used = self._fresh_used()
        cycle: List[int] = []
        if iterative:
            self._euler_iterative(start, cycle, used)
        else:
            self._euler_visit(start, cycle, used)
        cycle.reverse()
        return cycle

    # =====================================================
    # Hamiltonian search
    # =====================================================
    def hamilton(self, start: int = 0, max_steps: int = 0, iterative: bool = True) -> Optional[List[int]]:
        """
        Backtracking search for a Hamiltonian cycle starting at start.

        Returns [start, ..., start] of length n + 1, or None when no cycle exists.
        The closure check only asks whether start is a neighbour of the last
        vertex, so n == 1 needs a self-loop and n == 2 closes over a single edge.

        max_steps > 0 bounds the number of vertices placed on the path;
        HamiltonSearchAborted is raised when the bound is exceeded.
        iterative=False uses call-stack recursion, limited to n below the
        interpreter's recursion limit; both forms return the same cycle.
        """
        if self.n == 0:
            return None
        self._check_vertex(start)

        if iterative:
            return self._hamilton_iterative(start, max_steps)
        return self._hamilton_recursive(start, max_steps)

    def _hamilton_recursive(self, start: int, max_steps: int) -> Optional[List[int]]:
        n = self.n
        visited = [False] * n
        path: List[int] = []
        steps = 0

        def extend(v: int, depth: int) -> bool:
            nonlocal steps
            steps += 1
            if max_steps and steps > max_steps:
                raise HamiltonSearchAborted(max_steps)

            path.append(v)
            visited[v] = True

            # closure before extension
            if depth == n and start in self.adjacency[v]:
                path.append(start)
                return True

            for u in self.adjacency[v]:
                if visited[u]:
                    continue
                if extend(u, depth + 1):
                    return True

            visited[v] = False
            path.pop()
            return False

        if extend(start, 1):
            return path
        return None

    def _hamilton_iterative(self, start: int, max_steps: int) -> Optional[List[int]]:
        n = self.n
        visited = [False] * n
        path: List[int] = []
        # frames are [vertex, index of the next neighbour to try], one per path entry
        stack: List[List[int]] = []
        steps = 0

        def place(v: int) -> bool:
            nonlocal steps
            steps += 1
            if max_steps and steps > max_steps:
                raise HamiltonSearchAborted(max_steps)

            path.append(v)
            visited[v] = True

            # closure before extension
            if len(path) == n and start in self.adjacency[v]:
                path.append(start)
                return True

            stack.append([v, 0])
            return False

        if place(start):
            return path

        while stack:
            frame = stack[-1]
            v, i = frame
            neighbours = self.adjacency[v]
            while i < len(neighbours) and visited[neighbours[i]]:
                i += 1
            if i == len(neighbours):
                # backtrack
                stack.pop()
                visited[v] = False
                path.pop()
                continue
            frame[1] = i + 1
            if place(neighbours[i]):
                return path

        return None


# =====================================================
# Utils
# =====================================================
class GraphUtils:
    @staticmethod
    def is_eulerian(graph: Graph) -> bool:
        """All degrees even and every edge in one connected component."""
        if any(len(ns) % 2 for ns in graph.adjacency):
            return False

        active = [v for v in range(graph.n) if graph.adjacency[v]]
        if not active:
            return True

        visited = {active[0]}
        q = deque([active[0]])
        while q:
            x = q.popleft()
            for y in graph.adjacency[x]:
                if y not in visited:
                    visited.add(y)
                    q.append(y)
        return all(v in visited for v in active)

    @staticmethod
    def is_eulerian_circuit(graph: Graph, seq: List[int]) -> bool:
        """Closed walk that uses every edge instance exactly once."""
        if not seq:
            return graph.edge_count() == 0
        if seq[0] != seq[-1]:
            return False

        remaining: Counter = Counter()
        for u, v in graph.edges():
            remaining[(min(u, v), max(u, v))] += 1

        for u, v in zip(seq, seq[1:]):
            key = (min(u, v), max(u, v))
            if remaining[key] <= 0:
                return False
            remaining[key] -= 1

        return not +remaining

    @staticmethod
    def is_hamiltonian_cycle(graph: Graph, path: Optional[List[int]]) -> bool:
        n = graph.n
        if not path or n == 0:
            return False
        if len(path) != n + 1 or path[0] != path[-1]:
            return False
        if sorted(path[:-1]) != list(range(n)):
            return False
        return all(v in graph.adjacency[u] for u, v in zip(path, path[1:]))

    @staticmethod
    def to_display(seq: Optional[List[int]], one_based: bool = True) -> List[int]:
        if not seq:
            return []
        offset = 1 if one_based else 0
        return [v + offset for v in seq]


# =====================================================
# Adjacency matrix input
# =====================================================
class AdjacencyMatrixProcessor:
    """
    Validates a square, symmetric 0/1 adjacency matrix given as token rows.
    A leading row with a single integer is read as the vertex count when
    further rows follow. A lone "0" with nothing after it is therefore the
    1x1 matrix of a single isolated vertex; empty input is the empty graph.
    """

    def __init__(self, lines: List[List[str]]):
        self.lines = lines
        self.n = 0
        self.matrix: List[List[int]] = []

        self._build_matrix()

    def _parse_entry(self, token: str, r: int, c: int) -> int:
        try:
            value = int(token)
        except ValueError:
            raise MatrixFormatError(f"Row {r + 1}, column {c + 1}: '{token}' is not an integer") from None
        if value not in (0, 1):
            raise MatrixFormatError(f"Row {r + 1}, column {c + 1}: entry must be 0 or 1, got {value}")
        return value

    def _build_matrix(self) -> None:
        rows = [row for row in self.lines if row]
        if not rows:
            return

        expected: Optional[int] = None
        if len(rows) > 1 and len(rows[0]) == 1:
            try:
                expected = int(rows[0][0])
            except ValueError:
                raise MatrixFormatError(f"Header '{rows[0][0]}' is not a vertex count") from None
            rows = rows[1:]
            if expected != len(rows):
                raise MatrixFormatError(f"Header declares {expected} vertices but {len(rows)} rows follow")

        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise MatrixFormatError(f"Row {r + 1} has {len(row)} entries, expected {width}")
        if width != len(rows):
            raise MatrixFormatError(f"Matrix is {len(rows)}x{width}, expected a square matrix")

        matrix = [[self._parse_entry(tok, r, c) for c, tok in enumerate(row)] for r, row in enumerate(rows)]

        for i in range(width):
            if matrix[i][i]:
                raise MatrixFormatError(f"Self-loop on vertex {i + 1} is not allowed")
            for j in range(i + 1, width):
                if matrix[i][j] != matrix[j][i]:
                    raise MatrixFormatError(f"Matrix is not symmetric at ({i + 1}, {j + 1})")

        self.n = width
        self.matrix = matrix

    def build_graph(self) -> Graph:
        return Graph.from_matrix(self.matrix)


# =====================================================
# Random graph generation
# =====================================================
def generate_graph(n: int, density_percent: float, seed: Optional[int] = None) -> Graph:
    """
    Random connected graph that is both Eulerian and Hamiltonian.

    Starts from the cycle 0-1-...-(n-1)-0, adds random edges until the requested
    density is reached, then fixes odd degrees by toggling non-cycle edges.
    """
    if n < 3:
        raise ValueError(f"Need at least 3 vertices, got {n}")
    if not 0 <= density_percent <= 100:
        raise ValueError(f"Density must be within [0, 100], got {density_percent}")

    rng = random.Random(seed)
    max_edges = n * (n - 1) // 2
    edge_target = int(density_percent / 100.0 * max_edges)

    # ordered set: insertion order becomes adjacency order
    edges: Dict[Tuple[int, int], None] = {}
    for i in range(n):
        j = (i + 1) % n
        edges[(min(i, j), max(i, j))] = None
    base = set(edges)

    while len(edges) < edge_target:
        u, v = rng.randrange(n), rng.randrange(n)
        if u == v:
            continue
        edges.setdefault((min(u, v), max(u, v)), None)

    def toggle(a: int, b: int) -> None:
        key = (min(a, b), max(a, b))
        if key in edges:
            del edges[key]
        else:
            edges[key] = None

    def togglable(a: int, b: int) -> bool:
        return (min(a, b), max(a, b)) not in base

    degree = [0] * n
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
    odd = [v for v in range(n) if degree[v] % 2]

    while odd:
        a = odd.pop(0)
        partner = next((b for b in odd if togglable(a, b)), None)
        if partner is not None:
            odd.remove(partner)
            toggle(a, partner)
            continue

        # every remaining odd vertex sits next to a on the base cycle: detour through w
        b = odd.pop(0)
        for w in range(n):
            if w in (a, b):
                continue
            if togglable(a, w) and togglable(w, b):
                toggle(a, w)
                toggle(w, b)
                break
        else:
            raise RuntimeError(f"Could not repair parity between vertices {a} and {b}")

    return Graph.from_edges(n, edges)


# =====================================================
# App-level orchestration
# =====================================================
@dataclass(frozen=True)
class AppConfig:
    """Config container - all parameters set in main"""
    # Vertex both engines start from (0-based). Default: 0.
    start_vertex: int = 0
    # Run the Eulerian traversal. Default: True.
    run_euler: bool = True
    # Run the Hamiltonian search. Default: True.
    run_hamilton: bool = True
    # Use the explicit-stack Eulerian walk (no recursion depth limit). Default: True.
    euler_iterative: bool = True
    # Abort the Hamiltonian search after this many steps. 0 means unlimited.
    hamilton_max_steps: int = 0
    # Use the explicit-stack Hamiltonian search (no recursion depth limit). Default: True.
    hamilton_iterative: bool = True
    # Output vertex ids starting at 1. Default: True.
    output_one_based: bool = True
    # Print detailed debug/progress info. Default: True.
    verbose: bool = True
    # Log filename for debug output.
    debug_log_file: Optional[str] = None
    # Generate separate log file for each run. Default: False.
    generate_individual_log: bool = False

    # Callback interfaces
    on_progress: Optional[Callable[[str, float], None]] = None
    on_complete: Optional[Callable[[Dict], None]] = None


@dataclass
class RunResult:
    euler: List[int] = field(default_factory=list)
    # "circuit", "partial" or "skipped"
    euler_status: str = "skipped"
    hamilton: Optional[List[int]] = None
    # "found", "not_found", "aborted" or "skipped"
    hamilton_status: str = "skipped"


class EulerHamiltonApp:
    def __init__(self, config: Optional[AppConfig] = None):
        self.cfg = config or AppConfig()
        self.debug_output: List[str] = []
        self.progress_data: Dict[str, float] = {}
        self.last_stats: Dict[str, Any] = {}

    def _progress(self, stage: str, progress: float = 0.0) -> None:
        """Progress callback"""
        self.progress_data[stage] = progress
        if self.cfg.on_progress:
            self.cfg.on_progress(stage, progress)

    def _debug_print(self, *args, **kwargs) -> None:
        """Unified debug printer"""
        msg = " ".join(str(arg) for arg in args)
        self.debug_output.append(msg)

        if self.cfg.verbose:
            print(*args, **kwargs)

    def _save_debug_log(self, log_file: Optional[str] = None) -> None:
        """Save debug log to file"""
        if log_file is None:
            log_file = self.cfg.debug_log_file

        if log_file and self.debug_output:
            try:
                with open(log_file, "w", encoding="utf-8") as f:
                    f.write("\n".join(self.debug_output))
                if self.cfg.verbose:
                    print(f"[DEBUG] Log saved to: {log_file}")
            except OSError as e:
                print(f"Failed to save log: {e}", file=sys.stderr)

    def _complete(self, stats: Dict) -> None:
        """Completion callback"""
        self.last_stats = stats
        if self.cfg.on_complete:
            self.cfg.on_complete(stats)

    # -------- I/O --------
    def _read_input(self, input_file: str) -> List[List[str]]:
        with open(input_file, "r", encoding="utf-8", errors="ignore") as f:
            return self._read_input_from_text(f.read())

    def _read_input_from_text(self, text: str) -> List[List[str]]:
        """Read input from text string"""
        raw_lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        lines = [re.split(r"[,\s]+", line) for line in raw_lines]
        lines = [list(filter(None, row)) for row in lines]
        return lines

    def _format_result(self, result: RunResult) -> str:
        """Format result as string"""
        one_based = self.cfg.output_one_based
        out = []
        for label, status, seq in (
            ("EULER", result.euler_status, result.euler),
            ("HAMILTON", result.hamilton_status, result.hamilton),
        ):
            nodes = GraphUtils.to_display(seq, one_based)
            out.append(" ".join([label, status, str(len(nodes))] + [str(x) for x in nodes]))
        return "\n".join(out)

    def _write_output(self, output_file: str, result: RunResult) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(self._format_result(result) + "\n")

    @staticmethod
    def write_matrix(output_file: str, graph: Graph) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(f"{graph.n}\n")
            for row in graph.to_matrix():
                f.write(" ".join(str(x) for x in row) + "\n")

    # -------- pipeline --------
    def _execute_pipeline(self, graph: Graph) -> RunResult:
        """Run the enabled engines on graph"""
        result = RunResult()
        start = self.cfg.start_vertex
        self._debug_print(f"Graph: n={graph.n}, edges={graph.edge_count()}, start={start}")

        if self.cfg.run_euler:
            t0 = time.time()
            result.euler = graph.euler_circuit(start, iterative=self.cfg.euler_iterative)
            is_circuit = GraphUtils.is_eulerian_circuit(graph, result.euler)
            result.euler_status = "circuit" if is_circuit else "partial"
            self._debug_print(
                f"Euler: {result.euler_status}, {len(result.euler)} vertices, {time.time() - t0:.4f}s"
            )
            if not is_circuit and not GraphUtils.is_eulerian(graph):
                self._debug_print("Graph is not Eulerian, sequence does not cover every edge as a circuit")
        self._progress("euler", 0.5)

        if self.cfg.run_hamilton:
            t0 = time.time()
            try:
                result.hamilton = graph.hamilton(
                    start, max_steps=self.cfg.hamilton_max_steps, iterative=self.cfg.hamilton_iterative
                )
                result.hamilton_status = "found" if result.hamilton is not None else "not_found"
            except HamiltonSearchAborted as e:
                self._debug_print(str(e))
                result.hamilton_status = "aborted"
            self._debug_print(f"Hamilton: {result.hamilton_status}, {time.time() - t0:.4f}s")
        self._progress("hamilton", 0.9)

        return result

    def run_on_graph(self, graph: Graph) -> RunResult:
        return self._execute_pipeline(graph)

    def run_on_text(self, text: str) -> RunResult:
        processor = AdjacencyMatrixProcessor(self._read_input_from_text(text))
        return self._execute_pipeline(processor.build_graph())

    def run_from_file(self, input_file: str, output_file: str) -> None:
        """Run full pipeline from file input"""
        self._progress("start", 0.0)
        self._debug_print(f"Processing: {input_file}")

        start_time = time.time()
        error: Optional[str] = None

        # Determine log filename for this run
        log_file_to_use = self.cfg.debug_log_file
        if self.cfg.generate_individual_log:
            base_name = os.path.basename(input_file)
            file_name_without_ext = os.path.splitext(base_name)[0]
            log_file_to_use = f"{file_name_without_ext}.delog"

        try:
            lines = self._read_input(input_file)
            self._progress("read_input", 0.1)

            processor = AdjacencyMatrixProcessor(lines)
            graph = processor.build_graph()
            self._progress("build_graph", 0.2)

            result = self._execute_pipeline(graph)

            self._write_output(output_file, result)
            self._progress("write_output", 1.0)

        except Exception as e:
            error = str(e)
            self._debug_print(f"Process failed: {input_file}, Error: {e}")
            import traceback
            self._debug_print(traceback.format_exc())
        finally:
            end_time = time.time()
            duration = end_time - start_time
            self._debug_print(f"Completed: {input_file}, Duration: {duration:.2f}s")

            final_stats = {
                "input_file": input_file,
                "output_file": output_file,
                "duration": duration,
                "progress": self.progress_data,
                "error": error,
            }

            if log_file_to_use:
                self._save_debug_log(log_file_to_use)

            self._complete(final_stats)

    def run_on_networkx_graph(self, G) -> Tuple[List[Any], Optional[List[Any]]]:
        """
        Execute pipeline directly on a NetworkX graph.

        Nodes are numbered in G.nodes() order; cfg.start_vertex is an index into
        that order. Returns (euler_nodes, hamilton_nodes) with the original node
        objects, hamilton_nodes being None when no cycle was found.
        """
        graph, nodes = _graph_from_networkx(G)
        result = self._execute_pipeline(graph)
        self._progress("complete", 1.0)

        euler_nodes = [nodes[i] for i in result.euler]
        hamilton_nodes = [nodes[i] for i in result.hamilton] if result.hamilton is not None else None
        return euler_nodes, hamilton_nodes


# =====================================================
# NetworkX Adapters
# =====================================================
def _graph_from_networkx(G) -> Tuple[Graph, List[Any]]:
    nodes = list(G.nodes())
    index = {node: i for i, node in enumerate(nodes)}
    graph = Graph(len(nodes))
    for u, v in G.edges():
        graph.add_edge(index[u], index[v])
    return graph, nodes


def eulerian_circuit_dfs(G, source=None) -> List[Any]:
    """
    Eulerian circuit of G as a node list, by edge-exhausting DFS.

    Parameters
    ----------
    G : NetworkX Graph or MultiGraph
        Undirected input graph.
    source : node, optional
        Start node. Defaults to the first node of G.

    Returns
    -------
    list
        Nodes in visit order. When G is not Eulerian the walk is still returned
        and may not cover every edge.

    Examples
    --------
    >>> import networkx as nx
    >>> eulerian_circuit_dfs(nx.cycle_graph(4))
    [0, 1, 2, 3, 0]
    """
    graph, nodes = _graph_from_networkx(G)
    if not nodes:
        return []
    start = 0 if source is None else nodes.index(source)
    return [nodes[i] for i in graph.euler_circuit(start)]


def hamiltonian_cycle_backtracking(G, source=None, max_steps: int = 0) -> Optional[List[Any]]:
    """
    Hamiltonian cycle of G found by plain backtracking, or None.

    Examples
    --------
    >>> import networkx as nx
    >>> hamiltonian_cycle_backtracking(nx.cycle_graph(4))
    [0, 1, 2, 3, 0]
    """
    graph, nodes = _graph_from_networkx(G)
    if not nodes:
        return None
    start = 0 if source is None else nodes.index(source)
    path = graph.hamilton(start, max_steps=max_steps)
    if path is None:
        return None
    return [nodes[i] for i in path]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Find an Eulerian circuit and a Hamiltonian cycle in a graph.")

    # Core Task Arguments
    parser.add_argument("--task", type=str, default="run", choices=["run", "generate"],
                        help="Task to execute: 'run' (process input matrix) or 'generate' (write a random matrix).")

    # 'run' task arguments
    parser.add_argument("--input", "-i", type=str, help="Input matrix file path (required for task='run').")
    parser.add_argument("--output", "-o", type=str, help="Output file path.")

    # Positional args compatibility: python euler_hamilton.py input_file output_file
    parser.add_argument("input_pos", nargs="?", help="Input file path (positional)")
    parser.add_argument("output_pos", nargs="?", help="Output file path (positional)")

    # 'generate' task arguments
    parser.add_argument("--n", type=int, default=10, help="Vertex count (for 'generate').")
    parser.add_argument("--density", type=float, default=30.0, help="Edge density in percent (for 'generate').")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (for 'generate').")

    # AppConfig dynamic arguments
    for f in fields(AppConfig):
        if f.name in ["on_progress", "on_complete"]:
            continue

        arg_name = f"--{f.name.replace('_', '-')}"

        # Handle type annotation being string (from __future__ import annotations)
        is_bool = f.type is bool or (isinstance(f.type, str) and f.type == "bool")

        if is_bool:
            if f.default:
                parser.add_argument(f"--no-{f.name.replace('_', '-')}", dest=f.name, action="store_false", help=f"Disable {f.name}")
                parser.set_defaults(**{f.name: True})
            else:
                parser.add_argument(arg_name, dest=f.name, action="store_true", help=f"Enable {f.name}")
        else:
            arg_type = str
            raw_type = f.type

            if raw_type is int or (isinstance(raw_type, str) and raw_type == "int"):
                arg_type = int
            elif raw_type is float or (isinstance(raw_type, str) and raw_type == "float"):
                arg_type = float

            parser.add_argument(arg_name, type=arg_type, default=f.default, help=f"Set {f.name} (default: {f.default})")

    args = parser.parse_args(argv)

    config_dict = {f.name: getattr(args, f.name) for f in fields(AppConfig) if f.name in args}
    config = AppConfig(**config_dict)

    app = EulerHamiltonApp(config)

    if args.task == "run":
        input_file = args.input or args.input_pos
        output_file = args.output or args.output_pos

        if not input_file or not output_file:
            parser.error("Must specify input and output files (via positional args or --input/--output).")
        app.run_from_file(input_file, output_file)
        return 1 if app.last_stats.get("error") else 0

    # generate
    output_file = args.output or args.input_pos
    if not output_file:
        parser.error("Must specify an output file for task='generate'.")
    try:
        graph = generate_graph(args.n, args.density, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))
    app.write_matrix(output_file, graph)
    app._debug_print(f"Generated n={graph.n}, edges={graph.edge_count()} -> {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
