import pytest

from euler_hamilton import Graph, AppConfig

# Vertices 0-1, 2-3 and 4-5 cross-connected, as in the sample input
SAMPLE_MATRIX_TEXT = """\
6
0 0 1 1 1 1
0 0 1 1 0 0
1 1 0 0 1 1
1 1 0 0 1 1
1 0 1 1 0 1
1 0 1 1 1 0
"""

SAMPLE_EDGES = [
    (0, 2), (0, 3), (0, 4), (0, 5),
    (1, 2), (1, 3),
    (2, 4), (2, 5),
    (3, 4), (3, 5),
    (4, 5),
]


@pytest.fixture
def sample_graph():
    return Graph.from_edges(6, SAMPLE_EDGES)


@pytest.fixture
def quiet_config():
    return AppConfig(verbose=False)
