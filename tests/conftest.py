"""
Pytest configuration and shared fixtures.

Graphs are built with explicit ids (except the sample, whose ids are
generated) so tests can assert on exact paths.
"""

import pytest

from graph import Edge, EdgeKind, Graph, Node


def build_graph(nodes, edges) -> Graph:
    """
    nodes : [(id, x, y), …]
    edges : [(id, source, target, weight), …] or with a trailing EdgeKind
    """
    g = Graph()
    for node_id, x, y in nodes:
        g.add_node(Node(node_id, x=x, y=y))
    for row in edges:
        edge_id, source, target, weight = row[:4]
        kind = row[4] if len(row) > 4 else EdgeKind.DEFAULT
        g.add_edge(Edge(edge_id, source, target, weight=weight, kind=kind))
    return g


@pytest.fixture
def make_graph():
    """Factory fixture: make_graph(nodes, edges) → Graph."""
    return build_graph


@pytest.fixture
def sample_graph() -> Graph:
    """The six-node demo graph."""
    return Graph.sample()


@pytest.fixture
def sample_ids(sample_graph) -> list:
    """Sample node ids in creation order (index 0 is start, 5 is goal)."""
    return sample_graph.node_ids()


@pytest.fixture
def undirected_pair() -> Graph:
    """A ↔ B with weight 5."""
    return build_graph(
        [("A", 0, 0), ("B", 100, 0)],
        [("ab", "A", "B", 5, EdgeKind.UNDIRECTED)],
    )


@pytest.fixture
def unreachable_graph() -> Graph:
    """A → B and D → A; C is isolated.  From A only A and B are reachable."""
    return build_graph(
        [("A", 0, 0), ("B", 100, 0), ("C", 200, 0), ("D", 0, 100)],
        [("ab", "A", "B", 1), ("da", "D", "A", 1)],
    )


@pytest.fixture
def relaxation_graph() -> Graph:
    """
    S → A costs 5 directly but 2 via B, so A is pushed twice.
    Cheapest S → G is S, B, A, G at cost 3.
    """
    return build_graph(
        [("S", 0, 0), ("A", 100, 0), ("B", 50, 50), ("G", 200, 0)],
        [
            ("sa", "S", "A", 5),
            ("sb", "S", "B", 1),
            ("ba", "B", "A", 1),
            ("ag", "A", "G", 1),
        ],
    )


@pytest.fixture
def corridor_graph() -> Graph:
    """
    Undirected line L2 - L1 - S - A - B - G, 100 px apart, weight 100 each.
    Edge weights equal the euclidean gaps, so the heuristic is admissible
    and A* can ignore the L branch entirely.
    """
    U = EdgeKind.UNDIRECTED
    return build_graph(
        [
            ("L2", -200, 0), ("L1", -100, 0), ("S", 0, 0),
            ("A", 100, 0), ("B", 200, 0), ("G", 300, 0),
        ],
        [
            ("s-l1", "S", "L1", 100, U),
            ("s-a", "S", "A", 100, U),
            ("l1-l2", "L1", "L2", 100, U),
            ("a-b", "A", "B", 100, U),
            ("b-g", "B", "G", 100, U),
        ],
    )


@pytest.fixture
def grid_graph() -> Graph:
    """
    3 × 3 undirected grid, cells 100 px apart, weight 100 per edge, plus
    an expensive diagonal shortcut r0c0 → r2c2 (weight 500).
    """
    U = EdgeKind.UNDIRECTED
    nodes, edges = [], []
    for r in range(3):
        for c in range(3):
            nodes.append((f"r{r}c{c}", c * 100, r * 100))
            if c > 0:
                edges.append((f"h{r}{c}", f"r{r}c{c - 1}", f"r{r}c{c}", 100, U))
            if r > 0:
                edges.append((f"v{r}{c}", f"r{r - 1}c{c}", f"r{r}c{c}", 100, U))
    edges.append(("diag", "r0c0", "r2c2", 500))
    return build_graph(nodes, edges)


@pytest.fixture
def client():
    """Flask test client."""
    from main import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
