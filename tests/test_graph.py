"""Tests for the graph model: building, lookups, adjacency and snapshots."""

import math

import pytest

from graph import (
    Edge, EdgeKind, Graph, InvalidGraphError, Node, NodeLabeler, NodeRole,
    distance, euclidean, manhattan,
)


class TestDistance:
    """Tests for canvas distance metrics."""

    def test_euclidean(self):
        """3-4-5 triangle."""
        assert euclidean(Node("a", 0, 0), Node("b", 3, 4)) == pytest.approx(5.0)

    def test_manhattan(self):
        """Sum of absolute deltas."""
        assert manhattan(Node("a", 1, 1), Node("b", -2, 5)) == pytest.approx(7.0)

    def test_distance_by_name(self):
        """distance() dispatches on the metric name."""
        a, b = Node("a", 0, 0), Node("b", 3, 4)
        assert distance("euclidean", a, b) == pytest.approx(5.0)
        assert distance("manhattan", a, b) == pytest.approx(7.0)

    def test_distance_unknown_metric_raises(self):
        """Unknown metric names are rejected."""
        with pytest.raises(ValueError):
            distance("chebyshev", Node("a"), Node("b"))


class TestFindEdge:
    """Tests for direction-aware edge lookup."""

    def test_directed_edge_one_way(self, make_graph):
        """A directed edge is found forwards only."""
        g = make_graph([("A", 0, 0), ("B", 1, 0)], [("ab", "A", "B", 1)])
        assert g.find_edge("A", "B").id == "ab"
        assert g.find_edge("B", "A") is None

    def test_undirected_edge_both_ways(self, undirected_pair):
        """An undirected edge is found from either end."""
        assert undirected_pair.find_edge("A", "B").id == "ab"
        assert undirected_pair.find_edge("B", "A").id == "ab"

    def test_path_kind_is_directed(self, make_graph):
        """A path-marked edge keeps directed semantics."""
        g = make_graph([("A", 0, 0), ("B", 1, 0)], [("ab", "A", "B", 1, EdgeKind.PATH)])
        assert g.find_edge("B", "A") is None

    def test_first_matching_edge_wins(self, make_graph):
        """Parallel edges resolve to the earliest one."""
        g = make_graph(
            [("A", 0, 0), ("B", 1, 0)],
            [("first", "A", "B", 9), ("second", "A", "B", 1)],
        )
        assert g.find_edge("A", "B").id == "first"

    def test_missing_lookups_return_none(self, sample_graph):
        """Optional lookups never raise."""
        assert sample_graph.get_node("nope") is None
        assert sample_graph.get_edge("nope") is None
        assert sample_graph.find_edge("nope", "nada") is None


class TestNeighbours:
    """Tests for neighbour enumeration and the adjacency index."""

    def test_directed_neighbours(self, make_graph):
        """Only outgoing directed edges count."""
        g = make_graph(
            [("A", 0, 0), ("B", 1, 0), ("C", 2, 0)],
            [("ab", "A", "B", 2), ("ca", "C", "A", 3)],
        )
        assert [(n.node_id, n.weight, n.edge_id) for n in g.neighbours("A")] == [("B", 2, "ab")]
        assert g.neighbours("B") == []

    def test_undirected_neighbour_from_target(self, undirected_pair):
        """An undirected edge is walkable from its target."""
        assert [n.node_id for n in undirected_pair.neighbours("B")] == ["A"]

    def test_adjacency_matches_neighbours(self, grid_graph):
        """The one-pass index agrees with per-node scans."""
        adj = grid_graph.adjacency()
        for node_id in grid_graph.node_ids():
            assert adj[node_id] == grid_graph.neighbours(node_id)

    def test_adjacency_undirected_self_loop_listed_once(self, make_graph):
        """A self-loop does not double up."""
        g = make_graph([("A", 0, 0)], [("aa", "A", "A", 1, EdgeKind.UNDIRECTED)])
        assert len(g.adjacency()["A"]) == 1

    def test_path_cost(self, sample_graph, sample_ids):
        """Sum of weights along the path."""
        path = [sample_ids[0], sample_ids[3], sample_ids[5]]
        assert sample_graph.path_cost(path) == pytest.approx(10)


class TestBuilding:
    """Tests for snapshot validation."""

    def test_duplicate_node_rejected(self):
        g = Graph()
        g.add_node(Node("A"))
        with pytest.raises(InvalidGraphError):
            g.add_node(Node("A"))

    def test_edge_to_unknown_node_rejected(self):
        g = Graph()
        g.add_node(Node("A"))
        with pytest.raises(InvalidGraphError):
            g.add_edge(Edge("ax", "A", "X"))

    def test_negative_weight_rejected(self, make_graph):
        with pytest.raises(InvalidGraphError):
            make_graph([("A", 0, 0), ("B", 1, 0)], [("ab", "A", "B", -1)])

    @pytest.mark.parametrize("weight", ["5", None, True, math.nan])
    def test_non_numeric_weight_rejected(self, make_graph, weight):
        with pytest.raises(InvalidGraphError):
            make_graph([("A", 0, 0), ("B", 1, 0)], [("ab", "A", "B", weight)])

    @pytest.mark.parametrize("x,y", [(math.nan, 0), (0, math.inf), ("nan", 0), (0, "-inf")])
    def test_non_finite_position_rejected(self, x, y):
        with pytest.raises(InvalidGraphError):
            Graph().add_node(Node("A", x=x, y=y))

    def test_non_finite_position_rejected_from_snapshot(self):
        with pytest.raises(InvalidGraphError):
            Graph.from_dict({"nodes": [{"id": "a", "x": "nan", "y": 0}], "edges": []})

    def test_zero_weight_accepted(self, make_graph):
        g = make_graph([("A", 0, 0), ("B", 1, 0)], [("ab", "A", "B", 0)])
        assert g.edge_count() == 1

    def test_invalid_graph_error_is_value_error(self):
        assert issubclass(InvalidGraphError, ValueError)

    def test_create_generates_ids(self):
        g = Graph()
        a = g.create_node(0, 0)
        b = g.create_node(10, 0)
        e = g.create_edge(a.id, b.id, weight=3)
        assert a.id != b.id
        assert a.id.startswith("node-")
        assert e.id.startswith("edge-")
        assert g.find_edge(a.id, b.id) is e


class TestSnapshot:
    """Tests for the front-end JSON shape."""

    def test_round_trip(self, undirected_pair):
        data = undirected_pair.to_dict()
        assert Graph.from_dict(data).to_dict() == data

    def test_shape(self, undirected_pair):
        data = undirected_pair.to_dict()
        assert data["nodes"][0] == {
            "id": "A", "x": 0.0, "y": 0.0, "label": "A", "type": "default", "shape": "circle",
        }
        assert data["edges"][0] == {
            "id": "ab", "source": "A", "target": "B", "weight": 5, "type": "undirected",
        }

    def test_role_tags_read_back(self):
        g = Graph.from_dict({
            "nodes": [
                {"id": "a", "x": 0, "y": 0, "type": "start"},
                {"id": "b", "x": 1, "y": 0, "type": "goal", "shape": "square"},
            ],
            "edges": [],
        })
        assert g.start_node_id() == "a"
        assert g.goal_node_id() == "b"

    @pytest.mark.parametrize("data", [
        None,
        [],
        {"nodes": [{"x": 0}]},
        {"nodes": [{"id": "a", "type": "wall"}]},
        {"nodes": [{"id": "a"}], "edges": [{"id": "e", "source": "a", "target": "zz"}]},
        {"nodes": [{"id": "a"}, {"id": "b"}],
         "edges": [{"id": "e", "source": "a", "target": "b", "weight": -2}]},
    ])
    def test_malformed_snapshots_rejected(self, data):
        with pytest.raises(InvalidGraphError):
            Graph.from_dict(data)


class TestSample:
    """Tests for the demo graph."""

    def test_structure(self, sample_graph):
        assert sample_graph.node_count() == 6
        assert sample_graph.edge_count() == 6
        assert all(e.directed for e in sample_graph.edges.values())

    def test_start_and_goal(self, sample_graph, sample_ids):
        assert sample_graph.start_node_id() == sample_ids[0]
        assert sample_graph.goal_node_id() == sample_ids[5]
        assert sample_graph.nodes[sample_ids[0]].role is NodeRole.START

    def test_labels_restart_each_time(self):
        labeler = NodeLabeler()
        labeler.next_label()
        g = Graph.sample(labeler)
        assert [n.label for n in g.nodes.values()] == [f"Node {i}" for i in range(1, 7)]
        assert labeler.issued == 6


class TestNodeLabeler:
    """Tests for sequential labels."""

    def test_sequence_and_reset(self):
        labeler = NodeLabeler()
        assert labeler.next_label() == "Node 1"
        assert labeler.next_label() == "Node 2"
        labeler.reset()
        assert labeler.next_label() == "Node 1"

    def test_independent_counters(self):
        a, b = NodeLabeler(), NodeLabeler(prefix="Stop")
        a.next_label()
        assert b.next_label() == "Stop 1"
