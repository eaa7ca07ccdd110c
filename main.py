"""
main.py — Graph Search Visualizer Flask App
=============================================
JSON API in front of the search engine.  The browser owns the canvas and
the editing; it posts a graph snapshot and gets back the full step
sequence to animate.

Routes:
  GET  /api/health             – liveness probe
  GET  /api/algorithms         – registry cards (label, pseudocode, tags…)
  GET  /api/graph/sample       – the demo graph + its start / goal ids
  POST /api/run                – run one search, return result + steps
  POST /api/compare            – run two searches on one graph, compare

State management:
  None.  Every request carries its own snapshot, so any worker can
  serve any request and nothing has to be cleaned up afterwards.
"""

import logging
from typing import Optional, Tuple

from flask import Flask, jsonify, request

import config
from graph import Graph, NodeLabeler
from algorithms import HEURISTICS, get_algorithm, list_algorithms
from engine import Recorder, compare

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _text(data: dict, key: str) -> Optional[str]:
    """An optional string field; anything else in it is a bad request."""
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _endpoints(graph: Graph, data: dict) -> Tuple[str, str]:
    """start / goal from the body, falling back to the snapshot's role tags."""
    start: Optional[str] = _text(data, "start") or graph.start_node_id()
    goal:  Optional[str] = _text(data, "goal")  or graph.goal_node_id()
    if not start or not goal:
        raise ValueError("Set start and goal first")
    for node_id in (start, goal):
        if node_id not in graph:
            raise ValueError(f"Unknown node: {node_id}")
    return start, goal


def _checked_algorithm(data: dict, field: str = "algorithm") -> str:
    key = _text(data, field) or config.DEFAULT_ALGORITHM
    if get_algorithm(key) is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return key


def _checked_heuristic(data: dict, *algo_keys: str) -> str:
    """Validated only when one of the algorithms actually takes a heuristic."""
    if not any(get_algorithm(k).has_heuristic for k in algo_keys):
        return config.DEFAULT_HEURISTIC
    key = _text(data, "heuristic") or config.DEFAULT_HEURISTIC
    if key not in HEURISTICS:
        raise ValueError(f"Unknown heuristic: {key}")
    return key


def _record(algo_key: str, start: str, goal: str, graph: Graph, heuristic: str) -> Recorder:
    rec = Recorder()
    rec.start(algo_key, start, goal, graph, heuristic)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------
@app.errorhandler(ValueError)
def handle_bad_request(err: ValueError):
    # InvalidGraphError lands here too (it is a ValueError)
    logger.info("Rejected %s %s: %s", request.method, request.path, err)
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# API: Meta
# ---------------------------------------------------------------------------
@app.route("/api/health")
def api_health():
    return jsonify({"status": "ok"})


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        "algorithms":        [info.to_dict() for info in list_algorithms()],
        "default_algorithm": config.DEFAULT_ALGORITHM,
        "default_heuristic": config.DEFAULT_HEURISTIC,
        "speed_presets":     config.SPEED_PRESETS,
        "step_delay_ms":     config.DEFAULT_STEP_DELAY_MS,
    })


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph/sample")
def api_graph_sample():
    g = Graph.sample(NodeLabeler())
    return jsonify({
        "graph": g.to_dict(),
        "start": g.start_node_id(),
        "goal":  g.goal_node_id(),
    })


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data      = _payload()
    graph     = Graph.from_dict(data.get("graph"))
    start, goal = _endpoints(graph, data)
    algo_key  = _checked_algorithm(data)
    heuristic = _checked_heuristic(data, algo_key)

    rec = _record(algo_key, start, goal, graph, heuristic)
    logger.info(
        "%s %s → %s: found=%s settled=%d",
        algo_key, start, goal, rec.metrics.path_found, rec.metrics.nodes_visited,
    )
    return jsonify({
        "result":  rec.result.to_dict(),
        "steps":   [s.to_dict() for s in rec.steps],
        "metrics": rec.metrics.to_dict(),
    })


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data        = _payload()
    graph       = Graph.from_dict(data.get("graph"))
    start, goal = _endpoints(graph, data)
    left_key    = _checked_algorithm(data, "left")
    right_key   = _checked_algorithm(data, "right")
    heuristic   = _checked_heuristic(data, left_key, right_key)

    left  = _record(left_key,  start, goal, graph, heuristic)
    right = _record(right_key, start, goal, graph, heuristic)
    return jsonify(compare(left.metrics, right.metrics).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph Search Visualizer on http://%s:%d", config.HOST, config.PORT)
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
