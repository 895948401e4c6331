"""
main.py — Traversal Engine Flask Host
======================================
Thin JSON front end over one StepScheduler.  Rendering lives in the
browser; this process only answers commands and state polls.  The
client's timer is the cadence source (it POSTs /api/tick every
`tick_interval_ms` while auto mode runs) and its step button is the
trigger source (/api/step).

Routes:
  GET  /api/graph             – current graph
  POST /api/graph             – build from {num_nodes, edges, start, end}
  POST /api/graph/import      – build from the text input protocol
  POST /api/graph/generate    – random connected graph
  GET  /api/algorithms        – registered traversals, optional ?tag= filter
  POST /api/run               – start BFS / DFS / Dijkstra
  POST /api/tick              – one auto-mode tick
  POST /api/step              – one manual step
  POST /api/pause             – pause auto-advance
  POST /api/resume            – resume auto-advance
  POST /api/toggle_pause      – flip pause
  POST /api/mode/step         – switch to step mode
  POST /api/mode/auto         – switch to auto mode
  POST /api/reset             – cancel the run
  GET  /api/state             – full engine snapshot
  POST /api/trace             – record a whole run without touching the live one

State management:
  One workspace per app (graph, default start/end, scheduler), kept in
  app.extensions.  Loading a new graph replaces the scheduler but keeps
  the step-mode preference.
"""

import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request

import config
from algorithms import algorithms_by_tag, get_algorithm, list_algorithms
from engine import Recorder, StepScheduler
from graph import Graph, GraphConfigError, parse_graph_input

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------
class Workspace:
    """The graph loaded into this host plus the scheduler driving it."""

    def __init__(self):
        self.graph:     Optional[Graph]          = None
        self.start:     Optional[int]            = None
        self.end:       Optional[int]            = None
        self.scheduler: Optional[StepScheduler]  = None

    def load(self, graph: Graph, start: int, end: int) -> None:
        graph.require_node(start, role="start")
        graph.require_node(end, role="end")
        step_mode = self.scheduler.is_step_mode if self.scheduler else False

        self.graph     = graph
        self.start     = start
        self.end       = end
        self.scheduler = StepScheduler(graph)
        if step_mode:
            self.scheduler.set_step_mode()

    def state(self) -> dict:
        snap = self.scheduler.snapshot()
        snap["default_start"]    = self.start
        snap["default_end"]      = self.end
        snap["tick_interval_ms"] = config.TICK_INTERVAL_MS
        return snap


class NoGraphLoaded(Exception):
    pass


def get_workspace() -> Workspace:
    return current_app.extensions["traversal_workspace"]


def get_scheduler() -> StepScheduler:
    ws = get_workspace()
    if ws.scheduler is None:
        raise NoGraphLoaded()
    return ws.scheduler


def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app() -> Flask:
    app = Flask(__name__)
    app.extensions["traversal_workspace"] = Workspace()

    @app.errorhandler(GraphConfigError)
    def handle_config_error(e):
        logger.warning(f"Rejected configuration: {e}")
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ValueError)
    def handle_value_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NoGraphLoaded)
    def handle_no_graph(e):
        return jsonify({"error": "Load a graph first"}), 409

    # -----------------------------------------------------------------------
    # API: Graph
    # -----------------------------------------------------------------------
    @app.route("/api/graph", methods=["GET"])
    def api_graph_get():
        ws = get_workspace()
        if ws.graph is None:
            raise NoGraphLoaded()
        return jsonify({"graph": ws.graph.to_dict(), "start": ws.start, "end": ws.end})

    @app.route("/api/graph", methods=["POST"])
    def api_graph_build():
        data = _payload()
        g = Graph.build(data.get("num_nodes"), data.get("edges", []), strict=data.get("strict"))
        ws = get_workspace()
        ws.load(g, data.get("start", 1), data.get("end", g.num_nodes))
        return jsonify({"graph": g.to_dict(), "state": ws.state()})

    @app.route("/api/graph/import", methods=["POST"])
    def api_graph_import():
        data = _payload()
        parsed = parse_graph_input(data.get("text", ""), strict=data.get("strict"))
        ws = get_workspace()
        ws.load(parsed.graph, parsed.start, parsed.end)
        return jsonify({"graph": parsed.graph.to_dict(), "state": ws.state()})

    @app.route("/api/graph/generate", methods=["POST"])
    def api_graph_generate():
        data = _payload()
        g = Graph.generate_random(
            num_nodes=data.get("nodes", 8),
            edge_probability=data.get("prob", config.DEFAULT_EDGE_PROBABILITY),
            seed=data.get("seed"),
        )
        ws = get_workspace()
        ws.load(g, data.get("start", 1), data.get("end", g.num_nodes))
        return jsonify({"graph": g.to_dict(), "state": ws.state()})

    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        tag = request.args.get("tag")
        infos = algorithms_by_tag(tag) if tag else list_algorithms()
        return jsonify([
            {
                "key":         a.key,
                "label":       a.label,
                "tags":        a.tags,
                "pseudocode":  a.pseudocode,
                "complexity":  {"time": a.complexity_time, "space": a.complexity_space},
                "description": a.description,
            }
            for a in infos
        ])

    # -----------------------------------------------------------------------
    # API: Run control
    # -----------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data = _payload()
        ws = get_workspace()
        scheduler = get_scheduler()
        info = get_algorithm(data.get("mode", "bfs"))
        start = data.get("start", ws.start)
        end = data.get("end", ws.end) if info.uses_end_node else data.get("end")
        scheduler.start_run(info.mode, start, end)
        return jsonify(ws.state())

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        get_scheduler().tick()
        return jsonify(get_workspace().state())

    @app.route("/api/step", methods=["POST"])
    def api_step():
        get_scheduler().manual_step()
        return jsonify(get_workspace().state())

    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        get_scheduler().pause()
        return jsonify(get_workspace().state())

    @app.route("/api/resume", methods=["POST"])
    def api_resume():
        get_scheduler().resume()
        return jsonify(get_workspace().state())

    @app.route("/api/toggle_pause", methods=["POST"])
    def api_toggle_pause():
        get_scheduler().toggle_pause()
        return jsonify(get_workspace().state())

    @app.route("/api/mode/step", methods=["POST"])
    def api_mode_step():
        get_scheduler().set_step_mode()
        return jsonify(get_workspace().state())

    @app.route("/api/mode/auto", methods=["POST"])
    def api_mode_auto():
        get_scheduler().set_auto_mode()
        return jsonify(get_workspace().state())

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        get_scheduler().reset()
        logger.info("Run reset by client")
        return jsonify(get_workspace().state())

    @app.route("/api/state", methods=["GET"])
    def api_state():
        get_scheduler()
        return jsonify(get_workspace().state())

    # -----------------------------------------------------------------------
    # API: Recorded trace
    # -----------------------------------------------------------------------
    @app.route("/api/trace", methods=["POST"])
    def api_trace():
        data = _payload()
        ws = get_workspace()
        get_scheduler()
        info = get_algorithm(data.get("mode", "bfs"))
        start = data.get("start", ws.start)
        end = data.get("end", ws.end) if info.uses_end_node else data.get("end")
        rec = Recorder(ws.graph)
        rec.run(info.mode, start, end)
        return jsonify(rec.export())

    return app


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def serve(flask_app: Flask) -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Traversal engine host on http://{config.HOST}:{config.PORT}")
    # one shared scheduler: serve requests one at a time
    flask_app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=False)


if __name__ == "__main__":
    serve(app)
