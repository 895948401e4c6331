"""
Unit tests for the StepScheduler: run flags, pause / step / auto modes,
reset and the read-only query surface.
"""

import json

import pytest

from algorithms import RunMode, StepKind
from engine import StepScheduler
from graph import INF, Graph, InvalidEndpoint, NodeState


def run_out(scheduler, limit: int = 1000):
    for _ in range(limit):
        if not scheduler.is_running:
            return
        scheduler.manual_step()
    raise AssertionError("run did not finish")


class TestStartRun:
    """Starting and validating runs."""

    def test_initial_state(self, scheduler):
        assert scheduler.run_mode is RunMode.IDLE
        assert not scheduler.is_running
        assert not scheduler.is_paused
        assert not scheduler.is_step_mode
        assert scheduler.current_node is None

    def test_start_sets_flags(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        assert scheduler.run_mode is RunMode.BFS
        assert scheduler.is_running
        assert scheduler.frontier == [1]
        assert not scheduler.is_visited(1)

    def test_mode_by_name(self, scheduler):
        scheduler.start_run("dijkstra", 1, 3)
        assert scheduler.run_mode is RunMode.DIJKSTRA
        assert scheduler.distance_of(1) == 0

    @pytest.mark.parametrize("mode", ["astar", "idle", RunMode.IDLE])
    def test_unknown_mode_rejected(self, scheduler, mode):
        with pytest.raises(ValueError):
            scheduler.start_run(mode, 1)
        assert scheduler.run_mode is RunMode.IDLE

    @pytest.mark.parametrize("start,end", [(0, None), (4, None), (1, 9)])
    def test_invalid_endpoint_leaves_run_untouched(self, scheduler, start, end):
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.manual_step()
        with pytest.raises(InvalidEndpoint):
            scheduler.start_run(RunMode.DIJKSTRA, start, end)
        assert scheduler.run_mode is RunMode.BFS
        assert scheduler.is_running
        assert scheduler.is_visited(1)

    def test_restart_switches_mode(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        run_out(scheduler)
        scheduler.start_run(RunMode.DFS, 3)
        assert scheduler.run_mode is RunMode.DFS
        assert scheduler.overlay.visited_nodes() == []


class TestTick:
    """Auto-mode cadence."""

    def test_tick_advances_one_step(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        step = scheduler.tick()
        assert step.kind is StepKind.ADVANCED
        assert step.node == 1
        assert scheduler.is_visited(1)
        assert scheduler.step_count == 1

    def test_ticks_finish_run(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        kinds = []
        while scheduler.is_running:
            kinds.append(scheduler.tick().kind)
        assert kinds == [StepKind.ADVANCED] * 3 + [StepKind.DONE]
        assert scheduler.run_mode is RunMode.BFS
        assert scheduler.current_node is None

    def test_tick_when_not_running_is_noop(self, scheduler):
        assert scheduler.tick() is None
        scheduler.start_run(RunMode.BFS, 1)
        run_out(scheduler)
        before = scheduler.overlay.copy_state()
        assert scheduler.tick() is None
        assert scheduler.manual_step() is None
        assert scheduler.overlay.copy_state() == before

    def test_paused_ticks_change_nothing(self, scheduler):
        """Pause, tick several times: no state change until resume."""
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.pause()
        before = scheduler.overlay.copy_state()
        for _ in range(5):
            assert scheduler.tick() is None
        assert scheduler.overlay.copy_state() == before
        assert scheduler.step_count == 0

        scheduler.resume()
        scheduler.tick()
        assert scheduler.is_visited(1)

    def test_step_mode_blocks_tick(self, scheduler):
        scheduler.set_step_mode()
        scheduler.start_run(RunMode.DFS, 1)
        assert scheduler.tick() is None
        assert scheduler.manual_step().node == 1


class TestManualStep:
    """Explicit triggers."""

    def test_manual_step_while_paused(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.pause()
        step = scheduler.manual_step()
        assert step.node == 1
        assert scheduler.is_paused

    def test_manual_step_interleaves_with_tick(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.tick()
        scheduler.manual_step()
        scheduler.tick()
        assert scheduler.overlay.visited_nodes() == [1, 2, 3]

    def test_on_step_callback(self, line_graph):
        seen = []
        scheduler = StepScheduler(line_graph, on_step=seen.append)
        scheduler.start_run(RunMode.BFS, 1)
        run_out(scheduler)
        assert [s.node for s in seen] == [1, 2, 3, None]

    def test_finishing_clears_pause(self, scheduler):
        scheduler.start_run(RunMode.BFS, 3)
        scheduler.pause()
        run_out(scheduler)
        assert not scheduler.is_running
        assert not scheduler.is_paused


class TestPauseAndModes:
    """Pause toggling and step / auto mode."""

    def test_pause_ignored_when_not_running(self, scheduler):
        scheduler.pause()
        assert not scheduler.is_paused
        scheduler.toggle_pause()
        assert not scheduler.is_paused

    def test_toggle_pause(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.toggle_pause()
        assert scheduler.is_paused
        scheduler.toggle_pause()
        assert not scheduler.is_paused

    def test_auto_mode_unpauses(self, scheduler):
        scheduler.set_step_mode()
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.pause()
        scheduler.set_auto_mode()
        assert not scheduler.is_step_mode
        assert not scheduler.is_paused
        assert scheduler.tick() is not None

    def test_step_mode_survives_restart_and_reset(self, scheduler):
        scheduler.set_step_mode()
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.reset()
        assert scheduler.is_step_mode
        scheduler.start_run(RunMode.DFS, 1)
        assert scheduler.is_step_mode

    def test_status_text(self, scheduler):
        assert scheduler.status_text() == "Mode: NONE | Status: RUNNING"
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.set_step_mode()
        assert scheduler.status_text() == "Mode: BFS | Status: STEP MODE"
        scheduler.pause()
        assert scheduler.status_text() == "Mode: BFS | Status: PAUSED"


class TestReset:
    """Cancellation."""

    def test_reset_after_dijkstra(self, weighted_graph):
        scheduler = StepScheduler(weighted_graph)
        scheduler.start_run(RunMode.DIJKSTRA, 1, 4)
        run_out(scheduler)
        assert scheduler.shortest_path == [1, 3, 2, 4]

        scheduler.reset()
        for n in weighted_graph.node_ids():
            assert not scheduler.is_visited(n)
            assert scheduler.distance_of(n) == INF
        assert scheduler.shortest_path == []
        assert scheduler.current_node is None
        assert scheduler.run_mode is RunMode.IDLE
        assert not scheduler.is_running
        assert scheduler.frontier == []

    def test_reset_mid_run(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        scheduler.tick()
        scheduler.pause()
        scheduler.reset()
        assert not scheduler.is_paused
        assert scheduler.tick() is None
        assert scheduler.manual_step() is None


class TestQueries:
    """Observer-facing read surface."""

    def test_dijkstra_results(self, weighted_graph):
        scheduler = StepScheduler(weighted_graph)
        scheduler.start_run(RunMode.DIJKSTRA, 1, 4)
        assert scheduler.distance_summary() is None
        run_out(scheduler)
        assert [scheduler.distance_of(n) for n in (1, 2, 3, 4)] == [0, 2, 1, 3]
        assert scheduler.distance_summary() == "Shortest distance from 1 to 4: 3"

    def test_distance_summary_unreachable(self):
        g = Graph.build(3, [(1, 2, 1)])
        scheduler = StepScheduler(g)
        scheduler.start_run(RunMode.DIJKSTRA, 1, 3)
        run_out(scheduler)
        assert scheduler.shortest_path == []
        assert scheduler.distance_summary() is None

    def test_bfs_leaves_distances_infinite(self, scheduler):
        scheduler.start_run(RunMode.BFS, 1)
        run_out(scheduler)
        assert scheduler.distance_of(2) == INF

    def test_node_states(self, weighted_graph):
        scheduler = StepScheduler(weighted_graph)
        scheduler.start_run(RunMode.DIJKSTRA, 1, 4)
        scheduler.manual_step()
        scheduler.manual_step()
        assert scheduler.node_state(3) is NodeState.CURRENT
        assert scheduler.node_state(1) is NodeState.VISITED
        assert scheduler.node_state(4) is NodeState.UNVISITED
        run_out(scheduler)
        assert all(scheduler.node_state(n) is NodeState.PATH for n in (1, 2, 3, 4))

    def test_snapshot_is_json_safe(self, weighted_graph):
        scheduler = StepScheduler(weighted_graph)
        scheduler.start_run(RunMode.DIJKSTRA, 1, 4)
        scheduler.manual_step()
        snap = json.loads(json.dumps(scheduler.snapshot(), allow_nan=False))
        assert snap["mode"] == "dijkstra"
        assert snap["current_node"] == 1
        assert snap["frontier"] == [3, 2]
        assert snap["last_step"]["kind"] == "advanced"
        distances = {n["id"]: n["distance"] for n in snap["nodes"]}
        assert distances == {1: 0, 2: 4, 3: 1, 4: None}
