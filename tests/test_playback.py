import pytest

from mazesearch.core.bfs import BreadthFirstSearch
from mazesearch.core.dfs import DepthFirstSearch
from mazesearch.core.playback import (
    IDLE, PATH_PHASE, VISIT_PHASE, IntervalTimer, Playback,
)
from mazesearch.core.types import SearchResult


def run_to_idle(pb, limit=1000):
    ticks = 0
    while pb.busy:
        pb.tick()
        ticks += 1
        assert ticks < limit
    return ticks


def test_full_replay_skips_start_and_goal(painter, reference_grid):
    result = DepthFirstSearch().run(reference_grid)
    pb = Playback(painter)
    assert pb.start(result, reference_grid)
    assert pb.state == VISIT_PHASE

    ticks = run_to_idle(pb)

    assert ticks == len(result.visit_order) + len(result.path)
    inner = [c for c in result.path if c not in (reference_grid.start, reference_grid.goal)]
    assert painter.calls == [("visited", c) for c in inner] + [("path", c) for c in inner]
    assert pb.state == IDLE and not pb.busy


def test_visit_phase_hands_over_to_path_phase(painter, two_routes_grid):
    result = BreadthFirstSearch().run(two_routes_grid)
    pb = Playback(painter)
    pb.start(result, two_routes_grid)

    for _ in range(len(result.visit_order)):
        assert pb.state == VISIT_PHASE
        pb.tick()
    assert pb.state == PATH_PHASE
    assert pb.visit_index == len(result.visit_order)
    assert pb.path_index == 0

    run_to_idle(pb)
    assert pb.path_index == len(result.path)


def test_empty_path_goes_straight_to_idle(painter, walled_row_grid):
    result = BreadthFirstSearch().run(walled_row_grid)
    pb = Playback(painter)
    pb.start(result, walled_row_grid)

    ticks = run_to_idle(pb)

    assert ticks == len(result.visit_order)
    assert all(kind == "visited" for kind, _ in painter.calls)
    assert len(painter.calls) == len(result.visit_order) - 1   # start is skipped


def test_empty_result_never_becomes_busy(painter, reference_grid):
    pb = Playback(painter)
    assert pb.start(SearchResult(), reference_grid)
    assert pb.state == IDLE
    assert painter.calls == []


def test_second_start_is_rejected_while_running(painter, reference_grid, walled_row_grid):
    first = DepthFirstSearch().run(reference_grid)
    other = BreadthFirstSearch().run(walled_row_grid)
    pb = Playback(painter)
    pb.start(first, reference_grid)
    pb.tick(); pb.tick(); pb.tick()

    assert not pb.start(other, walled_row_grid)
    assert pb.visit_index == 3
    assert pb.visit_order == first.visit_order

    # drive into the path phase, still rejected
    while pb.state == VISIT_PHASE:
        pb.tick()
    assert not pb.start(other, walled_row_grid)

    run_to_idle(pb)
    revealed = [c for _, c in painter.calls]
    inner = [c for c in first.path if c not in (reference_grid.start, reference_grid.goal)]
    assert revealed == inner + inner

    assert pb.start(other, walled_row_grid)


def test_update_follows_phase_intervals(painter, clock, two_routes_grid):
    result = DepthFirstSearch().run(two_routes_grid)
    pb = Playback(painter, clock=clock)
    pb.start(result, two_routes_grid)

    pb.update(clock.advance(30))
    assert pb.visit_index == 0
    pb.update(clock.advance(25))
    assert pb.visit_index == 1

    for _ in range(len(result.visit_order) - 1):
        pb.update(clock.advance(55))
    assert pb.state == PATH_PHASE

    # path reveals are slower
    pb.update(clock.advance(55))
    assert pb.path_index == 0
    pb.update(clock.advance(55))
    assert pb.path_index == 1


def test_update_fires_at_most_one_tick(painter, clock, reference_grid):
    result = BreadthFirstSearch().run(reference_grid)
    pb = Playback(painter, clock=clock)
    pb.start(result, reference_grid)
    pb.update(clock.advance(1000))
    assert pb.visit_index == 1


def test_update_when_idle_does_nothing(painter, clock):
    pb = Playback(painter, clock=clock)
    pb.update(clock.advance(500))
    assert painter.calls == []
    assert pb.state == IDLE


def test_cancel_stops_drawing(painter, clock, reference_grid):
    result = DepthFirstSearch().run(reference_grid)
    pb = Playback(painter, clock=clock)
    pb.start(result, reference_grid)
    pb.update(clock.advance(60))
    drawn = len(painter.calls)

    pb.cancel()
    assert pb.state == IDLE
    for _ in range(10):
        pb.update(clock.advance(200))
    assert len(painter.calls) == drawn
    assert pb.start(result, reference_grid)


@pytest.mark.parametrize("elapsed_ms, expected", [(49, False), (51, True)])
def test_interval_timer(elapsed_ms, expected):
    t = IntervalTimer(0.05)
    t.arm(1.0)
    assert t.due(1.0 + elapsed_ms / 1000.0) is expected


def test_interval_timer_keeps_fixed_cadence():
    t = IntervalTimer(0.05)
    t.arm(0.0)
    # ~60 fps frames over just past one second: twenty 50 ms ticks, not one per 4th frame
    frame = 0.0166
    fired = sum(t.due(i * frame) for i in range(1, 62))
    assert fired == 20


def test_interval_timer_does_not_burst_after_stall():
    t = IntervalTimer(0.05)
    t.arm(0.0)
    assert t.due(1.0)
    assert not t.due(1.01)
    assert t.due(1.05)
