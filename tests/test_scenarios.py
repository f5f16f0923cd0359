from __future__ import annotations

from typing import List, Tuple

from toy_robot.directions import Direction
from toy_robot.robot import ExecutionResult, Robot
from toy_robot.sinks import MemorySink


def run(lines: List[str]) -> Tuple[Robot, List[ExecutionResult]]:
    robot = Robot(sink=MemorySink())
    results = robot.run(lines)
    return robot, results


def test_place_move_report() -> None:
    robot, results = run(["PLACE 0,0,NORTH", "MOVE", "REPORT"])
    assert [r.executed for r in results] == [True, True, True]
    state = robot.get_state()
    assert (state.x, state.y, state.facing) == (0, 1, Direction.NORTH)
    # Explicit report only, no trailing one.
    assert len(robot.sink.reports) == 1
    assert "1 |RN|  |  |  |  |" in robot.sink.reports[0].text


def test_left_then_blocked_move_gets_trailing_report() -> None:
    robot, results = run(["PLACE 0,0,NORTH", "LEFT", "MOVE"])
    assert [r.executed for r in results] == [True, True, False]
    state = robot.get_state()
    assert (state.x, state.y, state.facing) == (0, 0, Direction.WEST)
    assert len(results) == 3
    assert len(robot.sink.reports) == 1
    assert "0 |RW|  |  |  |  |" in robot.sink.reports[0].text


def test_move_without_placement() -> None:
    robot, results = run(["MOVE"])
    assert len(results) == 1
    assert not results[0].executed
    # The trailing report is attempted but fails, so nothing is rendered.
    assert robot.sink.reports == []
    assert not robot.get_state().placed


def test_sample_program() -> None:
    robot, results = run(["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"])
    assert all(r.executed for r in results)
    state = robot.get_state()
    assert (state.x, state.y, state.facing) == (3, 3, Direction.NORTH)
    assert "3 |  |  |  |RN|  |" in robot.sink.reports[-1].text


def test_failures_do_not_stop_the_run() -> None:
    robot, results = run(["REPORT", "JUMP", "PLACE 7,7,NORTH", "PLACE 4,0,EAST", "MOVE", "LEFT", "MOVE"])
    assert [r.executed for r in results] == [False, False, False, True, False, True, True]
    state = robot.get_state()
    assert (state.x, state.y, state.facing) == (4, 1, Direction.NORTH)


def test_auto_report_run() -> None:
    robot = Robot(sink=MemorySink(), auto_report=True)
    robot.run(["PLACE 0,0,EAST", "MOVE", "REPORT"])
    assert [r.automatic for r in robot.sink.reports] == [True, True, False]
