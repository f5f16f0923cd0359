from __future__ import annotations

import json

from toy_robot.cli import filter_results, main
from toy_robot.robot import ExecutionResult


def test_filter_results() -> None:
    results = [ExecutionResult(True, "ok\n"), ExecutionResult(False, "failed\n")]
    assert filter_results(results, "None") == []
    assert filter_results(results, "All") == results
    assert filter_results(results, "Failed") == [results[1]]


def test_main_debug_mode(capsys) -> None:
    assert main(["--mode", "dbg", "--log", "All"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Toy Robot starting up...")
    assert "The commands are:\nPLACE 1,2,EAST\n" in out
    assert "3 |  |  |  |RN|  |" in out
    assert "The following commands were sent to the robot" in out
    assert "Robot status successfully reported." in out
    assert out.rstrip().endswith("Toy Robot shutting down...")


def test_main_file_mode_with_failures_and_telemetry(tmp_path, capsys) -> None:
    commands = tmp_path / "commands.txt"
    commands.write_text("PLACE 0,0,SOUTH\nMOVE\n", encoding="utf-8")
    telemetry = tmp_path / "results.jsonl"

    code = main(
        [
            "--mode",
            "f",
            "--commands-file",
            str(commands),
            "--log",
            "Failed",
            "--auto-report",
            "--telemetry",
            str(telemetry),
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "The following commands were not executed:" in out
    assert "Robot could not be moved SOUTH from (0, 0)" in out
    assert "Robot placed successfully." not in out
    # One auto-report after the placement, then the trailing report.
    assert out.count("Automatic report:") == 1
    assert out.count("0 |RS|  |  |  |  |") == 2

    records = [json.loads(line) for line in telemetry.read_text(encoding="utf-8").splitlines()]
    assert [r["executed"] for r in records[:2]] == [True, False]
    assert records[2] == {"final_state": {"placed": True, "x": 0, "y": 0, "facing": "SOUTH", "step": 1}}


def test_main_prompts_for_mode(monkeypatch, capsys) -> None:
    answers = iter(["x", "dbg"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Retrieve commands from file [f] or via direct input [c]?") == 2
    assert "The following commands" not in out


def test_main_config_file(tmp_path, capsys) -> None:
    cfg = tmp_path / "robot.yaml"
    cfg.write_text("robot:\n  mode: dbg\n  log_level: Failed\n", encoding="utf-8")
    assert main(["--config", str(cfg)]) == 0
    out = capsys.readouterr().out
    assert "The following commands were not executed:" in out
    assert "Execution of" not in out


def test_main_missing_commands_file(tmp_path, capsys) -> None:
    code = main(["--mode", "f", "--commands-file", str(tmp_path / "missing.txt")])
    assert code == 1
    assert "Could not read commands" in capsys.readouterr().err


def test_main_invalid_mode(capsys) -> None:
    assert main(["--mode", "web"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err
