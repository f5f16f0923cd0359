from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, List, Optional, Sequence

from .config import LOG_LEVELS, RobotConfig, load_config
from .instructions import parse_commands
from .robot import ExecutionResult, Robot
from .sinks import ConsoleSink
from .sources import is_valid_mode, make_source
from .telemetry import ResultLogger


def filter_results(results: Sequence[ExecutionResult], log_level: str) -> List[ExecutionResult]:
    """Select the results printed for a log level."""
    if log_level == "None":
        return []
    if log_level == "Failed":
        return [r for r in results if not r.executed]
    return list(results)


def print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def ask_mode(read_line: Optional[Callable[[], str]] = None) -> str:
    """Ask for a retrieval mode until a supported one is entered."""
    read = read_line if read_line is not None else input
    while True:
        print("Retrieve commands from file [f] or via direct input [c]?")
        mode = read()
        if is_valid_mode(mode):
            return mode.strip().lower()


def build_config(args: argparse.Namespace) -> RobotConfig:
    config = load_config(args.config) if args.config else RobotConfig()
    if args.mode is not None:
        config.mode = args.mode
    if args.commands_file is not None:
        config.commands_file = args.commands_file
    if args.auto_report:
        config.auto_report = True
    if args.log is not None:
        config.log_level = args.log
    if args.telemetry is not None:
        config.telemetry_path = args.telemetry
    config.validate()
    return config


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Toy robot on a 5x5 board.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to robot YAML config.",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        help="Command source: f (file), c (console) or dbg (built-in sample).",
    )
    parser.add_argument(
        "--commands-file",
        type=str,
        default=None,
        help="Commands file used in f mode.",
    )
    parser.add_argument(
        "--auto-report",
        action="store_true",
        help="Report the status after every successful instruction.",
    )
    parser.add_argument(
        "--log",
        type=str,
        choices=LOG_LEVELS,
        default=None,
        help="Print the execution log: None, All or Failed.",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        default=None,
        help="Append execution results to this JSONL file.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: read commands, drive the robot, print the results."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    print("Toy Robot starting up...\n")

    try:
        mode = config.mode if config.mode is not None else ask_mode()
    except EOFError:
        print("No retrieval mode given.", file=sys.stderr)
        return 1

    try:
        commands = make_source(mode, config.commands_file).get_commands()
    except OSError as exc:
        print(f"Could not read commands: {exc}", file=sys.stderr)
        return 1

    print()
    print("The commands are:")
    print_lines(commands)

    instructions = parse_commands(commands)
    robot = Robot(sink=ConsoleSink(), auto_report=config.auto_report)
    results = robot.execute(instructions)

    if config.log_level != "None":
        only_failed = config.log_level == "Failed"
        print()
        print(
            "The following commands were not executed:"
            if only_failed
            else "The following commands were sent to the robot"
        )
        print_lines(r.log_message for r in filter_results(results, config.log_level))

    if config.telemetry_path:
        with ResultLogger(config.telemetry_path) as logger:
            logger.log_results(instructions, results)
            logger.log_state(robot.get_state())

    print("\nToy Robot shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
