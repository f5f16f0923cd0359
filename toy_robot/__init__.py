"""
Toy robot simulator on a fixed 5x5 board.

Components:
- directions: facing and rotation enums
- board: board bounds
- instructions: instruction variants and the command parser
- robot: robot state and the instruction interpreter
- render: text rendering of the board
- sinks: destinations for status renderings
- sources: file, console and built-in command sources
- config: YAML-backed run configuration
- telemetry: JSONL execution-result log
- cli: command line entry point
"""

from .board import Board
from .directions import Direction, Rotation
from .instructions import (
    Instruction,
    MoveInstruction,
    NoopInstruction,
    PlaceInstruction,
    ReportInstruction,
    RotateInstruction,
    parse_command,
    parse_commands,
)
from .robot import ExecutionResult, Robot, RobotState
from .sinks import ConsoleSink, MemorySink, ReportSink

__all__ = [
    "Board",
    "Direction",
    "Rotation",
    "Instruction",
    "NoopInstruction",
    "PlaceInstruction",
    "MoveInstruction",
    "RotateInstruction",
    "ReportInstruction",
    "parse_command",
    "parse_commands",
    "ExecutionResult",
    "Robot",
    "RobotState",
    "ConsoleSink",
    "MemorySink",
    "ReportSink",
]
