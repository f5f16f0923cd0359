from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .board import Board
from .directions import Direction, Rotation
from .instructions import (
    Instruction,
    MoveInstruction,
    NoopInstruction,
    PlaceInstruction,
    ReportInstruction,
    RotateInstruction,
    parse_commands,
)
from .render import render_board
from .sinks import ConsoleSink, ReportSink


@dataclass
class RobotState:
    """State of the robot on the board.

    Attributes
    ----------
    placed : bool
        Whether the robot has been legally placed yet.
    x : int
        Column of the current cell.
    y : int
        Row of the current cell.
    facing : Direction
        Current orientation.
    step : int
        Cells covered by a single move.
    """

    placed: bool = False
    x: int = 0
    y: int = 0
    facing: Direction = Direction.NORTH
    step: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "placed": self.placed,
            "x": self.x,
            "y": self.y,
            "facing": self.facing.name,
            "step": self.step,
        }


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a single instruction."""

    executed: bool
    log_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"executed": self.executed, "log_message": self.log_message}


class Robot:
    """Command interpreter driving a single robot over one run.

    Every instruction yields an ExecutionResult; failures (unknown command,
    illegal placement or move, use before placement) are recorded, never
    raised. Status renderings go to the report sink.
    """

    def __init__(
        self,
        sink: Optional[ReportSink] = None,
        auto_report: bool = False,
    ) -> None:
        self.board = Board()
        self.sink = sink if sink is not None else ConsoleSink()
        self.auto_report = auto_report

        self.state = RobotState()

    def get_state(self) -> RobotState:
        """Return a copy of current state."""
        s = self.state
        return RobotState(placed=s.placed, x=s.x, y=s.y, facing=s.facing, step=s.step)

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------
    def run(self, lines: Iterable[str]) -> List[ExecutionResult]:
        """Parse raw command lines and execute them."""
        return self.execute(parse_commands(lines))

    def execute(self, instructions: Sequence[Instruction]) -> List[ExecutionResult]:
        """Execute instructions in order, one result per instruction.

        If the last instruction is not a report, a final implicit report is
        performed; its result is not part of the returned list.
        """
        instructions = list(instructions)
        results = [self.apply(instruction) for instruction in instructions]

        if not instructions or not isinstance(instructions[-1], ReportInstruction):
            self.apply(ReportInstruction())
        return results

    def apply(self, instruction: Instruction) -> ExecutionResult:
        """Execute a single instruction, then auto-report if enabled."""
        if isinstance(instruction, NoopInstruction):
            executed = False
            detail = f"Unrecognized command '{instruction.raw}'. Nothing was executed."
        elif isinstance(instruction, PlaceInstruction):
            executed, detail = self._apply_place(instruction)
        elif isinstance(instruction, MoveInstruction):
            executed, detail = self._apply_move()
        elif isinstance(instruction, RotateInstruction):
            executed, detail = self._apply_rotate(instruction.rotation)
        elif isinstance(instruction, ReportInstruction):
            executed, detail = self._apply_report()
        else:
            raise TypeError(f"Unsupported instruction: {instruction!r}")

        if self.auto_report and executed and not isinstance(instruction, ReportInstruction):
            self._report(automatic=True)

        header = f"Execution of {type(instruction).__name__} with raw command: {instruction.raw}"
        return ExecutionResult(executed=executed, log_message=f"{header}\n{detail}\n")

    # ------------------------------------------------------------------
    # Instruction handlers
    # ------------------------------------------------------------------
    def _apply_place(self, place: PlaceInstruction) -> Tuple[bool, str]:
        verb = "repositioned" if self.state.placed else "placed"
        if not self._try_place(place.x, place.y, place.direction):
            return False, f"Placement in ({place.x}, {place.y}) is not legal. Robot not {verb}."
        return True, f"Placement in ({place.x}, {place.y}) is legal. Robot {verb} successfully."

    def _apply_move(self) -> Tuple[bool, str]:
        if not self.state.placed:
            return False, _not_placed("Move")
        moved = self._try_move()
        s = self.state
        if moved:
            return True, f"Robot successfully moved {s.facing.name} towards ({s.x}, {s.y})"
        return False, f"Robot could not be moved {s.facing.name} from ({s.x}, {s.y})"

    def _apply_rotate(self, rotation: Rotation) -> Tuple[bool, str]:
        if not self.state.placed:
            return False, _not_placed("Rotate")
        self._rotate(rotation)
        return True, f"Robot successfully rotated. Now facing {self.state.facing.name}"

    def _apply_report(self) -> Tuple[bool, str]:
        if not self.state.placed:
            return False, _not_placed("Report")
        self._report()
        return True, "Robot status successfully reported."

    # ------------------------------------------------------------------
    # State manipulation
    # ------------------------------------------------------------------
    def _try_place(self, x: int, y: int, facing: Direction) -> bool:
        """Place the robot at (x, y) if the cell is on the board."""
        if not self.board.contains(x, y):
            return False
        self.state.x = x
        self.state.y = y
        self.state.facing = facing
        self.state.placed = True
        return True

    def _next_position(self) -> Tuple[int, int]:
        """Cell reached by one move along the current facing."""
        dx, dy = self.state.facing.delta
        return self.state.x + dx * self.state.step, self.state.y + dy * self.state.step

    def _try_move(self) -> bool:
        x, y = self._next_position()
        if not self.board.contains(x, y):
            return False
        self.state.x = x
        self.state.y = y
        return True

    def _rotate(self, rotation: Rotation) -> None:
        self.state.facing = self.state.facing.rotated(rotation)

    def _report(self, automatic: bool = False) -> None:
        s = self.state
        self.sink.report(render_board(self.board, s.x, s.y, s.facing), automatic=automatic)


def _not_placed(kind: str) -> str:
    return f"Placement has not occurred yet. {kind} instruction cannot be executed."
