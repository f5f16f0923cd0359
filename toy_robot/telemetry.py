from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, TextIO
import json
import os

from .instructions import Instruction
from .robot import ExecutionResult, RobotState


class ResultLogger:
    """Structured JSONL logger for execution results.

    Append-only, one JSON object per executed instruction.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_record(self, record: Dict[str, Any]) -> None:
        """Append a single record to the JSONL file."""
        if self._fp is None:
            return
        self._fp.write(json.dumps(record, separators=(",", ":")) + "\n")
        self._fp.flush()

    def log_results(
        self,
        instructions: Sequence[Instruction],
        results: Sequence[ExecutionResult],
    ) -> None:
        """Log each instruction next to its result, in run order."""
        for index, (instruction, result) in enumerate(zip(instructions, results)):
            self.log_record(
                {
                    "index": index,
                    "instruction": type(instruction).__name__,
                    "raw_command": instruction.raw,
                    **result.to_dict(),
                }
            )

    def log_state(self, state: RobotState) -> None:
        """Append the robot state reached at the end of a run."""
        self.log_record({"final_state": state.to_dict()})

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "ResultLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
