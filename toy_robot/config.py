from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from .sources import ALLOWED_MODES, DEFAULT_COMMANDS_FILE, is_valid_mode


LOG_LEVELS = ("None", "All", "Failed")


@dataclass
class RobotConfig:
    """Run configuration for the toy robot CLI.

    Attributes
    ----------
    auto_report : bool
        Render the board after every successful non-report instruction.
    log_level : str
        Which execution results to print: "None", "All" or "Failed".
    mode : str, optional
        Command source ("f", "c", "dbg"); asked interactively when unset.
    commands_file : str
        File read in "f" mode.
    telemetry_path : str, optional
        JSONL file receiving one record per instruction; disabled when unset.
    """

    auto_report: bool = False
    log_level: str = "None"
    mode: Optional[str] = None
    commands_file: str = DEFAULT_COMMANDS_FILE
    telemetry_path: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.auto_report, bool):
            raise ValueError(f"Invalid auto_report {self.auto_report!r}; expected true or false")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level {self.log_level!r}; expected one of {LOG_LEVELS}")
        if self.mode is not None and not is_valid_mode(self.mode):
            raise ValueError(f"Invalid mode {self.mode!r}; expected one of {ALLOWED_MODES}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RobotConfig":
        """Build a config from a dict, ignoring unknown keys."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        if "log_level" in kwargs:
            # YAML reads a bare None as a string, but null as None
            kwargs["log_level"] = str(kwargs["log_level"]) if kwargs["log_level"] is not None else "None"
        return cls(**kwargs)


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: str) -> RobotConfig:
    """Load the ``robot`` section of a YAML config file."""
    cfg = load_yaml(path)
    return RobotConfig.from_dict(cfg.get("robot", {}))
