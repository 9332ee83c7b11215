from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

STRATEGIES = ("scan", "indexed")


@dataclass
class SolverConfig:
    # Consecutive empty-cell visits allowed without a placement before giving up.
    stall_threshold: int = 100
    # 'scan' rescans the board per query; 'indexed' uses DigitIndex masks.
    strategy: str = "scan"
    record_moves: bool = True

    def validate(self) -> "SolverConfig":
        if (
            isinstance(self.stall_threshold, bool)
            or not isinstance(self.stall_threshold, int)
            or self.stall_threshold < 0
        ):
            raise ValueError(f"stall_threshold must be a non-negative int, got {self.stall_threshold!r}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}, got {self.strategy!r}")
        return self


def load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def merge_overrides(cfg: SolverConfig, **overrides) -> SolverConfig:
    known = {f.name for f in fields(SolverConfig)}
    for k, v in overrides.items():
        if v is None:
            continue
        if k not in known:
            raise ValueError(f"unknown solver option: {k}")
        setattr(cfg, k, v)
    return cfg.validate()


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Defaults <- YAML file (optional 'solver:' section) <- non-None keyword overrides."""
    cfg = SolverConfig()
    if path:
        data = load_yaml(path)
        section = data.get("solver", data)
        if not isinstance(section, dict):
            raise ValueError(f"{path}: 'solver' must be a mapping")
        merge_overrides(cfg, **section)
    return merge_overrides(cfg, **overrides)
