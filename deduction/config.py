"""Solver configuration loaded from YAML, with CLI-style overrides."""

# config.py

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .chains import DEFAULT_SEARCH_BUDGET
from .errors import ConfigError


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def default_technique_order() -> List[str]:
    from .techniques import DEFAULT_ORDER

    return list(DEFAULT_ORDER)


@dataclass
class SolverConfig:
    techniques: List[str] = field(default_factory=default_technique_order)
    x_chain_min_links: int = 3
    x_chain_max_links: int = 9
    xy_chain_max_links: int = 9
    chain_search_budget: int = DEFAULT_SEARCH_BUDGET
    check_uniqueness: bool = False
    max_steps: Optional[int] = None

    def __post_init__(self):
        from .techniques import REGISTRY

        unknown = [name for name in self.techniques if name not in REGISTRY]
        if unknown:
            raise ConfigError(f"unknown techniques: {', '.join(unknown)}")
        if not 1 <= self.x_chain_min_links <= self.x_chain_max_links:
            raise ConfigError("x_chain_min_links must be between 1 and x_chain_max_links")
        if self.xy_chain_max_links < 3:
            raise ConfigError("xy_chain_max_links must be at least 3")
        if self.chain_search_budget < 1:
            raise ConfigError("chain_search_budget must be positive")
        if self.max_steps is not None and self.max_steps < 0:
            raise ConfigError("max_steps must be >= 0")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "SolverConfig":
        known = {f.name for f in fields(cls)}
        extra = sorted(set(data) - known)
        if extra:
            raise ConfigError(f"unknown config keys: {', '.join(extra)}")
        if "techniques" in data and isinstance(data["techniques"], str):
            data = dict(data, techniques=[t.strip() for t in data["techniques"].split(",") if t.strip()])
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path, **overrides) -> "SolverConfig":
        cfg = merge_overrides(dict(load_yaml(path)), **overrides)
        return cls.from_mapping(cfg)
