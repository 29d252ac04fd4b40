from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class Config:
    # Input/output text encoding
    encoding: str = "utf-8"

    # Rows buffered per sink before they hit the file
    flush_every: int = 500

    # Error file lives next to the output file under this name
    error_file_name: str = "errors.csv"

    log_level: str = "INFO"


def load_config_from_yaml(path: str | None) -> Config:
    """Load a Config from YAML. If path is None, return defaults."""
    if path is None:
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    # Shallow mapping; unknown keys are ignored
    cfg = Config(
        encoding = str(data.get("encoding", "utf-8")),
        flush_every = int(data.get("flush_every", 500)),
        error_file_name = str(data.get("error_file_name", "errors.csv")),
        log_level = str(data.get("log_level", "INFO")),
    )
    if cfg.flush_every < 1:
        raise ValueError(f"flush_every must be positive (in {path})")
    if not isinstance(logging.getLevelName(cfg.log_level.upper()), int):
        raise ValueError(f"Unknown log_level {cfg.log_level!r} (in {path})")
    return cfg


def load_default_config() -> Config:
    """Load `config.yaml` or `config.yml` from CWD or project root.

    Falls back to defaults when no file is found.
    """
    candidates = [
        Path.cwd() / "config.yaml",
        Path.cwd() / "config.yml",
        Path(__file__).resolve().parent.parent / "config.yaml",
        Path(__file__).resolve().parent.parent / "config.yml",
    ]
    for p in candidates:
        if p.exists():
            return load_config_from_yaml(str(p))
    return Config()
