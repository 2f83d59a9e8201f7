"""Minimal structured logging helper.

Emits key=value pairs (or JSON lines) with a timestamp and level. The game
owns the whole terminal while it runs, so records go to stderr by default, or
are appended to ``MAZE_LOG_FILE`` when that is set, and the default threshold
is ``warn``.

Usage:
    from mazegame.logging_utils import get_logger
    log = get_logger("mazegame.maze")
    log.info(event="maze_generated", seed=42, width=79, height=23)

Ints and floats are written as-is; other values are str()'d with spaces
replaced by underscores (JSON mode leaves them to json.dumps). Reserved keys:
level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "warn"), 30)
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")
LOG_FILE = os.getenv("MAZE_LOG_FILE") or None


def configure(level: str | None = None, json_mode: bool | None = None, log_file: str | None = None) -> None:
    """Re-read settings after a .env file has been loaded, or override them explicitly."""
    global CURRENT_LEVEL, JSON_MODE, LOG_FILE
    level = level or os.getenv("MAZE_LOG_LEVEL", "warn")
    if level not in LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
    CURRENT_LEVEL = LEVELS[level]
    if json_mode is None:
        json_mode = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")
    JSON_MODE = json_mode
    LOG_FILE = log_file or os.getenv("MAZE_LOG_FILE") or None


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegame"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        line = _format(lvl, **fields)
        if LOG_FILE:
            with open(LOG_FILE, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        else:
            print(line, file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]

