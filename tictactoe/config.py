"""game settings read from a small JSON file"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from .game_board import Mark

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TICTACTOE_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """
    a setting has a value the game can't use
    """


@dataclass(frozen=True)
class GameConfig:
    human_mark: str = "X"
    vs_computer: bool = True
    computer_starts: bool = False
    computer_delay_ms: int = 350
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def human(self):
        return Mark(self.human_mark)

    @property
    def computer(self):
        return self.human.opponent

    def validate(self) -> GameConfig:
        """
        raise ConfigError on a bad value, else a copy with log_level upper-cased
        """
        if self.human_mark not in ("X", "O"):
            raise ConfigError(f"human_mark must be 'X' or 'O', got {self.human_mark!r}")
        for name in ("vs_computer", "computer_starts"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false")
        delay = self.computer_delay_ms
        if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
            raise ConfigError(f"computer_delay_ms must be a non-negative integer, got {delay!r}")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.log_file is not None:
            if not isinstance(self.log_file, str) or not self.log_file:
                raise ConfigError("log_file must be a path string")
            folder = Path(self.log_file).expanduser().resolve().parent
            if not folder.is_dir():
                raise ConfigError(f"log_file folder {folder} does not exist")
        return replace(self, log_level=str(self.log_level).upper())


def config_path(path=None):
    """
    explicit path first, then $TICTACTOE_CONFIG
    """
    if path:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    return Path(env) if env else None


def load_config(path=None, **overrides) -> GameConfig:
    """
    settings from path merged over the defaults.

    a missing file gives the defaults, so does a file that isn't a JSON
    object (with a warning). unknown keys are logged and skipped.
    overrides that are not None win over the file.
    """
    data = {}
    source = config_path(path)
    if source is not None and source.exists():
        try:
            raw = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable config %s: %s", source, exc)
            raw = {}
        if isinstance(raw, dict):
            data.update(raw)
        else:
            logger.warning("ignoring config %s: expected a JSON object", source)

    known = {f.name for f in fields(GameConfig)}
    for key in sorted(set(data) - known):
        logger.warning("unknown config key %r", key)
        del data[key]
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**data).validate()
