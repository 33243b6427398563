"""Configuration handling for termgrid applications."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TERMGRID_"


def _parse_bool(value: str | None, default: bool) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return bool(re.match(r"^(1|true|yes|on)$", value.strip().lower()))


def _parse_int(value: str | None, default: int) -> int:
    """Parse integer from environment variable, falling back on bad input."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_level(value: str | None, default: str) -> str:
    """Parse a log level name."""
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"debug", "info", "warning", "error", "critical"}:
        return lowered
    return default


@dataclass
class TermgridConfig:
    """Runtime settings for the application loop."""

    target_fps: int = 30
    input_poll_ms: int = 10
    alternate_screen: bool = True
    log_level: str = "warning"
    log_file: Path | None = None

    def __post_init__(self) -> None:
        self.target_fps = max(1, self.target_fps)
        self.input_poll_ms = max(0, self.input_poll_ms)

    @property
    def frame_interval(self) -> float:
        """Target seconds per frame."""
        return 1.0 / self.target_fps

    @property
    def input_poll_timeout(self) -> float:
        """Seconds the loop may wait on the input queue each frame."""
        return self.input_poll_ms / 1000.0

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> TermgridConfig:
        """Load configuration from ``TERMGRID_*`` environment variables."""
        env = os.environ if environ is None else environ
        log_file = env.get(f"{ENV_PREFIX}LOG_FILE")
        return cls(
            target_fps=_parse_int(env.get(f"{ENV_PREFIX}TARGET_FPS"), 30),
            input_poll_ms=_parse_int(env.get(f"{ENV_PREFIX}INPUT_POLL_MS"), 10),
            alternate_screen=_parse_bool(env.get(f"{ENV_PREFIX}ALTERNATE_SCREEN"), True),
            log_level=_parse_level(env.get(f"{ENV_PREFIX}LOG_LEVEL"), "warning"),
            log_file=Path(log_file).expanduser() if log_file else None,
        )
