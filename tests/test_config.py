"""Tests for configuration loading."""

from pathlib import Path

import pytest

from termgrid.config import TermgridConfig


class TestTermgridConfig:
    """Tests for TermgridConfig."""

    def test_defaults(self) -> None:
        config = TermgridConfig()
        assert config.target_fps == 30
        assert config.input_poll_ms == 10
        assert config.alternate_screen is True
        assert config.log_level == "warning"
        assert config.log_file is None

    def test_derived_timings(self) -> None:
        config = TermgridConfig(target_fps=50, input_poll_ms=20)
        assert config.frame_interval == pytest.approx(0.02)
        assert config.input_poll_timeout == pytest.approx(0.02)

    def test_clamps_invalid_values(self) -> None:
        config = TermgridConfig(target_fps=0, input_poll_ms=-5)
        assert config.target_fps == 1
        assert config.input_poll_ms == 0

    def test_from_env(self, tmp_path: Path) -> None:
        log_file = tmp_path / "tg.log"
        config = TermgridConfig.from_env({
            "TERMGRID_TARGET_FPS": "60",
            "TERMGRID_INPUT_POLL_MS": "5",
            "TERMGRID_ALTERNATE_SCREEN": "no",
            "TERMGRID_LOG_LEVEL": "DEBUG",
            "TERMGRID_LOG_FILE": str(log_file),
        })
        assert config.target_fps == 60
        assert config.input_poll_ms == 5
        assert config.alternate_screen is False
        assert config.log_level == "debug"
        assert config.log_file == log_file

    def test_from_env_ignores_bad_values(self) -> None:
        config = TermgridConfig.from_env({
            "TERMGRID_TARGET_FPS": "fast",
            "TERMGRID_LOG_LEVEL": "loud",
        })
        assert config.target_fps == 30
        assert config.log_level == "warning"

    @pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("off", False)])
    def test_bool_parsing(self, value: str, expected: bool) -> None:
        config = TermgridConfig.from_env({"TERMGRID_ALTERNATE_SCREEN": value})
        assert config.alternate_screen is expected

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMGRID_TARGET_FPS", "12")
        assert TermgridConfig.from_env().target_fps == 12
