"""Tests for the headless CLI runner."""

import pytest

from snake_clone.cli import _build_parser, main, run_simulation
from snake_clone.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        parser = _build_parser()
        args = parser.parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.config is None
        assert args.frames == 1000
        assert args.frame_ms == 16.0
        assert not args.restart

    def test_config_args(self):
        parser = _build_parser()
        args = parser.parse_args(["config", "out.json", "--cells-x", "12"])
        assert args.output == "out.json"
        assert args.cells_x == 12
        assert args.cells_y is None


class TestRunSimulation:
    def test_counts_frames_and_steps(self):
        cfg = GameConfig(max_cells_x=20, max_cells_y=20, seed=3)
        result = run_simulation(cfg, frames=100, frame_ms=200.0, turn_prob=0.0)
        assert result.frames == 100
        assert result.games == 1
        # Straight line on a ring never collides, so every frame steps.
        assert result.steps == 100

    def test_reproducible_with_seed(self):
        cfg = GameConfig(max_cells_x=12, max_cells_y=12, seed=11)
        a = run_simulation(cfg, frames=300, frame_ms=100.0)
        b = run_simulation(cfg, frames=300, frame_ms=100.0)
        assert (a.steps, a.best_level, a.final_state) == (
            b.steps, b.best_level, b.final_state,
        )

    def test_negative_frames_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            run_simulation(GameConfig(), frames=-1)


class TestCLISimulate:
    def test_simulate_runs(self, capsys):
        result = main(["simulate", "--frames", "50", "--seed", "4"])
        assert result == 0
        captured = capsys.readouterr()
        assert "Simulation:" in captured.out
        assert "50 frames" in captured.out

    def test_simulate_with_config_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(max_cells_x=8, max_cells_y=8, seed=1).save(path)
        result = main([
            "simulate", "--config", str(path), "--frames", "200",
            "--frame-ms", "200", "--turn-prob", "0.5", "--restart",
        ])
        assert result == 0
        assert "Simulation:" in capsys.readouterr().out


class TestCLIConfig:
    def test_writes_config(self, tmp_path):
        out = tmp_path / "cfg.json"
        result = main(["config", str(out), "--cells-x", "16", "--seed", "2"])
        assert result == 0
        loaded = GameConfig.load(out)
        assert loaded.max_cells_x == 16
        assert loaded.seed == 2

    def test_missing_config_file_exits(self, tmp_path):
        with pytest.raises(SystemExit, match="2"):
            main(["simulate", "--config", str(tmp_path / "missing.json")])

    def test_unknown_config_key_exits(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text('{"speed": 3}')
        with pytest.raises(SystemExit, match="2"):
            main(["simulate", "--config", str(path)])

    def test_invalid_config_exits(self, tmp_path):
        with pytest.raises(SystemExit, match="2"):
            main(["config", str(tmp_path / "bad.json"), "--cells-x", "0"])
