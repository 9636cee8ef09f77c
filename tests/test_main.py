"""
Tests for the command line entry point
"""

import os

import matplotlib
matplotlib.use("Agg")

import pytest

from monty_hall.main import load_config, main, run_simulation
from monty_hall.simulation import BatchResult


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "simulation:\n"
        "  num_games: 60\n"
        "  random_seed: 7\n"
        "  confidence_level: 0.9\n"
        "visualization:\n"
        "  dpi: 50\n"
        "  figure_size: [6, 4]\n"
    )
    return str(path)


class TestLoadConfig:
    """Test configuration loading"""

    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yaml")) == {}

    def test_load_file(self, config_file):
        config = load_config(config_file)

        assert config["simulation"]["num_games"] == 60
        assert config["visualization"]["figure_size"] == [6, 4]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(str(path)) == {}


class TestRunSimulation:
    """Test the simulation pipeline"""

    def test_uses_config_values(self, config_file):
        results = run_simulation(config_path=config_file)
        simulation = results["simulation"]

        assert isinstance(simulation, BatchResult)
        assert simulation.num_games == 60
        assert simulation.config.random_seed == 7
        assert simulation.config.confidence_level == 0.9
        assert "charts" not in results

    def test_arguments_override_config(self, config_file):
        results = run_simulation(num_games=25, random_seed=1, config_path=config_file)

        assert results["summary"]["num_games"] == 25
        assert results["summary"]["random_seed"] == 1

    def test_seeded_runs_match(self, config_file):
        first = run_simulation(config_path=config_file)["simulation"]
        second = run_simulation(config_path=config_file)["simulation"]

        assert first.to_rows() == second.to_rows()

    def test_charts(self, config_file, tmp_path):
        results = run_simulation(
            num_games=30, config_path=config_file,
            output_dir=str(tmp_path / "out"), charts=True
        )

        assert len(results["charts"]) == 2
        assert all(os.path.exists(p) for p in results["charts"])


class TestMain:
    """Test CLI exit codes"""

    def test_success(self, config_file):
        assert main(["--games", "20", "--seed", "3", "--config", config_file]) == 0

    def test_invalid_games(self, config_file):
        assert main(["-n", "0", "-c", config_file]) == 1

    def test_charts_flag(self, config_file, tmp_path):
        out = tmp_path / "out"

        assert main(["-n", "15", "-c", config_file, "-o", str(out), "--charts"]) == 0
        assert (out / "charts" / "win_rates.png").exists()
