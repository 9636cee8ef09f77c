"""
Tests for batch simulation
"""

from unittest.mock import Mock, patch

import numpy as np
import pytest
from pydantic import ValidationError

from monty_hall.exceptions import InvalidArgumentError
from monty_hall.game import Outcome, Prize, RandomSource, Strategy
from monty_hall.simulation import (
    BatchResult, MontyHallSimulator, SimulationConfig, format_proportion_table,
    play_n_games, summarize_rounds,
)
from monty_hall.simulation.simulator import validate_num_games


class TestSimulationConfig:
    """Test simulation configuration"""

    def test_default_config(self):
        config = SimulationConfig()

        assert config.num_games == 100
        assert config.random_seed is None
        assert config.confidence_level == 0.95

    def test_custom_config(self):
        config = SimulationConfig(num_games=500, random_seed=42, confidence_level=0.99)

        assert config.num_games == 500
        assert config.random_seed == 42
        assert config.confidence_level == 0.99

    def test_invalid_config(self):
        with pytest.raises(ValidationError):
            SimulationConfig(num_games=0)
        with pytest.raises(ValidationError):
            SimulationConfig(confidence_level=1.5)


class TestValidateNumGames:
    """Test batch size validation"""

    @pytest.mark.parametrize("n", [0, -1, 2.5, True, "10", None])
    def test_invalid(self, n):
        with pytest.raises(InvalidArgumentError):
            validate_num_games(n)

    def test_valid(self):
        assert validate_num_games(1) == 1
        assert validate_num_games(np.int64(20)) == 20

    def test_no_upper_bound(self):
        assert validate_num_games(10_000_001) == 10_000_001
        assert SimulationConfig(num_games=10_000_001).num_games == 10_000_001

    def test_simulator_rejects_invalid_default(self):
        with pytest.raises(InvalidArgumentError):
            MontyHallSimulator(num_games=0)
        with pytest.raises(InvalidArgumentError):
            MontyHallSimulator(num_games=1.5)

    def test_large_batch_reaches_loop(self):
        simulator = MontyHallSimulator(num_games=10_000_001, random_seed=1)

        with patch.object(simulator.game, "play_game", side_effect=RuntimeError("stop")):
            with pytest.raises(RuntimeError):
                simulator.play_n_games(report=False)


class TestMontyHallSimulator:
    """Test batch runner"""

    @pytest.fixture
    def simulator(self):
        return MontyHallSimulator(num_games=200, random_seed=42)

    def test_default_batch_size(self, simulator):
        result = simulator.play_n_games(report=False)

        assert isinstance(result, BatchResult)
        assert result.num_games == 200
        assert result.config.num_games == 200

    def test_rows(self, simulator):
        result = simulator.play_n_games(50, report=False)
        rows = result.to_rows()

        assert len(rows) == 100
        assert [row["strategy"] for row in rows[:4]] == ["stay", "switch", "stay", "switch"]
        assert {row["outcome"] for row in rows} <= {"WIN", "LOSE"}

    def test_invalid_n(self, simulator):
        for n in (0, -5, 3.5, False):
            with pytest.raises(InvalidArgumentError):
                simulator.play_n_games(n)

    def test_reproducibility_with_seed(self):
        result1 = MontyHallSimulator(random_seed=123).play_n_games(100, report=False)
        result2 = MontyHallSimulator(random_seed=123).play_n_games(100, report=False)

        assert result1.to_rows() == result2.to_rows()
        assert [r.board for r in result1.rounds] == [r.board for r in result2.rounds]

    def test_summary_counts(self, simulator):
        result = simulator.play_n_games(report=False)
        stay = result.summaries[Strategy.STAY]
        switch = result.summaries[Strategy.SWITCH]

        assert stay.games == switch.games == 200
        # Exactly one strategy wins each round
        assert stay.wins + switch.wins == 200
        assert stay.win_rate + stay.lose_rate == pytest.approx(1.0)

    def test_confidence_interval_contains_rate(self, simulator):
        result = simulator.play_n_games(report=False)

        for s in result.summaries.values():
            assert 0 <= s.ci_low <= s.win_rate <= s.ci_high <= 1

    def test_proportion_table(self, simulator):
        table = simulator.play_n_games(report=False).proportion_table()

        assert set(table) == {"stay", "switch"}
        for row in table.values():
            assert set(row) == {"WIN", "LOSE"}
            assert row["WIN"] + row["LOSE"] == pytest.approx(1.0, abs=0.011)
            assert row["WIN"] == round(row["WIN"], 2)

    def test_running_win_rates(self, simulator):
        result = simulator.play_n_games(report=False)
        running = result.running_win_rates(Strategy.SWITCH)

        assert running.shape == (200,)
        assert running[-1] == pytest.approx(result.win_rates()[Strategy.SWITCH])
        assert np.all((running >= 0) & (running <= 1))

    def test_outcomes_array(self, simulator):
        result = simulator.play_n_games(20, report=False)
        stay = result.outcomes_array(Strategy.STAY)
        switch = result.outcomes_array("switch")

        assert np.array_equal(stay + switch, np.ones(20, dtype=int))

    def test_report_logged(self, simulator):
        with patch("monty_hall.simulation.simulator.log_summary") as mock_log:
            result = simulator.play_n_games(10)

        mock_log.assert_called_once_with(result)

    def test_report_disabled(self, simulator):
        with patch("monty_hall.simulation.simulator.log_summary") as mock_log:
            simulator.play_n_games(10, report=False)

        mock_log.assert_not_called()

    def test_failure_propagates(self):
        rng = Mock(spec=RandomSource)
        rng.shuffle.return_value = [Prize.CAR, Prize.GOAT, Prize.GOAT]
        rng.choice.side_effect = [1, 2, 1, RuntimeError("source exhausted")]
        simulator = MontyHallSimulator(rng=rng)

        with pytest.raises(RuntimeError):
            simulator.play_n_games(5, report=False)

    def test_scripted_rounds(self):
        # Goat picked every round: switching always wins
        rng = Mock(spec=RandomSource)
        rng.shuffle.return_value = [Prize.GOAT, Prize.CAR, Prize.GOAT]
        rng.choice.return_value = 1
        result = MontyHallSimulator(rng=rng).play_n_games(10, report=False)

        assert result.win_rates() == {Strategy.STAY: 0.0, Strategy.SWITCH: 1.0}
        assert all(r.opened_door == 3 for r in result.rounds)


class TestConvergence:
    """Statistical properties over a large batch"""

    @pytest.fixture(scope="class")
    def result(self):
        return MontyHallSimulator(random_seed=2024).play_n_games(10000, report=False)

    def test_switch_wins_two_thirds(self, result):
        assert abs(result.win_rates()[Strategy.SWITCH] - 2 / 3) < 0.03

    def test_stay_wins_one_third(self, result):
        assert abs(result.win_rates()[Strategy.STAY] - 1 / 3) < 0.03

    def test_switch_advantage_significant(self, result):
        assert result.switch_advantage_pvalue < 1e-10

    def test_interval_is_narrow(self, result):
        switch = result.summaries[Strategy.SWITCH]

        assert switch.ci_high - switch.ci_low < 0.05


class TestSummarizeRounds:
    """Test pure summary computation"""

    def test_empty(self):
        assert summarize_rounds([]) == ({}, None)

    def test_matches_batch(self):
        result = MontyHallSimulator(random_seed=8).play_n_games(30, report=False)

        summaries, pvalue = summarize_rounds(result.rounds)

        assert summaries == result.summaries
        assert pvalue == result.switch_advantage_pvalue


class TestReport:
    """Test text rendering"""

    def test_format_proportion_table(self):
        result = MontyHallSimulator(random_seed=3).play_n_games(100, report=False)
        table = result.proportion_table()

        text = format_proportion_table(result)
        lines = text.splitlines()

        assert len(lines) == 3
        assert "LOSE" in lines[0] and "WIN" in lines[0]
        assert lines[1].startswith("stay")
        assert lines[2].startswith("switch")
        assert f"{table['switch']['WIN']:.2f}" in lines[2]

    def test_summary_dict(self):
        summary = MontyHallSimulator(random_seed=3).play_n_games(40, report=False).summary()

        assert summary["num_games"] == 40
        assert summary["random_seed"] == 3
        assert set(summary["strategies"]) == {"stay", "switch"}
        assert "switch_advantage_pvalue" in summary


class TestModuleLevelPlayNGames:
    """Test convenience wrapper"""

    def test_default_n(self):
        result = play_n_games(report=False)

        assert result.num_games == 100
        assert len(result.to_rows()) == 200

    def test_invalid_n(self):
        with pytest.raises(InvalidArgumentError):
            play_n_games(0)

    def test_outcome_labels(self):
        result = play_n_games(5, report=False)

        for game in result.rounds:
            assert game.outcome_for(Strategy.STAY) in (Outcome.WIN, Outcome.LOSE)

    def test_seeded_runs_match(self):
        first = play_n_games(50, report=False, random_seed=9)
        second = play_n_games(50, report=False, random_seed=9)

        assert first.to_rows() == second.to_rows()
        assert first.config.random_seed == 9

    def test_injected_source(self):
        rng = Mock(spec=RandomSource)
        rng.shuffle.return_value = [Prize.CAR, Prize.GOAT, Prize.GOAT]
        rng.choice.side_effect = [1, 2] * 5

        result = play_n_games(5, report=False, rng=rng)

        assert result.win_rates() == {Strategy.STAY: 1.0, Strategy.SWITCH: 0.0}
