"""Smoke tests for game playing, arena, config, logging and the CLI."""

import json
import tempfile
from pathlib import Path

import numpy as np
import pytest
from typer.testing import CliRunner

from baozero.cli import app
from baozero.eval import Arena, ArenaResult
from baozero.game import Capture, Relay, create_game, legal_moves
from baozero.mcts import create_random_evaluator
from baozero.play import Difficulty, DifficultyConfig, get_difficulty_config
from baozero.selfplay import mcts_agent, play_game, play_random_game, random_agent
from baozero.utils import Config, GameConfig, Logger, set_seed


class TestPlayGame:
    def test_random_game(self):
        record = play_random_game(np.random.default_rng(0), max_moves=100)

        assert 0 < record.num_moves <= 100
        assert len(record.events) == record.num_moves
        assert record.final_state is not None
        if record.finished:
            assert record.winner in (1, 2)
        else:
            assert record.winner is None

    def test_move_limit(self):
        record = play_random_game(np.random.default_rng(1), max_moves=3)
        assert record.num_moves <= 3

    def test_on_move_callback(self):
        seen = []
        agent = random_agent(np.random.default_rng(2))
        record = play_game(agent, agent, max_moves=10,
                           on_move=lambda pit, state, events: seen.append(pit))
        assert seen == record.moves

    def test_illegal_agent_move(self):
        with pytest.raises(ValueError, match="Not your pit"):
            play_game(lambda s: 20, lambda s: 0)

    def test_summary(self):
        record = play_random_game(np.random.default_rng(3), max_moves=50)
        summary = record.summary(game_index=7)

        assert summary.game_index == 7
        assert summary.variant == "pre-filled"
        assert summary.num_moves == record.num_moves
        assert summary.total_events == sum(len(m) for m in record.events)
        assert summary.relays == record.count(Relay)
        assert summary.captures == record.count(Capture)
        assert summary.timestamp

    def test_mcts_agent_plays_legal_moves(self):
        agent = mcts_agent(create_random_evaluator(), num_simulations=8)
        record = play_game(agent, random_agent(np.random.default_rng(4)), max_moves=6)
        assert record.num_moves > 0


class TestArena:
    def test_seats_alternate(self):
        openers = []

        def first_legal(name):
            def choose(state):
                if state == create_game():
                    openers.append(name)
                return legal_moves(state)[0]
            return choose

        arena = Arena(max_moves=4)
        result = arena.evaluate(first_legal("candidate"), first_legal("opponent"), num_games=4)

        assert result.total_games == 4
        assert openers == ["candidate", "opponent", "candidate", "opponent"]

    def test_tally(self):
        arena = Arena(max_moves=60)
        results = []
        rng = np.random.default_rng(5)
        result = arena.evaluate(
            random_agent(rng),
            random_agent(rng),
            num_games=4,
            progress_callback=lambda n, r: results.append(r),
        )

        assert result.wins + result.losses + result.draws == 4
        assert len(results) == 4
        assert set(results) <= {"W", "L", "D"}
        assert 0.0 <= result.score <= 1.0
        assert sum(result.by_seat[1].values()) == 2
        assert sum(result.by_seat[2].values()) == 2

    def test_play_one_is_seat_aware(self):
        def first_legal(state):
            return legal_moves(state)[0]

        def last_legal(state):
            return legal_moves(state)[-1]

        arena = Arena(max_moves=80)
        as_opener = arena.play_one(first_legal, last_legal, seat=1)
        # Same game, scored for the other agent
        as_second = arena.play_one(last_legal, first_legal, seat=2)

        flipped = {"W": "L", "L": "W", "D": "D"}
        assert as_second == flipped[as_opener]

    def test_score_counts_draws_as_half(self):
        result = ArenaResult(wins=1, losses=1, draws=2, total_games=4, win_rate=0.25)
        assert result.score == 0.5


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.game.variant == "pre-filled"
        assert config.mcts.num_simulations == 100
        assert config.arena.num_games == 20

    def test_variant_alias_normalized(self):
        assert GameConfig(variant="kiswahili").variant == "house-seeded"

    def test_bad_values(self):
        with pytest.raises(ValueError):
            GameConfig(variant="namua")
        with pytest.raises(ValueError):
            GameConfig(max_moves=0)

    def test_save_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            config = Config(seed=7)
            config.game.max_moves = 50
            config.mcts.rollout_depth = 5
            config.save(str(path))

            loaded = Config.load(str(path))
            assert loaded.seed == 7
            assert loaded.game.max_moves == 50
            assert loaded.mcts.rollout_depth == 5

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  variant: house-seeded\n")

        loaded = Config.load(str(path))
        assert loaded.game.variant == "house-seeded"
        assert loaded.mcts.c_puct == 1.5


class TestLogger:
    def test_jsonl_written(self, tmp_path):
        logger = Logger(log_dir=str(tmp_path), verbose=False)
        for i in range(3):
            record = play_random_game(np.random.default_rng(i), max_moves=20)
            logger.log_game(record.summary(i))

        lines = logger.log_file.read_text().splitlines()
        assert len(lines) == 3
        first = json.loads(lines[0])
        assert first["game_index"] == 0
        assert first["variant"] == "pre-filled"
        assert len(logger.history) == 3

    def test_totals_table(self, tmp_path):
        logger = Logger(log_dir=str(tmp_path), verbose=False)
        assert logger.totals_table().row_count == 3

        logger.log_game(play_random_game(np.random.default_rng(9), max_moves=20).summary(0))
        assert logger.totals_table().row_count == 6


class TestDifficulty:
    def test_presets_get_stronger(self):
        easy = get_difficulty_config(Difficulty.EASY)
        hard = get_difficulty_config("HARD")
        assert easy.simulations < hard.simulations
        assert easy.temperature > hard.temperature

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown difficulty"):
            get_difficulty_config("impossible")

    def test_validation(self):
        with pytest.raises(ValueError):
            DifficultyConfig(simulations=0, temperature=0.0, rollout_depth=5)

    def test_agent_plays_a_legal_pit(self):
        level = DifficultyConfig(simulations=4, temperature=0.0, rollout_depth=3)
        agent = level.make_agent(np.random.default_rng(0))
        assert agent(create_game()) in legal_moves(create_game())


class TestSeed:
    def test_reproducible(self):
        a = set_seed(11).integers(0, 1000, size=5)
        b = set_seed(11).integers(0, 1000, size=5)
        assert np.array_equal(a, b)


class TestCLI:
    runner = CliRunner()

    def test_new(self):
        result = self.runner.invoke(app, ["new", "--variant", "house-seeded"])
        assert result.exit_code == 0
        assert "Player 1 to move" in result.output

    def test_new_json(self):
        result = self.runner.invoke(app, ["new", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["phase"] == "play-phase"

    def test_new_unknown_variant(self):
        result = self.runner.invoke(app, ["new", "--variant", "namua"])
        assert result.exit_code == 1

    def test_play_unknown_difficulty(self):
        result = self.runner.invoke(app, ["play", "--difficulty", "impossible"])
        assert result.exit_code == 1

    def test_replay(self):
        result = self.runner.invoke(app, ["replay", "0", "16"])
        assert result.exit_code == 0
        assert "relay" in result.output

    def test_replay_unknown_variant(self):
        result = self.runner.invoke(app, ["replay", "0", "--variant", "namua"])
        assert result.exit_code == 1
        assert "Unknown variant" in result.output

    def test_replay_rejected(self):
        result = self.runner.invoke(app, ["replay", "20"])
        assert result.exit_code == 1
        assert "Not your pit" in result.output

    def test_simulate(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config = Config(log_dir=str(tmp_path / "runs"))
        config.game.max_moves = 40
        config.save(str(config_path))

        result = self.runner.invoke(
            app, ["simulate", "--config", str(config_path), "--games", "2", "--quiet"]
        )
        assert result.exit_code == 0
        logs = list((tmp_path / "runs").glob("games_*.jsonl"))
        assert len(logs) == 1
        assert len(logs[0].read_text().splitlines()) == 2
