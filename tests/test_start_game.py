"""Tests for game initialization."""

import pytest

from chain_reaction.schemas.game_engine import (
    GamePhase,
    GameSettings,
    PlayerAttributes,
    Ruleset,
)
from chain_reaction.services.game.start_game import (
    BOARD_SIZES,
    build_game_settings,
    initialize_game,
    validate_game_settings,
)


class TestValidateGameSettings:
    """Tests for validate_game_settings."""

    @pytest.mark.parametrize("num_players", [0, 1, 5])
    def test_rejects_player_count_outside_range(self, num_players: int):
        settings = GameSettings(num_players=num_players, rows=6, cols=6)

        with pytest.raises(ValueError, match="players are required"):
            validate_game_settings(settings)

    def test_rejects_empty_board(self):
        with pytest.raises(ValueError):
            validate_game_settings(GameSettings(num_players=2, rows=0, cols=5))

    def test_rejects_board_smaller_than_player_count(self):
        with pytest.raises(ValueError, match="one cell per player"):
            validate_game_settings(GameSettings(num_players=3, rows=1, cols=2))

    def test_accepts_minimal_two_cell_board(self):
        validate_game_settings(GameSettings(num_players=2, rows=1, cols=2))

    def test_rejects_mismatched_attributes(self):
        settings = GameSettings(
            num_players=3,
            rows=6,
            cols=6,
            player_attributes=[
                PlayerAttributes(name="Alice", color="red"),
                PlayerAttributes(name="Bob", color="blue"),
            ],
        )

        with pytest.raises(ValueError, match="must match"):
            validate_game_settings(settings)

    def test_rejects_duplicate_colors(self):
        settings = GameSettings(
            num_players=2,
            rows=6,
            cols=6,
            player_attributes=[
                PlayerAttributes(name="Alice", color="red"),
                PlayerAttributes(name="Bob", color="red"),
            ],
        )

        with pytest.raises(ValueError, match="Duplicate player color"):
            validate_game_settings(settings)

    def test_rejects_capacity_below_two(self):
        with pytest.raises(ValueError):
            Ruleset(capacity=1)


class TestBuildGameSettings:
    """Tests for build_game_settings."""

    def test_uses_board_size_table(self):
        settings = build_game_settings(4)

        assert (settings.rows, settings.cols) == BOARD_SIZES[4] == (8, 8)
        assert settings.ruleset.capacity == 4
        assert not settings.ruleset.explode_on_conversion_at_threshold

    def test_explicit_size_wins(self):
        settings = build_game_settings(2, rows=1, cols=2)

        assert (settings.rows, settings.cols) == (1, 2)

    def test_partial_size_fills_the_other_dimension(self):
        settings = build_game_settings(3, rows=4)

        assert (settings.rows, settings.cols) == (4, 7)

    def test_unknown_player_count_without_size(self):
        with pytest.raises(ValueError, match="No default board size"):
            build_game_settings(6)

    def test_ruleset_options(self):
        settings = build_game_settings(2, capacity=5, explode_on_conversion_at_threshold=True, seed=3)

        assert settings.ruleset == Ruleset(capacity=5, explode_on_conversion_at_threshold=True)
        assert settings.seed == 3


class TestInitializeGame:
    """Tests for initialize_game."""

    def test_initial_state(self):
        state = initialize_game(build_game_settings(3, seed=21))

        assert state.phase == GamePhase.IN_PROGRESS
        assert state.turn_index == 0
        assert state.current_player_id == state.player_order[0]
        assert sorted(state.player_order) == [0, 1, 2]
        assert state.turn_number == 0
        assert state.winner is None
        assert all(not p.has_moved_first and p.alive for p in state.players)
        assert all(cell.owner is None and cell.power == 0 for row in state.board.cells for cell in row)

    def test_default_player_names(self):
        state = initialize_game(build_game_settings(4, seed=0))

        assert [p.name for p in state.players] == ["Red", "Green", "Blue", "Yellow"]
        assert [p.player_id for p in state.players] == [0, 1, 2, 3]

    def test_custom_player_attributes(self):
        settings = GameSettings(
            num_players=2,
            rows=3,
            cols=3,
            player_attributes=[
                PlayerAttributes(name="Alice", color="red"),
                PlayerAttributes(name="Bob", color="blue"),
            ],
        )

        state = initialize_game(settings)

        assert [(p.name, p.color) for p in state.players] == [("Alice", "red"), ("Bob", "blue")]

    def test_seed_fixes_player_order(self):
        orders = {
            tuple(initialize_game(build_game_settings(4, seed=99)).player_order) for _ in range(5)
        }

        assert len(orders) == 1

    def test_board_uses_ruleset_capacity(self):
        state = initialize_game(build_game_settings(2, rows=2, cols=3, capacity=6))

        assert state.board.capacity == 6
        assert (state.board.rows, state.board.cols) == (2, 3)
