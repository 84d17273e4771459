"""
Tests for player progression.
"""

from __future__ import annotations

import pytest

from hacksim.models.player import create_player
from hacksim.services.player import PlayerService, exp_required_for_level


@pytest.fixture
def players() -> PlayerService:
    return PlayerService(player=create_player("neo"))


class TestExpRequirement:
    @pytest.mark.parametrize(
        ("level", "required"),
        [(1, 100), (2, 150), (3, 225), (4, 337), (5, 506)],
    )
    def test_curve(self, level: int, required: int):
        assert exp_required_for_level(level) == required


class TestAddExp:
    """Tests for experience and levelling."""

    def test_below_threshold(self, players: PlayerService):
        assert players.add_exp(50) == 0
        assert players.player.level == 1
        assert players.player.exp == 50

    def test_exact_threshold(self, players: PlayerService):
        assert players.add_exp(100) == 1
        assert players.player.level == 2
        assert players.player.exp == 0

    def test_multiple_levels_in_one_grant(self, players: PlayerService):
        """250 exp pays for level 1 (100) and level 2 (150) exactly."""
        assert players.add_exp(250) == 2
        assert players.player.level == 3
        assert players.player.exp == 0

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_amounts_ignored(self, players: PlayerService, amount: int):
        players.add_exp(40)

        assert players.add_exp(amount) == 0
        assert players.player.exp == 40
        assert players.player.level == 1

    def test_exp_stays_below_requirement(self, players: PlayerService):
        for amount in [30, 170, 1, 999, 450, 3200, 75, 1600]:
            players.add_exp(amount)
            assert 0 <= players.player.exp < exp_required_for_level(players.player.level)

    def test_level_never_decreases(self, players: PlayerService):
        last = players.player.level
        for amount in [10, -100, 500, 0, 20]:
            players.add_exp(amount)
            assert players.player.level >= last
            last = players.player.level


class TestProgress:
    def test_level_progress(self, players: PlayerService):
        players.add_exp(50)

        assert players.exp_to_next_level == 100
        assert players.level_progress == 50

    def test_progress_on_later_level(self, players: PlayerService):
        players.add_exp(175)  # level 2 with 75/150

        assert players.exp_to_next_level == 150
        assert players.level_progress == 50


class TestCurrency:
    """Tests for credits and reputation."""

    def test_add_credits_and_reputation(self, players: PlayerService):
        players.add_credits(400)
        players.add_reputation(1)

        assert players.player.credits == 1400
        assert players.player.reputation == 1

    def test_spend_credits(self, players: PlayerService):
        assert players.spend_credits(300) is True
        assert players.player.credits == 700

    def test_cannot_overspend(self, players: PlayerService):
        assert players.spend_credits(5000) is False
        assert players.player.credits == 1000


class TestLifecycle:
    def test_reset_creates_new_player(self, players: PlayerService):
        old_id = players.player.id
        players.add_exp(500)

        players.reset("trinity")

        assert players.player.id != old_id
        assert players.player.name == "trinity"
        assert players.player.level == 1

    def test_rename(self, players: PlayerService):
        players.rename("morpheus")
        assert players.player.name == "morpheus"

    def test_restore(self, players: PlayerService):
        saved = create_player("tank")
        saved.level = 4

        players.restore(saved)

        assert players.player is saved
