"""Tests for victory module - kaiju/engine/victory.py."""

from kaiju.engine.dice import RollOutcome
from kaiju.engine.decisions import ScriptedDecisions
from kaiju.engine.resolver import resolve_turn
from kaiju.engine.victory import check_victory, SCORE_VICTORY, LAST_STANDING, DRAW
from kaiju.engine.utils import new_game


def make_state(count=3):
    return new_game(["Alice", "Bob", "Cyber Bunny", "Gigazaur"][:count])


class TestCheckVictory:

    def test_no_outcome_at_start(self):
        assert check_victory(make_state()) is None

    def test_score_victory(self):
        state = make_state()
        state.get_player(2).score = 20
        outcome = check_victory(state)
        assert (outcome.kind, outcome.player_id) == (SCORE_VICTORY, 2)

    def test_score_tie_goes_to_first_seat(self):
        state = make_state()
        state.get_player(2).score = 20
        state.get_player(3).score = 20
        assert check_victory(state).player_id == 2

    def test_dead_player_at_cap_does_not_win(self):
        state = make_state()
        state.get_player(1).score = 20
        state.get_player(1).health = 0
        assert check_victory(state) is None

    def test_score_beats_last_standing(self):
        state = make_state()
        state.get_player(1).health = 0
        state.get_player(3).health = 0
        state.get_player(2).score = 20
        assert check_victory(state).kind == SCORE_VICTORY

    def test_last_standing(self):
        state = make_state()
        state.get_player(1).health = 0
        state.get_player(2).health = 0
        outcome = check_victory(state)
        assert (outcome.kind, outcome.player_id) == (LAST_STANDING, 3)

    def test_draw_when_nobody_alive(self):
        state = make_state(2)
        state.get_player(1).take_damage(10)
        state.get_player(2).take_damage(10)
        outcome = check_victory(state)
        assert outcome.kind == DRAW
        assert outcome.player_id is None

    def test_simultaneous_elimination_in_one_resolution_is_draw(self):
        """Both remaining kaiju hit 0 in the same step (occupant was already at 0)."""
        state = make_state(3)
        state.zone_occupant = 1
        state.get_player(1).health = 0
        state.get_player(2).health = 3
        state.get_player(3).health = 2
        roll = RollOutcome.from_sides([5, 5, 5, 1, 2, 4])
        resolve_turn(state, 1, roll, ScriptedDecisions([False]))
        assert [p.health for p in state.players.values()] == [0, 0, 0]
        assert check_victory(state).kind == DRAW
