"""
Victory checks.
Run after the Tokyo hold reward and again after the roll is resolved; either check can end the game.
"""

from kaiju.engine.state import GameState, Outcome

SCORE_VICTORY = "score_victory"
LAST_STANDING = "last_standing"
DRAW = "draw"


def check_victory(state: GameState) -> Outcome | None:
    """
    Return the game outcome, or None if play continues.

    1. A living player at the score cap wins. Several at once: first in seat order.
    2. Exactly one living player wins as last standing.
    3. Nobody alive (simultaneous elimination) is a draw.
    """
    living = [p for p in state.players.values() if p.is_alive]

    for player in living:
        if player.score >= state.config.max_score:
            return Outcome(SCORE_VICTORY, player.id)

    if len(living) == 1:
        return Outcome(LAST_STANDING, living[0].id)
    if not living:
        return Outcome(DRAW)
    return None
