"""
Action definitions for the game.
Actions are immutable, deterministic instructions. The dice are rolled by the
caller, so a resolve_roll action carries its roll with it.
"""

from dataclasses import dataclass

from kaiju.engine.dice import RollOutcome


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type, player, and payload."""
    type: str  # "start_turn", "resolve_roll"
    player_id: int  # Active player
    payload: dict  # Action-specific data


def start_turn(player_id: int) -> Action:
    """Begin a player's turn: Tokyo hold reward, then a victory check."""
    return Action(type="start_turn", player_id=player_id, payload={})


def resolve_roll(player_id: int, roll: RollOutcome) -> Action:
    """
    Resolve a roll for the active player, then check victory.
    Example: resolve_roll(1, RollOutcome.from_sides([1, 1, 1, 4, 5, 6]))
    """
    return Action(
        type="resolve_roll",
        player_id=player_id,
        payload={"roll": roll},
    )
