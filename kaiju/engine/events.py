"""
Game events for UI hooks and logging.
Events describe what happened while a turn step was applied.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from kaiju.engine.state import GameState


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]


# Called with the state as of the event and the event itself
EventListener = Callable[[GameState, GameEvent], None]


# ===== Event Type Constants =====

# Turn events
TURN_STARTED = "turn_started"
DICE_ROLLED = "dice_rolled"

# Stat events
SCORE_GAINED = "score_gained"
ENERGY_GAINED = "energy_gained"
HEALTH_GAINED = "health_gained"
HEALING_SUPPRESSED = "healing_suppressed"

# Attack events
DAMAGE_DEALT = "damage_dealt"
PLAYER_ELIMINATED = "player_eliminated"

# Tokyo events
ZONE_REWARD = "zone_reward"
DECISION_MADE = "decision_made"
ZONE_CONCEDED = "zone_conceded"
CHALLENGE_REPELLED = "challenge_repelled"
ZONE_ENTERED = "zone_entered"
ZONE_DECLINED = "zone_declined"

# End of game
GAME_OVER = "game_over"
TURN_LIMIT_REACHED = "turn_limit_reached"


# ===== Event Factory Functions =====

def turn_started(turn_number: int, player_id: int) -> GameEvent:
    return GameEvent(TURN_STARTED, {
        "turn_number": turn_number,
        "player_id": player_id,
    })


def dice_rolled(player_id: int, faces: list[str], counts: dict[str, int]) -> GameEvent:
    return GameEvent(DICE_ROLLED, {
        "player_id": player_id,
        "faces": faces,
        "counts": counts,  # face value -> count, only faces that appeared
    })


def score_gained(player_id: int, amount: int, new_score: int, reason: str) -> GameEvent:
    """amount is what was actually added after clamping to the score cap."""
    return GameEvent(SCORE_GAINED, {
        "player_id": player_id,
        "amount": amount,
        "new_score": new_score,
        "reason": reason,  # "number_match"
    })


def energy_gained(player_id: int, amount: int, new_energy: int) -> GameEvent:
    return GameEvent(ENERGY_GAINED, {
        "player_id": player_id,
        "amount": amount,
        "new_energy": new_energy,
    })


def health_gained(player_id: int, hearts: int, amount: int, new_health: int) -> GameEvent:
    return GameEvent(HEALTH_GAINED, {
        "player_id": player_id,
        "hearts": hearts,
        "amount": amount,  # hearts actually applied (cap may eat some)
        "new_health": new_health,
    })


def healing_suppressed(player_id: int, hearts: int) -> GameEvent:
    """Emitted when the Tokyo occupant rolls hearts; they heal nothing."""
    return GameEvent(HEALING_SUPPRESSED, {
        "player_id": player_id,
        "hearts": hearts,
    })


def damage_dealt(attacker_id: int, target_id: int, amount: int, new_health: int) -> GameEvent:
    return GameEvent(DAMAGE_DEALT, {
        "attacker_id": attacker_id,
        "target_id": target_id,
        "amount": amount,
        "new_health": new_health,
    })


def player_eliminated(player_id: int, by_player_id: int) -> GameEvent:
    return GameEvent(PLAYER_ELIMINATED, {
        "player_id": player_id,
        "by_player_id": by_player_id,
    })


def zone_reward(player_id: int, amount: int, new_score: int) -> GameEvent:
    return GameEvent(ZONE_REWARD, {
        "player_id": player_id,
        "amount": amount,
        "new_score": new_score,
    })


def decision_made(kind: str, player_id: int, answer: bool) -> GameEvent:
    return GameEvent(DECISION_MADE, {
        "kind": kind,
        "player_id": player_id,
        "answer": answer,
    })


def zone_conceded(player_id: int, to_player_id: int | None) -> GameEvent:
    """to_player_id is the challenger, or None when the occupant leaves after their own attack."""
    return GameEvent(ZONE_CONCEDED, {
        "player_id": player_id,
        "to_player_id": to_player_id,
    })


def challenge_repelled(occupant_id: int, challenger_id: int, claws: int) -> GameEvent:
    return GameEvent(CHALLENGE_REPELLED, {
        "occupant_id": occupant_id,
        "challenger_id": challenger_id,
        "claws": claws,
    })


def zone_entered(player_id: int, bonus: int, new_score: int) -> GameEvent:
    return GameEvent(ZONE_ENTERED, {
        "player_id": player_id,
        "bonus": bonus,
        "new_score": new_score,
    })


def zone_declined(player_id: int) -> GameEvent:
    return GameEvent(ZONE_DECLINED, {"player_id": player_id})


def game_over(kind: str, player_id: int | None) -> GameEvent:
    return GameEvent(GAME_OVER, {
        "kind": kind,
        "player_id": player_id,
    })


def turn_limit_reached(turns_played: int) -> GameEvent:
    return GameEvent(TURN_LIMIT_REACHED, {"turns_played": turns_played})
