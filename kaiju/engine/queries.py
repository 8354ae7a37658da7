"""
Query functions for driver/UI integration.
These help the driver pick turn order and show standings without mutating game state.
"""

from typing import Any

from kaiju.engine.state import GameState, Player
from kaiju.engine.decisions import (
    DecisionRequest,
    CONCEDE_AFTER_ATTACK,
    CONCEDE_TO_CHALLENGE,
    ENTER_ZONE,
)


def get_living_players(state: GameState) -> list[Player]:
    """Players with health > 0, in seat order."""
    return [p for p in state.players.values() if p.is_alive]


def get_next_player(state: GameState, after_id: int | None = None) -> int | None:
    """
    Next living player in seat order after `after_id`, wrapping around.

    With after_id None the first living player is returned. Returns None when
    nobody is alive. `after_id` itself may be returned if it is the only living player.
    """
    order = list(state.players.keys())
    if not order:
        return None

    start = 0
    if after_id is not None:
        start = order.index(state.get_player(after_id).id) + 1

    for offset in range(len(order)):
        candidate = state.players[order[(start + offset) % len(order)]]
        if candidate.is_alive:
            return candidate.id
    return None


def get_standings(state: GameState) -> list[dict[str, Any]]:
    """
    Final-tally rows sorted by living first, then score, then health.
    Seat order breaks remaining ties.
    """
    rows = []
    for seat, player in enumerate(state.players.values()):
        row = player.to_dict()
        row["alive"] = player.is_alive
        row["in_zone"] = state.is_in_zone(player.id)
        rows.append((seat, row))
    rows.sort(key=lambda item: (not item[1]["alive"], -item[1]["score"], -item[1]["health"], item[0]))
    return [row for _, row in rows]


def get_game_summary(state: GameState) -> dict[str, Any]:
    """Compact snapshot for display."""
    occupant = state.zone_occupant
    return {
        "zone_occupant": occupant,
        "zone_occupant_name": state.get_player(occupant).name if occupant is not None else None,
        "living_players": [p.id for p in get_living_players(state)],
        "players": [p.to_dict() for p in state.players.values()],
        "outcome": state.outcome.to_dict() if state.outcome else None,
    }


def describe_decision(state: GameState, request: DecisionRequest) -> str:
    """Prompt text for a decision request, with the default capitalised in the y/n hint."""
    hint = "(Y/n)" if request.default else "(y/N)"
    answering = state.get_player(request.player_id).name
    active = state.get_player(request.active_player_id).name

    if request.kind == CONCEDE_AFTER_ATTACK:
        return f"{answering} has finished attacking. Concede Tokyo? {hint}: "
    if request.kind == CONCEDE_TO_CHALLENGE:
        return (f"{active} challenges {answering} with {request.claws} claw(s). "
                f"Should {answering} concede Tokyo? {hint}: ")
    if request.kind == ENTER_ZONE:
        return f"Tokyo is vacant. {active} rolled {request.claws} claw(s). Enter Tokyo? {hint}: "
    raise ValueError(f"Unknown decision kind: {request.kind}")
