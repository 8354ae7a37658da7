"""
Main game reducer.
Applies actions to a copy of the state, enforcing rules.
Returns (new_state, events) where events describe what happened.
"""

from kaiju.engine.state import GameState
from kaiju.engine.actions import Action
from kaiju.engine.decisions import DecisionProvider
from kaiju.engine.resolver import apply_passive_reward, resolve_turn
from kaiju.engine.victory import check_victory
from kaiju.engine.events import EventListener, GameEvent, game_over


def apply_action(
    state: GameState,
    action: Action,
    decide: DecisionProvider,
    on_event: EventListener | None = None,
) -> tuple[GameState, list[GameEvent]]:
    """
    Apply a single action to the current state, returning new state and events.

    Validates:
    - Game is not already over
    - Action player exists and is still alive

    Each action ends with a victory check; an outcome is stored on the new
    state and a game_over event is appended.

    Args:
        state: Current game state (not modified)
        action: Action to apply
        decide: Decision provider for Tokyo concessions and entry
        on_event: Optional listener; receives each returned event exactly once,
            and roll events reach it before any decision they lead to

    Returns:
        Tuple of (new_state, events)
    """
    if state.is_over:
        raise ValueError(f"Game is over ({state.outcome.kind}).")

    player = state.get_player(action.player_id)
    if not player.is_alive:
        raise ValueError(f"Player {player.name} has been eliminated and cannot act.")

    new_state = state.copy()
    events: list[GameEvent] = []

    if action.type == "start_turn":
        reward_events = apply_passive_reward(new_state, action.player_id)
        events.extend(reward_events)
        _notify(on_event, new_state, reward_events)

    elif action.type == "resolve_roll":
        roll = action.payload.get("roll")
        if roll is None:
            raise ValueError("resolve_roll action has no roll")
        events.extend(resolve_turn(new_state, action.player_id, roll, decide, on_event))

    else:
        raise ValueError(f"Unknown action type: {action.type}")

    outcome = check_victory(new_state)
    if outcome is not None:
        new_state.outcome = outcome
        event = game_over(outcome.kind, outcome.player_id)
        events.append(event)
        _notify(on_event, new_state, [event])

    return new_state, events


def _notify(on_event: EventListener | None, state: GameState, events: list[GameEvent]):
    if on_event:
        for event in events:
            on_event(state, event)
