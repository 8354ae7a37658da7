"""
Headless game loop.
Drives turn order over the reducer: start_turn, roll, resolve_roll, next living player.
Turn counters live here, never in GameState.
"""

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from kaiju import config
from kaiju.engine.state import GameState, Outcome
from kaiju.engine.dice import RollOutcome, roll_six
from kaiju.engine.decisions import DecisionProvider
from kaiju.engine.actions import start_turn, resolve_roll
from kaiju.engine.reducer import apply_action
from kaiju.engine.queries import get_next_player
from kaiju.engine.events import EventListener, GameEvent, turn_started, turn_limit_reached


@dataclass
class GameResult:
    """Final state of a finished (or turn-limited) game."""
    state: GameState
    outcome: Outcome | None  # None when the turn limit stopped the game
    turns_played: int
    events: list[GameEvent] = field(default_factory=list)


def play_game(
    state: GameState,
    decide: DecisionProvider,
    rng: random.Random | None = None,
    turn_limit: int = config.TURN_LIMIT,
    on_event: EventListener | None = None,
    roll_dice: Callable[[random.Random | None], RollOutcome] = roll_six,
) -> GameResult:
    """
    Play turns until a victory check ends the game or turn_limit turns have been played.

    Eliminated players are skipped. on_event is called with the latest state for
    every event as it happens, so everything a roll caused has been delivered
    before the decision it leads to is asked (the console driver prints here).

    Args:
        state: Starting state (not modified)
        decide: Decision provider for Tokyo concessions and entry
        rng: Optional random.Random for reproducible dice
        turn_limit: Maximum number of turns to play
        on_event: Optional callback (state, event)
        roll_dice: Dice source, roll_six by default

    Returns:
        GameResult with the final state, outcome and full event log
    """
    events: list[GameEvent] = []

    # Loop-level events only; apply_action delivers its own to on_event
    def emit(current: GameState, event: GameEvent):
        events.append(event)
        if on_event:
            on_event(current, event)

    turns_played = 0
    player_id = get_next_player(state)

    while not state.is_over and player_id is not None:
        if turns_played >= turn_limit:
            emit(state, turn_limit_reached(turns_played))
            break

        turns_played += 1
        emit(state, turn_started(turns_played, player_id))

        state, evts = apply_action(state, start_turn(player_id), decide, on_event)
        events.extend(evts)
        if state.is_over:
            break

        roll = roll_dice(rng)
        state, evts = apply_action(state, resolve_roll(player_id, roll), decide, on_event)
        events.extend(evts)

        player_id = get_next_player(state, player_id)

    return GameResult(
        state=state,
        outcome=state.outcome,
        turns_played=turns_played,
        events=events,
    )
