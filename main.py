#!/usr/bin/env python3
"""
Interactive console driver for King of Tokyo (simplified).
Run: python main.py
Reads player count and names, then plays until a kaiju wins or the turn limit is hit.
"""

from kaiju import config
from kaiju.engine.decisions import DecisionRequest, parse_yes_no
from kaiju.engine.dice import roll_six
from kaiju.engine.events import DICE_ROLLED, TURN_STARTED
from kaiju.engine.queries import describe_decision
from kaiju.engine.runner import play_game
from kaiju.engine.utils import (
    clamp_player_count,
    new_game,
    format_roll,
    format_event,
    print_game_state,
    print_final_scores,
)


def read_line(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def prompt_player_names() -> list[str]:
    """Ask for the player count (invalid input -> minimum, out of range -> clamped) and names."""
    raw = read_line(f"How many players ({config.MIN_PLAYERS}-{config.MAX_PLAYERS})? ")
    try:
        count = int(raw)
    except ValueError:
        count = config.MIN_PLAYERS
    count = clamp_player_count(count)
    return [read_line(f"Enter name for Player {i + 1}: ") for i in range(count)]


def main():
    print("# KING OF TOKYO (Simplified) #")

    state = new_game(prompt_player_names())
    print(f"\n--- Game Start with {len(state.players)} Players ---")

    # Decisions are asked against the latest state we have seen
    current = {"state": state}

    def on_event(latest, event):
        current["state"] = latest
        if event.type == DICE_ROLLED:
            return  # Printed by roll_and_show before any decision prompt
        if event.type == TURN_STARTED:
            print_game_state(latest)
        print(f"    {format_event(latest, event)}")

    def roll_and_show(rng):
        roll = roll_six(rng)
        print(f"    Roll: {format_roll(roll)}")
        return roll

    def ask(request: DecisionRequest) -> bool:
        answer = read_line("\n    " + describe_decision(current["state"], request))
        return parse_yes_no(answer, request.default)

    result = play_game(state, ask, on_event=on_event, roll_dice=roll_and_show)
    print_final_scores(result.state)


if __name__ == "__main__":
    main()
