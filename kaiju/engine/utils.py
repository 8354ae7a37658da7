"""
Utility functions for the game engine: setup and console formatting.
"""

from kaiju.engine.state import GameState, GameConfig, Player
from kaiju.engine.dice import RollOutcome
from kaiju.engine.events import (
    GameEvent,
    TURN_STARTED,
    DICE_ROLLED,
    SCORE_GAINED,
    ENERGY_GAINED,
    HEALTH_GAINED,
    HEALING_SUPPRESSED,
    DAMAGE_DEALT,
    PLAYER_ELIMINATED,
    ZONE_REWARD,
    DECISION_MADE,
    ZONE_CONCEDED,
    CHALLENGE_REPELLED,
    ZONE_ENTERED,
    ZONE_DECLINED,
    GAME_OVER,
    TURN_LIMIT_REACHED,
)
from kaiju.engine.queries import get_standings

FACE_SYMBOLS = {
    "1": "1",
    "2": "2",
    "3": "3",
    "energy": "E",
    "claw": "C",
    "heart": "H",
}


def clamp_player_count(count: int, config: GameConfig | None = None) -> int:
    """Clamp a requested player count into [min_players, max_players]."""
    config = config or GameConfig()
    return max(config.min_players, min(config.max_players, count))


def new_game(player_names: list[str], config: GameConfig | None = None) -> GameState:
    """
    Create a new game with players seated in the given order.

    Player count is clamped rather than rejected: names past max_players are
    dropped and missing seats are filled as "Player N". Blank names get the
    same default. Ids are assigned 1..n in seat order.

    Args:
        player_names: Names in seat/turn order
        config: Optional rule overrides (defaults from kaiju.config)

    Returns:
        Fresh GameState with Tokyo vacant
    """
    config = config or GameConfig()
    count = clamp_player_count(len(player_names), config)

    players: dict[int, Player] = {}
    for seat in range(count):
        player_id = seat + 1
        name = player_names[seat].strip() if seat < len(player_names) else ""
        players[player_id] = Player(
            id=player_id,
            name=name or f"Player {player_id}",
            health=config.starting_health,
            max_health=config.max_health,
            max_score=config.max_score,
        )

    return GameState(players=players, config=config)


def format_roll(roll: RollOutcome) -> str:
    """e.g. "[1 1 1 E C H]" """
    return "[" + " ".join(FACE_SYMBOLS[face.value] for face in roll) + "]"


def format_event(state: GameState, event: GameEvent) -> str:
    """One-line description of an event for console output."""
    p = event.payload

    def name(player_id: int | None) -> str:
        return state.get_player(player_id).name if player_id is not None else "nobody"

    if event.type == TURN_STARTED:
        return f"--- Turn {p['turn_number']} - {name(p['player_id'])} ---"
    if event.type == DICE_ROLLED:
        faces = " ".join(FACE_SYMBOLS[f] for f in p["faces"])
        return f"{name(p['player_id'])} rolls [{faces}]"
    if event.type == SCORE_GAINED:
        return f"{name(p['player_id'])} gains {p['amount']} VP ({p['reason']}). VP: {p['new_score']}"
    if event.type == ENERGY_GAINED:
        return f"{name(p['player_id'])} gains {p['amount']} energy. Energy: {p['new_energy']}"
    if event.type == HEALTH_GAINED:
        return f"{name(p['player_id'])} heals {p['amount']} outside Tokyo. HP: {p['new_health']}"
    if event.type == HEALING_SUPPRESSED:
        return f"{name(p['player_id'])} is in Tokyo: {p['hearts']} heart(s) ignored"
    if event.type == DAMAGE_DEALT:
        return (f"{name(p['attacker_id'])} hits {name(p['target_id'])} for {p['amount']}. "
                f"HP: {p['new_health']}")
    if event.type == PLAYER_ELIMINATED:
        return f"{name(p['player_id'])} is eliminated by {name(p['by_player_id'])}!"
    if event.type == ZONE_REWARD:
        return f"{name(p['player_id'])} holds Tokyo and gains {p['amount']} VP. VP: {p['new_score']}"
    if event.type == DECISION_MADE:
        return f"{name(p['player_id'])} answers {'yes' if p['answer'] else 'no'} ({p['kind']})"
    if event.type == ZONE_CONCEDED:
        return f"{name(p['player_id'])} concedes Tokyo"
    if event.type == CHALLENGE_REPELLED:
        return f"{name(p['occupant_id'])} holds Tokyo against {name(p['challenger_id'])}"
    if event.type == ZONE_ENTERED:
        return f"{name(p['player_id'])} enters Tokyo and gains {p['bonus']} VP. VP: {p['new_score']}"
    if event.type == ZONE_DECLINED:
        return f"{name(p['player_id'])} declines to enter Tokyo"
    if event.type == GAME_OVER:
        if p["kind"] == "score_victory":
            return f"GAME OVER! {name(p['player_id'])} reached {state.config.max_score} VP!"
        if p["kind"] == "last_standing":
            return f"GAME OVER! {name(p['player_id'])} is the last kaiju standing!"
        return "GAME OVER! All kaiju were eliminated simultaneously!"
    if event.type == TURN_LIMIT_REACHED:
        return f"Game stopped after {p['turns_played']} turns (turn limit)."
    return f"{event.type}: {p}"


def print_game_state(state: GameState):
    """Pretty-print players and Tokyo."""
    occupant = state.zone_occupant
    print(f"\n{'='*60}")
    print(f"Tokyo: {state.get_player(occupant).name if occupant is not None else 'vacant'}")
    print(f"{'='*60}")
    for player in state.players.values():
        marker = " [TOKYO]" if state.is_in_zone(player.id) else ""
        status = "" if player.is_alive else " (eliminated)"
        print(f"  {player.name}: HP {player.health}/{state.config.max_health}, "
              f"VP {player.score}/{state.config.max_score}, Energy {player.energy}{marker}{status}")


def print_final_scores(state: GameState):
    print("\n--- Final Scores ---")
    for row in get_standings(state):
        print(f"- {row['name']}: {row['score']} VP, {row['health']} HP, {row['energy']} Energy")
