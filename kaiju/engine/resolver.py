"""
Turn resolution.
Applies one roll for the active player: number matches, energy, hearts, then claws
and the Tokyo contention protocol. Mutates the state in place and returns events.
"""

from kaiju.engine import NUMBER_MATCH_THRESHOLD
from kaiju.engine.dice import DieFace, RollOutcome, NUMBER_FACES, tally
from kaiju.engine.state import GameState
from kaiju.engine.decisions import (
    DecisionProvider,
    DecisionRequest,
    CONCEDE_AFTER_ATTACK,
    CONCEDE_TO_CHALLENGE,
    ENTER_ZONE,
)
from kaiju.engine.events import (
    GameEvent,
    EventListener,
    dice_rolled,
    score_gained,
    energy_gained,
    health_gained,
    healing_suppressed,
    damage_dealt,
    player_eliminated,
    zone_reward,
    decision_made,
    zone_conceded,
    challenge_repelled,
    zone_entered,
    zone_declined,
)


def number_match_points(counts) -> int:
    """
    Points from numeric faces.

    Each of 1/2/3 rolled at least NUMBER_MATCH_THRESHOLD times scores its own
    value once. Extra matching dice add nothing.
    Example: [1, 1, 1, 1, 3, 3] -> 1 point; [2, 2, 2, 3, 3, 3] -> 5 points.
    """
    points = 0
    for face, value in NUMBER_FACES.items():
        if counts[face] >= NUMBER_MATCH_THRESHOLD:
            points += value
    return points


def apply_passive_reward(state: GameState, active_player_id: int) -> list[GameEvent]:
    """
    Award the Tokyo hold reward at the start of the occupant's own turn.

    No-op when Tokyo is vacant or held by someone other than the active player.
    Must run before dice are rolled.
    """
    if state.zone_occupant is None or state.zone_occupant != active_player_id:
        return []

    occupant = state.get_player(state.zone_occupant)
    gained = occupant.gain_score(state.config.zone_hold_reward)
    return [zone_reward(occupant.id, gained, occupant.score)]


class _TurnLog:
    """Events for one resolution, passed to the listener before each decision and at the end."""

    def __init__(self, state: GameState, on_event: EventListener | None):
        self.state = state
        self.on_event = on_event
        self.events: list[GameEvent] = []
        self._flushed = 0

    def add(self, event: GameEvent):
        self.events.append(event)

    def flush(self):
        if self.on_event:
            for event in self.events[self._flushed:]:
                self.on_event(self.state, event)
        self._flushed = len(self.events)

    def ask(self, decide: DecisionProvider, kind: str, answering_id: int, active_id: int, claws: int) -> bool:
        # Everything resolved so far is shown before the question
        self.flush()
        request = DecisionRequest.for_kind(kind, answering_id, active_id, claws)
        answer = bool(decide(request))
        self.add(decision_made(kind, answering_id, answer))
        return answer


def resolve_turn(
    state: GameState,
    player_id: int,
    roll: RollOutcome,
    decide: DecisionProvider,
    on_event: EventListener | None = None,
) -> list[GameEvent]:
    """
    Resolve a roll for the active player.

    Order:
    1. Tally the six faces
    2. Number matches score (clamped to score cap)
    3. Energy added unconditionally
    4. Hearts heal outside Tokyo only (clamped to health cap)
    5. Claws: attack from Tokyo, or challenge the occupant / enter a vacant Tokyo

    Args:
        state: Game state (mutated in place)
        player_id: Active player
        roll: Six-die roll for this turn
        decide: Decision provider queried for concessions and entry
        on_event: Optional listener called with (state, event) as events happen;
            every event up to a decision is delivered before decide is called

    Returns:
        Events in the order they happened
    """
    player = state.get_player(player_id)
    counts = tally(roll)
    log = _TurnLog(state, on_event)
    log.add(dice_rolled(player_id, roll.to_list(), {face.value: n for face, n in counts.items()}))

    # Decided once, before claws can move anyone in or out of Tokyo
    in_zone = state.is_in_zone(player_id)

    points = number_match_points(counts)
    if points > 0:
        gained = player.gain_score(points)
        log.add(score_gained(player_id, gained, player.score, "number_match"))

    energy = counts[DieFace.ENERGY]
    if energy > 0:
        player.gain_energy(energy)
        log.add(energy_gained(player_id, energy, player.energy))

    hearts = counts[DieFace.HEART]
    if hearts > 0:
        if in_zone:
            log.add(healing_suppressed(player_id, hearts))
        else:
            healed = player.gain_health(hearts)
            log.add(health_gained(player_id, hearts, healed, player.health))

    claws = counts[DieFace.CLAW]
    if claws > 0:
        if in_zone:
            _attack_from_zone(state, player_id, claws, decide, log)
        else:
            _contest_zone(state, player_id, claws, decide, log)

    log.flush()
    return log.events


def _attack_from_zone(
    state: GameState,
    player_id: int,
    claws: int,
    decide: DecisionProvider,
    log: _TurnLog,
):
    """Occupant hits every living player outside Tokyo, then may give Tokyo up."""
    for target in state.players.values():
        if target.id == player_id or state.is_in_zone(target.id) or not target.is_alive:
            continue
        dealt = target.take_damage(claws)
        log.add(damage_dealt(player_id, target.id, dealt, target.health))
        if not target.is_alive:
            log.add(player_eliminated(target.id, player_id))

    if log.ask(decide, CONCEDE_AFTER_ATTACK, player_id, player_id, claws):
        state.zone_occupant = None
        log.add(zone_conceded(player_id, None))


def _contest_zone(
    state: GameState,
    player_id: int,
    claws: int,
    decide: DecisionProvider,
    log: _TurnLog,
):
    """
    Claws rolled from outside Tokyo.

    An occupied Tokyo is challenged first: the occupant decides whether to leave.
    A refused challenge ends resolution with nobody damaged. If Tokyo is (or just
    became) vacant the active player decides whether to enter.
    """
    occupant_id = state.zone_occupant
    if occupant_id is not None:
        if not log.ask(decide, CONCEDE_TO_CHALLENGE, occupant_id, player_id, claws):
            log.add(challenge_repelled(occupant_id, player_id, claws))
            return
        state.zone_occupant = None
        log.add(zone_conceded(occupant_id, player_id))

    if not log.ask(decide, ENTER_ZONE, player_id, player_id, claws):
        log.add(zone_declined(player_id))
        return

    state.zone_occupant = player_id
    player = state.get_player(player_id)
    gained = player.gain_score(state.config.zone_entry_reward)
    log.add(zone_entered(player_id, gained, player.score))
