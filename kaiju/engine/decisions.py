"""
Decision points for Tokyo contention.
The resolver never decides concessions or entry itself. It builds a DecisionRequest
and calls the injected provider, blocking until it answers yes/no.
"""

from collections.abc import Callable
from dataclasses import dataclass

# Decision kinds
CONCEDE_AFTER_ATTACK = "concede_after_attack"  # Occupant attacked from Tokyo, may now leave
CONCEDE_TO_CHALLENGE = "concede_to_challenge"  # Occupant challenged by claws from outside
ENTER_ZONE = "enter_zone"  # Tokyo is vacant, active player may enter

# Answer used when the provider has nothing meaningful to say
DEFAULT_ANSWERS = {
    CONCEDE_AFTER_ATTACK: False,
    CONCEDE_TO_CHALLENGE: False,
    ENTER_ZONE: True,
}

YES_WORDS = ("y", "yes")
NO_WORDS = ("n", "no")


@dataclass(frozen=True)
class DecisionRequest:
    """A yes/no question the resolver needs answered."""
    kind: str
    player_id: int  # Who answers (the occupant for concessions, the active player for entry)
    active_player_id: int
    claws: int
    default: bool

    @classmethod
    def for_kind(cls, kind: str, player_id: int, active_player_id: int, claws: int) -> "DecisionRequest":
        if kind not in DEFAULT_ANSWERS:
            raise ValueError(f"Unknown decision kind: {kind}")
        return cls(
            kind=kind,
            player_id=player_id,
            active_player_id=active_player_id,
            claws=claws,
            default=DEFAULT_ANSWERS[kind],
        )


DecisionProvider = Callable[[DecisionRequest], bool]


def parse_yes_no(text: str | None, default: bool) -> bool:
    """Parse console input. Empty or unrecognised input gives the default."""
    answer = (text or "").strip().lower()
    if answer in YES_WORDS:
        return True
    if answer in NO_WORDS:
        return False
    return default


def default_decisions(request: DecisionRequest) -> bool:
    """Provider that always takes the default (hold Tokyo, enter when vacant)."""
    return request.default


def always(answer: bool) -> DecisionProvider:
    """Provider that answers every request the same way."""
    def provider(request: DecisionRequest) -> bool:
        return answer
    return provider


class ScriptedDecisions:
    """
    Provider that replays a fixed list of answers in order.

    Every request is recorded in `requests` so tests can assert which questions
    were asked. None in the script means "use the request's default".
    """

    def __init__(self, answers: list[bool | None] | None = None):
        self._answers = list(answers or [])
        self.requests: list[DecisionRequest] = []

    def __call__(self, request: DecisionRequest) -> bool:
        self.requests.append(request)
        if not self._answers:
            raise RuntimeError(
                f"No scripted answer left for {request.kind} (player {request.player_id})")
        answer = self._answers.pop(0)
        return request.default if answer is None else answer

    @property
    def remaining(self) -> int:
        return len(self._answers)
