"""
Game state representation.
The registry (players by id) and the Tokyo occupant are the only mutable state the engine owns.
Players are never removed; health 0 marks elimination.
"""

from dataclasses import dataclass, field
from copy import deepcopy
from typing import Any

from kaiju import config


class UnknownPlayerError(LookupError):
    """Raised for a player id that was never registered. Always a programming error."""
    pass


@dataclass(frozen=True)
class GameConfig:
    """Rule constants for one game. Fixed once the game is created."""
    max_health: int = config.MAX_HEALTH
    starting_health: int = config.STARTING_HEALTH
    max_score: int = config.MAX_SCORE
    min_players: int = config.MIN_PLAYERS
    max_players: int = config.MAX_PLAYERS
    zone_hold_reward: int = config.ZONE_HOLD_REWARD
    zone_entry_reward: int = config.ZONE_ENTRY_REWARD

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_health": self.max_health,
            "starting_health": self.starting_health,
            "max_score": self.max_score,
            "min_players": self.min_players,
            "max_players": self.max_players,
            "zone_hold_reward": self.zone_hold_reward,
            "zone_entry_reward": self.zone_entry_reward,
        }


@dataclass
class Player:
    """A single kaiju's stats. Mutators clamp and return the amount actually applied."""
    id: int
    name: str
    health: int
    score: int = 0
    energy: int = 0  # Currency, no cap
    max_health: int = config.MAX_HEALTH
    max_score: int = config.MAX_SCORE

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def gain_health(self, amount: int) -> int:
        old = self.health
        self.health = min(self.max_health, self.health + max(0, amount))
        return self.health - old

    def gain_score(self, amount: int) -> int:
        old = self.score
        self.score = min(self.max_score, self.score + max(0, amount))
        return self.score - old

    def gain_energy(self, amount: int) -> int:
        self.energy += max(0, amount)
        return max(0, amount)

    def take_damage(self, amount: int) -> int:
        old = self.health
        self.health = max(0, self.health - max(0, amount))
        return old - self.health

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "health": self.health,
            "score": self.score,
            "energy": self.energy,
        }


@dataclass
class Outcome:
    """How a game ended."""
    kind: str  # "score_victory", "last_standing", "draw"
    player_id: int | None = None  # None for a draw

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "player_id": self.player_id}


@dataclass
class GameState:
    """Complete game state."""
    # player_id -> Player, in seat order (also the victory tie-break order)
    players: dict[int, Player]
    config: GameConfig = field(default_factory=GameConfig)
    # Player id currently in Tokyo (None if vacant)
    zone_occupant: int | None = None
    # Set once a victory check finds an outcome
    outcome: Outcome | None = None

    def copy(self) -> "GameState":
        """Return a deep copy of this game state."""
        return deepcopy(self)

    def get_player(self, player_id: int) -> Player:
        """Look up a player. Ids are never removed, so a miss is a bug in the caller."""
        try:
            return self.players[player_id]
        except KeyError:
            raise UnknownPlayerError(f"No player with id {player_id!r}") from None

    def is_in_zone(self, player_id: int) -> bool:
        return self.zone_occupant == player_id

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "players": [p.to_dict() for p in self.players.values()],
            "config": self.config.to_dict(),
            "zone_occupant": self.zone_occupant,
            "outcome": self.outcome.to_dict() if self.outcome else None,
        }
