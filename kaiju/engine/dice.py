"""
Dice for the turn engine.
A roll is always six dice; each die lands on one of six faces with equal odds.
"""

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum

from kaiju.engine import DICE_PER_ROLL


class DieFace(Enum):
    """The six faces of a kaiju die."""
    ONE = "1"
    TWO = "2"
    THREE = "3"
    ENERGY = "energy"  # Currency
    CLAW = "claw"  # Attack / Tokyo contention
    HEART = "heart"  # +1 health outside Tokyo

    @property
    def number(self) -> int | None:
        """Numeric value for ONE/TWO/THREE, None for symbol faces."""
        return NUMBER_FACES.get(self)


NUMBER_FACES = {
    DieFace.ONE: 1,
    DieFace.TWO: 2,
    DieFace.THREE: 3,
}

# Die side (1-6) -> face, same order as the printed die
FACE_BY_SIDE = {
    1: DieFace.ONE,
    2: DieFace.TWO,
    3: DieFace.THREE,
    4: DieFace.ENERGY,
    5: DieFace.CLAW,
    6: DieFace.HEART,
}


@dataclass(frozen=True)
class RollOutcome:
    """Immutable result of one six-die roll."""
    faces: tuple[DieFace, ...]

    def __post_init__(self):
        if len(self.faces) != DICE_PER_ROLL:
            raise ValueError(
                f"A roll has exactly {DICE_PER_ROLL} dice, got {len(self.faces)}")
        for face in self.faces:
            if not isinstance(face, DieFace):
                raise ValueError(f"Not a die face: {face!r}")

    def __iter__(self):
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)

    @classmethod
    def from_sides(cls, sides: list[int]) -> "RollOutcome":
        """Build a roll from die sides 1-6 (4=energy, 5=claw, 6=heart)."""
        try:
            return cls(tuple(FACE_BY_SIDE[side] for side in sides))
        except KeyError as e:
            raise ValueError(f"Die side must be 1-6, got {e.args[0]!r}") from None

    def to_list(self) -> list[str]:
        return [face.value for face in self.faces]


def roll_six(rng: random.Random | None = None) -> RollOutcome:
    """
    Roll six dice.

    Args:
        rng: Optional random.Random for reproducible rolls. Defaults to the
            process-wide random module.

    Returns:
        A fresh RollOutcome
    """
    source = rng if rng is not None else random
    faces = tuple(FACE_BY_SIDE[source.randint(1, 6)] for _ in range(DICE_PER_ROLL))
    return RollOutcome(faces)


def tally(roll: RollOutcome) -> Counter:
    """Count each face in a roll. Missing faces count as 0 (Counter semantics)."""
    return Counter(roll.faces)
