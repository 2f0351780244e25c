"""
Face turns and their notation.

Notation grammar: a face letter (U, D, L, R, F, B), optionally followed by
* "'" : counter-clockwise quarter turn
* "2" : half turn
No suffix means a clockwise quarter turn.

The solver answers with a whitespace-separated sequence of such tokens (empty when already solved).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import Face
from src.cube.colors import FACE_NAMES

NOTATION_PATTERN = re.compile(r"^([UDFBLR])('|2)?$")


class Direction(IntEnum):
    """Values match the number of clockwise quarter turns, except counter-clockwise (-1 == 3 quarter turns)."""

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
    HALF_TURN = 2


DIRECTION_SUFFIX: dict[Direction, str] = {
    Direction.CLOCKWISE: "",
    Direction.COUNTER_CLOCKWISE: "'",
    Direction.HALF_TURN: "2",
}

SUFFIX_TO_DIRECTION: dict[str, Direction] = {
    value: key for key, value in DIRECTION_SUFFIX.items()
}

DIRECTION_TEXT: dict[Direction, str] = {
    Direction.CLOCKWISE: "clockwise",
    Direction.COUNTER_CLOCKWISE: "counter-clockwise",
    Direction.HALF_TURN: "180 degrees",
}


def format_notation(face: Face, direction: Direction) -> str:
    return f"{face.value}{DIRECTION_SUFFIX[direction]}"


@dataclass(frozen=True)
class Move:
    """A single face turn. The notation is always derived from (face, direction), never stored."""

    face: Face
    direction: Direction

    def __post_init__(self) -> None:
        object.__setattr__(self, "face", Face(self.face))
        object.__setattr__(self, "direction", Direction(self.direction))

    @classmethod
    def from_notation(cls, notation: str) -> Move:
        """
        Parse a single token such as "R", "U'" or "F2".

        Anything else (lower case letters, surrounding whitespace, "R3", "R'2", ...) is rejected.
        """
        match = NOTATION_PATTERN.fullmatch(notation)
        if match is None:
            raise InvalidNotationError(f"Cannot interpret {notation!r} as a move.")
        face, suffix = match.groups()
        return cls(Face(face), SUFFIX_TO_DIRECTION[suffix or ""])

    def to_notation(self) -> str:
        return format_notation(self.face, self.direction)

    @property
    def notation(self) -> str:
        return self.to_notation()

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise quarter turns this move amounts to."""
        return self.direction % 4

    def explain(self) -> str:
        """Plain English description, e.g. 'Rotate Front face clockwise'"""
        return f"Rotate {FACE_NAMES[self.face]} face {DIRECTION_TEXT[self.direction]}"

    def inverse(self) -> Move:
        if self.direction == Direction.HALF_TURN:
            return self
        return Move(self.face, Direction(-self.direction))

    def __str__(self) -> str:
        return self.to_notation()


def is_valid_notation(notation: str) -> bool:
    return NOTATION_PATTERN.fullmatch(notation) is not None


def is_valid_move(face: str, direction: int, notation: str) -> bool:
    """Check that a (face, direction, notation) triple, e.g. coming from a client, is consistent."""
    if face not in Face.__members__:
        return False
    if direction not in {d.value for d in Direction}:
        return False
    return notation == format_notation(Face(face), Direction(direction))


def parse_solution(solution: str) -> list[Move]:
    """
    Parse the solver's answer into moves.
    ---

    Tokens are separated by any whitespace. An empty (or blank) answer means the cube was already solved.
    A single malformed token invalidates the whole answer.
    """
    return [Move.from_notation(token) for token in solution.split()]


def format_solution(moves: Iterable[Move]) -> str:
    return " ".join(move.to_notation() for move in moves)


def invert_sequence(moves: Iterable[Move]) -> list[Move]:
    """The sequence that undoes the given one: reversed order, every move inverted."""
    return [move.inverse() for move in reversed(list(moves))]
