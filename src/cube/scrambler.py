"""Random scrambles: sequences of face turns where no face is turned twice in a row."""

import random
from typing import Optional

from src.core.shared_types import Face
from src.cube.colors import FACE_ORDER
from src.cube.engine import apply_moves
from src.cube.moves import Direction, Move
from src.cube.state import CubeState

DEFAULT_SCRAMBLE_LENGTH = 25


def generate_scramble(
    length: int = DEFAULT_SCRAMBLE_LENGTH, rng: Optional[random.Random] = None
) -> list[Move]:
    """
    Draw `length` moves uniformly from the 6 faces x 3 directions.

    Turning the same face twice in a row is redundant (R R == R2), so the face of the previous move is never drawn again.
    Pass a seeded `random.Random` to get a reproducible scramble.
    """
    if length < 0:
        raise ValueError(f"Scramble length cannot be negative, got {length}")
    rng = rng if rng is not None else random.Random()

    moves: list[Move] = []
    last_face: Optional[Face] = None
    for _ in range(length):
        face = rng.choice([face for face in FACE_ORDER if face != last_face])
        direction = rng.choice(list(Direction))
        moves.append(Move(face, direction))
        last_face = face
    return moves


def scramble_state(
    state: CubeState,
    length: int = DEFAULT_SCRAMBLE_LENGTH,
    rng: Optional[random.Random] = None,
) -> tuple[CubeState, list[Move]]:
    """Generate a scramble and apply it. Returns the scrambled cube together with the moves used."""
    moves = generate_scramble(length, rng)
    return apply_moves(state, moves), moves
