"""
Facelet string: the serialization understood by the external solver.
----

54 characters, 9 per face, with the face blocks in the order U, R, F, D, L, B.
Each block is read row by row (row 0 -> 2), and every row from column 0 -> 2.

A character does NOT name the color of the sticker: it names the face whose center carries that color on a
solved cube (white -> U, yellow -> D, red -> F, orange -> B, blue -> R, green -> L).

ex) the solved cube encodes as
UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB
"""

from typing import Mapping

from src.core.exceptions import (
    InvalidAlphabetError,
    InvalidLengthError,
    UnknownColorError,
)
from src.core.shared_types import Color, Face
from src.cube.colors import (
    COLOR_TO_FACE,
    FACE_TO_COLOR,
    FACELET_ORDER,
    GRID_SIZE,
    STICKERS_PER_COLOR,
)
from src.cube.state import CubeState, make_grid

FACELET_LENGTH = len(FACELET_ORDER) * STICKERS_PER_COLOR
FACELET_ALPHABET = frozenset(face.value for face in FACELET_ORDER)
SOLVED_FACELETS = "".join(face.value * STICKERS_PER_COLOR for face in FACELET_ORDER)


def invalid_characters(facelets: str) -> list[str]:
    """Characters outside of the alphabet, each listed once in order of appearance."""
    return list(dict.fromkeys(char for char in facelets if char not in FACELET_ALPHABET))


def check_facelets(facelets: str) -> None:
    """Raise if the string cannot be decoded. Length is checked before the alphabet."""
    if len(facelets) != FACELET_LENGTH:
        raise InvalidLengthError(
            f"Facelet string must be exactly {FACELET_LENGTH} characters, got {len(facelets)}"
        )
    bad_characters = invalid_characters(facelets)
    if bad_characters:
        raise InvalidAlphabetError(
            f"Facelet string contains invalid characters: {', '.join(bad_characters)}. "
            f"Only {', '.join(face.value for face in FACELET_ORDER)} are allowed."
        )


def is_valid_facelets(facelets: str) -> bool:
    return len(facelets) == FACELET_LENGTH and not invalid_characters(facelets)


def encode(state: CubeState, scheme: Mapping[Color, Face] = COLOR_TO_FACE) -> str:
    """
    Write the facelet string for a cube.

    `scheme` translates sticker colors into face letters. A sticker whose color is missing from the
    scheme is a broken contract: raise instead of guessing a letter.
    """
    characters: list[str] = []
    for face in FACELET_ORDER:
        for row in state.face(face):
            for color in row:
                letter = scheme.get(color)
                if letter is None:
                    raise UnknownColorError(
                        f"Sticker color {color!r} on face {face.value} has no facelet letter."
                    )
                characters.append(Face(letter).value)
    return "".join(characters)


def decode(facelets: str, scheme: Mapping[Face, Color] = FACE_TO_COLOR) -> CubeState:
    """reverse operation: build the cube described by a facelet string"""
    check_facelets(facelets)

    faces = {}
    for block_idx, face in enumerate(FACELET_ORDER):
        block = facelets[block_idx * STICKERS_PER_COLOR : (block_idx + 1) * STICKERS_PER_COLOR]
        faces[face] = make_grid(
            [scheme[Face(letter)] for letter in block[row * GRID_SIZE : (row + 1) * GRID_SIZE]]
            for row in range(GRID_SIZE)
        )
    return CubeState(faces)
