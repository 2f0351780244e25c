"""Unit tests for src/cube/facelets.py"""

import random

import pytest

from src.core.exceptions import (
    InvalidAlphabetError,
    InvalidFaceletError,
    InvalidLengthError,
    UnknownColorError,
)
from src.core.shared_types import Color, Face
from src.cube.colors import COLOR_TO_FACE, FACE_TO_COLOR
from src.cube.engine import apply_moves
from src.cube.facelets import (
    FACELET_LENGTH,
    SOLVED_FACELETS,
    check_facelets,
    decode,
    encode,
    invalid_characters,
    is_valid_facelets,
)
from src.cube.scrambler import generate_scramble
from src.cube.state import CubeState


def test_solved_cube_encoding(solved: CubeState) -> None:
    assert SOLVED_FACELETS == "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"
    assert encode(solved) == SOLVED_FACELETS
    assert decode(SOLVED_FACELETS) == solved


@pytest.mark.parametrize(
    "color, letter",
    [
        (Color.WHITE, "U"),
        (Color.YELLOW, "D"),
        (Color.RED, "F"),
        (Color.ORANGE, "B"),
        (Color.BLUE, "R"),
        (Color.GREEN, "L"),
    ],
)
def test_color_is_written_as_its_face_letter(
    solved: CubeState, color: Color, letter: str
) -> None:
    """The first sticker of U gets recolored: the first character names the face owning that color."""
    state = solved.with_sticker(Face.U, 0, 0, color)
    assert encode(state)[0] == letter


@pytest.mark.parametrize(
    "face, row, col, index",
    [
        (Face.U, 0, 0, 0),
        (Face.U, 2, 2, 8),
        (Face.R, 0, 0, 9),
        (Face.R, 1, 2, 14),
        (Face.F, 0, 1, 19),
        (Face.D, 2, 0, 33),
        (Face.L, 1, 1, 40),
        (Face.B, 2, 2, 53),
    ],
)
def test_position_order(
    solved: CubeState, face: Face, row: int, col: int, index: int
) -> None:
    """Blocks U, R, F, D, L, B, each one row-major"""
    # yellow is written as "D": use white on the D face
    paint = Color.YELLOW if face != Face.D else Color.WHITE
    encoded = encode(solved.with_sticker(face, row, col, paint))
    changed = [i for i, (a, b) in enumerate(zip(encoded, SOLVED_FACELETS)) if a != b]
    assert changed == [index]


def test_decode_reads_positions_in_the_same_order() -> None:
    facelets = "D" + SOLVED_FACELETS[1:]
    state = decode(facelets)
    assert state.sticker(Face.U, 0, 0) == Color.YELLOW
    assert state.sticker(Face.U, 0, 1) == Color.WHITE


@pytest.mark.parametrize("seed", range(5))
def test_state_round_trip(solved: CubeState, seed: int) -> None:
    state = apply_moves(solved, generate_scramble(25, random.Random(seed)))
    assert decode(encode(state)) == state


def test_state_round_trip_of_invalid_cube(solved: CubeState) -> None:
    """Round trip does not require a solvable (or even structurally valid) cube"""
    state = solved.with_sticker(Face.F, 1, 1, Color.WHITE)
    assert decode(encode(state)) == state


@pytest.mark.parametrize(
    "facelets",
    [
        SOLVED_FACELETS,
        "UUUUUUUUU" * 6,
        "URFDLB" * 9,
        SOLVED_FACELETS[::-1],
    ],
)
def test_string_round_trip(facelets: str) -> None:
    assert encode(decode(facelets)) == facelets


@pytest.mark.parametrize("length", [0, 53, 55, 108])
def test_invalid_length(length: int) -> None:
    facelets = ("URFDLB" * 20)[:length]
    assert not is_valid_facelets(facelets)
    with pytest.raises(InvalidLengthError):
        decode(facelets)


@pytest.mark.parametrize(
    "facelets, bad",
    [
        ("X" + SOLVED_FACELETS[1:], ["X"]),
        ("u" + SOLVED_FACELETS[1:], ["u"]),
        (SOLVED_FACELETS[:-2] + "W ", ["W", " "]),
        ("WW" + SOLVED_FACELETS[2:], ["W"]),
    ],
)
def test_invalid_alphabet(facelets: str, bad: list[str]) -> None:
    assert len(facelets) == FACELET_LENGTH
    assert invalid_characters(facelets) == bad
    assert not is_valid_facelets(facelets)
    with pytest.raises(InvalidAlphabetError):
        decode(facelets)


def test_length_is_checked_before_alphabet() -> None:
    with pytest.raises(InvalidLengthError):
        check_facelets("XYZ")


def test_codec_errors_share_a_base_class() -> None:
    with pytest.raises(InvalidFaceletError):
        decode("")


def test_unknown_color_is_not_silently_defaulted(solved: CubeState) -> None:
    """A color scheme lacking a color cannot encode a sticker with that color"""
    scheme = {color: face for color, face in COLOR_TO_FACE.items() if color != Color.RED}
    with pytest.raises(UnknownColorError):
        encode(solved, scheme)


def test_custom_color_scheme(solved: CubeState) -> None:
    """Any bijection between colors and faces can be used, as long as encode and decode agree."""
    swapped_faces = {**FACE_TO_COLOR, Face.U: Color.YELLOW, Face.D: Color.WHITE}
    swapped_colors = {color: face for face, color in swapped_faces.items()}
    encoded = encode(solved, swapped_colors)
    assert encoded[:9] == "DDDDDDDDD"
    assert decode(encoded, swapped_faces) == solved
