"""
Applying face turns to a CubeState
-----

Key idea: every move is built from a single atomic operation, the clockwise quarter turn of one face.
* clockwise         : 1 quarter turn
* half turn         : 2 quarter turns
* counter-clockwise : 3 quarter turns

A quarter turn of face X
1. rotates the 3x3 grid of X itself by 90 degrees clockwise (as seen from outside that face), and
2. cycles the strips of 3 stickers bordering X on its four neighbours.

All functions are pure: the input state is never changed, a new CubeState is returned.
"""

from dataclasses import dataclass
from typing import Iterable

from src.core.shared_types import Face
from src.cube.colors import GRID_SIZE
from src.cube.moves import Move
from src.cube.state import CubeState, Grid, make_grid

Cell = tuple[int, int]

# Strips read in forward or reversed order
FORWARD = (0, 1, 2)
REVERSED = (2, 1, 0)


@dataclass(frozen=True)
class Strip:
    """Three stickers of a neighbouring face, in the order in which they are handed on to the next strip of the cycle."""

    face: Face
    cells: tuple[Cell, Cell, Cell]

    @classmethod
    def row(cls, face: Face, row: int, order: tuple[int, ...] = FORWARD) -> "Strip":
        return cls(face, tuple((row, col) for col in order))  # type: ignore[arg-type]

    @classmethod
    def column(cls, face: Face, col: int, order: tuple[int, ...] = FORWARD) -> "Strip":
        return cls(face, tuple((row, col) for row in order))  # type: ignore[arg-type]


# --- ADJACENCY TABLE ---
# For every face: the four strips around it, in cycle order. On a clockwise quarter turn the i-th sticker
# of strip k moves to the i-th sticker of strip k+1 (the last strip feeds the first).
# Reversed strips sit on faces that point away from the viewer, so they read in opposite linear order.
ADJACENT_STRIPS: dict[Face, tuple[Strip, Strip, Strip, Strip]] = {
    Face.U: (
        Strip.row(Face.F, 0),
        Strip.row(Face.R, 0),
        Strip.row(Face.B, 0, REVERSED),
        Strip.row(Face.L, 0, REVERSED),
    ),
    Face.D: (
        Strip.row(Face.F, 2),
        Strip.row(Face.L, 2),
        Strip.row(Face.B, 2, REVERSED),
        Strip.row(Face.R, 2, REVERSED),
    ),
    Face.L: (
        Strip.column(Face.U, 0),
        Strip.column(Face.F, 0),
        Strip.column(Face.D, 0),
        Strip.column(Face.B, 2, REVERSED),
    ),
    Face.R: (
        Strip.column(Face.U, 2),
        Strip.column(Face.B, 0, REVERSED),
        Strip.column(Face.D, 2),
        Strip.column(Face.F, 2),
    ),
    Face.F: (
        Strip.row(Face.U, 2),
        Strip.column(Face.R, 0),
        Strip.row(Face.D, 0, REVERSED),
        Strip.column(Face.L, 2, REVERSED),
    ),
    Face.B: (
        Strip.row(Face.U, 0),
        Strip.column(Face.R, 2),
        Strip.row(Face.D, 2, REVERSED),
        Strip.column(Face.L, 0, REVERSED),
    ),
}


def rotate_grid_clockwise(grid: Grid) -> Grid:
    """Standard matrix rotation: transpose, then reverse each row."""
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"Can only rotate a {GRID_SIZE}x{GRID_SIZE} grid, got {grid}")
    transposed = zip(*grid)
    return make_grid(reversed(row) for row in transposed)


def cycle_strips(state: CubeState, strips: tuple[Strip, ...]) -> CubeState:
    """Hand the stickers of every strip on to the next strip in the cycle."""
    rows = {face: [list(row) for row in grid] for face, grid in state.faces.items()}
    for index, target in enumerate(strips):
        source = strips[index - 1]
        for (src_row, src_col), (dst_row, dst_col) in zip(source.cells, target.cells):
            rows[target.face][dst_row][dst_col] = state.sticker(source.face, src_row, src_col)
    return CubeState({face: make_grid(grid) for face, grid in rows.items()})


def quarter_turn(state: CubeState, face: Face) -> CubeState:
    """The atomic operation: a clockwise quarter turn of a single face."""
    rotated = state.with_face(face, rotate_grid_clockwise(state.face(face)))
    return cycle_strips(rotated, ADJACENT_STRIPS[face])


def apply_move(state: CubeState, move: Move) -> CubeState:
    """Apply a move by repeating the clockwise quarter turn (1x, 2x for a half turn, 3x for counter-clockwise)."""
    new_state = state
    for _ in range(move.quarter_turns):
        new_state = quarter_turn(new_state, move.face)
    return new_state


def apply_moves(state: CubeState, moves: Iterable[Move]) -> CubeState:
    """convenience function to replay a scramble / solution, strictly in the given order"""
    for move in moves:
        state = apply_move(state, move)
    return state
