"""
The state of the puzzle: 54 stickers, grouped in six 3x3 grids (one per face).

Grids are tuples of tuples, so a CubeState can never be changed after creation.
Every 'mutation' (turning a face, recoloring a sticker) returns a new CubeState.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

from src.core.exceptions import UnknownColorError
from src.core.shared_types import Color, Face
from src.cube.colors import CENTER, FACE_ORDER, FACE_TO_COLOR, GRID_SIZE

Row = tuple[Color, Color, Color]
Grid = tuple[Row, Row, Row]


def to_color(value: Color | str) -> Color:
    try:
        return Color(value)
    except ValueError:
        raise UnknownColorError(f"Unknown sticker color: {value!r}") from None


def make_grid(rows: Iterable[Iterable[Color | str]]) -> Grid:
    """Build an immutable 3x3 grid, converting plain strings into Colors.

    A grid of any other shape is a programming error and raises ValueError.
    """
    grid = tuple(tuple(to_color(color) for color in row) for row in rows)
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"A face must be a {GRID_SIZE}x{GRID_SIZE} grid, got {grid}")
    return grid  # type: ignore[return-value]


def uniform_grid(color: Color) -> Grid:
    return make_grid([[color] * GRID_SIZE for _ in range(GRID_SIZE)])


@dataclass(frozen=True)
class CubeState:
    faces: Mapping[Face, Grid]

    def __post_init__(self) -> None:
        missing = [face for face in FACE_ORDER if face not in self.faces]
        if missing:
            raise ValueError(f"CubeState is missing faces: {missing}")
        # normalize into our own dict of validated grids
        object.__setattr__(
            self, "faces", {face: make_grid(self.faces[face]) for face in FACE_ORDER}
        )

    def __hash__(self) -> int:
        return hash(tuple(self.faces[face] for face in FACE_ORDER))

    @classmethod
    def solved(cls) -> CubeState:
        """Every face carries the color of its center."""
        return cls({face: uniform_grid(FACE_TO_COLOR[face]) for face in FACE_ORDER})

    @classmethod
    def from_rows(cls, rows: Mapping[str, Iterable[Iterable[str]]]) -> CubeState:
        """Construct from plain data, e.g. {"U": [["white", ...], ...], ...} as sent over JSON."""
        return cls({Face(face): make_grid(grid) for face, grid in rows.items()})

    def to_rows(self) -> dict[str, list[list[str]]]:
        """reverse of from_rows"""
        return {
            face.value: [[color.value for color in row] for row in self.faces[face]]
            for face in FACE_ORDER
        }

    def face(self, face: Face) -> Grid:
        return self.faces[face]

    def sticker(self, face: Face, row: int, col: int) -> Color:
        return self.faces[face][row][col]

    def centers(self) -> dict[Face, Color]:
        row, col = CENTER
        return {face: self.sticker(face, row, col) for face in FACE_ORDER}

    def stickers(self) -> list[Color]:
        """All 54 stickers, face by face, row-major."""
        return [color for face in FACE_ORDER for row in self.faces[face] for color in row]

    def color_counts(self) -> Counter[Color]:
        return Counter(self.stickers())

    def is_solved(self) -> bool:
        """Solved means every face shows a single color (whatever the color scheme)."""
        return all(
            len({color for row in self.faces[face] for color in row}) == 1
            for face in FACE_ORDER
        )

    def with_face(self, face: Face, grid: Grid) -> CubeState:
        faces = dict(self.faces)
        faces[face] = grid
        return CubeState(faces)

    def with_sticker(self, face: Face, row: int, col: int, color: Color) -> CubeState:
        """Recolor a single sticker (used when mapping a physical cube by hand).

        NOTE: Centers can be recolored too. The validator is responsible for flagging that.
        """
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError(f"Sticker ({row}, {col}) is outside of the {GRID_SIZE}x{GRID_SIZE} grid")
        rows = [list(r) for r in self.faces[face]]
        rows[row][col] = to_color(color)
        return self.with_face(face, make_grid(rows))
