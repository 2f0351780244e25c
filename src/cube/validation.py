"""
Structural checks on a CubeState, run before a cube is handed to the solver.

Only the invariants that can be read off the stickers directly are checked:
1. every center carries the color of its face
2. the six centers are all different
3. every color appears exactly 9 times

NOTE: A cube can pass all of these and still be unsolvable (a twisted corner, a flipped edge, ...).
That parity analysis is left to the solver, which fails on such a cube.
"""

from dataclasses import dataclass, field

from src.core.exceptions import StructuralViolationError
from src.core.shared_types import Color
from src.cube.colors import FACE_ORDER, FACE_TO_COLOR, STICKERS_PER_COLOR
from src.cube.state import CubeState


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


def center_errors(state: CubeState) -> list[str]:
    centers = state.centers()
    return [
        f"Face {face.value} center should be {FACE_TO_COLOR[face].value}, but is {centers[face].value}"
        for face in FACE_ORDER
        if centers[face] != FACE_TO_COLOR[face]
    ]


def unique_center_errors(state: CubeState) -> list[str]:
    if len(set(state.centers().values())) != len(FACE_ORDER):
        return [
            "Center stickers must be unique (each color must appear exactly once as a center)"
        ]
    return []


def color_count_errors(state: CubeState) -> list[str]:
    counts = state.color_counts()
    return [
        f"Color {color.value} appears {counts[color]} times, but should appear exactly {STICKERS_PER_COLOR} times"
        for color in Color
        if counts[color] != STICKERS_PER_COLOR
    ]


def validate_state(state: CubeState) -> ValidationResult:
    """Run every check and report all violations (not just the first one found)."""
    errors = center_errors(state) + unique_center_errors(state) + color_count_errors(state)
    return ValidationResult(errors=errors)


def ensure_valid(state: CubeState) -> None:
    """Raise a StructuralViolationError carrying every reason if the cube is not structurally valid."""
    result = validate_state(state)
    if not result.is_valid:
        raise StructuralViolationError(result.errors)
