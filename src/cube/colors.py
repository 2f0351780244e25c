"""Fixed vocabulary of the cube: which color belongs to which face on a solved cube, display names and face orders."""

from src.core.shared_types import Color, Face

# NOTE: the pairing defines what "solved" means. Any bijection is structurally legal.
FACE_TO_COLOR: dict[Face, Color] = {
    Face.U: Color.WHITE,
    Face.D: Color.YELLOW,
    Face.F: Color.RED,
    Face.B: Color.ORANGE,
    Face.R: Color.BLUE,
    Face.L: Color.GREEN,
}

COLOR_TO_FACE: dict[Color, Face] = {value: key for key, value in FACE_TO_COLOR.items()}

FACE_NAMES: dict[Face, str] = {
    Face.U: "Up (top)",
    Face.D: "Down (bottom)",
    Face.L: "Left",
    Face.R: "Right",
    Face.F: "Front",
    Face.B: "Back",
}

# Order in which faces are iterated (and reported by the validator)
FACE_ORDER: tuple[Face, ...] = (Face.U, Face.D, Face.L, Face.R, Face.F, Face.B)

# Order of the face blocks inside a facelet string
FACELET_ORDER: tuple[Face, ...] = (Face.U, Face.R, Face.F, Face.D, Face.L, Face.B)

# A face is always 3x3. The center sits at (1, 1)
GRID_SIZE = 3
CENTER = (1, 1)
STICKERS_PER_COLOR = GRID_SIZE * GRID_SIZE
