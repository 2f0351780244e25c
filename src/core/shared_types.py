"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"
    GREEN = "green"


class Face(StrEnum):
    """The six faces, named by their letter in move notation."""

    U = "U"
    D = "D"
    L = "L"
    R = "R"
    F = "F"
    B = "B"


class SolveStatus(StrEnum):
    IDLE = "idle"
    SOLVING = "solving"
    SOLVED = "solved"
    ERROR = "error"
