"""Implementation of Solver using the two-phase algorithm of the `kociemba` package."""

import logging

import kociemba

from src.core.exceptions import SolverError

logger = logging.getLogger(__name__)


class KociembaSolver:
    """Herbert Kociemba's two-phase algorithm. Expects facelets in U, R, F, D, L, B block order."""

    def solve(self, facelets: str) -> str:
        logger.debug("Solving facelets %s", facelets)
        try:
            solution = kociemba.solve(facelets)
        except ValueError as error:
            # kociemba signals unsolvable / malformed cubes with a ValueError
            raise SolverError(f"Solver rejected the cube: {error}") from error
        return solution.strip()
