"""Protocol for the external solving algorithm. The domain never reaches into a solver: one is injected into the service."""

from typing import Protocol


class Solver(Protocol):
    """A black box that turns a facelet string into a solution."""

    def solve(self, facelets: str) -> str:
        """Return the solution as whitespace-separated move notation ("" when already solved)."""
        ...
