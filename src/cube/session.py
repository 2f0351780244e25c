"""
A solve session is the entrypoint into the domain layer for the service layer (like a game is for a board game).

It holds the cube that has to be solved, the solver's answer and, for every move of that answer,
the cube after the move (a SolveStep). The playback layer steps through those states.

Status flow:
idle --start()--> solving --record_solution()--> solved
                     \\--record_error()--> error
reset() brings any session back to idle.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import SessionStateError
from src.core.models import SolveSessionModel
from src.core.shared_types import SolveStatus
from src.cube.engine import apply_move
from src.cube.facelets import decode, encode
from src.cube.moves import Move, parse_solution
from src.cube.state import CubeState


@dataclass(frozen=True)
class SolveStep:
    """The ``index``-th move of a solution and the cube right after it."""

    index: int
    move: Move
    state: CubeState


def replay(initial: CubeState, moves: list[Move]) -> list[SolveStep]:
    """Apply the moves one by one, recording every intermediate cube."""
    steps: list[SolveStep] = []
    state = initial
    for index, move in enumerate(moves):
        state = apply_move(state, move)
        steps.append(SolveStep(index, move, state))
    return steps


@dataclass
class SolveSession:
    initial_state: CubeState
    steps: list[SolveStep] = field(default_factory=list)
    status: SolveStatus = SolveStatus.IDLE
    solution: Optional[str] = None
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_model(cls, model: SolveSessionModel) -> Self:
        """Define how to construct a session from the information the Service layer actually has"""
        if model.status not in {status.value for status in SolveStatus}:
            raise SessionStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(status.value for status in SolveStatus)}"
            )
        if len(model.moves) != len(model.step_facelets):
            raise SessionStateError(
                f"Every move needs a recorded state: got {len(model.moves)} moves and {len(model.step_facelets)} states."
            )

        steps = [
            SolveStep(index, Move.from_notation(notation), decode(facelets))
            for index, (notation, facelets) in enumerate(
                zip(model.moves, model.step_facelets)
            )
        ]
        return cls(
            initial_state=decode(model.initial_facelets),
            steps=steps,
            status=SolveStatus(model.status),
            solution=model.solution,
            error=model.error,
            warnings=list(model.warnings),
        )

    def to_model(self) -> SolveSessionModel:
        """Encode back into a format the Service layer uses"""
        return SolveSessionModel(
            initial_facelets=encode(self.initial_state),
            moves=[step.move.to_notation() for step in self.steps],
            step_facelets=[encode(step.state) for step in self.steps],
            status=self.status.value,
            solution=self.solution,
            error=self.error,
            warnings=list(self.warnings),
        )

    @property
    def moves(self) -> list[Move]:
        return [step.move for step in self.steps]

    @property
    def final_state(self) -> CubeState:
        return self.steps[-1].state if self.steps else self.initial_state

    def is_solution_verified(self) -> bool:
        """Replaying the solution on our own model ends in a solved cube."""
        return self.status == SolveStatus.SOLVED and self.final_state.is_solved()

    def start(self) -> None:
        if self.status != SolveStatus.IDLE:
            raise SessionStateError(
                f"Can only start solving an idle session. status: {self.status}"
            )
        self.steps = []
        self.solution = None
        self.error = None
        self.warnings = []
        self.status = SolveStatus.SOLVING

    def record_solution(self, solution: str) -> None:
        """
        Store the solver's answer
        ----

        1. parse the notation (raises InvalidNotationError on a malformed token)
        2. replay it on the initial cube, keeping every intermediate state
        3. keep the answer exactly as the solver gave it
        4. warn (don't fail) if the replay does not end in a solved cube
        """
        self._assert_solving()
        self.steps = replay(self.initial_state, parse_solution(solution))
        self.solution = solution
        self.status = SolveStatus.SOLVED
        if not self.final_state.is_solved():
            self.warnings.append(
                "Replaying the solution does not end in a solved cube."
            )

    def record_error(self, message: str) -> None:
        self._assert_solving()
        self.error = message
        self.status = SolveStatus.ERROR

    def reset(self) -> None:
        self.steps = []
        self.solution = None
        self.error = None
        self.warnings = []
        self.status = SolveStatus.IDLE

    def state_at_step(self, index: int) -> CubeState:
        """
        Cube to display at a given step of the playback.

        Before the first step (index < 0) that is the initial cube, beyond the last step it stays the final cube.
        """
        if index < 0 or not self.steps:
            return self.initial_state
        if index >= len(self.steps):
            return self.steps[-1].state
        return self.steps[index].state

    # -- PRIVATE HELPERS ---
    def _assert_solving(self) -> None:
        if self.status != SolveStatus.SOLVING:
            raise SessionStateError(
                f"Session is not being solved. status: {self.status}"
            )
