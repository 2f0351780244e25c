"""Orchestration of communication from API router to business logic, the solver and persistence layers (and the reverse direction)."""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional
from uuid import UUID

from src.api.models import (
    ApplyMovesRequest,
    ApplyMovesResponse,
    DeleteSessionRequest,
    GetSessionRequest,
    ScrambleRequest,
    ScrambleResponse,
    SolveRequest,
    SolveSessionResponse,
    StepRequest,
    StepResponse,
    ValidateRequest,
    ValidationResponse,
)
from src.core.config import get_settings
from src.core.exceptions import (
    InvalidNotationError,
    RepositoryError,
    SolverError,
    SolverTimeoutError,
    StructuralViolationError,
)
from src.core.models import SolveSessionModel
from src.cube.engine import apply_moves
from src.cube.facelets import decode, encode
from src.cube.moves import Move
from src.cube.scrambler import scramble_state
from src.cube.session import SolveSession
from src.cube.state import CubeState
from src.cube.validation import validate_state
from src.db.repository import SessionRepository
from src.solvers.solver import Solver

logger = logging.getLogger(__name__)


class CubeService:
    """Orchestration of layers for solving a cube."""

    def __init__(
        self,
        repository: SessionRepository,
        solver: Solver,
        solver_timeout: Optional[float] = None,
    ) -> None:
        self.repo = repository
        self.solver = solver
        self.solver_timeout = (
            solver_timeout
            if solver_timeout is not None
            else get_settings().solver_timeout_seconds
        )

    # -- API routes logic ---
    def scramble(self, request: ScrambleRequest) -> ScrambleResponse:
        """Scramble a solved cube. Supplying a seed makes the scramble reproducible."""
        rng = random.Random(request.seed) if request.seed is not None else None
        scrambled, moves = scramble_state(CubeState.solved(), request.length, rng)
        return ScrambleResponse(
            facelets=encode(scrambled), moves=[move.to_notation() for move in moves]
        )

    def validate(self, request: ValidateRequest) -> ValidationResponse:
        """Structural check of a cube that was, for instance, mapped by hand."""
        result = validate_state(decode(request.facelets))
        return ValidationResponse(
            facelets=request.facelets,
            is_valid=result.is_valid,
            errors=result.errors,
            warnings=result.warnings,
        )

    def apply_moves(self, request: ApplyMovesRequest) -> ApplyMovesResponse:
        moves = [Move.from_notation(notation) for notation in request.moves]
        new_state = apply_moves(decode(request.facelets), moves)
        return ApplyMovesResponse(
            facelets=encode(new_state),
            moves=[move.to_notation() for move in moves],
            is_solved=new_state.is_solved(),
        )

    def solve(self, request: SolveRequest) -> SolveSessionResponse:
        """
        Solve a cube
        ----

        1. decode the facelets, start a new session and store it (status: solving)
        2. structurally invalid cube? Record the error, update the record, and raise
        3. call the solver (on a worker thread, bounded by the timeout)
        4. record the solution (parsed + replayed into steps), or the failure if the solver fails or answers garbage
        5. update the stored session and return it
        """
        session = SolveSession(initial_state=decode(request.facelets))
        session.start()
        _, session_id = self.repo.create_session(session.to_model())

        result = validate_state(session.initial_state)
        if not result.is_valid:
            session.record_error("; ".join(result.errors))
            self._update_session(session_id, session)
            raise StructuralViolationError(result.errors)

        logger.info("Solving cube %s (session %s)", request.facelets, session_id)
        try:
            solution = self._call_solver(request.facelets)
            session.record_solution(solution)
        except (SolverError, InvalidNotationError) as error:
            logger.warning("Solver failed for %s: %s", request.facelets, error)
            session.record_error(str(error))
            self._update_session(session_id, session)
            raise
        except Exception as error:
            logger.exception("Solver crashed for %s", request.facelets)
            session.record_error(f"Solver crashed: {error!r}")
            self._update_session(session_id, session)
            raise SolverError(f"Solver crashed: {error!r}") from error

        stored = self._update_session(session_id, session)
        logger.info(
            "Solved cube %s in %d moves (session %s)",
            request.facelets,
            len(stored.moves),
            session_id,
        )
        return self._create_session_response(session_id, stored)

    def get_session(self, request: GetSessionRequest) -> SolveSessionResponse:
        model = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, model)

    def get_step(self, request: StepRequest) -> StepResponse:
        """
        Cube state for one step of the playback.
        ----
        Index -1 is the cube before the first move. Indices beyond the last move keep showing the final cube.
        """
        session = SolveSession.from_model(self._fetch_session(request.session_id))
        state = session.state_at_step(request.step_index)
        step = (
            session.steps[request.step_index]
            if 0 <= request.step_index < len(session.steps)
            else None
        )
        return StepResponse(
            session_id=request.session_id,
            step_index=request.step_index,
            move=step.move.to_notation() if step else None,
            explanation=step.move.explain() if step else None,
            facelets=encode(state),
        )

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to delete a session record."""
        if self.repo.delete_session(request.session_id) is None:
            raise RepositoryError(f"Solve session with session_id={request.session_id} not found.")

    # -- Internal helpers --
    def _call_solver(self, facelets: str) -> str:
        """The solver may take a while: run it off the calling thread and give up after the timeout."""
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self.solver.solve, facelets)
        try:
            return future.result(timeout=self.solver_timeout)
        except FutureTimeoutError as error:
            future.cancel()
            raise SolverTimeoutError(
                f"Solver did not answer within {self.solver_timeout} seconds."
            ) from error
        finally:
            # don't block on a solver that is still running
            executor.shutdown(wait=False)

    def _update_session(self, session_id: UUID, session: SolveSession) -> SolveSessionModel:
        """Write the session's current info to its existing record and raise error if the record is gone."""
        stored = self.repo.update_session(session_id, session.to_model())
        if stored is None:
            raise RepositoryError(f"Solve session with {session_id=} not found.")
        return stored

    def _create_session_response(
        self, session_id: UUID, model: SolveSessionModel
    ) -> SolveSessionResponse:
        """Convert info in SolveSessionModel to a SolveSessionResponse (for session with given ID.)"""
        return SolveSessionResponse(
            session_id=session_id,
            status=model.status,
            initial_facelets=model.initial_facelets,
            solution=model.solution,
            moves=model.moves,
            explanations=[Move.from_notation(m).explain() for m in model.moves],
            error=model.error,
            warnings=model.warnings,
        )

    def _fetch_session(self, session_id: UUID) -> SolveSessionModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        session_model = self.repo.get_session(session_id)
        if session_model is None:
            raise RepositoryError(f"Solve session with {session_id=} not found.")
        return session_model
