"""Implementation of (Session)Repository using SQLAlchemy"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import SolveSessionModel
from src.db.schema import DBSolveSession

logger = logging.getLogger(__name__)


class SQLSessionRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_session(self, session_id: UUID) -> SolveSessionModel | None:
        """Get session by ID, if record exists."""
        session_db = self._fetch_session(session_id)
        if session_db:
            return self._to_model(session_db)
        return None

    def create_session(self, session: SolveSessionModel) -> tuple[SolveSessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        new_id = uuid4()
        session_db = DBSolveSession(id=new_id)
        self._copy_fields(session, session_db)
        self.db.add(session_db)
        self.db.commit()
        self.db.refresh(session_db)
        logger.debug("Stored solve session %s", new_id)
        return self._to_model(session_db), new_id

    def update_session(self, session_id: UUID, session: SolveSessionModel) -> SolveSessionModel | None:
        """Add new info to existing record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        self._copy_fields(session, session_db)
        self.db.commit()
        self.db.refresh(session_db)
        return self._to_model(session_db)

    def delete_session(self, session_id: UUID) -> SolveSessionModel | None:
        """Remove a session's record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        session_model = self._to_model(session_db)
        self.db.delete(session_db)
        self.db.commit()
        logger.debug("Deleted solve session %s", session_id)
        return session_model

    def _fetch_session(self, session_id: UUID) -> DBSolveSession | None:
        query = select(DBSolveSession).where(DBSolveSession.id == session_id)
        return self.db.scalar(query)

    def _copy_fields(self, session: SolveSessionModel, session_db: DBSolveSession) -> None:
        # NOTE: assign fresh lists, so SQLAlchemy notices the change of the JSON columns
        session_db.initial_facelets = session.initial_facelets
        session_db.moves = list(session.moves)
        session_db.step_facelets = list(session.step_facelets)
        session_db.status = session.status
        session_db.solution = session.solution
        session_db.error = session.error
        session_db.warnings = list(session.warnings)

    def _to_model(self, session_db: DBSolveSession) -> SolveSessionModel:
        """Convert SQLAlchemy model to data transfer model."""
        return SolveSessionModel(
            initial_facelets=session_db.initial_facelets,
            moves=list(session_db.moves),
            step_facelets=list(session_db.step_facelets),
            status=session_db.status,
            solution=session_db.solution,
            error=session_db.error,
            warnings=list(session_db.warnings),
        )
