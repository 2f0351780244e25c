"""Unit tests for src/db/sql_repository.py"""

from typing import Any
from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.shared_types import SolveStatus
from src.db.sql_repository import SolveSessionModel, SQLSessionRepository

SOLVED_FACELETS = "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"


def mock_session(**overrides: Any) -> SolveSessionModel:
    data = dict(
        initial_facelets="facelets before solving",
        moves=["R", "U'", "mock"],
        step_facelets=["after R", "after U'", SOLVED_FACELETS],
        status=SolveStatus.SOLVED.value,
        solution="R U' mock",
        error=None,
        warnings=[],
    )
    data.update(overrides)
    return SolveSessionModel(**data)


def test_create_session(db_session_repo: Session) -> None:
    """Conversion from a SolveSessionModel to DBSolveSession for a new entry to the database."""
    model = mock_session()
    repo = SQLSessionRepository(db_session_repo)
    record_in_db, _ = repo.create_session(model)
    assert isinstance(record_in_db, SolveSessionModel)
    assert record_in_db == model


def test_get_session_by_id(db_session_repo: Session) -> None:
    """Create a session, then fetch it from db."""
    repo = SQLSessionRepository(db_session_repo)
    expected_session, session_id = repo.create_session(mock_session())
    session_found = repo.get_session(session_id)
    assert isinstance(session_found, SolveSessionModel)
    assert session_found == expected_session


def test_get_unknown_session(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLSessionRepository(db_session_repo)
    assert repo.get_session(uuid4()) is None

    # Now do it with creating a session, but retrieving from the wrong ID
    repo.create_session(mock_session())
    assert repo.get_session(uuid4()) is None


def test_update_session(db_session_repo: Session) -> None:
    """
    Update an earlier created record: a session that failed while solving.
    """
    repo = SQLSessionRepository(db_session_repo)
    new = mock_session(
        moves=[], step_facelets=[], status=SolveStatus.SOLVING.value, solution=None
    )
    _, session_id = repo.create_session(new)

    failed = mock_session(
        moves=[],
        step_facelets=[],
        status=SolveStatus.ERROR.value,
        solution=None,
        error="Solver rejected the cube",
        warnings=["something odd"],
    )
    updated = repo.update_session(session_id, failed)
    assert updated == failed
    assert repo.get_session(session_id) == failed


def test_update_unknown_session(db_session_repo: Session) -> None:
    repo = SQLSessionRepository(db_session_repo)
    assert repo.update_session(uuid4(), mock_session()) is None


def test_delete_session(db_session_repo: Session) -> None:
    repo = SQLSessionRepository(db_session_repo)
    model, session_id = repo.create_session(mock_session())
    deleted = repo.delete_session(session_id)
    assert deleted == model
    assert repo.get_session(session_id) is None


def test_delete_unknown_session(db_session_repo: Session) -> None:
    repo = SQLSessionRepository(db_session_repo)
    assert repo.delete_session(uuid4()) is None
