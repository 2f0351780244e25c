"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBSolveSession(Base):
    __tablename__ = "solve_sessions"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    initial_facelets: Mapped[str]
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    step_facelets: Mapped[list[str]] = mapped_column(JSON, default=list)
    status: Mapped[str]
    solution: Mapped[Optional[str]]
    error: Mapped[Optional[str]]
    warnings: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
