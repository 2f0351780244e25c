"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidFaceletError, InvalidRequestError
from src.core.shared_types import SolveStatus
from src.cube.facelets import check_facelets
from src.cube.moves import is_valid_notation

Facelets = str
Notation = str


def _validate_facelets(value: str) -> str:
    try:
        check_facelets(value)
    except InvalidFaceletError as error:
        raise InvalidRequestError(str(error)) from error
    return value


# --- REQUEST MODELS ---
class ScrambleRequest(BaseModel):
    length: int = Field(default=25, ge=0)
    seed: Optional[int] = None


class ValidateRequest(BaseModel):
    facelets: Facelets

    @field_validator("facelets")
    @classmethod
    def validate_facelets(cls, value: str) -> str:
        return _validate_facelets(value)


class ApplyMovesRequest(BaseModel):
    facelets: Facelets
    moves: list[Notation]

    @field_validator("facelets")
    @classmethod
    def validate_facelets(cls, value: str) -> str:
        return _validate_facelets(value)

    @field_validator("moves")
    @classmethod
    def validate_moves(cls, value: list[str]) -> list[str]:
        invalid = [notation for notation in value if not is_valid_notation(notation)]
        if invalid:
            raise InvalidRequestError(
                f"Cannot interpret {', '.join(repr(n) for n in invalid)} as moves."
            )
        return value


class SolveRequest(BaseModel):
    facelets: Facelets

    @field_validator("facelets")
    @classmethod
    def validate_facelets(cls, value: str) -> str:
        return _validate_facelets(value)


class GetSessionRequest(BaseModel):
    session_id: UUID


class StepRequest(BaseModel):
    session_id: UUID
    step_index: int


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class ScrambleResponse(BaseModel):
    facelets: Facelets
    moves: list[Notation]


class ValidationResponse(BaseModel):
    facelets: Facelets
    is_valid: bool
    errors: list[str]
    warnings: list[str]


class ApplyMovesResponse(BaseModel):
    facelets: Facelets
    moves: list[Notation]
    is_solved: bool


class SolveSessionResponse(BaseModel):
    session_id: UUID
    status: SolveStatus
    initial_facelets: Facelets
    solution: Optional[str]
    moves: list[Notation]
    explanations: list[str]
    error: Optional[str]
    warnings: list[str]


class StepResponse(BaseModel):
    session_id: UUID
    step_index: int
    move: Optional[Notation]
    explanation: Optional[str]
    facelets: Facelets
