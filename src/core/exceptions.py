"""Custom exceptions. Every layer raises (a subclass of) CubeError for problems caused by the data it was handed."""


class CubeError(Exception):
    """Base class for all errors raised by this application."""


# --- DOMAIN ---
class InvalidNotationError(CubeError):
    """A move token does not follow the face-letter + optional ' or 2 grammar."""


class InvalidFaceletError(CubeError):
    """A facelet string cannot be decoded."""


class InvalidLengthError(InvalidFaceletError):
    pass


class InvalidAlphabetError(InvalidFaceletError):
    pass


class UnknownColorError(CubeError):
    """A sticker holds a color without a facelet letter (corrupt state)."""


class StructuralViolationError(CubeError):
    """The cube breaks one or more structural invariants. Carries all reasons, not just the first."""

    def __init__(self, reasons: list[str]) -> None:
        self.reasons = list(reasons)
        super().__init__("; ".join(self.reasons))


class SessionStateError(CubeError):
    """Requested transition does not fit the current status of the solve session."""


# --- SOLVER COLLABORATOR ---
class SolverError(CubeError):
    pass


class SolverTimeoutError(SolverError):
    pass


# --- SERVICE / PERSISTENCE / API ---
class RepositoryError(CubeError):
    pass


class InvalidRequestError(CubeError):
    """Raised from request validators. Not a ValueError, so pydantic lets it propagate unwrapped."""
