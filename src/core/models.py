"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make SolveSessionModel easier to read
Facelets = str
Notation = str


@dataclass
class SolveSessionModel:
    """Transport-safe representation of a solve session used between API, Service, DB, and domain layers."""

    initial_facelets: Facelets
    moves: list[Notation]
    step_facelets: list[Facelets]
    status: str
    solution: Optional[str] = None
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
