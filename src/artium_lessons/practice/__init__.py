"""Practice submission simulation."""

from .simulator import (
    OutcomeStrategy,
    SubmissionSimulator,
    TerminalOutcome,
    fixed_outcome,
    random_outcome,
)

__all__ = [
    "OutcomeStrategy",
    "SubmissionSimulator",
    "TerminalOutcome",
    "fixed_outcome",
    "random_outcome",
]
