"""Steering exception hierarchy.

Centralised base classes so callers can catch package failures narrowly.
Numeric configuration below its floor is clamped rather than raised, so
there is no exception for it here.
"""


class SteeringError(Exception):
    """Root of all steering-engine exceptions."""


class InvalidCellError(SteeringError, IndexError):
    """Attempt to access a flow field cell that does not exist."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__(f"There is no cell given by row {row} and column {column}")
        self.row = row
        self.column = column


class MissingCollaboratorError(SteeringError):
    """A required external reference (manager, agent, raycaster) is absent."""


class ConfigurationError(SteeringError):
    """Invalid non-numeric configuration, such as an unknown update mode."""
