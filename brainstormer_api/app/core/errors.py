"""
Expected failure outcomes of the session use cases.

Both classes derive from ``Exception`` so a component may raise them
(the repository does on a missing record), but the service layer
returns them as values and the API layer maps them to status codes.
Neither represents a fatal condition.
"""

from typing import Any, Dict


class ValidationError(Exception):
    """Input violated one or more field constraints.

    ``errors`` maps each offending field (by its external name) to a
    human readable reason.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(f"Invalid fields: {', '.join(sorted(self.errors))}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ValidationError) and self.errors == other.errors

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.errors.items())))


class NotFoundError(Exception):
    """A referenced identifier has no stored record."""

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"No record with id {identifier!r}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NotFoundError) and self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)
