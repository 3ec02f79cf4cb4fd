"""Exception hierarchy for the Game Fairy project.

Nothing in the core catches or translates these; they surface to the
immediate caller unchanged.
"""

from typing import Any


class GameFairyError(Exception):
    """Base exception for all Game Fairy errors."""


class IndeterminateOracleError(GameFairyError):
    """Raised when an oracle's visions are neither a tie nor a win."""

    def __init__(self, mystic_visions: str):
        self.mystic_visions = mystic_visions
        super().__init__(
            f"Oracle visions {mystic_visions!r} are neither a tie nor a win"
        )


class StubError(GameFairyError):
    """Base exception for stub harness errors."""


class UnknownOperationError(StubError, AttributeError):
    """Raised when stubbing an operation the target does not expose."""

    def __init__(self, target: Any, operation_name: str):
        self.target = target
        self.operation_name = operation_name
        super().__init__(
            f"{_describe(target)} has no operation named {operation_name!r}"
        )


class DuplicateStubError(StubError):
    """Raised when an operation is already stubbed on the same target."""

    def __init__(self, target: Any, operation_name: str):
        self.target = target
        self.operation_name = operation_name
        super().__init__(
            f"{_describe(target)}.{operation_name} is already stubbed"
        )


class StubStateError(StubError):
    """Raised on an illegal bind/unbind transition."""


def _describe(target: Any) -> str:
    if isinstance(target, type):
        return target.__name__
    return f"<{type(target).__name__} object>"
