"""Scoped stubbing of a single operation on a live object or class.

Useful for tests that need one collaborator method to answer a fixed
value without touching the collaborator's class definition.

Example::

    from gamefairy.testing import with_stub

    fairy = GameFairy()
    with with_stub(fairy, "proclamation", True):
        with with_stub(GameFairyGateway, "get_oracle", returns=fairy):
            assert Game(GameFairyGateway()).is_done() is True

The original operation is restored when the block exits, whether it
returns or raises. The harness is not thread-safe.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

from gamefairy.core.errors import (
    DuplicateStubError,
    StubStateError,
    UnknownOperationError,
)

logger = logging.getLogger(__name__)

_MISSING: Any = object()

# (id(target), operation_name) -> binding currently installed
_active: dict[tuple[int, str], "StubBinding"] = {}


class BindingState(Enum):
    """Lifecycle of a stub binding: UNBOUND -> BOUND -> UNBOUND."""

    UNBOUND = "unbound"
    BOUND = "bound"


class StubBinding:
    """One substituted operation on one target.

    ``replacement`` is either a plain value to return or a callable to
    invoke in place of the original. Use ``returns`` to return a callable
    (or any other value) as-is.
    """

    def __init__(
        self,
        target: Any,
        operation_name: str,
        replacement: Any = _MISSING,
        *,
        returns: Any = _MISSING,
    ):
        if (replacement is _MISSING) == (returns is _MISSING):
            raise TypeError("Provide exactly one of replacement or returns")

        self.target = target
        self.operation_name = operation_name
        self.replacement = replacement
        self.returns = returns
        self.state = BindingState.UNBOUND
        self.call_count = 0
        self._original: Any = _MISSING

    @property
    def key(self) -> tuple[int, str]:
        return (id(self.target), self.operation_name)

    def bind(self) -> None:
        """Install the substitute on the target.

        Raises:
            StubStateError: If this binding is already bound.
            UnknownOperationError: If the target has no such operation.
            DuplicateStubError: If another binding holds the same slot.
        """
        if self.state is BindingState.BOUND:
            raise StubStateError(f"Binding for {self.operation_name!r} is already bound")
        if not callable(getattr(self.target, self.operation_name, None)):
            raise UnknownOperationError(self.target, self.operation_name)
        if self.key in _active:
            raise DuplicateStubError(self.target, self.operation_name)

        self._original = vars(self.target).get(self.operation_name, _MISSING)
        setattr(self.target, self.operation_name, self._substitute())
        _active[self.key] = self
        self.state = BindingState.BOUND
        logger.debug(f"Stubbed {self.operation_name!r} on {self.target!r}")

    def unbind(self) -> None:
        """Put the original operation back exactly as it was.

        Raises:
            StubStateError: If this binding is not bound.
        """
        if self.state is BindingState.UNBOUND:
            raise StubStateError(f"Binding for {self.operation_name!r} is not bound")

        try:
            if self._original is _MISSING:
                delattr(self.target, self.operation_name)
            else:
                setattr(self.target, self.operation_name, self._original)
        finally:
            del _active[self.key]
            self._original = _MISSING
            self.state = BindingState.UNBOUND
        logger.debug(f"Restored {self.operation_name!r} on {self.target!r}")

    def _substitute(self) -> Any:
        if self.returns is not _MISSING:
            impl = self._constant(self.returns)
        elif callable(self.replacement):
            impl = self.replacement
        else:
            impl = self._constant(self.replacement)

        def stub(*args: Any, **kwargs: Any) -> Any:
            self.call_count += 1
            return impl(*args, **kwargs)

        # Classes get a staticmethod so neither the class nor its
        # instances pass an implicit self/cls.
        if isinstance(self.target, type):
            return staticmethod(stub)
        return stub

    @staticmethod
    def _constant(value: Any) -> Callable[..., Any]:
        def constant(*args: Any, **kwargs: Any) -> Any:
            return value

        return constant


@contextmanager
def with_stub(
    target: Any,
    operation_name: str,
    replacement: Any = _MISSING,
    *,
    returns: Any = _MISSING,
) -> Iterator[StubBinding]:
    """Stub ``target.operation_name`` for the duration of the block.

    Args:
        target: Object instance or class owning the operation.
        operation_name: Name of the method to replace.
        replacement: Value to return, or callable to invoke instead.
        returns: Value to return verbatim, even if it is callable.

    Yields:
        The active StubBinding.

    Raises:
        UnknownOperationError: If the target has no such operation.
        DuplicateStubError: If the operation is already stubbed.
    """
    binding = StubBinding(target, operation_name, replacement, returns=returns)
    binding.bind()
    try:
        yield binding
    finally:
        binding.unbind()


def active_bindings() -> list[StubBinding]:
    """Return the bindings currently installed, oldest first."""
    return list(_active.values())


__all__ = ["BindingState", "StubBinding", "active_bindings", "with_stub"]
