"""
Command results.

Commands report validation failures (no canvas, empty selection, unknown
tag choice) as ``Err`` values rather than exceptions. A host's event loop
can show the message and carry on.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A command that ran; ``value`` describes what it changed."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A command rejected before anything was mutated."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error, so callers that expect success fail loudly."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Command failed: {self.error}")


Result = Union[Ok[T], Err[E]]
