from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias


class ErrorKind(str, Enum):
    EMPTY_COMMIT = "empty-commit"
    MISSING_OBJECT = "missing-object"
    UNKNOWN_COMMIT_HASH = "unknown-commit-hash"
    NO_COMMITS = "no-commits"
    DUPLICATE_BRANCH = "duplicate-branch"
    UNKNOWN_BRANCH = "unknown-branch"
    CANNOT_REMOVE_CURRENT = "cannot-remove-current"
    INVALID_BRANCH_NAME = "invalid-branch-name"


@dataclass(frozen=True)
class Success:
    """Outcome of an operation that was carried out."""

    message: str
    payload: Any = None

    def is_success(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return True

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Success(...)")
        else:
            with p.group(4, "Success(", ")"):
                p.breakable()
                p.text(f"message={self.message!r},")
                p.breakable()
                p.text("payload=")
                p.pretty(self.payload)
                p.breakable()


@dataclass(frozen=True)
class Failure:
    """
    Outcome of an operation that was refused.

    Nothing was changed; `kind` tells which precondition did not hold.
    """

    kind: ErrorKind
    message: str
    payload: Any = None

    def is_success(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Failure(...)")
        else:
            with p.group(4, "Failure(", ")"):
                p.breakable()
                p.text(f"kind={self.kind.name},")
                p.breakable()
                p.text(f"message={self.message!r},")
                p.breakable()


Result: TypeAlias = Success | Failure
