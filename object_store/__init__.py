from typing import Any, Callable

from .base import Branch, Change, ChangeKind, Commit
from .branches import BranchManager
from .repo import Repository
from .result import ErrorKind, Failure, Result, Success


def create_object_repo(
    configure: Callable[[Repository], Any] | None = None,
    default_branch: str = "master",
) -> Repository:
    return Repository.init(configure, default_branch=default_branch)


__all__ = [
    "Branch",
    "BranchManager",
    "Change",
    "ChangeKind",
    "Commit",
    "ErrorKind",
    "Failure",
    "Repository",
    "Result",
    "Success",
    "create_object_repo",
]
