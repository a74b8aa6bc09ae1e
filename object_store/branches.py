import logging
from typing import TYPE_CHECKING

from object_store.base import Branch
from object_store.result import ErrorKind, Failure, Result, Success

if TYPE_CHECKING:
    from object_store.repo import Repository

logger = logging.getLogger(__name__)

EXISTS = "Branch {name} already exists."
CREATED = "Created branch {name}."
DOES_NOT_EXIST = "Branch {name} does not exist."
SWITCHED_TO = "Switched to branch {name}."
REMOVED = "Removed branch {name}."
CANT_REMOVE = "Cannot remove current branch."
INVALID_NAME = "Invalid branch name {name!r}."


class BranchManager:
    """
    Branch lifecycle operations on a repository it does not own.
    """

    def __init__(self, repo: "Repository") -> None:
        self.repo = repo

    def _find(self, name: str) -> Branch | None:
        for branch in self.repo.branches:
            if branch.name == name:
                return branch
        return None

    def names(self) -> list[str]:
        return [b.name for b in self.repo.branches]

    def create(self, name: str) -> Result:
        """Create `name` from the current branch history without switching to it."""
        if not isinstance(name, str) or not name:
            return Failure(ErrorKind.INVALID_BRANCH_NAME, INVALID_NAME.format(name=name))
        if self._find(name) is not None:
            return Failure(ErrorKind.DUPLICATE_BRANCH, EXISTS.format(name=name))

        self.repo.branches.append(self.repo.current_branch.fork(name))
        logger.debug("Created branch %s from %s", name, self.repo.current_branch.name)
        return Success(CREATED.format(name=name))

    def checkout(self, name: str) -> Result:
        branch = self._find(name)
        if branch is None:
            return Failure(ErrorKind.UNKNOWN_BRANCH, DOES_NOT_EXIST.format(name=name))

        self.repo.current_branch = branch
        logger.debug("Switched to branch %s", name)
        return Success(SWITCHED_TO.format(name=name))

    def remove(self, name: str) -> Result:
        branch = self._find(name)
        if branch is None:
            return Failure(ErrorKind.UNKNOWN_BRANCH, DOES_NOT_EXIST.format(name=name))
        if branch is self.repo.current_branch:
            return Failure(ErrorKind.CANNOT_REMOVE_CURRENT, CANT_REMOVE)

        self.repo.branches.remove(branch)
        logger.debug("Removed branch %s", name)
        return Success(REMOVED.format(name=name))

    def list(self) -> Result:
        """
        Render branch names, current one marked with ``*``.

        Sorts `repo.branches` in place, so the storage order stays
        alphabetical afterwards.
        """
        self.repo.branches.sort(key=lambda b: b.name)
        current = self.repo.current_branch
        lines = [
            f"{'* ' if b is current else '  '}{b.name}" for b in self.repo.branches
        ]
        return Success("\n".join(lines))
