import logging
from datetime import datetime
from typing import Any, Callable

from object_store.base import Branch, Change, Commit, format_date
from object_store.branches import BranchManager
from object_store.result import ErrorKind, Failure, Result, Success

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

COMMIT_ERROR = "Nothing to commit, working directory clean."
COMMIT_SUCCESS = "{message}\n\t{count} objects changed"
ADD_SUCCESS = "Added {name} to stage."
HASH_MISSING = "Commit {hash} does not exist."
PENDING_REMOVAL = "Added {name} for removal."
HEAD_AT = "HEAD is now at {hash}."
NO_COMMITS = "Branch {name} does not have any commits yet."
COMMIT_LOG_PATTERN = "Commit {hash}\nDate: {date}\n\n\t{message}\n\n"
NOT_COMMITTED = "Object {name} is not committed."
FOUND = "Found object {name}."


def _local_now() -> datetime:
    return datetime.now().astimezone()


class Repository:
    """
    In-memory object store with a stage, per-branch history and branches.

    Reads (`get`, `log`, `head`) only ever see committed snapshots of the
    current branch; `add` and `remove` only touch its stage.
    """

    @classmethod
    def init(
        cls,
        configure: Callable[["Repository"], Any] | None = None,
        **options: Any,
    ) -> "Repository":
        """Create a repository and run `configure` against it once."""
        repo = cls(**options)
        if configure is None:
            return repo
        if not callable(configure):
            raise TypeError(f"configure must be callable, got {type(configure).__name__}")

        configure(repo)
        return repo

    def __init__(self, default_branch: str = "master", clock: Clock | None = None) -> None:
        self.clock: Clock = clock or _local_now
        self.current_branch = Branch(default_branch)
        self.branches: list[Branch] = [self.current_branch]
        self._branch_manager: BranchManager | None = None

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Repository(...)")
        else:
            with p.group(4, "Repository(", ")"):
                p.breakable()
                p.text(f"branch='{self.current_branch.name}',")
                p.breakable()
                p.text("branches=")
                p.pretty([b.name for b in self.branches])
                p.text(",")
                p.breakable()
                p.text("head=")
                p.pretty(self.current_branch.last_commit)
                p.text(",")
                p.breakable()
                p.text("pending=")
                p.pretty(sorted(self.current_branch.pending))
                p.breakable()

    def branch(self) -> BranchManager:
        if self._branch_manager is None:
            self._branch_manager = BranchManager(self)
        return self._branch_manager

    def is_dirty(self) -> bool:
        return self.current_branch.is_dirty()

    def add(self, name: str, obj: Any) -> Result:
        self.current_branch.pending[name] = Change.add(obj)
        logger.debug("Staged %s on branch %s", name, self.current_branch.name)
        return Success(ADD_SUCCESS.format(name=name), obj)

    def commit(self, message: str) -> Result:
        branch = self.current_branch
        if not branch.is_dirty():
            return self._refuse(ErrorKind.EMPTY_COMMIT, COMMIT_ERROR)

        count = len(branch.pending)
        data = branch.snapshot()
        for name, change in branch.pending.items():
            change.apply(data, name)

        new_commit = Commit.create(message, data, self.clock())
        branch.commits.append(new_commit)
        branch.pending.clear()

        logger.debug(
            "Committed %s on branch %s (%d objects changed)",
            new_commit.short_hash,
            branch.name,
            count,
        )
        return Success(COMMIT_SUCCESS.format(message=message, count=count), new_commit)

    def get(self, name: str) -> Result:
        last = self.current_branch.last_commit
        if last is None or name not in last.data:
            return self._refuse(ErrorKind.MISSING_OBJECT, NOT_COMMITTED.format(name=name))

        return Success(FOUND.format(name=name), last.data[name])

    def remove(self, name: str) -> Result:
        last = self.current_branch.last_commit
        if last is None or name not in last.data:
            return self._refuse(ErrorKind.MISSING_OBJECT, NOT_COMMITTED.format(name=name))

        self.current_branch.pending[name] = Change.delete()
        logger.debug("Staged removal of %s on branch %s", name, self.current_branch.name)
        return Success(PENDING_REMOVAL.format(name=name), last.data[name])

    def checkout(self, hash_: str) -> Result:
        """
        Reset the current branch to the commit `hash_`.

        Every later commit on the branch is dropped for good; other branches
        keep their own lists and are unaffected.
        """
        branch = self.current_branch
        index = branch.find_commit(hash_)
        if index is None:
            return self._refuse(ErrorKind.UNKNOWN_COMMIT_HASH, HASH_MISSING.format(hash=hash_))

        discarded = len(branch.commits) - index - 1
        branch.commits = branch.commits[: index + 1]
        if discarded:
            logger.info(
                "Discarded %d commit(s) on branch %s, HEAD is now %s",
                discarded,
                branch.name,
                hash_,
            )

        assert branch.last_commit is not None
        return Success(HEAD_AT.format(hash=hash_), branch.last_commit)

    def log(self) -> Result:
        branch = self.current_branch
        if branch.is_empty():
            return self._refuse(ErrorKind.NO_COMMITS, NO_COMMITS.format(name=branch.name))

        entries = "".join(
            COMMIT_LOG_PATTERN.format(
                hash=c.hash, date=format_date(c.timestamp), message=c.message
            )
            for c in reversed(branch.commits)
        )
        return Success(entries.strip())

    def head(self) -> Result:
        branch = self.current_branch
        last = branch.last_commit
        if last is None:
            return self._refuse(ErrorKind.NO_COMMITS, NO_COMMITS.format(name=branch.name))

        return Success(last.message, last)

    def _refuse(self, kind: ErrorKind, message: str) -> Failure:
        logger.debug("Refused on branch %s: %s (%s)", self.current_branch.name, message, kind.value)
        return Failure(kind, message)
