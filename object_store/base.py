import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

SnapshotData = dict[str, Any]


def format_date(timestamp: datetime) -> str:
    """Render a timestamp the way commit logs show it, e.g. ``Sat Oct 17 09:05 2026 +0200``."""
    return f"{timestamp:%a %b} {timestamp.day} {timestamp:%H:%M %Y %z}"


def commit_hash(timestamp: datetime, message: str) -> str:
    """
    Identifier of a commit made at `timestamp` with `message`.

    Only the minute-resolution date and the message take part, the snapshot
    does not: two commits with the same message in the same minute share it.
    """
    return hashlib.sha1(f"{format_date(timestamp)}{message}".encode()).hexdigest()


class ChangeKind(str, Enum):
    ADD = "add"
    DELETE = "delete"


@dataclass(frozen=True)
class Change:
    """Pending mutation of a single name, waiting in a branch stage."""

    kind: ChangeKind
    value: Any = None

    @classmethod
    def add(cls, value: Any) -> "Change":
        return cls(ChangeKind.ADD, value)

    @classmethod
    def delete(cls) -> "Change":
        return cls(ChangeKind.DELETE)

    def apply(self, data: SnapshotData, name: str) -> None:
        if self.kind is ChangeKind.ADD:
            data[name] = self.value
        else:
            data.pop(name, None)


@dataclass(frozen=True, eq=False)
class Commit:
    """
    Immutable snapshot of every named object at a specific point in time.
    """

    message: str
    data: Mapping[str, Any]
    hash: str
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def create(cls, message: str, data: SnapshotData, timestamp: datetime) -> "Commit":
        return cls(
            message=message,
            data=data,
            hash=commit_hash(timestamp, message),
            timestamp=timestamp,
        )

    @property
    def objects(self) -> list[Any]:
        return list(self.data.values())

    @property
    def short_hash(self) -> str:
        return self.hash[:7]

    @property
    def date(self) -> str:
        return format_date(self.timestamp)

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Commit(...)")
        else:
            with p.group(4, "Commit(", ")"):
                p.breakable()
                p.text(f"hash={self.short_hash},")
                p.breakable()
                p.text(f"message={self.message!r},")
                p.breakable()
                p.text("data=")
                p.pretty(dict(self.data))
                p.breakable()


@dataclass
class Branch:
    """
    Named line of history.

    Owns its commit list and its stage of pending changes. Commits are shared
    freely between branches, the lists holding them never are.
    """

    name: str
    commits: list[Commit] = field(default_factory=list)
    pending: dict[str, Change] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Branch name must be a non-empty string, got {self.name!r}")

    @property
    def last_commit(self) -> Commit | None:
        return self.commits[-1] if self.commits else None

    def is_empty(self) -> bool:
        return not self.commits

    def is_dirty(self) -> bool:
        return len(self.pending) > 0

    def snapshot(self) -> SnapshotData:
        """Copy of the latest committed data, empty before the first commit."""
        last = self.last_commit
        return dict(last.data) if last else {}

    def fork(self, name: str) -> "Branch":
        return Branch(name, commits=list(self.commits))

    def find_commit(self, hash_: str) -> int | None:
        for index, commit in enumerate(self.commits):
            if commit.hash == hash_:
                return index
        return None

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Branch(...)")
        else:
            with p.group(4, "Branch(", ")"):
                p.breakable()
                p.text(f"name='{self.name}',")
                p.breakable()
                p.text("commits=")
                p.pretty([c.short_hash for c in self.commits])
                p.text(",")
                p.breakable()
                p.text("pending=")
                p.pretty({name: change.kind.value for name, change in self.pending.items()})
                p.breakable()
