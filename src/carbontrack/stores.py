"""Record stores consumed by the engine.

The engine only needs keyed read/write access per aggregate (User, Activity,
Challenge). Production deployments back these protocols with their document
store; the in-memory implementations here serve tests and local tooling.

Stores hand out copies: a record read from a store is only persisted by
passing it back to ``save``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from carbontrack.activities.schemas import Activity
    from carbontrack.challenges.schemas import Challenge
    from carbontrack.emissions.schemas import ActivityCategory, EmissionFactor
    from carbontrack.users.schemas import User

RecordT = TypeVar("RecordT", bound=BaseModel)


class FactorSource(Protocol):
    def active_factors(
        self,
        category: ActivityCategory | str,
        subcategory: str | None = None,
    ) -> list[EmissionFactor]: ...


class UserStore(Protocol):
    def get(self, user_id: str) -> User | None: ...

    def save(self, user: User) -> User: ...


class ChallengeStore(Protocol):
    def get(self, challenge_id: str) -> Challenge | None: ...

    def save(self, challenge: Challenge) -> Challenge: ...


class ActivityStore(Protocol):
    def get(self, activity_id: str) -> Activity | None: ...

    def save(self, activity: Activity) -> Activity: ...

    def delete(self, activity_id: str) -> bool: ...

    def list_for_user(self, user_id: str) -> list[Activity]: ...


class _InMemoryStore:
    """Dict-backed store keyed by the record's ``id``."""

    def __init__(self, records=()) -> None:
        self._records: dict[str, BaseModel] = {}
        for record in records:
            self.save(record)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str):
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def save(self, record: RecordT) -> RecordT:
        self._records[record.id] = record.model_copy(deep=True)
        return record

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def all(self) -> list:
        return [r.model_copy(deep=True) for r in self._records.values()]


class InMemoryUserStore(_InMemoryStore):
    pass


class InMemoryChallengeStore(_InMemoryStore):
    pass


class InMemoryActivityStore(_InMemoryStore):
    def list_for_user(self, user_id: str) -> list[Activity]:
        return [a for a in self.all() if a.user_id == user_id]
