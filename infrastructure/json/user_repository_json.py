from __future__ import annotations

from typing import Any, Dict, List, Optional

from domain.models import User
from domain.repositories import UserRepository
from infrastructure.json.reader import read_records, require


class JsonUserRepository(UserRepository):
    """
    JSON-file-backed implementation of `UserRepository`.

    The file is read on first access and the mapped users are cached, so
    balance updates made by the caller stick for the lifetime of the
    repository. Keys other than the user fields are ignored.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._users: Optional[List[User]] = None

    def _to_domain(self, record: Dict[str, Any]) -> User:
        return User(
            id=require(record, "id", int, self._path),
            first_name=require(record, "first_name", str, self._path),
            last_name=require(record, "last_name", str, self._path),
            email=require(record, "email", str, self._path),
            company_id=require(record, "company_id", int, self._path),
            tokens=require(record, "tokens", int, self._path),
            active_status=require(record, "active_status", bool, self._path),
        )

    def get_all_users(self) -> List[User]:
        if self._users is None:
            self._users = [self._to_domain(r) for r in read_records(self._path)]
        return self._users
