from __future__ import annotations

from typing import Any, Dict, List, Optional

from domain.models import Company
from domain.repositories import CompanyRepository
from infrastructure.json.reader import read_records, require


class JsonCompanyRepository(CompanyRepository):
    """JSON-file-backed implementation of `CompanyRepository`."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._companies: Optional[List[Company]] = None

    def _to_domain(self, record: Dict[str, Any]) -> Company:
        return Company(
            id=require(record, "id", int, self._path),
            name=require(record, "name", str, self._path),
            top_up=require(record, "top_up", int, self._path),
            email_status=require(record, "email_status", bool, self._path),
        )

    def get_all_companies(self) -> List[Company]:
        if self._companies is None:
            self._companies = [self._to_domain(r) for r in read_records(self._path)]
        return self._companies
