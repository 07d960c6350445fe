from __future__ import annotations

from typing import List, Protocol

from .models import Company, User


class UserRepository(Protocol):
    """
    Abstraction over where user records come from.

    Implementations are responsible for:
    - Mapping between raw records and the `User` domain model.
    - Raising `DataSourceError` / `FormatError` when the source is unusable.
    """

    def get_all_users(self) -> List[User]:
        """Return all users, in source order."""

        ...


class CompanyRepository(Protocol):
    """
    Abstraction over where company records come from.
    """

    def get_all_companies(self) -> List[Company]:
        """Return all companies, in source order."""

        ...


class ReportWriter(Protocol):
    """
    Destination for a rendered report.

    Writes are all-or-nothing: on failure implementations raise
    `WriteError` and leave no partially written report behind.
    """

    def write(self, text: str) -> None:
        ...

    def describe(self) -> str:
        """Human readable name of the destination (e.g. a file path)."""

        ...
