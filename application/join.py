"""Lookup structures joining users to companies, each built in one pass."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from domain.models import Company, User


def index_companies(companies: Iterable[Company]) -> Dict[int, Company]:
    """
    Map company id to company.

    If the same id appears more than once the first company wins.
    """

    index: Dict[int, Company] = {}
    for company in companies:
        index.setdefault(company.id, company)
    return index


def group_users_by_company(users: Iterable[User]) -> Dict[int, List[User]]:
    """Map company id to its users, keeping input order within each group."""

    groups: Dict[int, List[User]] = defaultdict(list)
    for user in users:
        groups[user.company_id].append(user)
    return dict(groups)
