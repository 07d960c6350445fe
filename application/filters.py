from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from application.join import index_companies
from domain.models import Company, User


def filter_active(
    users: Iterable[User],
    companies: Iterable[Company],
    company_index: Optional[Dict[int, Company]] = None,
) -> List[User]:
    """Return users that are active and whose company resolves, in input order."""

    index = company_index if company_index is not None else index_companies(companies)
    return [u for u in users if u.company_id in index and u.active_status]


def partition_by_email(users: Iterable[User], company: Company) -> Tuple[List[User], List[User]]:
    """
    Split a company's users into (emailed, not_emailed).

    The company's `email_status` decides for all of its users at once, so one
    of the two lists is always empty. Users of other companies are ignored.
    """

    members = [u for u in users if u.company_id == company.id]
    if company.email_status:
        return members, []
    return [], members
