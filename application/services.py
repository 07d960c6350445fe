from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, Dict, Iterable, List, Optional

import structlog

from application.filters import filter_active
from application.join import index_companies
from application.report import render
from domain.models import Company, User
from domain.repositories import CompanyRepository, ReportWriter, UserRepository

logger = structlog.get_logger(__name__)


@dataclass
class TopUpRun:
    """Everything a single top-up run produced."""

    users: List[User]
    companies: List[Company]
    totals: Dict[int, int]
    active_users: List[User] = field(default_factory=list)
    report: str = ""


def compute_balances(
    users: List[User],
    companies: Iterable[Company],
    company_index: Optional[Dict[int, Company]] = None,
) -> List[User]:
    """
    Credit every user with their company's top-up.

    - The balance before the top-up is kept in `previous_tokens`.
    - Users whose company cannot be found are left untouched.

    Pass `company_index` to reuse a lookup built by `index_companies`.

    Returns the users that received a top-up.
    """

    index = company_index if company_index is not None else index_companies(companies)
    credited = []
    for user in users:
        company = index.get(user.company_id)
        if company is None:
            logger.debug("company_join_miss", user_id=user.id, company_id=user.company_id)
            continue

        user.previous_tokens = user.tokens
        user.tokens += company.top_up
        credited.append(user)

    logger.info("balances_computed", users=len(users), credited=len(credited))
    return credited


def total_top_ups(
    users: Iterable[User],
    companies: Iterable[Company],
    company_index: Optional[Dict[int, Company]] = None,
) -> DefaultDict[int, int]:
    """
    Sum the top-ups owed by each company across all of its users.

    Every user whose company resolves counts, whatever its active or email
    status. Companies without such users are absent and read as zero.
    """

    index = company_index if company_index is not None else index_companies(companies)
    totals: DefaultDict[int, int] = defaultdict(int)
    for user in users:
        company = index.get(user.company_id)
        if company is not None:
            totals[company.id] += company.top_up
    return totals


def run_top_up(
    user_repo: UserRepository,
    company_repo: CompanyRepository,
    writer: ReportWriter,
) -> TopUpRun:
    """
    Run the whole pipeline once:
    - Load users and companies.
    - Apply top-ups and total them per company.
    - Render the report for active users and write it out.

    Any `TopUpError` raised along the way aborts the run before the report
    is written.
    """

    users = user_repo.get_all_users()
    companies = company_repo.get_all_companies()
    logger.info("records_loaded", users=len(users), companies=len(companies))

    company_index = index_companies(companies)
    compute_balances(users, companies, company_index)
    active_users = filter_active(users, companies, company_index)
    totals = total_top_ups(users, companies, company_index)

    report = render(companies, active_users, totals)
    writer.write(report)
    logger.info(
        "report_written",
        destination=writer.describe(),
        companies=len(companies),
        active_users=len(active_users),
    )

    return TopUpRun(
        users=users,
        companies=companies,
        totals=totals,
        active_users=active_users,
        report=report,
    )
