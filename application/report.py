from __future__ import annotations

from typing import Iterable, List, Mapping

from application.filters import partition_by_email
from application.join import group_users_by_company
from domain.models import Company, User


def _previous_balance(user: User, company: Company) -> int:
    if user.previous_tokens is not None:
        return user.previous_tokens
    return user.tokens - company.top_up


def _user_block(user: User, company: Company, emailed: bool) -> str:
    marker = "Email sent" if emailed else "Email not sent"
    return (
        f"{user.full_name}, {user.email} - {marker}\n"
        f"  Previous Token Balance: {_previous_balance(user, company)}\n"
        f"  New Token Balance: {user.tokens}\n"
    )


def render_company(
    company: Company,
    emailed: Iterable[User],
    not_emailed: Iterable[User],
    total: int,
) -> str:
    """Render the report block for a single company."""

    lines: List[str] = [
        f"Company Id: {company.id}\n",
        f"Company Name: {company.name}\n",
        "Users Emailed:\n",
    ]
    lines.extend(_user_block(u, company, emailed=True) for u in emailed)
    lines.append("Users Not Emailed:\n")
    lines.extend(_user_block(u, company, emailed=False) for u in not_emailed)
    lines.append(f"Total amount of top ups for {company.name}: {total}\n\n")
    return "".join(lines)


def render(
    companies: Iterable[Company],
    users: Iterable[User],
    totals: Mapping[int, int],
) -> str:
    """
    Render the full report.

    `users` should already be filtered down to the users worth reporting.
    Companies are emitted in ascending id order whatever order they came in,
    and a company missing from `totals` reports a total of zero.
    """

    by_company = group_users_by_company(users)
    blocks = []
    for company in sorted(companies, key=lambda c: c.id):
        members = by_company.get(company.id, [])
        emailed, not_emailed = partition_by_email(members, company)
        blocks.append(render_company(company, emailed, not_emailed, totals.get(company.id, 0)))
    return "".join(blocks)
