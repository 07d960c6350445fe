from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Domain representation of a user holding a token balance.

    This model is intentionally simple and independent of the format the
    records were exported in. `tokens` is updated in place when a top-up is
    applied; `previous_tokens` keeps the balance from just before that.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    company_id: int
    tokens: int
    active_status: bool
    previous_tokens: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"


@dataclass(frozen=True)
class Company:
    """
    A company that credits a fixed top-up to each of its users.

    `email_status` applies to the whole company: either every user of the
    company was emailed about the top-up or none was.
    """

    id: int
    name: str
    top_up: int
    email_status: bool
