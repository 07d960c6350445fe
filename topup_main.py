import argparse
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from application.services import run_top_up
from domain.errors import TopUpError
from infrastructure.json.company_repository_json import JsonCompanyRepository
from infrastructure.json.user_repository_json import JsonUserRepository
from infrastructure.observability.logging import setup_logging
from infrastructure.output.report_writer_file import FileReportWriter


load_dotenv()

USERS_PATH = os.environ.get("USERS_PATH", "users.json")
COMPANIES_PATH = os.environ.get("COMPANIES_PATH", "companies.json")
OUTPUT_PATH = os.environ.get("OUTPUT_PATH", "output.txt")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply company token top-ups to users and write a report.",
    )
    parser.add_argument("users", nargs="?", default=USERS_PATH, help=f"users JSON file (default: {USERS_PATH})")
    parser.add_argument(
        "companies",
        nargs="?",
        default=COMPANIES_PATH,
        help=f"companies JSON file (default: {COMPANIES_PATH})",
    )
    parser.add_argument("output", nargs="?", default=OUTPUT_PATH, help=f"report file (default: {OUTPUT_PATH})")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(LOG_LEVEL)

    user_repo = JsonUserRepository(args.users)
    company_repo = JsonCompanyRepository(args.companies)
    writer = FileReportWriter(args.output)

    try:
        run_top_up(user_repo, company_repo, writer)
    except TopUpError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Result written to {writer.describe()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
