"""Utility script to create the first administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from harmonia.application.use_cases.users.create_user import create_user
from harmonia.domain.entities import ROLE_ADMIN, USER_ROLES
from harmonia.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create an initial user for the Harmonia API.",
    )
    parser.add_argument("--email", default="admin@example.com", help="Login email")
    parser.add_argument("--first-name", default="Admin", help="Given name")
    parser.add_argument("--last-name", default="User", help="Family name")
    parser.add_argument(
        "--role",
        default=ROLE_ADMIN,
        choices=USER_ROLES,
        help="Account role (default: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted for interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            email=args.email,
            password=password,
            first_name=args.first_name,
            last_name=args.last_name,
            role=args.role,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.display_name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
