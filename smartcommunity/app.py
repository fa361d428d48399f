"""Command-line entry: open the database and route a user by role."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from enum import IntEnum

from smartcommunity.database import DEFAULT_PATH, Database
from smartcommunity.greeting import greet


class Role(IntEnum):
    """The kind of account a user holds."""

    ADMIN = 0
    STAFF = 1
    OWNER = 2


def role_from_code(code: int | str) -> Role:
    """Return the role for a stored role code."""
    try:
        return Role(int(code))
    except (TypeError, ValueError):
        raise ValueError(f"用户身份不符: {code!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Create the schema and, given a user, greet them with their role."""
    parser = argparse.ArgumentParser(
        prog="smartcommunity", description="Smart community management."
    )
    parser.add_argument("--db", default=DEFAULT_PATH, help="database file")
    parser.add_argument("--user", help="username to enter as")
    args = parser.parse_args(argv)

    with Database(args.db) as db:
        db.create_schema()
        if args.user is None:
            return 0
        row = db.get_user_by_username(args.user)
        if row is None:
            print(f"用户不存在: {args.user}", file=sys.stderr)
            return 1
        try:
            role = role_from_code(row["role"])
        except ValueError as exc:
            print(f"进入失败: {exc}", file=sys.stderr)
            return 1
        name = row["name"] or row["username"]
        print(f"{greet().text} {name} [{role.name.lower()}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())