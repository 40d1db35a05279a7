"""
Create a user (e.g. the first admin) without going through the HTTP API. Run from project root:
  python -m metaspace.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m metaspace.scripts.create_user admin your-secure-password admin
"""
import argparse
import sys

from metaspace.core.database import SessionLocal
from metaspace.core.errors import ConflictError, ValidationError
from metaspace.services.identity import signup


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Metaspace user.")
    parser.add_argument("username", help="Username (1-255 chars, case-sensitive)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "regular", "admin"])
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = signup(db, args.username, args.password, role=args.role)
    except (ValidationError, ConflictError) as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' ({user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
