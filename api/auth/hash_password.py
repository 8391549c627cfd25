"""
Generate the bcrypt hash to put in AUTH_PASSWORD_HASH.

Usage (from the api/ directory):
    python -m auth.hash_password YourPasswordHere
"""

from __future__ import annotations

import argparse
import secrets
import sys

from .security import AuthSecurityError, hash_password


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a bcrypt hash for AUTH_PASSWORD_HASH.")
    parser.add_argument("password", help="password to hash")
    args = parser.parse_args(argv)

    try:
        password_hash = hash_password(args.password)
    except AuthSecurityError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Add this to your .env file:")
    print(f"AUTH_PASSWORD_HASH={password_hash}")
    print()
    print("Also set JWT_SECRET, for example:")
    print(f"JWT_SECRET={secrets.token_hex(64)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
