#!/usr/bin/env python3
"""Mint a bearer token for local development.

Tokens are normally issued by the platform's login service. This signs one
with the configured secret so the API can be called by hand:

    python scripts/create_token.py 7a0c...e1 --admin
"""

import argparse
import sys
from uuid import UUID

from ctfhub.config import Settings
from ctfhub.util.jwt import create_token


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("user_id", type=UUID, help="ID of the user the token is for")
    parser.add_argument(
        "--admin", action="store_true", help="Grant platform admin rights"
    )
    args = parser.parse_args()

    settings = Settings()
    print(create_token(str(args.user_id), args.admin, settings.auth))
    return 0


if __name__ == "__main__":
    sys.exit(main())
