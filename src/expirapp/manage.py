"""ExpirApp database management CLI.

Usage:
    expirapp-manage setup-db   # Create all tables
    expirapp-manage drop-db    # Drop all tables

Set PROTEAN_ENV=production (and DATABASE_URL) to target PostgreSQL.
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the commerce domain."""
    from expirapp.bootstrap import init_domain
    from expirapp.utils.db import setup_db

    print("Initializing commerce domain...")
    commerce = init_domain()
    print("Creating database schema...")
    setup_db(commerce)
    print("Done.")


def drop_database():
    """Drop the database schema for the commerce domain."""
    from expirapp.bootstrap import init_domain
    from expirapp.utils.db import drop_db

    print("Initializing commerce domain...")
    commerce = init_domain()
    print("Dropping database schema...")
    drop_db(commerce)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="ExpirApp database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
