"""OctoCAT Supply database management CLI.

Creates and drops the database schema of the supply domain using the
setup_db/drop_db utilities.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    """Create the supply database schema."""
    from supply.domain import supply
    from supply.utils.db import setup_db

    print("Initializing supply domain...")
    supply.init()
    print("Creating supply database schema...")
    setup_db(supply)
    print("  supply schema ready.")

    print("Done.")


def drop_databases():
    """Drop the supply database schema."""
    from supply.domain import supply
    from supply.utils.db import drop_db

    print("Initializing supply domain...")
    supply.init()
    print("Dropping supply database schema...")
    drop_db(supply)
    print("  supply schema dropped.")

    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="OctoCAT Supply database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
