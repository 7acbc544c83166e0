"""Storefront database management CLI.

Creates and drops the database schema and loads demo data.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load demo stores, products and listings
"""

import argparse
import random
import sys


def _initialized_domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    """Create the database schema for the storefront domain."""
    from storefront.utils.db import setup_db

    domain = _initialized_domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the database schema of the storefront domain."""
    from storefront.utils.db import drop_db

    domain = _initialized_domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_database(seed=None):
    """Load demo data, skipping whatever is already present."""
    from storefront.seeds import seed_catalog
    from storefront.utils.logging import add_context, clear_context

    domain = _initialized_domain()

    add_context(command="seed", seed=seed)
    try:
        with domain.domain_context():
            summary = seed_catalog(random.Random(seed))
    finally:
        clear_context()

    for name, created in summary.items():
        print(f"  {name}: {created} created")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load demo data")
    seed_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible stock levels and prices",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database(args.seed)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
