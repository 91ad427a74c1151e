"""Stockroom management CLI.

Creates and drops the database schema, and moves the product catalogue in
and out of JSON snapshot files.

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db                        # Drop all tables
    python src/manage.py export-products products.json  # Write a snapshot
    python src/manage.py import-products products.json  # Restore a snapshot
"""

import argparse
import sys


def _domain():
    from stockroom.domain import stockroom

    stockroom.init()
    return stockroom


def setup_database():
    """Create the database schema for the stockroom domain."""
    from stockroom.utils.db import setup_db

    domain = _domain()
    print("Creating stockroom database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the database schema for the stockroom domain."""
    from stockroom.utils.db import drop_db

    domain = _domain()
    print("Dropping stockroom database schema...")
    drop_db(domain)
    print("Done.")


def export_products(path):
    from stockroom.product.snapshot import export_to_file

    domain = _domain()
    with domain.domain_context():
        count = export_to_file(path)
    print(f"Exported {count} product(s) to {path}.")


def import_products(path):
    from stockroom.product.snapshot import import_from_file

    domain = _domain()
    with domain.domain_context():
        count = import_from_file(path)
    print(f"Imported {count} product(s) from {path}.")


def main():
    parser = argparse.ArgumentParser(description="Stockroom management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    export_parser = subparsers.add_parser("export-products", help="Write all products to a JSON file")
    export_parser.add_argument("path", help="Destination file")

    import_parser = subparsers.add_parser("import-products", help="Load products from a JSON file")
    import_parser.add_argument("path", help="Source file written by export-products")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "export-products":
        export_products(args.path)
    elif args.command == "import-products":
        import_products(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
