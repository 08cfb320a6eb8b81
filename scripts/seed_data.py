#!/usr/bin/env python3
"""
Database Seed Script

Loads the demo catalog into MongoDB for local development.

USAGE:
    # From the project root with venv activated
    python scripts/seed_data.py            # seed only if the collection is empty
    python scripts/seed_data.py --reset    # delete every book, then seed

The API seeds an empty collection on its own at startup in development.
This script is for starting over after experimenting with mutations.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bookstore.config import get_settings
from bookstore.database import close_database, get_book_context
from bookstore.services.seed import insert_demo_books, reset_demo_data


def seed_database(reset: bool = False) -> None:
    """
    Seed the book collection.

    Args:
        reset: If True, deletes every book before seeding.
    """
    settings = get_settings()
    context = get_book_context()
    collection = context.get_collection(context.book_collection)

    print("=" * 60)
    print(f"Seeding '{settings.mongodb_database}.{context.book_collection}'...")
    print("=" * 60)

    try:
        if reset:
            count = reset_demo_data(collection)
        elif collection.find_one({}, {"_id": 1}) is not None:
            print("Collection already has books. Use --reset to replace them.")
            return
        else:
            count = insert_demo_books(collection)

        context.create_indexes()

        print(f"Created {count} books.")
        print(f"\nGraphQL endpoint: http://localhost:{settings.port}/graphql")
    except Exception as e:
        print(f"Error seeding database: {e}")
        raise
    finally:
        close_database()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the BookStore demo catalog")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all existing books before seeding",
    )
    args = parser.parse_args()
    seed_database(reset=args.reset)
