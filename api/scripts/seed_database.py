#!/usr/bin/env python3
"""
Seed the RTO record store.

Creates the schema and fills empty tables with demo drivers, generated
drivers, the violation catalog, locations and cameras.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import settings
from database import db
from utils.seed_data import clear_database, seed_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the seeding script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Create the RTO database schema and seed reference data"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all existing rows (including memos) before seeding"
    )
    parser.add_argument(
        "--drivers",
        type=int,
        default=settings.seed_random_drivers,
        help="Number of generated drivers to add after the demo drivers"
    )
    args = parser.parse_args()

    logger.info(f"Using database {settings.database_path}")
    db.initialize_schema()

    if args.reset:
        logger.warning("Deleting all rows before seeding")
        clear_database()

    stats = seed_database(random_drivers=args.drivers)
    for table, inserted in stats.items():
        logger.info(f"{table}: {inserted} inserted")

    return 0


if __name__ == "__main__":
    sys.exit(main())
