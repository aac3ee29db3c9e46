"""
main.py
-------
Entry point for the flights dataset demo.

Responsibilities:
    - Initialize the ArangoDB client and select the database.
    - Run the fixed sequence of demonstration queries.
    - Stop the process on the first error.
"""

import sys

from arango.exceptions import ArangoError

from db.connection import close_client, get_database, init_client
from services.flight_data_service import FlightDataService
from utils.logger import get_logger
from utils.timing import timed

logger = get_logger(__name__)

DEMO_AIRPORT_KEY = "M75"
DEMO_FLIGHT_KEY = "350814"
DEMO_ORIGIN_CODE = "LAX"
LISTING_SIZES = (0, 10, 100)


def run_demo(service: FlightDataService) -> None:
    """Run every demonstration query in order."""

    # ── 1. Single document lookups ────────────────────────
    service.print_airport_by_key(DEMO_AIRPORT_KEY)
    service.print_flight_by_key(DEMO_FLIGHT_KEY)

    # ── 2. Listings ───────────────────────────────────────
    for n in LISTING_SIZES:
        service.print_airports(n)
    for n in LISTING_SIZES:
        service.print_flights(n)

    # ── 3. Aggregation ────────────────────────────────────
    service.print_airport_count_per_state()

    # ── 4. Traversal ──────────────────────────────────────
    service.print_flights_from_airport(DEMO_ORIGIN_CODE, 20)

    # ── 5. Insertion ──────────────────────────────────────
    service.create_demo_airport()


def main() -> None:
    """Connect, run the demo and exit with status 1 on any failure."""
    with timed("Total Elapsed Time"):
        try:
            init_client()
            db = get_database()
            run_demo(FlightDataService(db))
        except (ArangoError, LookupError, RuntimeError) as e:
            logger.error(f"Demo aborted: {e}")
            sys.exit(1)
        finally:
            close_client()


if __name__ == "__main__":
    main()
