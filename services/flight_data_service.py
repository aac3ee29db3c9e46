"""
services/flight_data_service.py
-------------------------------
Runs the demonstration queries against the flights dataset and
prints each result to the console.
"""

from arango.database import StandardDatabase

from config import AIRPORTS_COLLECTION, FLIGHTS_COLLECTION
from models.airport import Airport
from models.document_meta import DocumentMeta
from repositories.airport_repo import AirportRepository
from repositories.common import DocumentNotFoundError
from repositories.flight_repo import FlightRepository
from utils.console import print_contents
from utils.logger import get_logger
from utils.timing import timed

logger = get_logger(__name__)

DEMO_AIRPORT = Airport(
    airport="A new one",
    city="Cincinnati",
    state="NA",
    country="USA",
    lat=39.5155436,
    long=-84.29460752,
)


class FlightDataService:
    """
    Handles all console-facing operations on airports and flights.

    Every failure is raised to the caller; nothing is printed for a
    lookup that did not succeed.
    """

    def __init__(self, db: StandardDatabase):
        self.airports = AirportRepository(db)
        self.flights = FlightRepository(db)

    # ── Single documents ──────────────────────────────────

    def print_airport_by_key(self, key: str) -> None:
        """Print an airport's metadata and contents."""
        found = self.airports.get_by_key(key)
        if found is None:
            raise DocumentNotFoundError(AIRPORTS_COLLECTION, key)
        print_contents(*found)

    def print_flight_by_key(self, key: str) -> None:
        """Print a flight's metadata and contents."""
        found = self.flights.get_by_key(key)
        if found is None:
            raise DocumentNotFoundError(FLIGHTS_COLLECTION, key)
        print_contents(*found)

    # ── Listings ──────────────────────────────────────────

    def print_airports(self, n: int) -> None:
        """Print the first N airports (20 when N is not positive)."""
        with timed("getFirstNAirports"):
            for meta, airport in self.airports.get_first(n):
                print_contents(meta, airport)

    def print_flights(self, n: int) -> None:
        """Print the first N flights (20 when N is not positive)."""
        with timed("getFirstNFlights"):
            for meta, flight in self.flights.get_first(n):
                print_contents(meta, flight)

    # ── Aggregation ───────────────────────────────────────

    def airport_count_per_state(self) -> dict[str, int]:
        """Return the number of airports in each state."""
        with timed("getAirportCountPerState"):
            return self.airports.count_per_state()

    def print_airport_count_per_state(self) -> None:
        for state, count in self.airport_count_per_state().items():
            print(state)
            print(count)

    # ── Traversal ─────────────────────────────────────────

    def print_flights_from_airport(self, code: str, n: int) -> None:
        """Print up to N destination airports and flights leaving `code`."""
        with timed("getNFlightsFromAirport"):
            for airport, flight in self.flights.get_outbound(code, n):
                print_contents(airport, flight)

    # ── Insertion ─────────────────────────────────────────

    def create_demo_airport(self) -> tuple[DocumentMeta, Airport]:
        """
        Insert the demonstration airport and read it back.

        Returns:
            Metadata and contents of the stored document as re-read by key.
        """
        meta = self.airports.add(DEMO_AIRPORT)
        print_contents(meta)

        stored = self.airports.get_by_key(meta.key)
        if stored is None:
            raise DocumentNotFoundError(AIRPORTS_COLLECTION, meta.key)
        print_contents(*stored)
        return stored
