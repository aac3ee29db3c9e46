"""
repositories/flight_repo.py
---------------------------
Data access layer for flights.
All AQL queries related to the `flights` edge collection live here.
"""

from typing import Optional

from arango.database import StandardDatabase
from arango.exceptions import DocumentGetError

from config import AIRPORTS_COLLECTION, FLIGHTS_COLLECTION
from models.airport import Airport
from models.document_meta import DocumentMeta
from models.flight import Flight
from repositories.common import effective_limit, run_query
from utils.logger import get_logger

logger = get_logger(__name__)


class FlightRepository:
    """Repository for reads and one-hop traversals over the flights edges."""

    FIRST_N_QUERY = """
FOR f IN flights
LIMIT @n
RETURN f"""

    OUTBOUND_QUERY = """
FOR a, f IN OUTBOUND @airportCode flights
LIMIT @count
RETURN {a, f}
"""

    def __init__(self, db: StandardDatabase):
        self.db = db
        self.collection = db.collection(FLIGHTS_COLLECTION)

    def get_by_key(self, key: str) -> Optional[tuple[DocumentMeta, Flight]]:
        """
        Fetch a single flight by document key.

        Returns:
            The document metadata and Flight, or None if not found.
        """
        try:
            doc = self.collection.get(key)
        except DocumentGetError as e:
            logger.error(f"Failed to read flight '{key}': {e}")
            raise
        if doc is None:
            return None
        return DocumentMeta.from_document(doc), Flight.from_document(doc)

    def get_first(self, n: int) -> list[tuple[DocumentMeta, Flight]]:
        """Fetch the first N flights; non-positive N uses the default limit."""
        rows = run_query(self.db, self.FIRST_N_QUERY, {"n": effective_limit(n)})
        return [(DocumentMeta.from_document(r), Flight.from_document(r)) for r in rows]

    def get_outbound(self, code: str, n: int) -> list[tuple[Airport, Flight]]:
        """
        Follow outbound flight edges one hop from an airport.

        Args:
            code: Key of the departure airport (e.g. 'LAX').
            n: Maximum number of results, bound as given (0 returns nothing).

        Returns:
            (destination Airport, Flight) pairs.
        """
        bind_vars = {
            "airportCode": f"{AIRPORTS_COLLECTION}/{code}",
            "count": n,
        }
        rows = run_query(self.db, self.OUTBOUND_QUERY, bind_vars)
        return [(Airport.from_document(r["a"]), Flight.from_document(r["f"])) for r in rows]
