"""
repositories/airport_repo.py
----------------------------
Data access layer for airports.
All AQL queries related to the `airports` collection live here.
"""

from typing import Optional

from arango.database import StandardDatabase
from arango.exceptions import DocumentGetError, DocumentInsertError

from config import AIRPORTS_COLLECTION
from models.airport import Airport
from models.document_meta import DocumentMeta
from repositories.common import effective_limit, run_query
from utils.logger import get_logger

logger = get_logger(__name__)


class AirportRepository:
    """Repository for reads, aggregations and inserts on the airports collection."""

    FIRST_N_QUERY = """
FOR a IN airports
LIMIT @n
RETURN a"""

    COUNT_PER_STATE_QUERY = """
FOR a IN airports
COLLECT state = a.state
WITH COUNT INTO counter
RETURN {state, counter}
"""

    def __init__(self, db: StandardDatabase):
        self.db = db
        self.collection = db.collection(AIRPORTS_COLLECTION)

    # ── CREATE ────────────────────────────────────────────

    def add(self, airport: Airport) -> DocumentMeta:
        """
        Insert a new airport document.

        Args:
            airport: The Airport to persist.

        Returns:
            The metadata (including the key) assigned by the database.
        """
        try:
            result = self.collection.insert(airport.to_document())
        except DocumentInsertError as e:
            logger.error(f"Failed to add airport '{airport.airport}': {e}")
            raise
        meta = DocumentMeta.from_document(result)
        logger.info(f"Added airport {meta.id}")
        return meta

    # ── READ ──────────────────────────────────────────────

    def get_by_key(self, key: str) -> Optional[tuple[DocumentMeta, Airport]]:
        """
        Fetch a single airport by document key.

        Returns:
            The document metadata and Airport, or None if not found.
        """
        try:
            doc = self.collection.get(key)
        except DocumentGetError as e:
            logger.error(f"Failed to read airport '{key}': {e}")
            raise
        if doc is None:
            return None
        return DocumentMeta.from_document(doc), Airport.from_document(doc)

    def get_first(self, n: int) -> list[tuple[DocumentMeta, Airport]]:
        """
        Fetch the first N airports in collection order.

        Args:
            n: Number of airports; non-positive values use the default limit.
        """
        rows = run_query(self.db, self.FIRST_N_QUERY, {"n": effective_limit(n)})
        return [(DocumentMeta.from_document(r), Airport.from_document(r)) for r in rows]

    def count_per_state(self) -> dict[str, int]:
        """
        Count airports grouped by state.

        Returns:
            Mapping of state code to number of airports.
        """
        rows = run_query(self.db, self.COUNT_PER_STATE_QUERY)
        return {r["state"]: int(r["counter"]) for r in rows}
