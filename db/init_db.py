"""
db/init_db.py
-------------
Creates the collections and graph of the flights dataset if they do not already exist.
Run this module directly to prepare an empty database:
    python -m db.init_db
"""

from arango.database import StandardDatabase

from config import AIRPORTS_COLLECTION, FLIGHTS_COLLECTION, FLIGHTS_GRAPH
from utils.logger import get_logger

logger = get_logger(__name__)

EDGE_DEFINITIONS = [
    {
        "edge_collection": FLIGHTS_COLLECTION,
        "from_vertex_collections": [AIRPORTS_COLLECTION],
        "to_vertex_collections": [AIRPORTS_COLLECTION],
    },
]


def ensure_schema(db: StandardDatabase) -> None:
    """
    Create the airports/flights collections and the flights graph.
    Safe to call multiple times.
    """
    if not db.has_collection(AIRPORTS_COLLECTION):
        db.create_collection(AIRPORTS_COLLECTION)
        logger.info(f"Created document collection '{AIRPORTS_COLLECTION}'.")
    if not db.has_collection(FLIGHTS_COLLECTION):
        db.create_collection(FLIGHTS_COLLECTION, edge=True)
        logger.info(f"Created edge collection '{FLIGHTS_COLLECTION}'.")
    if not db.has_graph(FLIGHTS_GRAPH):
        db.create_graph(FLIGHTS_GRAPH, edge_definitions=EDGE_DEFINITIONS)
        logger.info(f"Created graph '{FLIGHTS_GRAPH}'.")
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import close_client, get_database, init_client
    init_client()
    try:
        ensure_schema(get_database())
    finally:
        close_client()
    print("Database schema created successfully.")
