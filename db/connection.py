"""
db/connection.py
----------------
Manages the ArangoDB client.
A single python-arango ArangoClient (and its HTTP session) is shared per process.
"""

from typing import Optional

from arango import ArangoClient
from arango.database import StandardDatabase
from arango.exceptions import ServerConnectionError

from config import ARANGO_DATABASE, ARANGO_HOSTS, ARANGO_PASSWORD, ARANGO_USERNAME
from utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[ArangoClient] = None


def init_client(hosts: Optional[str] = None) -> None:
    """
    Initialize the ArangoDB client.

    Args:
        hosts: Endpoint URL(s); defaults to ``ARANGO_HOSTS``.
    """
    global _client
    if _client is not None:
        return
    _client = ArangoClient(hosts=hosts or ARANGO_HOSTS)
    logger.info(f"ArangoDB client initialized for {hosts or ARANGO_HOSTS}.")


def get_database(name: Optional[str] = None) -> StandardDatabase:
    """
    Get a database handle by name.

    Args:
        name: Database name. Falls back to ``ARANGO_DATABASE``, then ``_system``.

    Returns:
        A python-arango StandardDatabase.

    Raises:
        RuntimeError: If the client has not been initialized.
        arango.exceptions.ServerConnectionError: If the server is unreachable
            or rejects the credentials.
    """
    if _client is None:
        raise RuntimeError("ArangoDB client not initialized. Call init_client() first.")
    name = name or ARANGO_DATABASE or "_system"
    try:
        db = _client.db(name, username=ARANGO_USERNAME, password=ARANGO_PASSWORD, verify=True)
    except ServerConnectionError as e:
        logger.error(f"Failed to connect to database '{name}': {e}")
        raise
    logger.info(f"Connected to database '{name}' as '{ARANGO_USERNAME}'.")
    return db


def close_client() -> None:
    """Close the client's HTTP session."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("ArangoDB client closed.")
