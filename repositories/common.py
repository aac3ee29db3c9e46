"""
repositories/common.py
----------------------
Helpers shared by all repositories.
"""

from typing import Any, Optional

from arango.database import StandardDatabase
from arango.exceptions import AQLQueryExecuteError, CursorNextError

from config import DEFAULT_QUERY_LIMIT
from utils.logger import get_logger

logger = get_logger(__name__)


class DocumentNotFoundError(LookupError):
    """Raised when a document key does not exist in its collection."""

    def __init__(self, collection: str, key: str):
        super().__init__(f"Document '{key}' not found in collection '{collection}'")
        self.collection = collection
        self.key = key


def effective_limit(n: int) -> int:
    """Return ``n``, or ``DEFAULT_QUERY_LIMIT`` when ``n`` is not positive."""
    return n if n > 0 else DEFAULT_QUERY_LIMIT


def run_query(
    db: StandardDatabase, query: str, bind_vars: Optional[dict[str, Any]] = None
) -> list[dict]:
    """
    Execute an AQL query and drain its cursor.

    Args:
        db: Database handle.
        query: AQL text with ``@name`` placeholders.
        bind_vars: Values for the placeholders.

    Returns:
        Every result row, in cursor order.
    """
    try:
        cursor = db.aql.execute(query, bind_vars=bind_vars or {})
    except AQLQueryExecuteError as e:
        logger.error(f"Query failed: {e}")
        raise
    # Leaving the block closes the cursor with ignore_missing=True: the server
    # drops an exhausted multi-batch cursor on its own.
    with cursor:
        try:
            return list(cursor)
        except CursorNextError as e:
            logger.error(f"Failed to read query results: {e}")
            raise
