"""
models/document_meta.py
-----------------------
System attributes ArangoDB assigns to every stored document.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentMeta:
    """
    Identity of a stored document.

    Attributes:
        id: Full document handle, e.g. ``airports/LAX``.
        key: Key unique within the collection.
        rev: Revision of the document.
    """
    id: str
    key: str
    rev: str

    @classmethod
    def from_document(cls, doc: dict) -> "DocumentMeta":
        """Read ``_id``, ``_key`` and ``_rev`` from a document or insert result."""
        return cls(id=doc["_id"], key=doc["_key"], rev=doc["_rev"])

    def display(self) -> str:
        return f"{self.id} {self.rev} {self.key}"
