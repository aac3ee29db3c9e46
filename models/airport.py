"""
models/airport.py
-----------------
Domain model for airports (vertices of the flights graph).
"""

from dataclasses import dataclass


@dataclass
class Airport:
    """
    Represents a single airport document.

    Attributes:
        airport: Airport name.
        city: City the airport serves.
        state: Two-letter state code.
        country: Country name.
        lat: Latitude in decimal degrees.
        long: Longitude in decimal degrees.
    """
    airport: str
    city: str
    state: str
    country: str
    lat: float
    long: float

    @classmethod
    def from_document(cls, doc: dict) -> "Airport":
        """Build an Airport from a raw document, ignoring system attributes.
        Missing or null fields take their zero value."""
        return cls(
            airport=doc.get("airport") or "",
            city=doc.get("city") or "",
            state=doc.get("state") or "",
            country=doc.get("country") or "",
            lat=float(doc.get("lat") or 0.0),
            long=float(doc.get("long") or 0.0),
        )

    def to_document(self) -> dict:
        """Return the document body with the stored field names."""
        return {
            "airport": self.airport,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "lat": self.lat,
            "long": self.long,
        }

    def display(self) -> str:
        return f"{self.airport} {self.city} {self.country} {self.lat} {self.long} {self.state}"
