"""
models/flight.py
----------------
Domain model for flights (edges between two airports).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from dateutil.parser import isoparse


def _parse_timestamp(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return isoparse(value)


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class Flight:
    """
    Represents a single flight edge document.

    Attributes:
        year, month, day_of_month, day_of_week: Calendar fields of the flight.
        dep_time, arr_time: Local departure/arrival times as HHMM integers.
        dep_time_utc, arr_time_utc: Departure/arrival instants in UTC.
        unique_carrier: Carrier code (e.g. 'WN').
        flight_num: Flight number within the carrier.
        tail_num: Aircraft tail number.
        distance: Distance in miles.
        from_airport: ``_from`` handle of the departure airport.
        to_airport: ``_to`` handle of the arrival airport.
    """
    year: int
    month: int
    day_of_month: int
    day_of_week: int
    dep_time: int
    arr_time: int
    unique_carrier: str
    flight_num: int
    tail_num: str
    distance: int
    dep_time_utc: Optional[datetime] = None
    arr_time_utc: Optional[datetime] = None
    from_airport: str = ""
    to_airport: str = ""

    @classmethod
    def from_document(cls, doc: dict) -> "Flight":
        """Build a Flight from a raw edge document; null fields become zero values."""
        return cls(
            year=int(doc.get("Year") or 0),
            month=int(doc.get("Month") or 0),
            day_of_month=int(doc.get("DayofMonth") or 0),
            day_of_week=int(doc.get("DayOfWeek") or 0),
            dep_time=int(doc.get("DepTime") or 0),
            arr_time=int(doc.get("ArrTime") or 0),
            dep_time_utc=_parse_timestamp(doc.get("DepTimeUTC")),
            arr_time_utc=_parse_timestamp(doc.get("ArrTimeUTC")),
            unique_carrier=doc.get("UniqueCarrier") or "",
            flight_num=int(doc.get("FlightNum") or 0),
            tail_num=doc.get("TailNum") or "",
            distance=int(doc.get("Distance") or 0),
            from_airport=doc.get("_from") or "",
            to_airport=doc.get("_to") or "",
        )

    def to_document(self) -> dict:
        """Return the edge document body with the stored field names."""
        return {
            "Year": self.year,
            "Month": self.month,
            "DayofMonth": self.day_of_month,
            "DayOfWeek": self.day_of_week,
            "DepTime": self.dep_time,
            "ArrTime": self.arr_time,
            "DepTimeUTC": _format_timestamp(self.dep_time_utc),
            "ArrTimeUTC": _format_timestamp(self.arr_time_utc),
            "UniqueCarrier": self.unique_carrier,
            "FlightNum": self.flight_num,
            "TailNum": self.tail_num,
            "Distance": self.distance,
            "_from": self.from_airport,
            "_to": self.to_airport,
        }

    def display(self) -> str:
        fields = (
            self.arr_time, self.arr_time_utc, self.day_of_month, self.day_of_week,
            self.dep_time, self.distance, self.flight_num, self.month,
            self.tail_num, self.unique_carrier, self.year,
            self.from_airport, self.to_airport,
        )
        return " ".join(str(f) for f in fields)
