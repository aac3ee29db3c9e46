"""
pytest fixtures for the flights demo.

Provides an in-memory stand-in for a python-arango database handle:
collections with point reads and inserts, and an AQL executor that
answers the handful of queries the repositories issue.
"""

import itertools

import pytest
from arango.exceptions import ArangoClientError


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.closed = False

    def __iter__(self):
        return iter(self.rows)

    def close(self, ignore_missing=False):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close(ignore_missing=True)


class FakeCollection:
    def __init__(self, name, docs=None, fail_reads=False):
        self.name = name
        self.fail_reads = fail_reads
        self.docs = {}
        self._keys = itertools.count(1000)
        for key, doc in (docs or {}).items():
            self.docs[key] = dict(doc, _key=key, _id=f"{name}/{key}", _rev="_rev0")

    def get(self, key):
        if self.fail_reads:
            raise ArangoClientError(f"cannot read {self.name}/{key}")
        doc = self.docs.get(key)
        return dict(doc) if doc is not None else None

    def insert(self, document):
        key = str(next(self._keys))
        meta = {"_id": f"{self.name}/{key}", "_key": key, "_rev": "_rev1"}
        self.docs[key] = dict(document, **meta)
        return dict(meta)


class FakeAQL:
    def __init__(self, db):
        self.db = db
        self.calls = []
        self.cursors = []

    def execute(self, query, bind_vars=None):
        bind_vars = bind_vars or {}
        self.calls.append((query, bind_vars))
        cursor = FakeCursor(self._answer(query, bind_vars))
        self.cursors.append(cursor)
        return cursor

    def _answer(self, query, bind_vars):
        airports = list(self.db.collections["airports"].docs.values())
        flights = list(self.db.collections["flights"].docs.values())
        if "COLLECT" in query:
            counts = {}
            for a in airports:
                counts[a["state"]] = counts.get(a["state"], 0) + 1
            return [{"state": s, "counter": c} for s, c in counts.items()]
        if "OUTBOUND" in query:
            by_id = {a["_id"]: a for a in airports}
            rows = [
                {"a": by_id[f["_to"]], "f": f}
                for f in flights
                if f["_from"] == bind_vars["airportCode"] and f["_to"] in by_id
            ]
            return rows[:bind_vars["count"]]
        if "IN airports" in query:
            return airports[:bind_vars["n"]]
        if "IN flights" in query:
            return flights[:bind_vars["n"]]
        raise AssertionError(f"unexpected query: {query}")


class FakeDatabase:
    def __init__(self, collections=None):
        self.collections = collections or {}
        self.graphs = {}
        self.aql = FakeAQL(self)

    def collection(self, name):
        return self.collections[name]

    def has_collection(self, name):
        return name in self.collections

    def create_collection(self, name, edge=False):
        self.collections[name] = FakeCollection(name)
        self.collections[name].edge = edge
        return self.collections[name]

    def has_graph(self, name):
        return name in self.graphs

    def create_graph(self, name, edge_definitions=None):
        self.graphs[name] = edge_definitions
        return name


AIRPORT_DOCS = {
    "LAX": {"airport": "Los Angeles International", "city": "Los Angeles", "state": "CA",
            "country": "USA", "lat": 33.94253611, "long": -118.4080744},
    "SFO": {"airport": "San Francisco International", "city": "San Francisco", "state": "CA",
            "country": "USA", "lat": 37.61900194, "long": -122.3748433},
    "JFK": {"airport": "John F Kennedy Intl", "city": "New York", "state": "NY",
            "country": "USA", "lat": 40.63975111, "long": -73.77892556},
    "M75": {"airport": "Malad City", "city": "Malad City", "state": "ID",
            "country": "USA", "lat": 42.16571944, "long": -112.2865},
}

FLIGHT_DOCS = {
    "350814": {"Year": 2008, "Month": 1, "DayofMonth": 3, "DayOfWeek": 4,
               "DepTime": 1343, "ArrTime": 1451,
               "DepTimeUTC": "2008-01-03T21:43:00.000Z", "ArrTimeUTC": "2008-01-03T22:51:00.000Z",
               "UniqueCarrier": "WN", "FlightNum": 2891, "TailNum": "N351",
               "Distance": 337, "_from": "airports/LAX", "_to": "airports/SFO"},
    "350815": {"Year": 2008, "Month": 1, "DayofMonth": 3, "DayOfWeek": 4,
               "DepTime": 2210, "ArrTime": 631,
               "DepTimeUTC": "2008-01-04T06:10:00.000Z", "ArrTimeUTC": "2008-01-04T11:31:00.000Z",
               "UniqueCarrier": "AA", "FlightNum": 10, "TailNum": "N339AA",
               "Distance": 2475, "_from": "airports/LAX", "_to": "airports/JFK"},
    "350816": {"Year": 2008, "Month": 1, "DayofMonth": 4, "DayOfWeek": 5,
               "DepTime": 700, "ArrTime": 1012,
               "DepTimeUTC": "2008-01-04T12:00:00.000Z", "ArrTimeUTC": "2008-01-04T18:12:00.000Z",
               "UniqueCarrier": "AA", "FlightNum": 1, "TailNum": "N338AA",
               "Distance": 2475, "_from": "airports/JFK", "_to": "airports/LAX"},
}


@pytest.fixture
def fake_db():
    """A database preloaded with a few airports and flights."""
    return FakeDatabase({
        "airports": FakeCollection("airports", AIRPORT_DOCS),
        "flights": FakeCollection("flights", FLIGHT_DOCS),
    })


@pytest.fixture
def empty_db():
    """A database with no collections at all."""
    return FakeDatabase()
