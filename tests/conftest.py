from __future__ import annotations

import copy
import itertools
from collections import defaultdict

import pytest


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Mimics the chainable supabase/postgrest request builder."""

    def __init__(self, client: "FakeClient", table: str):
        self.client = client
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.filters: list[tuple[str, object]] = []
        self.ordering: tuple[str, bool] | None = None
        self.single = False
        self.payload: dict | None = None

    def select(self, columns="*"):
        self.columns = columns
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def maybe_single(self):
        self.single = True
        return self

    def insert(self, row):
        self.op = "insert"
        self.payload = row
        return self

    def execute(self):
        self.client.calls.append(self)
        if self.table in self.client.failures:
            raise self.client.failures[self.table]

        rows = self.client.tables[self.table]
        if self.op == "insert":
            row = {"id": next(self.client.ids), **self.payload}
            rows.append(row)
            return FakeResponse([dict(row)])

        out = [dict(r) for r in rows if all(r.get(c) == v for c, v in self.filters)]
        if self.ordering:
            column, desc = self.ordering
            out.sort(key=lambda r: r.get(column), reverse=desc)
        if self.columns != "*":
            keep = [c.strip() for c in self.columns.split(",")]
            out = [{c: r.get(c) for c in keep} for r in out]
        if self.single:
            return FakeResponse(out[0]) if out else None
        return FakeResponse(out)


class FakeClient:
    def __init__(self, tables=None):
        self.tables = defaultdict(list, copy.deepcopy(tables or {}))
        self.calls: list[FakeQuery] = []
        self.failures: dict[str, Exception] = {}
        self.ids = itertools.count(100)

    def table(self, name):
        return FakeQuery(self, name)

    def inserts(self, table=None):
        return [c for c in self.calls if c.op == "insert" and (table is None or c.table == table)]

    def reads(self, table=None):
        return [c for c in self.calls if c.op == "select" and (table is None or c.table == table)]


PRESSES = [
    {"id": "p1", "name": "Maasara Nur", "location": "Jenin", "capacity": 4000},
    {"id": "p2", "name": "Al-Zaytoun Press", "location": "Nablus", "capacity": None},
]

FACILITIES = [
    {"id": "f1", "name": "Green Gold Bottling", "location": "Ramallah", "type": "Bottler"},
    {"id": "f2", "name": "Hebron Traders", "location": "Hebron", "type": "Buyer"},
    {"id": "f3", "name": "Cold Store 4", "location": "Tulkarm", "type": "Storage"},
]

TRIPS = [
    {"id": "t1", "origin": "Jenin", "destination": "Maasara Nur", "status": "Delivered", "date": "2024-10-01"},
    {"id": "t3", "origin": "Nablus", "destination": "Cold Store 4", "status": "Pending", "date": "2024-10-20",
     "driver_name": "Sami"},
    {"id": "t2", "origin": "Maasara Nur", "destination": "Hebron Traders", "status": "In Transit",
     "date": "2024-10-12"},
]


@pytest.fixture
def client():
    return FakeClient({"presses": PRESSES, "facilities": FACILITIES, "trips": TRIPS})


@pytest.fixture
def empty_client():
    return FakeClient()


@pytest.fixture
def make_client():
    return FakeClient
