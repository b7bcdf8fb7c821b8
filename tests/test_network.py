from __future__ import annotations

import pytest
from postgrest.exceptions import APIError

from oleum.models import Facility, Press
from oleum.services.network import fetch_network, filter_network, network_rows


def test_presses_come_before_facilities(client):
    items = fetch_network(client)

    assert [i.id for i in items] == ["p1", "p2", "f1", "f2", "f3"]
    assert [type(i) for i in items] == [Press, Press, Facility, Facility, Facility]
    assert len(client.reads()) == 2


def test_filter_is_client_side(client):
    items = fetch_network(client)

    assert len(filter_network(items, "press")) == 2
    assert len(filter_network(items, "facility")) == 3
    assert len(filter_network(items, "all")) == 5
    assert len(client.reads()) == 2


def test_failed_collection_contributes_nothing(client):
    client.failures["facilities"] = APIError({"message": "timeout", "code": "57014"})

    items = fetch_network(client)

    assert [i.id for i in items] == ["p1", "p2"]


def test_unknown_filter_rejected(client):
    with pytest.raises(ValueError):
        filter_network([], "warehouse")


def test_rows_use_facility_type_as_kind(client):
    rows = network_rows(fetch_network(client))

    assert rows[0] == {"Kind": "Press", "Name": "Maasara Nur", "Location": "Jenin"}
    assert [r["Kind"] for r in rows[2:]] == ["Bottler", "Buyer", "Storage"]


def test_empty_network(empty_client):
    assert fetch_network(empty_client) == []
