from __future__ import annotations

import httpx

from oleum.services.trips import StatusColor, list_trips, status_color


def test_trips_ordered_by_backend(client):
    trips = list_trips(client)

    assert client.reads("trips")[0].ordering == ("date", True)
    assert [t.id for t in trips] == ["t3", "t2", "t1"]
    assert trips[0].driver_name == "Sami"
    assert trips[1].driver_name is None


def test_status_classification():
    assert status_color("Delivered") == StatusColor.GREEN
    assert status_color("In Transit") == StatusColor.BLUE
    assert status_color("Pending") == StatusColor.YELLOW
    assert status_color("Pending") == status_color("Lost at sea") == status_color("")


def test_fetch_failure_logged_not_raised(client, caplog):
    client.failures["trips"] = httpx.ConnectError("connection refused")

    assert list_trips(client) == []
    assert "Error fetching trips" in caplog.text
