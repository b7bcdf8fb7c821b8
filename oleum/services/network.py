from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Type, Union

from oleum.backend import select
from oleum.errors import OleumError
from oleum.models import Facility, NetworkEntry, Press

logger = logging.getLogger(__name__)

FILTERS = {
    "all": "All Locations",
    "press": "Presses",
    "facility": "Facilities",
}


def _fetch(client, table: str, model: Type[Union[Press, Facility]]) -> list[NetworkEntry]:
    try:
        return [model.from_row(r) for r in select(client, table)]
    except OleumError:
        logger.exception("Error fetching %s", table)
        return []


def fetch_network(client) -> list[NetworkEntry]:
    """
    Presses followed by facilities, fetched concurrently.

    A collection that fails to load contributes nothing.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        presses = pool.submit(_fetch, client, "presses", Press)
        facilities = pool.submit(_fetch, client, "facilities", Facility)
        return presses.result() + facilities.result()


def filter_network(items: Iterable[NetworkEntry], category: str = "all") -> list[NetworkEntry]:
    if category not in FILTERS:
        raise ValueError(f"Unknown filter: {category!r}")
    if category == "all":
        return list(items)
    return [item for item in items if item.kind == category]


def network_rows(items: Iterable[NetworkEntry]) -> list[dict]:
    return [
        {"Kind": item.badge, "Name": item.name, "Location": item.location}
        for item in items
    ]
