from __future__ import annotations

import logging
from enum import Enum

from oleum.backend import select
from oleum.errors import OleumError
from oleum.models import Trip, TripStatus

logger = logging.getLogger(__name__)


class StatusColor(str, Enum):
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


# foreground, background, border
PALETTE = {
    StatusColor.GREEN: ("#16a34a", "#f0fdf4", "#dcfce7"),
    StatusColor.BLUE: ("#2563eb", "#eff6ff", "#dbeafe"),
    StatusColor.YELLOW: ("#ca8a04", "#fefce8", "#fef9c3"),
}


def status_color(status: str) -> StatusColor:
    if status == TripStatus.DELIVERED.value:
        return StatusColor.GREEN
    if status == TripStatus.IN_TRANSIT.value:
        return StatusColor.BLUE
    return StatusColor.YELLOW


def list_trips(client) -> list[Trip]:
    """All trips, most recent first as ordered by the backend."""
    try:
        rows = select(client, "trips", order="date", desc=True)
        return [Trip.from_row(r) for r in rows]
    except OleumError:
        logger.exception("Error fetching trips")
        return []
