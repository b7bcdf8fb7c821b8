from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from oleum.backend import insert, select
from oleum.errors import OleumError, ValidationFailure
from oleum.models import Facility, OilBatch, OliveBatch, OrderType, Press
from oleum.utils import positive_number

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Batch dispatched successfully!"


@dataclass(frozen=True)
class OrderMode:
    destination_table: str
    batch_table: str
    amount_label: str
    amount_unit: str
    amount_placeholder: str
    destination_label: str
    destination_placeholder: str


MODES = {
    OrderType.OLIVES: OrderMode(
        destination_table="presses",
        batch_table="olive_batches",
        amount_label="Batch Weight (kg)",
        amount_unit="kg",
        amount_placeholder="e.g. 500",
        destination_label="Destination Press (Maasara)",
        destination_placeholder="Select a press",
    ),
    OrderType.OIL: OrderMode(
        destination_table="facilities",
        batch_table="oil_batches",
        amount_label="Oil Volume (Liters)",
        amount_unit="L",
        amount_placeholder="e.g. 120",
        destination_label="Destination Facility",
        destination_placeholder="Select a facility",
    ),
}


LOADING_PLACEHOLDER = "Loading..."


class FormControls(NamedTuple):
    destination_placeholder: str
    destination_disabled: bool
    submit_disabled: bool


def form_controls(order_type: OrderType, *, fetching: bool, busy: bool) -> FormControls:
    """Nothing can be picked while destinations load, and nothing submitted twice."""
    mode = MODES[OrderType(order_type)]
    return FormControls(
        destination_placeholder=LOADING_PLACEHOLDER if fetching else mode.destination_placeholder,
        destination_disabled=fetching,
        submit_disabled=fetching or busy,
    )


def list_destinations(client, order_type: OrderType) -> list[Union[Press, Facility]]:
    """
    Destinations for ``order_type``: presses for olives, facilities for oil.

    A failed fetch is logged and yields an empty list.
    """
    mode = MODES[OrderType(order_type)]
    model = Press if OrderType(order_type) == OrderType.OLIVES else Facility
    try:
        rows = select(client, mode.destination_table)
        return [model.from_row(r) for r in rows]
    except OleumError:
        logger.exception("Error fetching %s", mode.destination_table)
        return []


def build_batch(
    order_type: OrderType,
    *,
    user_id,
    destination_id: Optional[str],
    amount,
) -> Union[OliveBatch, OilBatch]:
    if not destination_id:
        raise ValidationFailure("Please select a destination")

    value = positive_number(amount)
    if OrderType(order_type) == OrderType.OLIVES:
        if value is None:
            raise ValidationFailure("Batch weight must be a number greater than 0.")
        return OliveBatch(weight_kg=value, press_id=str(destination_id), user_id=user_id)

    if value is None:
        raise ValidationFailure("Oil volume must be a number greater than 0.")
    return OilBatch(volume_liters=value, facility_id=str(destination_id), user_id=user_id)


def submit_batch(
    client,
    order_type: OrderType,
    *,
    user_id,
    destination_id: Optional[str],
    amount,
) -> dict:
    """Validate and insert exactly one batch row. Returns the stored row."""
    batch = build_batch(order_type, user_id=user_id, destination_id=destination_id, amount=amount)
    table = MODES[OrderType(order_type)].batch_table
    row = insert(client, table, batch.to_insert())
    logger.info("User %s dispatched %s row %s", user_id, table, row.get("id"))
    return row
