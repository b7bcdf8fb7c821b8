from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional, Union

from oleum.errors import ValidationFailure


class OrderType(str, Enum):
    OLIVES = "olives"
    OIL = "oil"


class TripStatus(str, Enum):
    IN_TRANSIT = "In Transit"
    DELIVERED = "Delivered"
    PENDING = "Pending"


FACILITY_TYPES = ("Bottler", "Buyer", "Storage")


def _require(row: Mapping[str, Any], *keys: str) -> None:
    missing = [k for k in keys if row.get(k) is None]
    if missing:
        raise ValidationFailure(f"Record is missing field(s): {', '.join(missing)}")


@dataclass(frozen=True)
class User:
    id: int
    name: str
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        # password column never enters the session
        _require(row, "id", "name")
        return cls(id=row["id"], name=str(row["name"]), created_at=row.get("created_at"))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "created_at": self.created_at}


@dataclass(frozen=True)
class Press:
    kind: ClassVar[str] = "press"

    id: str
    name: str
    location: str
    capacity: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Press":
        _require(row, "id", "name")
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            location=str(row.get("location") or ""),
            capacity=row.get("capacity"),
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.location})"

    @property
    def badge(self) -> str:
        return "Press"


@dataclass(frozen=True)
class Facility:
    kind: ClassVar[str] = "facility"

    id: str
    name: str
    location: str
    type: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Facility":
        _require(row, "id", "name")
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            location=str(row.get("location") or ""),
            type=str(row.get("type") or ""),
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.location}) - {self.type}"

    @property
    def badge(self) -> str:
        return self.type


# A merged directory entry is always exactly one of these.
NetworkEntry = Union[Press, Facility]


@dataclass(frozen=True)
class Trip:
    id: str
    origin: str
    destination: str
    status: str
    date: str
    driver_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Trip":
        _require(row, "id")
        return cls(
            id=str(row["id"]),
            origin=str(row.get("origin") or ""),
            destination=str(row.get("destination") or ""),
            status=str(row.get("status") or ""),
            date=str(row.get("date") or ""),
            driver_name=row.get("driver_name") or None,
        )


@dataclass(frozen=True)
class OliveBatch:
    weight_kg: float
    press_id: str
    user_id: Union[int, str]
    id: Optional[str] = None
    created_at: Optional[str] = None

    def to_insert(self) -> dict:
        return {"user_id": self.user_id, "press_id": self.press_id, "weight_kg": self.weight_kg}


@dataclass(frozen=True)
class OilBatch:
    volume_liters: float
    facility_id: str
    user_id: Union[int, str]
    id: Optional[str] = None
    created_at: Optional[str] = None

    def to_insert(self) -> dict:
        return {"user_id": self.user_id, "facility_id": self.facility_id, "volume_liters": self.volume_liters}
