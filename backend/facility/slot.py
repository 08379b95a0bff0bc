from enum import Enum
from typing import Any, Dict

from facility.facility_errors import InvalidTypeError


class SizeClass(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, value) -> "SizeClass":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidTypeError(f"Unknown size class '{value}'") from None


class VehicleKind(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    BUS = "bus"

    @classmethod
    def parse(cls, value) -> "VehicleKind":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidTypeError(f"Unknown vehicle kind '{value}'") from None

    @property
    def required_slots(self) -> int:
        # a bus always takes a contiguous run of three slots
        return 3 if self is VehicleKind.BUS else 1


class Slot:
    def __init__(self, slot_id: int, size: SizeClass):
        self._slot_id = slot_id
        self.size = size
        # "" means free
        self.occupant_id: str = ""

    @property
    def slot_id(self) -> int:
        return self._slot_id

    @property
    def is_occupied(self) -> bool:
        return self.occupant_id != ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.slot_id,
            "size": self.size.value,
            "occupied": self.is_occupied,
            "occupantID": self.occupant_id,
        }

    def __repr__(self) -> str:
        return f"Slot({self.slot_id}, {self.size.name}, occupant={self.occupant_id!r})"
