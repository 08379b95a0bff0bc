from typing import Dict, Iterable, Iterator, List, Tuple

from facility.facility_errors import (
    DuplicateSlotError,
    SlotNotFoundError,
    SlotNotOccupiedError,
    SlotOccupiedError,
)
from facility.slot import SizeClass, Slot


class SlotRegistry:
    """
    Authoritative collection of parking slots.

    The master ordering is ascending slot id; position i is the i-th slot in
    that ordering. The slot set is fixed at construction, only occupancy
    changes afterwards.
    """

    def __init__(self, slots: Iterable[Tuple[int, SizeClass]]):
        self._slots: Dict[int, Slot] = {}

        for slot_id, size in slots:
            if slot_id <= 0:
                raise ValueError(f"Slot id must be a positive integer, got {slot_id}")
            if slot_id in self._slots:
                raise DuplicateSlotError(f"Slot id {slot_id} is defined more than once")
            self._slots[slot_id] = Slot(slot_id, SizeClass.parse(size))

        self._ordered: List[Slot] = [self._slots[k] for k in sorted(self._slots)]
        self._positions: Dict[int, int] = {
            slot.slot_id: pos for pos, slot in enumerate(self._ordered)
        }

        # bumped on every successful occupy/vacate
        self.version = 0

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, slot_id: int) -> bool:
        return slot_id in self._slots

    # -------- queries --------

    def get(self, slot_id: int) -> Slot:
        slot = self._slots.get(slot_id)
        if slot is None:
            raise SlotNotFoundError(f"Slot {slot_id} does not exist")
        return slot

    def all(self) -> Iterator[Slot]:
        """Yield every slot in ascending id order. Each call starts over."""
        for slot in self._ordered:
            yield slot

    def slot_at(self, position: int) -> Slot:
        return self._ordered[position]

    def position_of(self, slot_id: int) -> int:
        if slot_id not in self._positions:
            raise SlotNotFoundError(f"Slot {slot_id} does not exist")
        return self._positions[slot_id]

    # -------- mutations --------

    def occupy(self, slot_id: int, vehicle_id: str) -> None:
        if not vehicle_id:
            raise ValueError("vehicle_id must be a non-empty string")

        slot = self.get(slot_id)
        if slot.is_occupied:
            raise SlotOccupiedError(f"Slot {slot_id} is already occupied by '{slot.occupant_id}'")

        slot.occupant_id = vehicle_id
        self.version += 1

    def vacate(self, slot_id: int) -> None:
        slot = self.get(slot_id)
        if not slot.is_occupied:
            raise SlotNotOccupiedError(f"Slot {slot_id} is not occupied")

        slot.occupant_id = ""
        self.version += 1
