# allocation/allocation_engine.py
import logging
from typing import List, Optional

from allocation.reservation_table import Reservation
from facility.facility_errors import AlreadyParkedError, NoCapacityError, NotParkedError
from facility.slot import SizeClass, VehicleKind

logger = logging.getLogger(__name__)


class AllocationEngine:
    """
    Finds and commits slot reservations against the shared facility state.

    Responsibilities:
    - Single-slot lookup through the SlotIndex (count == 1)
    - Contiguous window search over the master ordering (count > 1)
    - All-or-nothing commit of a reservation
    - Release of every slot a reservation holds
    """

    def __init__(self, state):
        self.state = state
        self.registry = state.registry
        self.index = state.index
        self.reservations = state.reservations

    # ---------------- allocation ----------------

    def allocate(
        self,
        vehicle_id: str,
        size: Optional[SizeClass],
        count: int = 1,
        kind: Optional[VehicleKind] = None,
    ) -> List[int]:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        if self.reservations.has(vehicle_id):
            raise AlreadyParkedError(f"Vehicle '{vehicle_id}' is already parked")

        if count == 1:
            if size is None:
                raise ValueError("A single-slot allocation needs a size class")
            slot = self.index.first_available(size)
            if slot is None:
                raise NoCapacityError(f"No free {size.value} slot")
            slot_ids = [slot.slot_id]
        else:
            slot_ids = self.find_contiguous_window(count)
            if slot_ids is None:
                raise NoCapacityError(f"No run of {count} consecutive free slots")

        if kind is None:
            kind = VehicleKind.BUS if count > 1 else VehicleKind(size.value)

        self._commit(vehicle_id, slot_ids)
        self.reservations.add(Reservation(vehicle_id, tuple(slot_ids), size, kind))
        return slot_ids

    def find_contiguous_window(self, count: int) -> Optional[List[int]]:
        """
        First window of `count` consecutive positions that are all free,
        scanning left to right from position 0. Size classes are ignored.
        """
        total = len(self.registry)

        for start in range(total - count + 1):
            window_ok = True
            for pos in range(start, start + count):
                if self.registry.slot_at(pos).is_occupied:
                    window_ok = False
                    break
            if window_ok:
                return [self.registry.slot_at(pos).slot_id for pos in range(start, start + count)]

        return None

    def _commit(self, vehicle_id: str, slot_ids: List[int]) -> None:
        done: List[int] = []
        try:
            for slot_id in slot_ids:
                self.registry.occupy(slot_id, vehicle_id)
                done.append(slot_id)
        except Exception:
            # undo the part of the window that was already taken
            for slot_id in reversed(done):
                self.registry.vacate(slot_id)
            raise

    # ---------------- release ----------------

    def release(self, vehicle_id: str) -> List[int]:
        reservation = self.reservations.get(vehicle_id)
        if reservation is None:
            raise NotParkedError(f"Vehicle '{vehicle_id}' is not parked")

        freed: List[int] = []
        for slot_id in reservation.slot_ids:
            slot = self.registry.get(slot_id)
            if slot.occupant_id != vehicle_id:
                logger.warning(
                    "Slot %s is held by %r, not %r; leaving it untouched",
                    slot_id, slot.occupant_id, vehicle_id,
                )
                continue
            self.registry.vacate(slot_id)
            freed.append(slot_id)

        self.reservations.remove(vehicle_id)
        return freed

    # ---------------- helpers ----------------

    def reservation_for(self, vehicle_id: str) -> Optional[Reservation]:
        return self.reservations.get(vehicle_id)
