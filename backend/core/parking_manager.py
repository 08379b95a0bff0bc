# core/parking_manager.py
from typing import Any, Dict, List, Optional, Sequence

from allocation.allocation_engine import AllocationEngine
from core.config import FacilityConfig
from core.facility_state import FacilityState
from facility.facility_errors import AlreadyParkedError, InvalidTypeError, OutOfRangeError
from facility.slot import SizeClass, VehicleKind
from planning import schedule_optimizer


class ParkingManager:
    """
    Command interface of one facility.

    Every operation either fully succeeds or raises a FacilityError with no
    side effects. Mutations and slot reads share `state.lock`; graph and
    schedule queries only touch immutable data.
    """

    def __init__(self, state: FacilityState):
        self.state = state
        self.engine = AllocationEngine(state)

    @classmethod
    def from_config(cls, config: FacilityConfig) -> "ParkingManager":
        return cls(FacilityState.from_config(config))

    # ---------------- slots ----------------

    def list_slots(self) -> List[Dict[str, Any]]:
        with self.state.lock:
            return [slot.to_dict() for slot in self.state.registry.all()]

    def occupancy_summary(self) -> Dict[str, Any]:
        with self.state.lock:
            by_size = {size.value: {"total": 0, "free": 0} for size in SizeClass}
            for slot in self.state.registry.all():
                by_size[slot.size.value]["total"] += 1
            for size in SizeClass:
                by_size[size.value]["free"] = self.state.index.free_count(size)

            total = len(self.state.registry)
            free = sum(entry["free"] for entry in by_size.values())
            return {
                "total": total,
                "free": free,
                "occupied": total - free,
                "parked_vehicles": len(self.state.reservations),
                "by_size": by_size,
            }

    # ---------------- parking logic ----------------

    def allocate(self, vehicle_id: str, size_class, vehicle_kind) -> List[int]:
        if not vehicle_id or not str(vehicle_id).strip():
            raise InvalidTypeError("Vehicle id must be a non-empty string")

        with self.state.lock:
            # a parked vehicle is rejected before its request is even parsed
            if self.state.reservations.has(vehicle_id):
                raise AlreadyParkedError(f"Vehicle '{vehicle_id}' is already parked")

            kind = VehicleKind.parse(vehicle_kind)
            if kind is VehicleKind.BUS:
                # the declared size of a bus is ignored
                size: Optional[SizeClass] = None
            else:
                size = SizeClass.parse(size_class)

            return self.engine.allocate(vehicle_id, size, kind.required_slots, kind=kind)

    def release(self, vehicle_id: str) -> List[int]:
        with self.state.lock:
            return self.engine.release(vehicle_id)

    def vehicle_slots(self, vehicle_id: str) -> Optional[List[int]]:
        with self.state.lock:
            reservation = self.engine.reservation_for(vehicle_id)
            if reservation is None:
                return None
            return list(reservation.slot_ids)

    # ---------------- floor queries ----------------

    def _to_position(self, slot_number: int) -> int:
        # 1-based slot number -> 0-based graph node
        if not 1 <= slot_number <= self.state.graph.node_count:
            raise OutOfRangeError(
                f"Slot {slot_number} is outside 1..{self.state.graph.node_count}"
            )
        return slot_number - 1

    def shortest_hops(self, src_slot: int, dest_slot: int) -> int:
        return self.state.graph.shortest_hops(
            self._to_position(src_slot), self._to_position(dest_slot)
        )

    def shortest_route(self, src_slot: int, dest_slot: int) -> List[int]:
        path = self.state.graph.shortest_path(
            self._to_position(src_slot), self._to_position(dest_slot)
        )
        return [node + 1 for node in path]

    # ---------------- scheduling ----------------

    def max_schedule(self, entries: Sequence[int], exits: Sequence[int]) -> int:
        intervals = schedule_optimizer.intervals_from(entries, exits)
        return schedule_optimizer.max_non_overlapping(intervals)

    def best_schedule(self, entries: Sequence[int], exits: Sequence[int]):
        intervals = schedule_optimizer.intervals_from(entries, exits)
        return schedule_optimizer.select_non_overlapping(intervals)
