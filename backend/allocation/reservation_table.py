from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from facility.facility_errors import AlreadyParkedError, NotParkedError
from facility.slot import SizeClass, VehicleKind


@dataclass(frozen=True)
class Reservation:
    """Binding of one vehicle to the slots it currently holds."""

    vehicle_id: str
    slot_ids: Tuple[int, ...]
    size: Optional[SizeClass]  # None for a bus, whose declared size is ignored
    kind: VehicleKind


class ReservationTable:
    '''
The ReservationTable maps a vehicle id to its active reservation.

It answers three questions:

Is this vehicle parked?

Which slots does it hold?

Can I record (or drop) a reservation?

The full slot list is stored for every reservation, so a release never has to
guess which slots a multi-slot vehicle was holding.
    '''

    def __init__(self):
        self._by_vehicle: Dict[str, Reservation] = {}

    def __len__(self) -> int:
        return len(self._by_vehicle)

    def __iter__(self) -> Iterator[Reservation]:
        return iter(list(self._by_vehicle.values()))

    # -------- queries --------

    def has(self, vehicle_id: str) -> bool:
        return vehicle_id in self._by_vehicle

    def get(self, vehicle_id: str) -> Optional[Reservation]:
        return self._by_vehicle.get(vehicle_id)

    # -------- reservations --------

    def add(self, reservation: Reservation) -> None:
        if not reservation.slot_ids:
            raise ValueError("A reservation must hold at least one slot")
        if reservation.vehicle_id in self._by_vehicle:
            raise AlreadyParkedError(f"Vehicle '{reservation.vehicle_id}' is already parked")
        self._by_vehicle[reservation.vehicle_id] = reservation

    def remove(self, vehicle_id: str) -> Reservation:
        reservation = self._by_vehicle.pop(vehicle_id, None)
        if reservation is None:
            raise NotParkedError(f"Vehicle '{vehicle_id}' is not parked")
        return reservation
