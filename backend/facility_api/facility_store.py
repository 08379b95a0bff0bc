import threading
from typing import Optional

from core.config import FacilityConfig, default_facility_config
from core.parking_manager import ParkingManager


class FacilityStore:
    """Process-local holder of the facility session served over HTTP.

    There is exactly one facility per process. Re-configuring replaces the
    whole session (slots, reservations, floor plan) in one step.

    Note: nothing here survives a restart.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._manager: Optional[ParkingManager] = None

    def reset(self, config: Optional[FacilityConfig] = None) -> ParkingManager:
        manager = ParkingManager.from_config(config or default_facility_config())
        with self._lock:
            self._manager = manager
        return manager

    def get(self) -> ParkingManager:
        with self._lock:
            if self._manager is None:
                self._manager = ParkingManager.from_config(default_facility_config())
            return self._manager
