"""FastAPI facility dependencies.

Why this module exists:
- FastAPI endpoints can `Depends(get_manager)` to reach the current facility.
- Tests reset the shared `store` to a known facility before each case.
"""

import logging

from core.parking_manager import ParkingManager

from .facility_store import FacilityStore

logger = logging.getLogger(__name__)

store = FacilityStore()


def init_facility() -> None:
    """Build the default facility (called on application startup)."""
    manager = store.reset()
    logger.info("Facility initialised with %d slots", len(manager.state.registry))


def get_manager() -> ParkingManager:
    """Return the facility session shared by all requests."""
    return store.get()
