"""Parking facility HTTP API.

A thin driver over ParkingManager: it parses requests, calls one core
operation and renders the outcome. Core failures come back as
`{ok: false, error: {code, message}}`; malformed requests are rejected with 422.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.config import FacilityConfig
from core.parking_manager import ParkingManager
from facility.facility_errors import FacilityError

from .deps import get_manager, store
from .facility_dtos import (
    AllocateRequest,
    AllocateResponse,
    ErrorDTO,
    FacilityConfigDTO,
    ListSlotsResponse,
    PathResponse,
    ReleaseResponse,
    ScheduleRequest,
    ScheduleResponse,
    SlotDTO,
    SummaryResponse,
    VehicleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/facility", tags=["facility"])


def _error(e: FacilityError) -> ErrorDTO:
    return ErrorDTO(code=e.code, message=str(e))


# ------------------------
# Routes
# ------------------------

@router.put("", response_model=SummaryResponse)
def configure_facility(req: FacilityConfigDTO):
    """Replace the facility. Edges name 1-based slot numbers, as /facility/path does."""
    data = req.model_dump()
    data["edges"] = [(u - 1, v - 1) for u, v in req.edges]
    config = FacilityConfig.from_dict(data)
    try:
        manager = store.reset(config)
    except FacilityError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "message": str(e)})
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_CONFIG", "message": str(e)})

    logger.info("Facility re-configured with %d slots", len(config.slots))
    return manager.occupancy_summary()


@router.get("/slots", response_model=ListSlotsResponse)
def list_slots(manager: ParkingManager = Depends(get_manager)):
    return ListSlotsResponse(slots=[SlotDTO(**s) for s in manager.list_slots()])


@router.get("/summary", response_model=SummaryResponse)
def get_summary(manager: ParkingManager = Depends(get_manager)):
    return manager.occupancy_summary()


@router.post("/vehicles", response_model=AllocateResponse)
def allocate_vehicle(req: AllocateRequest, manager: ParkingManager = Depends(get_manager)):
    try:
        slot_ids = manager.allocate(req.vehicleID, req.sizeClass, req.vehicleKind)
    except FacilityError as e:
        return AllocateResponse(ok=False, error=_error(e))
    return AllocateResponse(ok=True, slotIDs=slot_ids)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleResponse)
def get_vehicle(vehicle_id: str, manager: ParkingManager = Depends(get_manager)):
    slot_ids = manager.vehicle_slots(vehicle_id)
    if slot_ids is None:
        raise HTTPException(status_code=404, detail={"code": "NOT_PARKED", "message": "Vehicle not found"})
    return VehicleResponse(vehicleID=vehicle_id, slotIDs=slot_ids)


@router.delete("/vehicles/{vehicle_id}", response_model=ReleaseResponse)
def release_vehicle(vehicle_id: str, manager: ParkingManager = Depends(get_manager)):
    try:
        freed = manager.release(vehicle_id)
    except FacilityError as e:
        return ReleaseResponse(ok=False, error=_error(e))
    return ReleaseResponse(ok=True, freedSlotIDs=freed)


@router.get("/path", response_model=PathResponse)
def shortest_path(src: int, dest: int, manager: ParkingManager = Depends(get_manager)):
    try:
        route = manager.shortest_route(src, dest)
    except FacilityError as e:
        return PathResponse(ok=False, error=_error(e))
    return PathResponse(ok=True, hops=len(route) - 1, route=route)


@router.post("/schedule", response_model=ScheduleResponse)
def optimize_schedule(req: ScheduleRequest, manager: ParkingManager = Depends(get_manager)):
    try:
        count = manager.max_schedule(req.entries, req.exits)
        selected = manager.best_schedule(req.entries, req.exits)
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_SCHEDULE", "message": str(e)})
    return ScheduleResponse(count=count, selected=[[iv.entry, iv.exit] for iv in selected])
